import asyncio
import logging
from datetime import datetime, timedelta, timezone

from reminder_app.client.scheduler import NOTIFICATION_TITLE, NotificationScheduler


def reminder(reminder_id, title, delta):
    return {"id": reminder_id, "title": title, "eventTime": (datetime.now(timezone.utc) + delta).isoformat()}


def run_for(loop, seconds):
    loop.run_until_complete(asyncio.sleep(seconds))


def test_past_reminder_is_not_scheduled(loop, notifier):
    scheduler = NotificationScheduler(notifier, loop=loop)
    scheduler.start()

    assert not scheduler.schedule(reminder("r1", "Too late", timedelta(minutes=-5)))
    assert scheduler.pending == set()
    run_for(loop, 0.05)
    assert notifier.shown == []


def test_future_reminder_fires_once(loop, notifier):
    scheduler = NotificationScheduler(notifier, loop=loop)
    scheduler.start()

    assert scheduler.schedule(reminder("r1", "Call mom", timedelta(milliseconds=50)))
    assert scheduler.pending == {"r1"}
    run_for(loop, 0.2)

    assert notifier.shown == [(NOTIFICATION_TITLE, "Call mom")]
    assert scheduler.pending == set()


def test_resync_does_not_duplicate_alerts(loop, notifier):
    scheduler = NotificationScheduler(notifier, loop=loop)
    scheduler.start()
    reminders = [reminder("r1", "Stretch", timedelta(milliseconds=50)), reminder("r0", "Old", timedelta(hours=-1))]

    assert scheduler.sync(reminders) == 1
    assert scheduler.sync(reminders) == 0
    run_for(loop, 0.2)

    assert notifier.shown == [(NOTIFICATION_TITLE, "Stretch")]


def test_sync_cancels_reminders_that_disappeared(loop, notifier):
    scheduler = NotificationScheduler(notifier, loop=loop)
    scheduler.start()
    scheduler.sync([reminder("r1", "Gone", timedelta(milliseconds=50)), reminder("r2", "Later", timedelta(hours=1))])

    scheduler.sync([reminder("r2", "Later", timedelta(hours=1))])
    run_for(loop, 0.2)

    assert notifier.shown == []
    assert scheduler.pending == {"r2"}
    scheduler.cancel_all()
    assert scheduler.pending == set()


def test_moved_reminder_is_rearmed(loop, notifier):
    scheduler = NotificationScheduler(notifier, loop=loop)
    scheduler.start()
    scheduler.schedule(reminder("r1", "Meeting", timedelta(hours=1)))

    assert scheduler.schedule(reminder("r1", "Meeting moved", timedelta(milliseconds=50)))
    run_for(loop, 0.2)

    assert notifier.shown == [(NOTIFICATION_TITLE, "Meeting moved")]


def test_cancel_prevents_firing(loop, notifier):
    scheduler = NotificationScheduler(notifier, loop=loop)
    scheduler.start()
    scheduler.schedule(reminder("r1", "Never", timedelta(milliseconds=50)))

    assert scheduler.cancel("r1")
    assert not scheduler.cancel("r1")
    run_for(loop, 0.2)
    assert notifier.shown == []


def test_permission_is_requested_once(loop, notifier):
    scheduler = NotificationScheduler(notifier, loop=loop)
    assert scheduler.start()
    assert scheduler.start()
    assert notifier.permission_requests == 1


def test_denied_permission_silently_skips_display(loop, notifier_cls):
    notifier = notifier_cls(granted=False)
    scheduler = NotificationScheduler(notifier, loop=loop)
    assert not scheduler.start()

    scheduler.schedule(reminder("r1", "Quiet", timedelta(milliseconds=50)))
    run_for(loop, 0.2)

    assert notifier.shown == []
    assert scheduler.pending == set()


def test_display_failures_are_swallowed(loop, notifier_cls):
    notifier = notifier_cls(fail=True)
    scheduler = NotificationScheduler(notifier, loop=loop)
    scheduler.start()

    scheduler.schedule(reminder("r1", "Boom", timedelta(milliseconds=50)))
    run_for(loop, 0.2)

    assert scheduler.pending == set()


def test_clock_decides_what_is_in_the_future(loop, notifier):
    frozen = datetime(2026, 10, 20, 12, 0, tzinfo=timezone.utc)
    scheduler = NotificationScheduler(notifier, loop=loop, clock=lambda: frozen)

    assert not scheduler.schedule({"id": "a", "title": "noon", "eventTime": "2026-10-20T12:00:00Z"})
    assert scheduler.schedule({"id": "b", "title": "later", "eventTime": "2026-10-20T12:00:01Z"})
    scheduler.cancel_all()


def test_runs_on_the_running_loop(notifier):
    async def main():
        scheduler = NotificationScheduler(notifier)
        scheduler.start()
        scheduler.schedule(reminder("r1", "Async", timedelta(milliseconds=30)))
        await asyncio.sleep(0.15)

    asyncio.run(main())
    assert notifier.shown == [(NOTIFICATION_TITLE, "Async")]


def test_default_notifier_logs(loop, caplog):
    caplog.set_level(logging.INFO, logger="reminder-app")
    scheduler = NotificationScheduler(loop=loop)
    assert scheduler.start()

    scheduler.schedule(reminder("r1", "Feed the cat", timedelta(milliseconds=30)))
    run_for(loop, 0.15)

    assert "Feed the cat" in caplog.text


def test_scheduler_outside_a_loop_owns_one(notifier):
    scheduler = NotificationScheduler(notifier)
    scheduler.start()

    assert scheduler.schedule(reminder("r1", "Own loop", timedelta(milliseconds=50)))
    scheduler.wait(0.2)
    scheduler.close()

    assert notifier.shown == [(NOTIFICATION_TITLE, "Own loop")]
    assert scheduler.loop.is_closed()


def test_close_leaves_a_borrowed_loop_open(loop, notifier):
    scheduler = NotificationScheduler(notifier, loop=loop)
    scheduler.schedule(reminder("r1", "Later", timedelta(hours=1)))

    scheduler.close()

    assert scheduler.pending == set()
    assert not loop.is_closed()
