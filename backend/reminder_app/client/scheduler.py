"""
Deferred local alerts for upcoming reminders.

Each future reminder gets one ``loop.call_later`` timer, keyed by reminder
id. ``sync`` is called after every full refresh: it arms timers for new
reminders, re-arms moved ones, cancels those that disappeared and leaves
pending ones alone, so re-fetching the same list never doubles an alert.

Timers live only as long as the process. Reminders whose time passed while
nothing was running are skipped, not replayed.

A scheduler built inside a running loop uses that loop. Otherwise it owns a
fresh loop, which synchronous callers drive with ``wait``.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Set, Union

from reminder_app.client.notifier import LoggingNotifier, Notifier
from reminder_app.core.logging import logger
from reminder_app.core.time_utils import parse_instant

NOTIFICATION_TITLE = "Reminder!"

Clock = Callable[[], datetime]


@dataclass
class PendingAlert:
    reminder_id: str
    title: str
    event_time: datetime
    handle: asyncio.TimerHandle


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _loop_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


def _bound_loop() -> asyncio.AbstractEventLoop:
    if _loop_running():
        return asyncio.get_running_loop()
    return asyncio.new_event_loop()


def _fields(reminder: Union[Mapping[str, Any], Any]) -> tuple[str, str, datetime]:
    if isinstance(reminder, Mapping):
        event_time = reminder.get("eventTime", reminder.get("event_time"))
        return str(reminder["id"]), reminder["title"], parse_instant(event_time)
    return str(reminder.id), reminder.title, parse_instant(reminder.event_time)


class NotificationScheduler:
    def __init__(
        self,
        notifier: Optional[Notifier] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        clock: Optional[Clock] = None,
    ):
        self.notifier = notifier or LoggingNotifier()
        self._owns_loop = loop is None and not _loop_running()
        self.loop = loop or _bound_loop()
        self._clock = clock or _utcnow
        self._pending: Dict[str, PendingAlert] = {}
        self._permission: Optional[bool] = None

    @property
    def pending(self) -> Set[str]:
        return set(self._pending)

    @property
    def permitted(self) -> bool:
        return bool(self._permission)

    def start(self) -> bool:
        """Ask for notification permission. Only the first call asks."""
        if self._permission is None:
            try:
                self._permission = bool(self.notifier.request_permission())
            except Exception:
                logger.debug("Notification permission request failed", exc_info=True)
                self._permission = False
        return self._permission

    def schedule(self, reminder) -> bool:
        """Arm an alert for ``reminder`` if it is still ahead. Returns True when a timer was armed."""
        reminder_id, title, event_time = _fields(reminder)
        existing = self._pending.get(reminder_id)
        if existing is not None:
            if existing.event_time == event_time:
                existing.title = title
                return False
            self.cancel(reminder_id)

        delay = (event_time - self._clock()).total_seconds()
        if delay <= 0:
            return False

        handle = self.loop.call_later(delay, self._fire, reminder_id)
        self._pending[reminder_id] = PendingAlert(reminder_id, title, event_time, handle)
        return True

    def sync(self, reminders: Iterable) -> int:
        """Re-derive timers from a freshly fetched list. Returns how many were armed."""
        seen: Set[str] = set()
        armed = 0
        for reminder in reminders:
            seen.add(_fields(reminder)[0])
            if self.schedule(reminder):
                armed += 1
        for reminder_id in self.pending - seen:
            self.cancel(reminder_id)
        return armed

    def cancel(self, reminder_id: str) -> bool:
        alert = self._pending.pop(str(reminder_id), None)
        if alert is None:
            return False
        alert.handle.cancel()
        return True

    def cancel_all(self) -> None:
        for reminder_id in list(self._pending):
            self.cancel(reminder_id)

    def _fire(self, reminder_id: str) -> None:
        alert = self._pending.pop(reminder_id, None)
        if alert is None or not self._permission:
            return
        try:
            self.notifier.show(NOTIFICATION_TITLE, alert.title)
        except Exception:
            # Display failures are never surfaced.
            logger.debug("Could not show notification for %s", reminder_id, exc_info=True)

    def wait(self, seconds: float) -> None:
        """Run the bound loop for ``seconds`` so due alerts fire. For synchronous callers."""
        self.loop.run_until_complete(asyncio.sleep(seconds))

    def close(self) -> None:
        self.cancel_all()
        if self._owns_loop and not self.loop.is_closed():
            self.loop.close()
