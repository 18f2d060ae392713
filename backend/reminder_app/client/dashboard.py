from datetime import date, datetime, time, tzinfo
from typing import Any, Dict, List, Optional

from reminder_app.client.api import ReminderApiClient, SessionExpiredError
from reminder_app.client.scheduler import NotificationScheduler
from reminder_app.core.time_utils import parse_instant


class Dashboard:
    """Client-side reminder list plus the timers that go with it."""

    def __init__(self, api: ReminderApiClient, scheduler: NotificationScheduler):
        self.api = api
        self.scheduler = scheduler
        self.reminders: List[Dict[str, Any]] = []

    def load(self) -> List[Dict[str, Any]]:
        self.scheduler.start()
        return self.refresh()

    def refresh(self) -> List[Dict[str, Any]]:
        try:
            reminders = self.api.list_reminders()
        except SessionExpiredError:
            self.scheduler.cancel_all()
            self.reminders = []
            raise
        self.scheduler.sync(reminders)
        self.reminders = reminders
        return self.reminders

    def add(self, title: str, day: date, hh_mm: str, tz: Optional[tzinfo] = None) -> Dict[str, Any]:
        """Create a reminder at ``hh_mm`` local time on ``day``."""
        hours, minutes = (int(part) for part in hh_mm.split(":"))
        event_time = datetime.combine(day, time(hours, minutes))
        event_time = event_time.replace(tzinfo=tz) if tz else event_time.astimezone()

        reminder = self.api.create_reminder(title, event_time)
        self.reminders.append(reminder)
        self.reminders.sort(key=lambda r: parse_instant(r["eventTime"]))
        self.scheduler.schedule(reminder)
        return reminder

    def remove(self, reminder_id: str) -> None:
        self.api.delete_reminder(reminder_id)
        self.reminders = [r for r in self.reminders if r["id"] != reminder_id]
        self.scheduler.cancel(reminder_id)

    def reminders_on(self, day: date, tz: Optional[tzinfo] = None) -> List[Dict[str, Any]]:
        return [r for r in self.reminders if parse_instant(r["eventTime"]).astimezone(tz).date() == day]

    def logout(self) -> None:
        self.scheduler.cancel_all()
        self.reminders = []
        self.api.logout()
