from .api import ApiError, ReminderApiClient, SessionExpiredError
from .dashboard import Dashboard
from .notifier import LoggingNotifier, Notifier
from .scheduler import NotificationScheduler
from .session import SessionContext

__all__ = [
    "ApiError",
    "Dashboard",
    "LoggingNotifier",
    "NotificationScheduler",
    "Notifier",
    "ReminderApiClient",
    "SessionContext",
    "SessionExpiredError",
]
