from .user import User
from .reminder import Reminder

__all__ = ["User", "Reminder"]
