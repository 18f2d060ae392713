from typing import Protocol

from reminder_app.core.logging import logger


class Notifier(Protocol):
    def request_permission(self) -> bool: ...

    def show(self, title: str, body: str) -> None: ...


class LoggingNotifier:
    """Shows notifications as log records. Always permitted."""

    def request_permission(self) -> bool:
        return True

    def show(self, title: str, body: str) -> None:
        logger.info("%s %s", title, body)
