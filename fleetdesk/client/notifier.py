"""
User-facing notifications (toasts) raised by client views.
"""
from typing import Protocol
import logging

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Where success and error messages go."""

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoggingNotifier:
    """Notifier writing to the log; also keeps the last messages for inspection."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append(("success", message))
        logger.info(message)

    def error(self, message: str) -> None:
        self.messages.append(("error", message))
        logger.error(message)
