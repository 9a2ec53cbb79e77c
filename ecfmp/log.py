"""Logging interface and the loggers the SDK wraps around it."""

from __future__ import annotations

from abc import ABC, abstractmethod


def decorate_message(message: str) -> str:
    """Prefix a message so it is clear it comes from the SDK."""
    return "ECFMP: " + message


class Logger(ABC):
    """A logger that consumers may provide; it should be thread-safe."""

    @abstractmethod
    def debug(self, message: str) -> None:
        """Log a debug message."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Log an informational message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Log a warning."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Log an error."""


class NullLogger(Logger):
    """A logger that discards everything; used when none is provided."""

    def debug(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


class LogDecorator(Logger):
    """Wraps a user logger and prefixes every message."""

    def __init__(self, user_logger: Logger) -> None:
        if user_logger is None:
            raise ValueError("No logger provided to LogDecorator")
        self._user_logger = user_logger

    def debug(self, message: str) -> None:
        self._user_logger.debug(decorate_message(message))

    def info(self, message: str) -> None:
        self._user_logger.info(decorate_message(message))

    def warning(self, message: str) -> None:
        self._user_logger.warning(decorate_message(message))

    def error(self, message: str) -> None:
        self._user_logger.error(decorate_message(message))