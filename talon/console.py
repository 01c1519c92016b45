"""In-memory log of engine messages shown by the editor console."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from typing import Callable, Iterator


class LogLevel(Enum):
    """Severity of a console message."""

    INFO = auto()
    WARNING = auto()
    ERROR = auto()
    DEBUG = auto()


@dataclass(frozen=True)
class ConsoleMessage:
    """One logged message with its origin and time of day."""

    level: LogLevel
    message: str
    file: str
    line: int
    timestamp: str


class Console:
    """Keeps the most recent messages, dropping the oldest beyond the limit."""

    MAX_MESSAGES = 2000

    def __init__(
        self,
        max_messages: int = MAX_MESSAGES,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._messages: deque[ConsoleMessage] = deque(maxlen=max_messages)
        self._clock = clock or datetime.now

    def log(self, level: LogLevel, message: str, file: str, line: int) -> ConsoleMessage:
        """Record a message at the given level and return it."""
        entry = ConsoleMessage(
            level, message, file, line, self._clock().strftime("%H:%M:%S")
        )
        self._messages.append(entry)
        return entry

    def info(self, message: str, file: str, line: int) -> ConsoleMessage:
        return self.log(LogLevel.INFO, message, file, line)

    def warning(self, message: str, file: str, line: int) -> ConsoleMessage:
        return self.log(LogLevel.WARNING, message, file, line)

    def error(self, message: str, file: str, line: int) -> ConsoleMessage:
        return self.log(LogLevel.ERROR, message, file, line)

    def debug(self, message: str, file: str, line: int) -> ConsoleMessage:
        return self.log(LogLevel.DEBUG, message, file, line)

    def messages(self) -> list[ConsoleMessage]:
        """All stored messages, oldest first."""
        return list(self._messages)

    def clear(self) -> None:
        self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ConsoleMessage]:
        return iter(list(self._messages))