"""Filtering, counting and formatting of console messages for display."""

from __future__ import annotations

import re
from typing import Any, Iterable

from talon.console import ConsoleMessage, LogLevel

Color = tuple[float, float, float, float]

_STYLES: dict[LogLevel, tuple[str, Color]] = {
    LogLevel.INFO: ("[Info]", (0.4, 0.8, 1.0, 1.0)),
    LogLevel.WARNING: ("[Warning]", (1.0, 1.0, 0.0, 1.0)),
    LogLevel.ERROR: ("[Error]", (1.0, 0.4, 0.4, 1.0)),
    LogLevel.DEBUG: ("[Debug]", (0.5, 0.5, 1.0, 1.0)),
}

# Attribute name and the key it is stored under in the settings file.
_SETTINGS: tuple[tuple[str, str], ...] = (
    ("show_info", "show_info"),
    ("show_warning", "show_warning"),
    ("show_error", "show_error"),
    ("show_debug", "show_debug"),
    ("show_timestamp", "show_timestamps"),
)


def extract_file_name(file_path: str) -> str:
    """The last component of a path, accepting either kind of separator."""
    return re.split(r"[\\/]", file_path)[-1]


class ConsoleView:
    """Level filters, search and per-level counts for the console panel."""

    def __init__(self) -> None:
        self.show_info = True
        self.show_warning = True
        self.show_error = True
        self.show_debug = True
        self.auto_scroll = True
        self.show_timestamp = True
        self.counts: dict[LogLevel, int] = {level: 0 for level in LogLevel}

    def _level_enabled(self, level: LogLevel) -> bool:
        return {
            LogLevel.INFO: self.show_info,
            LogLevel.WARNING: self.show_warning,
            LogLevel.ERROR: self.show_error,
            LogLevel.DEBUG: self.show_debug,
        }[level]

    def tag_for(self, message: ConsoleMessage) -> tuple[str, Color] | None:
        """The tag and colour for a message, or None when its level is hidden."""
        if not self._level_enabled(message.level):
            return None
        return _STYLES[message.level]

    def visible_messages(
        self, messages: Iterable[ConsoleMessage], search: str = ""
    ) -> list[ConsoleMessage]:
        """Messages matching the search and level filters; recounts shown messages per level."""
        self.counts = {level: 0 for level in LogLevel}
        needle = (search or "").lower()
        shown = []
        for message in messages:
            if needle and needle not in message.message.lower():
                continue
            if self.tag_for(message) is None:
                continue
            self.counts[message.level] += 1
            shown.append(message)
        return shown

    def format_message(self, message: ConsoleMessage) -> str:
        """One display line: tag, optional timestamp, text and origin."""
        tag = _STYLES[message.level][0]
        parts = [tag]
        if self.show_timestamp:
            parts.append(f"[{message.timestamp}]")
        parts.append(f"{message.message} ({message.file}, {message.line})")
        return " ".join(parts)

    def save_settings(self, root: dict[str, Any]) -> None:
        """Store the filter settings under root["console"]."""
        section = root.setdefault("console", {})
        for attribute, key in _SETTINGS:
            section[key] = getattr(self, attribute)

    def load_settings(self, root: dict[str, Any]) -> None:
        """Read filter settings from root["console"]; missing keys default to shown."""
        section = root.get("console")
        if section is None:
            return
        for attribute, key in _SETTINGS:
            setattr(self, attribute, bool(section.get(key, True)))