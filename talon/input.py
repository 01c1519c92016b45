"""Keyboard state tracking with named action bindings."""

from __future__ import annotations

import json
import logging
import os
from typing import Iterable, Union

_log = logging.getLogger(__name__)

NUM_SCANCODES = 512

SCANCODES: dict[str, int] = {
    **{chr(ord("A") + offset): 4 + offset for offset in range(26)},
    **{str(digit): 30 + digit - 1 for digit in range(1, 10)},
    "0": 39,
    "Return": 40,
    "Escape": 41,
    "Backspace": 42,
    "Tab": 43,
    "Space": 44,
    **{f"F{n}": 58 + n - 1 for n in range(1, 13)},
    "Insert": 73,
    "Home": 74,
    "PageUp": 75,
    "Delete": 76,
    "End": 77,
    "PageDown": 78,
    "Right": 79,
    "Left": 80,
    "Down": 81,
    "Up": 82,
    "Left Ctrl": 224,
    "Left Shift": 225,
    "Left Alt": 226,
    "Right Ctrl": 228,
    "Right Shift": 229,
    "Right Alt": 230,
}

_BY_NAME = {name.lower(): code for name, code in SCANCODES.items()}

Key = Union[int, str]


def _scancode_from_name(name: str) -> int | None:
    if not isinstance(name, str):
        raise TypeError(f"key name must be a string, not {type(name).__name__}")
    return _BY_NAME.get(name.lower())


class InputSystem:
    """Tracks which keys are held this frame and the previous frame.

    Keys are queried either by scancode (an int) or by the name of a
    bound action (a str).
    """

    def __init__(self) -> None:
        self._bindings: dict[str, int] = {}
        self._current: frozenset[int] | None = None
        self._last: frozenset[int] = frozenset()

    @property
    def bindings(self) -> dict[str, int]:
        return dict(self._bindings)

    def bind(self, action: str, key_name: str) -> None:
        """Bind an action to a key given by name (case-insensitive)."""
        code = _scancode_from_name(key_name)
        if code is None:
            raise ValueError(f"unknown key: {key_name!r}")
        self._bindings[action] = code

    def load_bindings(self, path: str | os.PathLike) -> None:
        """Load an object mapping action names to key names; unknown keys are skipped."""
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        for action, key_name in data.items():
            try:
                self.bind(action, key_name)
            except ValueError:
                _log.warning("Unknown key %r for action %r", key_name, action)

    def update(self, pressed_keys: Iterable[Key]) -> None:
        """Set the keys held this frame, given as scancodes or key names."""
        codes = set()
        for key in pressed_keys:
            if isinstance(key, str):
                code = _scancode_from_name(key)
                if code is None:
                    raise ValueError(f"unknown key: {key!r}")
                codes.add(code)
            else:
                codes.add(int(key))
        self._current = frozenset(codes)

    def late_update(self) -> None:
        """Remember this frame's state as the previous frame."""
        if self._current is not None:
            self._last = self._current

    def _code(self, key: Key) -> int | None:
        if isinstance(key, str):
            return self._bindings.get(key)
        return key

    def _valid(self, code: int | None) -> bool:
        return self._current is not None and code is not None and 0 <= code < NUM_SCANCODES

    def get_key(self, key: Key) -> bool:
        """Whether the key is held down."""
        code = self._code(key)
        return self._valid(code) and code in self._current

    def get_key_down(self, key: Key) -> bool:
        """Whether the key went down this frame."""
        code = self._code(key)
        return self._valid(code) and code in self._current and code not in self._last

    def get_key_up(self, key: Key) -> bool:
        """Whether the key was released this frame."""
        code = self._code(key)
        return self._valid(code) and code not in self._current and code in self._last