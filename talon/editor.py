"""The editor: play/edit modes, the frame loop and persisted settings."""

from __future__ import annotations

import argparse
import inspect
import json
import logging
import os
import time
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence

from talon.console import Console
from talon.console_view import ConsoleView
from talon.core import GameObject, Scene
from talon.hierarchy import Hierarchy
from talon.input import InputSystem, Key

_log = logging.getLogger(__name__)

DEFAULT_BINDINGS = "./assets/config/input.json"
DEFAULT_SETTINGS = "./settings/editor_settings.json"
FRAME_DELAY = 0.016

SceneLoader = Callable[[], Iterable[GameObject]]
SceneSaver = Callable[[Scene], None]


class EngineMode(Enum):
    EDIT = "Edit"
    PLAY = "Play"


class Editor:
    """Holds the scene and editor state and runs one frame at a time."""

    def __init__(
        self,
        scene: Scene | None = None,
        console: Console | None = None,
        input_system: InputSystem | None = None,
        scene_loader: Optional[SceneLoader] = None,
        scene_saver: Optional[SceneSaver] = None,
    ) -> None:
        self.scene = scene if scene is not None else Scene()
        self.console = console if console is not None else Console()
        self.input = input_system if input_system is not None else InputSystem()
        self.console_view = ConsoleView()
        self.hierarchy = Hierarchy(self.scene)
        self.scene_loader = scene_loader
        self.scene_saver = scene_saver
        self.mode = EngineMode.EDIT

    @property
    def is_playing(self) -> bool:
        return self.mode is EngineMode.PLAY

    def save_settings(self, file_path: str | os.PathLike) -> None:
        """Write the console panel settings as indented JSON."""
        data: dict = {}
        self.console_view.save_settings(data)
        with open(file_path, "w", encoding="utf-8") as handle:
            handle.write(json.dumps(data, indent=4))

    def load_settings(self, file_path: str | os.PathLike) -> bool:
        """Read settings written by save_settings; False if the file cannot be opened."""
        try:
            handle = open(file_path, encoding="utf-8")
        except OSError:
            return False
        with handle:
            data = json.load(handle)
        self.console_view.load_settings(data)
        return True

    def play(self) -> None:
        """Save the scene, enter play mode, then wake and start every object."""
        if self.scene_saver is not None:
            self.scene_saver(self.scene)
        self.mode = EngineMode.PLAY
        objects = list(self.scene)
        for obj in objects:
            obj.awake()
        for obj in objects:
            obj.start()
        frame = inspect.currentframe()
        self.console.info("Play mode started", __file__, frame.f_lineno if frame else 0)

    def stop(self) -> None:
        """Return to edit mode, dropping play-time objects and reloading the scene."""
        self.mode = EngineMode.EDIT
        self.scene.clear()
        if self.scene_loader is not None:
            for obj in self.scene_loader():
                self.scene.add(obj)

    def step(self, pressed_keys: Iterable[Key] = ()) -> None:
        """Run one frame with the given keys held."""
        self.input.update(pressed_keys)
        objects = list(self.scene)
        if self.is_playing:
            for obj in objects:
                obj.update()
        else:
            for obj in objects:
                obj.render()
        for obj in list(self.scene):
            obj.draw_gizmo()
        self.input.late_update()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="talon", description="Run the editor loop.")
    parser.add_argument("--bindings", default=DEFAULT_BINDINGS, help="key bindings file")
    parser.add_argument("--settings", default=DEFAULT_SETTINGS, help="editor settings file")
    parser.add_argument("--frames", type=int, default=0, help="frames to run; 0 runs until interrupted")
    parser.add_argument("--delay", type=float, default=FRAME_DELAY, help="seconds between frames")
    parser.add_argument("--play", action="store_true", help="start in play mode")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    editor = Editor()

    try:
        editor.input.load_bindings(args.bindings)
    except OSError:
        _log.error("Failed to open input file: %s", args.bindings)
    editor.load_settings(args.settings)

    if args.play:
        editor.play()

    frame = 0
    try:
        while args.frames <= 0 or frame < args.frames:
            editor.step()
            frame += 1
            if args.delay > 0:
                time.sleep(args.delay)
    except KeyboardInterrupt:
        pass

    for obj in list(editor.scene):
        obj.on_destroy()

    settings_dir = os.path.dirname(args.settings)
    if settings_dir:
        os.makedirs(settings_dir, exist_ok=True)
    editor.save_settings(args.settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())