"""Frame-by-frame sprite sheet animation."""

from __future__ import annotations

import os
from typing import Any

from talon.core import Component
from talon.geometry import Rect
from talon.sprite_renderer import SpriteRenderer

FRAME_STEP = 0.016


class Animator(Component):
    """Slices a sprite sheet into frames and cycles the sprite renderer through them."""

    priority = 14

    def __init__(self) -> None:
        super().__init__()
        self.frame_width = 16
        self.frame_height = 16
        self.frame_duration = 0.15
        self.spritesheet_columns = 0
        self.spritesheet_rows = 0
        self._sprite_renderer: SpriteRenderer | None = None
        self._frame_clips: list[Rect] = []
        self._frame_index = 0
        self._frame_timer = 0.0

    @property
    def frame_clips(self) -> list[Rect]:
        return list(self._frame_clips)

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def awake(self) -> None:
        if self.game_object is not None:
            self._sprite_renderer = self.game_object.get_component(SpriteRenderer)

    def _generate_frame_clips(self) -> None:
        self._frame_clips = [
            Rect(
                column * self.frame_width,
                row * self.frame_height,
                self.frame_width,
                self.frame_height,
            )
            for row in range(self.spritesheet_rows)
            for column in range(self.spritesheet_columns)
        ]

    def _update_frames(self) -> None:
        if self._sprite_renderer is None or not self._frame_clips:
            return
        self._frame_timer += FRAME_STEP
        if self._frame_timer >= self.frame_duration:
            self._frame_timer -= self.frame_duration
            if self._frame_index < len(self._frame_clips):
                self._sprite_renderer.set_source_rect(self._frame_clips[self._frame_index])
            self._frame_index += 1
            if self._frame_index >= len(self._frame_clips):
                self._frame_index = 0

    def update(self) -> None:
        self._update_frames()

    def set_sprite_sheet(self, path: str | os.PathLike) -> None:
        """Switch to a new sheet, restarting the animation from its first frame."""
        path = os.fspath(path)
        if not path:
            return
        self._frame_index = 0
        self._frame_timer = 0.0
        if self._sprite_renderer is not None:
            self._sprite_renderer.width = self.frame_width * 2
            self._sprite_renderer.height = self.frame_height * 2
            self._sprite_renderer.set_image(path)
        self._generate_frame_clips()
        self._update_frames()

    def serialize(self, out: list[dict[str, Any]]) -> None:
        out.append(
            {
                "type": "Animator",
                "data": {
                    "frame": {
                        "width": self.frame_width,
                        "height": self.frame_height,
                        "duration": self.frame_duration,
                    },
                    "spritesheet": {
                        "columns": self.spritesheet_columns,
                        "rows": self.spritesheet_rows,
                    },
                },
                "active": self.active,
            }
        )

    def deserialize(self, data: dict[str, Any]) -> None:
        if "frame" in data:
            self.frame_width = int(data["frame"]["width"])
            self.frame_height = int(data["frame"]["height"])
            self.frame_duration = float(data["frame"]["duration"])
        if "spritesheet" in data:
            self.spritesheet_columns = int(data["spritesheet"]["columns"])
            self.spritesheet_rows = int(data["spritesheet"]["rows"])