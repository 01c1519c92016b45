"""Component that draws an image at its object's position."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Optional

from talon.core import Component
from talon.geometry import Rect, Vector2

_log = logging.getLogger(__name__)

DrawCallback = Callable[[str, Optional[Rect], Rect], None]


class SpriteRenderer(Component):
    """Draws an image, optionally clipped to a source rectangle.

    Drawing is delegated to a renderer callable taking the image path,
    the source rectangle (or None for the whole image) and the
    destination rectangle.
    """

    def __init__(self, renderer: DrawCallback | None = None) -> None:
        super().__init__()
        self.renderer = renderer
        self.width = 32
        self.height = 32
        self.pivot = Vector2()
        self.image_path = ""
        self.has_image = False
        self.source_rect = Rect()
        self.use_source_rect = False

    def set_image(self, path: str | os.PathLike) -> bool:
        """Load an image file; on failure the previous image is dropped."""
        self.has_image = False
        path = os.fspath(path)
        if not os.path.isfile(path):
            _log.error("Failed to load image: %s", path)
            return False
        self.has_image = True
        self.image_path = path
        return True

    def set_source_rect(self, rect: Rect) -> None:
        self.source_rect = Rect(rect.x, rect.y, rect.w, rect.h)
        self.use_source_rect = True

    def clear_source_rect(self) -> None:
        self.use_source_rect = False

    def destination_rect(self) -> Rect:
        """Where the sprite lands on screen, scaled by the object's transform."""
        transform = self.game_object.transform if self.game_object is not None else None
        if transform is None:
            return Rect(int(self.pivot.x), int(self.pivot.y), self.width, self.height)
        world = transform.world_position()
        return Rect(
            int(self.pivot.x + world.x),
            int(self.pivot.y + world.y),
            int(self.width * transform.scale.x),
            int(self.height * transform.scale.y),
        )

    def awake(self) -> None:
        """Nothing to prepare; present so play mode can call it uniformly."""

    def render(self) -> None:
        if self.renderer is None:
            return
        source = self.source_rect if self.use_source_rect else None
        self.renderer(self.image_path, source, self.destination_rect())

    def update(self) -> None:
        self.render()

    def serialize(self, out: list[dict[str, Any]]) -> None:
        out.append(
            {
                "type": "SpriteRenderer",
                "data": {
                    "sprite": {"width": self.width, "height": self.height},
                    "pivot": {"x": self.pivot.x, "y": self.pivot.y},
                    "image": self.image_path,
                },
                "active": self.active,
            }
        )

    def deserialize(self, data: dict[str, Any]) -> None:
        if "sprite" in data:
            self.width = int(data["sprite"]["width"])
            self.height = int(data["sprite"]["height"])
        if "pivot" in data:
            self.pivot = Vector2(float(data["pivot"]["x"]), float(data["pivot"]["y"]))
        if "image" in data:
            self.set_image(data["image"])