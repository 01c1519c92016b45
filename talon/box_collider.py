"""Axis-aligned box collider component."""

from __future__ import annotations

from typing import Any

from talon.core import Component, Transform
from talon.geometry import Rect, Vector2


class BoxCollider(Component):
    """A rectangular collision area, offset from its object's world position."""

    priority = 5

    def __init__(
        self,
        width: int = 50,
        height: int = 50,
        offset: Vector2 | None = None,
        draw_debug: bool = False,
    ) -> None:
        super().__init__()
        self.width = width
        self.height = height
        self.offset = offset if offset is not None else Vector2()
        self.draw_debug = draw_debug
        self._transform: Transform | None = None

    def bounds(self) -> Rect:
        """The collider's rectangle in world space; empty without a transform."""
        transform = self.game_object.transform if self.game_object is not None else None
        if transform is None:
            return Rect(0, 0, 0, 0)
        world = transform.world_position()
        return Rect(
            int(world.x + self.offset.x),
            int(world.y + self.offset.y),
            self.width,
            self.height,
        )

    def awake(self) -> None:
        if self.game_object is not None:
            self._transform = self.game_object.transform

    def serialize(self, out: list[dict[str, Any]]) -> None:
        out.append(
            {
                "type": "BoxCollider",
                "data": {
                    "scale": {"width": self.width, "height": self.height},
                    "offset": {"x": self.offset.x, "y": self.offset.y},
                    "draw debug": self.draw_debug,
                },
                "active": self.active,
            }
        )

    def deserialize(self, data: dict[str, Any]) -> None:
        if "scale" in data:
            self.width = int(data["scale"]["width"])
            self.height = int(data["scale"]["height"])
        if "offset" in data:
            self.offset = Vector2(float(data["offset"]["x"]), float(data["offset"]["y"]))
        if "draw debug" in data:
            self.draw_debug = bool(data["draw debug"])