"""Scene-wide collision queries."""

from __future__ import annotations

from talon.box_collider import BoxCollider
from talon.core import GameObject, Scene
from talon.geometry import Rect, check_collision


def check_scene_collision(
    scene: Scene, source: GameObject | None, predicted_rect: Rect
) -> bool:
    """Whether predicted_rect overlaps the collider of any root object other than source."""
    for obj in scene:
        if obj is source:
            continue
        collider = obj.get_component(BoxCollider)
        if collider is None:
            continue
        if check_collision(predicted_rect, collider.bounds()):
            return True
    return False