"""Simple 2D rigid body physics with pixel-stepped collision resolution."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from talon.box_collider import BoxCollider
from talon.collision import check_scene_collision
from talon.core import Component, Scene, Transform
from talon.geometry import Vector2

_log = logging.getLogger(__name__)

DEFAULT_GRAVITY = 9.81

T = TypeVar("T", int, float)


def clamp(value: T, low: T, high: T) -> T:
    """Limit value to the range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


class Rigidbody(Component):
    """Applies forces, gravity and drag, then moves the object until it hits a collider."""

    priority = 10

    def __init__(self, scene: Scene | None = None) -> None:
        super().__init__()
        self.scene = scene
        self.velocity = Vector2()
        self.acceleration = Vector2()
        self.linear_drag = Vector2(0.9, 0.9)
        self.mass = 1.0
        self.gravity = DEFAULT_GRAVITY
        self.max_velocity = 50.0
        self.use_gravity = True
        self.is_kinematic = False
        self._transform: Transform | None = None

    def awake(self) -> None:
        if self.game_object is None:
            return
        self._transform = self.game_object.get_component(Transform)
        if self._transform is None:
            _log.error("No transform found on object: %s", self.game_object.name)

    def add_force(self, force: Vector2) -> None:
        self.acceleration = Vector2(
            self.acceleration.x + force.x / self.mass,
            self.acceleration.y + force.y / self.mass,
        )

    def set_velocity(self, new_velocity: Vector2) -> None:
        self.velocity = Vector2(new_velocity.x, new_velocity.y)

    def add_velocity(self, delta_velocity: Vector2) -> None:
        self.velocity = self.velocity + delta_velocity

    def apply_impulse(self, impulse: Vector2) -> None:
        self.velocity = Vector2(
            self.velocity.x + impulse.x / self.mass,
            self.velocity.y + impulse.y / self.mass,
        )

    def on_collision(self) -> None:
        self.velocity = Vector2()
        self.acceleration = Vector2()

    def _blocked(self, collider: BoxCollider) -> bool:
        if self.scene is None:
            return False
        return check_scene_collision(self.scene, self.game_object, collider.bounds())

    def _step_axis(self, transform: Transform, collider: BoxCollider, axis: str) -> None:
        speed = getattr(self.velocity, axis)
        sign = 1 if speed > 0 else -1
        for _ in range(int(abs(speed))):
            setattr(transform.position, axis, getattr(transform.position, axis) + sign)
            if self._blocked(collider):
                setattr(transform.position, axis, getattr(transform.position, axis) - sign)
                setattr(self.velocity, axis, 0.0)
                break

    def check_and_resolve_collision(self) -> None:
        """Move one pixel at a time along each axis, stopping at the first collision."""
        if self.game_object is None:
            return
        transform = self.game_object.transform
        collider = self.game_object.get_component(BoxCollider)
        if transform is None or collider is None:
            return
        self._step_axis(transform, collider, "x")
        self._step_axis(transform, collider, "y")

    def update(self) -> None:
        if self._transform is None or self.is_kinematic:
            return
        if self.use_gravity:
            self.acceleration.y += self.gravity
        velocity = (self.velocity + self.acceleration)
        velocity = Vector2(velocity.x * self.linear_drag.x, velocity.y * self.linear_drag.y)
        if abs(velocity.x) < 0.01:
            velocity.x = 0.0
        if abs(velocity.y) < 0.01:
            velocity.y = 0.0
        self.velocity = velocity.clamped(-self.max_velocity, self.max_velocity)
        self.check_and_resolve_collision()
        self.acceleration = Vector2()

    def serialize(self, out: list[dict[str, Any]]) -> None:
        out.append(
            {
                "type": "Rigidbody",
                "data": {
                    "mass": self.mass,
                    "gravity": self.gravity,
                    "max velocity": self.max_velocity,
                    "use gravity": self.use_gravity,
                    "is kinematic": self.is_kinematic,
                },
                "active": self.active,
            }
        )

    def deserialize(self, data: dict[str, Any]) -> None:
        if "mass" in data:
            self.mass = float(data["mass"])
        if "gravity" in data:
            self.gravity = float(data["gravity"])
        if "max velocity" in data:
            self.max_velocity = float(data["max velocity"])
        if "use gravity" in data:
            self.use_gravity = bool(data["use gravity"])
        for key in ("is kinematic", "kinematic"):
            if key in data:
                self.is_kinematic = bool(data[key])