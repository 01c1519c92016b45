"""Keyboard-driven movement for the player character."""

from __future__ import annotations

from enum import Enum
from typing import Any

from talon.core import Component
from talon.geometry import Vector2
from talon.input import InputSystem
from talon.rigidbody import Rigidbody
from talon.state_machine import AnimatorStateMachine


class AnimationState(Enum):
    IDLE = "Idle"
    WALK = "Walk"


class Direction(Enum):
    """Facing direction; the value is what the animator's "direction" variable gets."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


_MOVES = (
    ("MoveUp", Vector2(0.0, -1.0), Direction.UP),
    ("MoveDown", Vector2(0.0, 1.0), Direction.DOWN),
    ("MoveLeft", Vector2(-1.0, 0.0), Direction.LEFT),
    ("MoveRight", Vector2(1.0, 0.0), Direction.RIGHT),
)


class PlayerController(Component):
    """Moves the rigidbody from input and feeds the animator state machine."""

    def __init__(self, input_system: InputSystem | None = None) -> None:
        super().__init__()
        self.input_system = input_system
        self.walk_speed = 10.0
        self.sprint_speed_multiplier = 2.0
        self.jump_power = Vector2(0.0, -10.0)
        self.animation_state = AnimationState.IDLE
        self.direction = Direction.DOWN
        self.last_state = (self.animation_state, self.direction)
        self._rigidbody: Rigidbody | None = None
        self._state_machine: AnimatorStateMachine | None = None

    def awake(self) -> None:
        if self.game_object is None:
            return
        self._rigidbody = self.game_object.get_component(Rigidbody)
        self.last_state = (self.animation_state, self.direction)
        self._state_machine = self.game_object.get_component(AnimatorStateMachine)

    def start(self) -> None:
        self.animation_state = AnimationState.IDLE
        self.direction = Direction.DOWN
        if self._state_machine is not None:
            self._state_machine.set_state("Idle")
            self._state_machine.set_int("direction", 1)

    def _set_animator_variables(self) -> None:
        machine = self._state_machine
        machine.set_bool("isWalking", self.animation_state is not AnimationState.IDLE)
        machine.set_int("direction", self.direction.value)

    def update(self) -> None:
        inputs = self.input_system
        rigidbody = self._rigidbody
        if inputs is None or rigidbody is None or self._state_machine is None:
            return

        movement = Vector2.zero()
        for action, step, direction in _MOVES:
            if inputs.get_key(action):
                movement = movement + step
                self.direction = direction

        if inputs.get_key("Sprint"):
            movement = movement * self.sprint_speed_multiplier

        moving = movement != Vector2.zero()
        self.animation_state = AnimationState.WALK if moving else AnimationState.IDLE
        self._set_animator_variables()

        if moving:
            rigidbody.set_velocity(movement.normalized() * self.walk_speed * 0.5)

        if inputs.get_key("Jump") and rigidbody.use_gravity:
            rigidbody.add_force(self.jump_power)

    def serialize(self, out: list[dict[str, Any]]) -> None:
        out.append(
            {
                "type": "PlayerController",
                "data": {
                    "walk speed": self.walk_speed,
                    "sprint speed multiplier": self.sprint_speed_multiplier,
                    "jump power": {"x": self.jump_power.x, "y": self.jump_power.y},
                },
                "active": self.active,
            }
        )

    def deserialize(self, data: dict[str, Any]) -> None:
        if "walk speed" in data:
            self.walk_speed = float(data["walk speed"])
        if "sprint speed multiplier" in data:
            self.sprint_speed_multiplier = float(data["sprint speed multiplier"])
        if "jump power" in data:
            self.jump_power = Vector2(
                float(data["jump power"]["x"]), float(data["jump power"]["y"])
            )