"""State-driven animation control through triggers, variables and transitions."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from talon.animator import Animator
from talon.core import Component

_log = logging.getLogger(__name__)

ConditionValue = Optional[Union[bool, int, float]]

_VALUE_PARSERS: dict[str, Callable[[Any], Union[bool, int, float]]] = {
    "bool": bool,
    "int": int,
    "float": float,
}


@dataclass
class TransitionCondition:
    """A trigger name, or a variable that must hold an expected value."""

    trigger: str = ""
    condition_variable: str = ""
    expected_value: ConditionValue = None


@dataclass
class AnimationEvent:
    """A callback tied to a frame of an animation."""

    frame: int = -1
    callback: Optional[Callable[[], None]] = None


@dataclass
class Animation:
    """One sprite sheet animation and the condition that selects it."""

    condition: TransitionCondition = field(default_factory=TransitionCondition)
    name: str = ""
    sprite_path: str = ""
    columns: int = 0
    rows: int = 0
    frame_width: int = 0
    frame_height: int = 0
    events: list[AnimationEvent] = field(default_factory=list)


@dataclass
class AnimatorState:
    """A named state holding animations and outgoing transitions."""

    name: str = ""
    animations: list[Animation] = field(default_factory=list)
    transitions: list[AnimatorStateTransition] = field(default_factory=list)


@dataclass
class AnimatorStateTransition:
    """A move to target_state when condition is met."""

    condition: TransitionCondition = field(default_factory=TransitionCondition)
    target_state: Optional[AnimatorState] = None


def _parse_value(value: dict[str, Any]) -> ConditionValue:
    parser = _VALUE_PARSERS.get(value["type"])
    return None if parser is None else parser(value["data"])


class AnimatorStateMachine(Component):
    """Switches states and animations based on triggers and condition variables."""

    priority = 13

    def __init__(self) -> None:
        super().__init__()
        self._animator: Animator | None = None
        self._states: dict[str, AnimatorState] = {}
        self._bools: dict[str, bool] = {}
        self._ints: dict[str, int] = {}
        self._floats: dict[str, float] = {}
        self.current_state = ""
        self.current_animation_name = ""
        self.config_path = ""

    @property
    def states(self) -> dict[str, AnimatorState]:
        return dict(self._states)

    def awake(self) -> None:
        if self.game_object is not None:
            self._animator = self.game_object.get_component(Animator)

    def add_state(self, state: AnimatorState) -> None:
        self._states[state.name] = state

    def _add_transition(
        self, condition: TransitionCondition, source: str, destination: str
    ) -> bool:
        if source not in self._states or destination not in self._states:
            return False
        self._states[source].transitions.append(
            AnimatorStateTransition(condition, self._states[destination])
        )
        return True

    def add_trigger_transition(
        self, trigger: str, source_state_name: str, destination_state_name: str
    ) -> bool:
        """Add a transition fired by a trigger; False if either state is unknown."""
        return self._add_transition(
            TransitionCondition(trigger=trigger),
            source_state_name,
            destination_state_name,
        )

    def add_condition_transition(
        self,
        condition_variable: str,
        expected_value: ConditionValue,
        source_state_name: str,
        destination_state_name: str,
    ) -> bool:
        """Add a transition taken when a variable equals a value; False if a state is unknown."""
        return self._add_transition(
            TransitionCondition("", condition_variable, expected_value),
            source_state_name,
            destination_state_name,
        )

    def add_animation(self, state_name: str, animation: Animation) -> bool:
        state = self._states.get(state_name)
        if state is None:
            return False
        state.animations.append(animation)
        return True

    def _find_animation(self, state_name: str, animation_name: str) -> Animation | None:
        state = self._states.get(state_name)
        if state is None:
            return None
        return next((a for a in state.animations if a.name == animation_name), None)

    def add_trigger_animation(
        self, trigger: str, animation_name: str, state_name: str
    ) -> bool:
        animation = self._find_animation(state_name, animation_name)
        if animation is None:
            return False
        animation.condition.trigger = trigger
        return True

    def add_condition_animation(
        self,
        condition_variable: str,
        expected_value: ConditionValue,
        animation_name: str,
        state_name: str,
    ) -> bool:
        animation = self._find_animation(state_name, animation_name)
        if animation is None:
            return False
        animation.condition.condition_variable = condition_variable
        animation.condition.expected_value = expected_value
        return True

    def add_trigger_callback(
        self, animation_name: str, frame: int, callback: Callable[[], None]
    ) -> int:
        """Attach a frame event to the matching animation of every state; return how many."""
        attached = 0
        for state in self._states.values():
            animation = next(
                (a for a in state.animations if a.name == animation_name), None
            )
            if animation is not None:
                animation.events.append(AnimationEvent(frame, callback))
                attached += 1
        return attached

    def set_bool(self, name: str, value: bool) -> None:
        self._bools[name] = bool(value)

    def get_bool(self, name: str) -> bool:
        return self._bools.get(name, False)

    def set_int(self, name: str, value: int) -> None:
        self._ints[name] = int(value)

    def get_int(self, name: str) -> int:
        return self._ints.get(name, 0)

    def set_float(self, name: str, value: float) -> None:
        self._floats[name] = float(value)

    def get_float(self, name: str) -> float:
        return self._floats.get(name, 0.0)

    def _set_animation(self, animation: Animation) -> None:
        if self.current_animation_name == animation.name:
            return
        self.current_animation_name = animation.name
        animator = self._animator
        if animator is None:
            return
        animator.spritesheet_columns = animation.columns
        animator.spritesheet_rows = animation.rows
        animator.frame_width = animation.frame_width
        animator.frame_height = animation.frame_height
        animator.set_sprite_sheet(animation.sprite_path)

    def set_state(self, state_name: str) -> None:
        """Enter a known state and play its first unconditional animation."""
        if state_name == self.current_state or state_name not in self._states:
            return
        self.current_state = state_name
        for animation in self._states[state_name].animations:
            condition = animation.condition
            if condition.expected_value is None and not condition.trigger:
                self._set_animation(animation)
                break

    def trigger(self, trigger: str) -> None:
        """Fire a trigger: follow a matching transition, else play a matching animation."""
        state = self._states.get(self.current_state, AnimatorState())
        for transition in state.transitions:
            if transition.condition.trigger == trigger and transition.target_state is not None:
                self.set_state(transition.target_state.name)
                return
        for animation in state.animations:
            if animation.condition.trigger == trigger:
                self._set_animation(animation)
                return

    def _variable_equals(self, variable: str, expected: ConditionValue) -> bool:
        if isinstance(expected, bool):
            return self.get_bool(variable) == expected
        if isinstance(expected, int):
            return self.get_int(variable) == expected
        if isinstance(expected, float):
            return self.get_float(variable) == expected
        return False

    def update(self) -> None:
        state = self._states.get(self.current_state, AnimatorState())
        for transition in state.transitions:
            condition = transition.condition
            if condition.expected_value is None or transition.target_state is None:
                continue
            if self._variable_equals(condition.condition_variable, condition.expected_value):
                self.set_state(transition.target_state.name)
                break

        # Animations are chosen from the state active when the update began.
        for animation in state.animations:
            condition = animation.condition
            expected = condition.expected_value
            if not condition.condition_variable or expected is None:
                continue
            if isinstance(expected, bool):
                matched = self.get_bool(condition.condition_variable)
            else:
                matched = self._variable_equals(condition.condition_variable, expected)
            if matched:
                self._set_animation(animation)
                return

    def load_from_json(self, path: str | os.PathLike) -> bool:
        """Load states and transitions from a config file; False if it cannot be opened."""
        path = os.fspath(path)
        try:
            handle = open(path, encoding="utf-8")
        except OSError:
            _log.error("Failed to open file: %s", path)
            return False
        self.config_path = path
        with handle:
            data = json.load(handle)

        for state_json in data.get("states") or []:
            state = AnimatorState(name=state_json["name"])
            for anim_json in state_json.get("animations") or []:
                animation = Animation(
                    name=anim_json["name"],
                    sprite_path=anim_json["sprite_path"],
                    columns=int(anim_json["columns"]),
                    rows=int(anim_json["rows"]),
                    frame_width=int(anim_json["frame_width"]),
                    frame_height=int(anim_json["frame_height"]),
                )
                if "condition" in anim_json:
                    cond = anim_json["condition"]
                    animation.condition.condition_variable = cond["variable"]
                    animation.condition.expected_value = _parse_value(cond["value"])
                state.animations.append(animation)
            self.add_state(state)

        for trans in data.get("transitions") or []:
            condition = trans["condition"]
            value = _parse_value(condition["value"])
            if value is None:
                continue
            self.add_condition_transition(
                condition["variable"], value, trans["from"], trans["to"]
            )
        return True

    def serialize(self, out: list[dict[str, Any]]) -> None:
        out.append(
            {
                "type": "AnimatorStateMachine",
                "data": {"config path": self.config_path},
                "active": self.active,
            }
        )

    def deserialize(self, data: dict[str, Any]) -> None:
        if "config path" in data:
            self.load_from_json(data["config path"])