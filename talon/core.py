"""Game objects, components, transforms and the scene that holds them."""

from __future__ import annotations

import secrets
import weakref
from typing import Any, Iterator, TypeVar

from talon.geometry import Vector2

C = TypeVar("C", bound="Component")


def _vec_to_json(vector: Vector2) -> dict[str, float]:
    return {"x": vector.x, "y": vector.y}


def _vec_from_json(data: dict[str, Any]) -> Vector2:
    return Vector2(float(data["x"]), float(data["y"]))


class Component:
    """Behaviour attached to a game object; lower priority runs first."""

    priority: int = 0

    def __init__(self) -> None:
        self.game_object: GameObject | None = None
        self.active = True

    def awake(self) -> None:
        """Called once when play mode begins."""

    def start(self) -> None:
        """Called after every object has been awoken."""

    def update(self) -> None:
        """Called every frame in play mode."""

    def on_destroy(self) -> None:
        """Called when the scene shuts down."""

    def draw_gizmo(self) -> None:
        """Draw debug visuals."""

    def render(self) -> None:
        """Draw in edit mode."""

    def remove(self) -> None:
        """Schedule this component for removal from its game object."""
        if self.game_object is not None:
            self.game_object.remove_component(self)

    def serialize(self, out: list[dict[str, Any]]) -> None:
        """Append this component's record to out."""
        out.append({"type": type(self).__name__, "data": {}, "active": self.active})

    def deserialize(self, data: dict[str, Any]) -> None:
        """Read settings from a record's data section."""


class Transform(Component):
    """Position, scale and rotation of a game object relative to its parent."""

    def __init__(self) -> None:
        super().__init__()
        self.position = Vector2()
        self.relative_position = Vector2()
        self.scale = Vector2(1.0, 1.0)
        self.rotation = 0.0

    def _parent_transform(self) -> Transform | None:
        if self.game_object is None:
            return None
        parent = self.game_object.parent
        return parent.transform if parent is not None else None

    def world_position(self) -> Vector2:
        """Position in world space, adding up every parent's position."""
        parent_transform = self._parent_transform()
        if parent_transform is not None:
            return self.position + parent_transform.world_position()
        return Vector2(self.position.x, self.position.y)

    def set_world_position(self, world_pos: Vector2) -> None:
        parent_transform = self._parent_transform()
        if parent_transform is not None:
            self.position = world_pos - parent_transform.world_position()
        else:
            self.position = Vector2(world_pos.x, world_pos.y)

    def serialize(self, out: list[dict[str, Any]]) -> None:
        out.append(
            {
                "type": "Transform",
                "data": {
                    "position": _vec_to_json(self.position),
                    "relative position": _vec_to_json(self.relative_position),
                    "scale": _vec_to_json(self.scale),
                    "rotation": self.rotation,
                },
                "active": self.active,
            }
        )

    def deserialize(self, data: dict[str, Any]) -> None:
        if "position" in data:
            self.position = _vec_from_json(data["position"])
        if "relative position" in data:
            self.relative_position = _vec_from_json(data["relative position"])
        if "scale" in data:
            self.scale = _vec_from_json(data["scale"])
        if "rotation" in data:
            self.rotation = float(data["rotation"])


class GameObject:
    """A named node in the scene tree carrying components and children."""

    def __init__(self, name: str = "GameObject") -> None:
        self.name = name
        self.active = True
        self.uuid = ""
        self.children: list[GameObject] = []
        self._parent_ref: weakref.ref[GameObject] | None = None
        self._components: list[Component] = []
        self._pending_removal: list[Component] = []
        self.generate_uuid()
        self.add_component(Transform())

    def __repr__(self) -> str:
        return f"GameObject({self.name!r})"

    @property
    def parent(self) -> GameObject | None:
        return self._parent_ref() if self._parent_ref is not None else None

    @parent.setter
    def parent(self, value: GameObject | None) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    @property
    def components(self) -> list[Component]:
        return list(self._components)

    @property
    def transform(self) -> Transform | None:
        return self.get_component(Transform)

    def add_component(self, component: Component) -> Component:
        """Attach a component, keeping components ordered by priority."""
        component.game_object = self
        self._components.append(component)
        self._components.sort(key=lambda c: c.priority)
        return component

    def get_component(self, kind: type[C]) -> C | None:
        """First attached component of the given type, or None."""
        return next((c for c in self._components if isinstance(c, kind)), None)

    def remove_component(self, component: Component) -> None:
        """Schedule a component for removal at the end of the next update."""
        self._pending_removal.append(component)

    def add_child(self, child: GameObject) -> None:
        self.children.append(child)
        child.parent = self

    def has_parent(self) -> bool:
        return self.parent is not None

    def full_path(self) -> str:
        """Names from the root down to this object, joined by '/'."""
        names = [self.name]
        current = self.parent
        while current is not None:
            names.append(current.name)
            current = current.parent
        return "/".join(reversed(names))

    def generate_uuid(self) -> str:
        self.uuid = secrets.token_hex(16)
        return self.uuid

    def awake(self) -> None:
        if not self.active:
            return
        self._pending_removal.clear()
        for component in tuple(self._components):
            component.awake()
        for child in tuple(self.children):
            child.awake()

    def start(self) -> None:
        if not self.active:
            return
        for component in tuple(self._components):
            component.start()
        for child in tuple(self.children):
            child.start()

    def update(self) -> None:
        if not self.active:
            return
        for component in tuple(self._components):
            component.update()
        for child in tuple(self.children):
            child.update()
        if self._pending_removal:
            doomed = self._pending_removal
            self._components = [
                c for c in self._components if not any(c is d for d in doomed)
            ]
            self._pending_removal = []

    def on_destroy(self) -> None:
        for component in tuple(self._components):
            component.on_destroy()

    def draw_gizmo(self) -> None:
        for component in tuple(self._components):
            component.draw_gizmo()
        for child in tuple(self.children):
            child.draw_gizmo()

    def render(self) -> None:
        for component in tuple(self._components):
            component.render()
        for child in tuple(self.children):
            child.render()

    def serialize(self, out: list[dict[str, Any]]) -> None:
        """Append this object's record, then its descendants', to out."""
        record: dict[str, Any] = {
            "name": self.name,
            "active": self.active,
            "uuid": self.uuid,
        }
        parent = self.parent
        if parent is not None:
            record["parent"] = parent.uuid
        record["components"] = []
        for component in self._components:
            component.serialize(record["components"])
        out.append(record)
        for child in self.children:
            child.serialize(out)


class Scene:
    """The list of root game objects."""

    def __init__(self) -> None:
        self.objects: list[GameObject] = []

    def __iter__(self) -> Iterator[GameObject]:
        return iter(list(self.objects))

    def __len__(self) -> int:
        return len(self.objects)

    def __contains__(self, game_object: object) -> bool:
        return any(o is game_object for o in self.objects)

    def add(self, game_object: GameObject) -> None:
        self.objects.append(game_object)

    def remove(self, game_object: GameObject | None) -> None:
        """Detach an object from its parent, or from the roots if it has none."""
        if game_object is None:
            return
        parent = game_object.parent
        siblings = parent.children if parent is not None else self.objects
        siblings[:] = [o for o in siblings if o is not game_object]

    def clear(self) -> None:
        self.objects.clear()

    def find(self, name: str) -> GameObject | None:
        """Depth-first search for an object by name."""
        for root in self.objects:
            found = _find_in(root, name)
            if found is not None:
                return found
        return None


def _find_in(game_object: GameObject, name: str) -> GameObject | None:
    if game_object.name == name:
        return game_object
    for child in game_object.children:
        found = _find_in(child, name)
        if found is not None:
            return found
    return None