"""Scene hierarchy editing: search, selection, renaming, reparenting and reordering."""

from __future__ import annotations

from talon.core import GameObject, Scene

NEW_GAME_OBJECT_NAME = "New GameObject"
COPY_SUFFIX = " (Copy)"

_WHITESPACE = " \t\n\r"


def name_matches_search(name: str, search: str | None) -> bool:
    """Case-insensitive substring match; an empty search matches everything."""
    if not search:
        return True
    return search.lower() in name.lower()


def generate_unique_name(base_name: str, parent: GameObject) -> str:
    """A name not used by any child of parent, numbering copies as 'name (n)'."""
    taken = {child.name for child in parent.children}
    new_name = base_name
    counter = 1
    while new_name in taken:
        new_name = f"{base_name} ({counter})"
        counter += 1
    return new_name


def is_descendant_of(parent: GameObject, possible_child: GameObject) -> bool:
    """Whether possible_child lies anywhere below parent in the tree."""
    return any(
        child is possible_child or is_descendant_of(child, possible_child)
        for child in parent.children
    )


def _contains(objects: list[GameObject], target: GameObject) -> bool:
    return any(o is target for o in objects)


def _index_of(objects: list[GameObject], target: GameObject) -> int:
    for index, obj in enumerate(objects):
        if obj is target:
            return index
    raise ValueError(f"{target!r} is not in the list")


class Hierarchy:
    """Selection and structural edits on the game objects of a scene."""

    def __init__(self, scene: Scene, search: str = "") -> None:
        self.scene = scene
        self.search = search
        self.selected: list[GameObject] = []
        self.last_clicked: GameObject | None = None

    def visible_objects(self, search: str | None = None) -> list[GameObject]:
        """Every object in the tree, depth first, whose name matches the search."""
        if search is None:
            search = self.search
        found: list[GameObject] = []

        def walk(objects: list[GameObject]) -> None:
            for obj in objects:
                if name_matches_search(obj.name, search):
                    found.append(obj)
                walk(obj.children)

        walk(list(self.scene.objects))
        return found

    def click(
        self, game_object: GameObject, shift: bool = False, ctrl: bool = False
    ) -> list[GameObject]:
        """Update the selection as a click with the given modifiers would; return it."""
        if shift and self.last_clicked is not None:
            visible = self.visible_objects()
            try:
                first = _index_of(visible, self.last_clicked)
                second = _index_of(visible, game_object)
            except ValueError:
                pass
            else:
                low, high = sorted((first, second))
                self.selected = visible[low : high + 1]
        elif ctrl:
            if _contains(self.selected, game_object):
                self.selected = [o for o in self.selected if o is not game_object]
            else:
                self.selected.append(game_object)
        else:
            self.selected = [game_object]
        self.last_clicked = game_object
        return list(self.selected)

    def selected_object(self) -> GameObject | None:
        """The object clicked most recently."""
        return self.last_clicked

    def delete_selected(self) -> list[GameObject]:
        """Remove every selected object from the scene and clear the selection."""
        removed = list(self.selected)
        for obj in removed:
            self.scene.remove(obj)
        self.selected.clear()
        return removed

    def duplicate_selected(self) -> list[GameObject]:
        """Add an empty copy beside each selected object; return the copies."""
        copies = []
        for obj in self.selected:
            copy = GameObject(obj.name + COPY_SUFFIX)
            parent = obj.parent
            if parent is not None:
                parent.add_child(copy)
            else:
                self.scene.add(copy)
            copies.append(copy)
        return copies

    def rename_selected(self, new_name: str) -> str:
        """Give every selected object the trimmed name; empty names are refused."""
        trimmed = new_name.strip(_WHITESPACE)
        if not trimmed:
            target = self.last_clicked.name if self.last_clicked is not None else ""
            raise ValueError(f"GameObject name cannot be empty: {target}")
        for obj in self.selected:
            obj.name = trimmed
        return trimmed

    def add_empty_child(self, parent: GameObject) -> GameObject:
        """Create an empty child with a name unique among its siblings."""
        child = GameObject(generate_unique_name(NEW_GAME_OBJECT_NAME, parent))
        parent.add_child(child)
        return child

    def reparent(self, game_object: GameObject, target: GameObject | None) -> None:
        """Move an object under target, or to the scene roots when target is None."""
        if target is not None:
            if target is game_object or is_descendant_of(game_object, target):
                raise ValueError(
                    f"cannot move {game_object.name!r} under {target.name!r}"
                )
            self.scene.remove(game_object)
            target.add_child(game_object)
        else:
            self.scene.remove(game_object)
            game_object.parent = None
            self.scene.add(game_object)

    def reorder(
        self, game_object: GameObject, target: GameObject, above: bool = True
    ) -> None:
        """Move an object just above or below a sibling."""
        if game_object is target:
            raise ValueError("cannot reorder an object relative to itself")
        parent = target.parent
        if game_object.parent is not parent:
            raise ValueError(
                f"{game_object.name!r} and {target.name!r} are not siblings"
            )
        siblings = parent.children if parent is not None else self.scene.objects
        remaining = [o for o in siblings if o is not game_object]
        index = _index_of(remaining, target)
        remaining.insert(index if above else index + 1, game_object)
        siblings[:] = remaining