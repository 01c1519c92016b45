import pytest

from talon.core import GameObject, Scene
from talon.hierarchy import (
    COPY_SUFFIX,
    NEW_GAME_OBJECT_NAME,
    Hierarchy,
    generate_unique_name,
    is_descendant_of,
    name_matches_search,
)


@pytest.fixture
def tree():
    scene = Scene()
    player = GameObject("Player")
    weapon = GameObject("Weapon")
    bow = GameObject("Bow")
    player.add_child(weapon)
    player.add_child(bow)
    wall = GameObject("Wall")
    scene.add(player)
    scene.add(wall)
    return scene, player, weapon, bow, wall


def names(objects):
    return [o.name for o in objects]


def test_name_matches_search_is_case_insensitive():
    assert name_matches_search("Player", "lay")
    assert name_matches_search("Player", "PLAY")
    assert not name_matches_search("Player", "wall")


def test_empty_search_matches_everything():
    assert name_matches_search("anything", "")
    assert name_matches_search("anything", None)


def test_generate_unique_name_free_name_kept():
    parent = GameObject("Root")
    assert generate_unique_name("Child", parent) == "Child"


def test_generate_unique_name_numbers_duplicates():
    parent = GameObject("Root")
    parent.add_child(GameObject(NEW_GAME_OBJECT_NAME))
    parent.add_child(GameObject(NEW_GAME_OBJECT_NAME + " (1)"))
    result = generate_unique_name(NEW_GAME_OBJECT_NAME, parent)
    assert result == NEW_GAME_OBJECT_NAME + " (2)"
    assert result not in names(parent.children)


def test_is_descendant_of(tree):
    _, player, weapon, _, wall = tree
    grandchild = GameObject("Tip")
    weapon.add_child(grandchild)
    assert is_descendant_of(player, grandchild)
    assert is_descendant_of(player, weapon)
    assert not is_descendant_of(weapon, player)
    assert not is_descendant_of(player, wall)


def test_visible_objects_depth_first(tree):
    scene, player, weapon, bow, wall = tree
    hierarchy = Hierarchy(scene)
    assert hierarchy.visible_objects() == [player, weapon, bow, wall]


def test_visible_objects_filters_but_walks_children(tree):
    scene, _, weapon, _, _ = tree
    hierarchy = Hierarchy(scene)
    assert hierarchy.visible_objects("weap") == [weapon]


def test_plain_click_selects_only_one(tree):
    scene, player, weapon, _, _ = tree
    hierarchy = Hierarchy(scene)
    hierarchy.click(player)
    assert hierarchy.click(weapon) == [weapon]
    assert hierarchy.selected_object() is weapon


def test_ctrl_click_toggles(tree):
    scene, player, weapon, _, _ = tree
    hierarchy = Hierarchy(scene)
    hierarchy.click(player)
    assert hierarchy.click(weapon, ctrl=True) == [player, weapon]
    assert hierarchy.click(player, ctrl=True) == [weapon]


def test_shift_click_selects_range(tree):
    scene, player, weapon, bow, wall = tree
    hierarchy = Hierarchy(scene)
    hierarchy.click(wall)
    assert hierarchy.click(weapon, shift=True) == [weapon, bow, wall]
    assert hierarchy.selected_object() is weapon


def test_delete_selected_removes_from_tree(tree):
    scene, player, weapon, _, wall = tree
    hierarchy = Hierarchy(scene)
    hierarchy.click(weapon)
    hierarchy.click(wall, ctrl=True)
    removed = hierarchy.delete_selected()
    assert removed == [weapon, wall]
    assert hierarchy.selected == []
    assert weapon not in player.children
    assert wall not in scene


def test_duplicate_selected_places_copy_beside_original(tree):
    scene, player, weapon, _, wall = tree
    hierarchy = Hierarchy(scene)
    hierarchy.click(weapon)
    hierarchy.click(wall, ctrl=True)
    copies = hierarchy.duplicate_selected()
    assert names(copies) == ["Weapon" + COPY_SUFFIX, "Wall" + COPY_SUFFIX]
    assert copies[0].parent is player
    assert copies[1] in scene


def test_rename_selected_trims(tree):
    scene, player, weapon, _, _ = tree
    hierarchy = Hierarchy(scene)
    hierarchy.click(weapon)
    assert hierarchy.rename_selected("  Sword\t") == "Sword"
    assert weapon.name == "Sword"


def test_rename_to_blank_is_refused(tree):
    scene, _, weapon, _, _ = tree
    hierarchy = Hierarchy(scene)
    hierarchy.click(weapon)
    with pytest.raises(ValueError):
        hierarchy.rename_selected(" \n ")
    assert weapon.name == "Weapon"


def test_add_empty_child_names_are_unique(tree):
    scene, _, _, _, wall = tree
    hierarchy = Hierarchy(scene)
    first = hierarchy.add_empty_child(wall)
    second = hierarchy.add_empty_child(wall)
    assert first.name == NEW_GAME_OBJECT_NAME
    assert second.name != first.name
    assert wall.children == [first, second]
    assert second.parent is wall


def test_reparent_moves_root_under_target(tree):
    scene, player, _, _, wall = tree
    hierarchy = Hierarchy(scene)
    hierarchy.reparent(wall, player)
    assert wall not in scene
    assert player.children[-1] is wall
    assert wall.parent is player


def test_reparent_to_root(tree):
    scene, player, weapon, _, _ = tree
    hierarchy = Hierarchy(scene)
    hierarchy.reparent(weapon, None)
    assert weapon not in player.children
    assert scene.objects[-1] is weapon
    assert not weapon.has_parent()


def test_reparent_into_own_descendant_is_refused(tree):
    scene, player, weapon, _, _ = tree
    hierarchy = Hierarchy(scene)
    with pytest.raises(ValueError):
        hierarchy.reparent(player, weapon)
    with pytest.raises(ValueError):
        hierarchy.reparent(player, player)
    assert weapon.parent is player


def test_reorder_above_and_below(tree):
    scene, player, weapon, bow, wall = tree
    hierarchy = Hierarchy(scene)
    hierarchy.reorder(bow, weapon, above=True)
    assert player.children == [bow, weapon]
    hierarchy.reorder(bow, weapon, above=False)
    assert player.children == [weapon, bow]
    hierarchy.reorder(wall, player, above=True)
    assert scene.objects == [wall, player]


def test_reorder_requires_siblings(tree):
    scene, player, weapon, _, wall = tree
    hierarchy = Hierarchy(scene)
    with pytest.raises(ValueError):
        hierarchy.reorder(wall, weapon)
    with pytest.raises(ValueError):
        hierarchy.reorder(player, player)
    assert scene.objects == [player, wall]