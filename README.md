# talon

A small 2D game engine core in plain Python, with no third-party
dependencies. It provides:

- a scene graph of game objects carrying components that run in priority
  order (`talon.core`);
- 2D vectors and integer rectangles (`talon.geometry`);
- box colliders, scene-wide collision queries and a simple rigid body
  (`talon.box_collider`, `talon.collision`, `talon.rigidbody`);
- sprite drawing, spritesheet animation and an animation state machine
  (`talon.sprite_renderer`, `talon.animator`, `talon.state_machine`);
- keyboard state with named action bindings (`talon.input`);
- a keyboard-driven player controller (`talon.player_controller`);
- an in-memory log and the filtering behind a console view
  (`talon.console`, `talon.console_view`);
- the selection and tree edits behind a scene hierarchy view
  (`talon.hierarchy`);
- an editor with edit and play modes and a frame loop (`talon.editor`).

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building a scene

```python
from talon.core import GameObject, Scene
from talon.box_collider import BoxCollider
from talon.rigidbody import Rigidbody
from talon.geometry import Vector2

scene = Scene()

player = GameObject("Player")
player.add_component(BoxCollider())
body = Rigidbody(scene)
body.use_gravity = False
player.add_component(body)
scene.add(player)

player.awake()
player.start()
body.set_velocity(Vector2(3.0, 0.0))
player.update()
```

Every `GameObject` is created with a `Transform` and a random `uuid`.
Components are kept sorted by their `priority`; `get_component` finds the
first one of a class, and `remove_component` (or `Component.remove`) takes a
component off at the end of the next `update`. `add_child` builds the tree,
`Transform.world_position` adds up the parents' positions, and `full_path`
gives the names from the root joined by `/`. `Scene.find` searches the whole
tree depth first by name; `Scene.remove` detaches an object from its parent,
or from the roots if it has none.

`GameObject.serialize` and each component's `serialize` append plain
dictionaries to a list, ready for `json.dump`; the components'
`deserialize` methods read the `data` part of such a record back.

## Physics

A `Rigidbody` applies gravity, accumulated forces and drag, clamps its
velocity to `max_velocity`, then moves its object one pixel at a time along
x and then y, stopping on an axis as soon as its `BoxCollider` would overlap
the collider of another root object in the scene given to it. Without a
scene it moves freely. `check_scene_collision(scene, source, rect)` answers
the same question directly.

## Input

`InputSystem` maps action names to key names such as `"W"`, `"Space"`,
`"Left Shift"` or `"Up"` (case-insensitive). Bind with
`bind(action, key_name)`, which raises `ValueError` for an unknown key, or
load a JSON object of action to key name with `load_bindings`, which skips
unknown keys with a logged warning. Each frame, call `update` with the keys
that are down (scancodes or key names), query with `get_key`,
`get_key_down` and `get_key_up` (by scancode or action name), and end the
frame with `late_update`.

`PlayerController` reads the actions `MoveUp`, `MoveDown`, `MoveLeft`,
`MoveRight`, `Sprint` and `Jump` from the `InputSystem` it is given, sets
its object's rigidbody velocity, and sets the `isWalking` and `direction`
variables of its `AnimatorStateMachine`.

## Animation

`Animator` cuts a spritesheet into `spritesheet_columns` ×
`spritesheet_rows` frames and advances the `SpriteRenderer`'s source
rectangle by 0.016 s per update, one frame every `frame_duration` seconds.
`AnimatorStateMachine` holds `AnimatorState`s with `Animation`s and
transitions that fire on triggers (`trigger`) or on condition variables
(`set_bool`, `set_int`, `set_float`). `load_from_json` reads a file with a
`states` list (each with `name` and `animations`) and a `transitions` list
(each with `from`, `to` and a `condition` holding `variable` and a typed
`value`).

## Logging

`Console` keeps the latest 2000 messages, each a `ConsoleMessage` with a
`LogLevel` (`INFO`, `WARNING`, `ERROR`, `DEBUG`), file, line and an
`HH:MM:SS` timestamp. `ConsoleView` filters them by level and search text,
counts what it shows per level, formats display lines, and saves or loads
its filters under the `"console"` key of a settings dictionary.

## Hierarchy

`Hierarchy` works on a `Scene`: `visible_objects` lists matches of a search
depth first; `click` updates the selection with shift (range) and ctrl
(toggle) modifiers; `delete_selected`, `duplicate_selected`,
`rename_selected`, `add_empty_child`, `reparent` and `reorder` edit the
tree, raising `ValueError` for empty names, cycles or non-siblings.

## The editor command

```
talon [--bindings PATH] [--settings PATH] [--frames N] [--delay SECONDS] [--play]
```

It loads key bindings (default `./assets/config/input.json`) and editor
settings (default `./settings/editor_settings.json`), optionally enters play
mode, runs frames until `--frames` is reached or it is interrupted, calls
`on_destroy` on every object, and writes the settings file back.

In code, `Editor` switches modes with `play` (saving the scene through an
optional `scene_saver`, then waking and starting every object) and `stop`
(clearing the scene and refilling it from an optional `scene_loader`),
advances one frame with `step(pressed_keys)`, and saves or loads its
settings with `save_settings` and `load_settings`.

## What it does not do

The package opens no window and draws nothing itself: `SpriteRenderer` only
checks that its image file exists and hands the path and rectangles to a
renderer callable you supply. There is no graphical editor; the hierarchy
and console classes hold the logic but render no panels. There is no scene
file format: the `talon` command starts with an empty scene, and loading or
saving scenes is left to the `scene_loader` and `scene_saver` callables.
Keyboard state is not read from the system; you pass the held keys to
`InputSystem.update` or `Editor.step`.