import pytest

from talon.box_collider import BoxCollider
from talon.core import GameObject, Scene
from talon.geometry import Vector2
from talon.rigidbody import DEFAULT_GRAVITY, Rigidbody, clamp


def _body(scene=None, collider=True, position=None):
    obj = GameObject("Body")
    if position is not None:
        obj.transform.position = position
    if collider:
        obj.add_component(BoxCollider(width=10, height=10))
    body = Rigidbody(scene)
    obj.add_component(body)
    body.awake()
    return obj, body


@pytest.mark.parametrize(
    "value,low,high,expected",
    [(5, 0, 10, 5), (-3, 0, 10, 0), (12, 0, 10, 10), (0.5, 0.0, 1.0, 0.5)],
)
def test_clamp(value, low, high, expected):
    assert clamp(value, low, high) == expected


def test_defaults():
    body = Rigidbody()
    assert body.gravity == DEFAULT_GRAVITY == 9.81
    assert body.max_velocity == 50.0
    assert body.mass == 1.0
    assert body.use_gravity is True and body.is_kinematic is False


def test_add_force_divides_by_mass():
    body = Rigidbody()
    body.mass = 4.0
    force = Vector2(8.0, -12.0)
    body.add_force(force)
    assert body.acceleration * body.mass == force


def test_velocity_helpers():
    body = Rigidbody()
    body.set_velocity(Vector2(1.0, 2.0))
    body.add_velocity(Vector2(3.0, 4.0))
    assert body.velocity == Vector2(1.0, 2.0) + Vector2(3.0, 4.0)
    body.mass = 2.0
    before = Vector2(body.velocity.x, body.velocity.y)
    body.apply_impulse(Vector2(2.0, 2.0))
    assert body.velocity - before == Vector2(1.0, 1.0)


def test_on_collision_stops_body():
    body = Rigidbody()
    body.set_velocity(Vector2(3.0, 3.0))
    body.add_force(Vector2(1.0, 1.0))
    body.on_collision()
    assert body.velocity == Vector2.zero()
    assert body.acceleration == Vector2.zero()


def test_update_before_awake_does_nothing():
    obj = GameObject("Body")
    body = Rigidbody()
    obj.add_component(body)
    body.update()
    assert body.velocity == Vector2.zero()


def test_kinematic_body_ignores_physics():
    _, body = _body()
    body.is_kinematic = True
    body.update()
    assert body.velocity == Vector2.zero()


def test_gravity_accelerates_downwards_and_resets_acceleration():
    _, body = _body(collider=False)
    body.update()
    assert body.velocity.y > 0
    assert body.velocity.x == 0.0
    assert body.acceleration == Vector2.zero()


def test_no_collider_means_no_movement():
    obj, body = _body(collider=False)
    body.use_gravity = False
    body.linear_drag = Vector2(1.0, 1.0)
    body.set_velocity(Vector2(10.0, 0.0))
    body.update()
    assert obj.transform.position == Vector2.zero()


def test_moves_by_whole_velocity_when_free():
    obj, body = _body(scene=Scene())
    body.use_gravity = False
    body.linear_drag = Vector2(1.0, 1.0)
    body.set_velocity(Vector2(10.0, -4.0))
    body.update()
    assert obj.transform.position == Vector2(10.0, -4.0)
    assert body.velocity == Vector2(10.0, -4.0)


def test_velocity_is_clamped():
    _, body = _body(scene=Scene())
    body.use_gravity = False
    body.linear_drag = Vector2(1.0, 1.0)
    body.set_velocity(Vector2(1000.0, -1000.0))
    body.update()
    assert body.velocity == Vector2(body.max_velocity, -body.max_velocity)


def test_tiny_velocity_snaps_to_zero():
    _, body = _body()
    body.use_gravity = False
    body.set_velocity(Vector2(0.005, -0.005))
    body.update()
    assert body.velocity == Vector2.zero()


def test_stops_against_wall():
    scene = Scene()
    wall = GameObject("Wall")
    wall.transform.position = Vector2(20.0, 0.0)
    wall.add_component(BoxCollider(width=10, height=10))
    scene.add(wall)
    mover, body = _body(scene=scene)
    scene.add(mover)
    body.use_gravity = False
    body.linear_drag = Vector2(1.0, 1.0)
    body.set_velocity(Vector2(15.0, 0.0))
    body.update()
    mover_bounds = mover.get_component(BoxCollider).bounds()
    wall_bounds = wall.get_component(BoxCollider).bounds()
    assert body.velocity.x == 0.0
    assert not mover_bounds.intersects(wall_bounds)
    assert mover_bounds.x + mover_bounds.w == wall_bounds.x


def test_serialize_round_trip():
    original = Rigidbody()
    original.mass = 3.0
    original.gravity = 1.5
    original.max_velocity = 7.0
    original.use_gravity = False
    original.is_kinematic = True
    out = []
    original.serialize(out)
    assert out[0]["type"] == "Rigidbody"
    restored = Rigidbody()
    restored.deserialize(out[0]["data"])
    assert (restored.mass, restored.gravity, restored.max_velocity) == (3.0, 1.5, 7.0)
    assert restored.use_gravity is False
    assert restored.is_kinematic is True


def test_deserialize_reads_short_kinematic_key():
    body = Rigidbody()
    body.deserialize({"kinematic": True})
    assert body.is_kinematic is True