from talon.animator import Animator
from talon.core import GameObject
from talon.geometry import Rect
from talon.sprite_renderer import SpriteRenderer


def _animated(tmp_path, columns=4, rows=2, duration=0.15):
    sheet = tmp_path / "sheet.png"
    sheet.write_bytes(b"\x89PNG")
    obj = GameObject("Player")
    sprite = SpriteRenderer()
    obj.add_component(sprite)
    animator = Animator()
    animator.spritesheet_columns = columns
    animator.spritesheet_rows = rows
    animator.frame_duration = duration
    obj.add_component(animator)
    animator.awake()
    return animator, sprite, str(sheet)


def test_defaults():
    animator = Animator()
    assert (animator.frame_width, animator.frame_height) == (16, 16)
    assert animator.frame_duration == 0.15
    assert animator.priority == 14
    assert animator.frame_clips == []


def test_sheet_is_sliced_into_grid(tmp_path):
    animator, _, sheet = _animated(tmp_path)
    animator.set_sprite_sheet(sheet)
    clips = animator.frame_clips
    assert len(clips) == animator.spritesheet_columns * animator.spritesheet_rows
    assert clips[0] == Rect(0, 0, 16, 16)
    assert all((c.w, c.h) == (16, 16) for c in clips)
    assert len({(c.x, c.y) for c in clips}) == len(clips)


def test_sheet_resizes_and_loads_sprite(tmp_path):
    animator, sprite, sheet = _animated(tmp_path)
    animator.set_sprite_sheet(sheet)
    assert sprite.width == animator.frame_width * 2
    assert sprite.height == animator.frame_height * 2
    assert sprite.image_path == sheet


def test_default_duration_waits_before_first_frame(tmp_path):
    animator, sprite, sheet = _animated(tmp_path)
    animator.set_sprite_sheet(sheet)
    assert sprite.use_source_rect is False
    assert animator.frame_index == 0


def test_frames_advance_and_wrap(tmp_path):
    animator, sprite, sheet = _animated(tmp_path, columns=3, rows=1, duration=0.01)
    animator.set_sprite_sheet(sheet)
    clips = animator.frame_clips
    seen = [sprite.source_rect]
    for _ in range(len(clips)):
        animator.update()
        seen.append(sprite.source_rect)
    assert seen == clips + [clips[0]]


def test_update_without_sprite_renderer_does_nothing(tmp_path):
    obj = GameObject("Player")
    animator = Animator()
    animator.spritesheet_columns = 2
    animator.spritesheet_rows = 2
    obj.add_component(animator)
    animator.awake()
    animator.set_sprite_sheet(str(tmp_path / "sheet.png"))
    animator.update()
    assert animator.frame_index == 0
    assert len(animator.frame_clips) == 4


def test_empty_path_is_ignored(tmp_path):
    animator, _, _ = _animated(tmp_path)
    animator.set_sprite_sheet("")
    assert animator.frame_clips == []


def test_serialize_round_trip():
    original = Animator()
    original.frame_width = 32
    original.frame_height = 48
    original.frame_duration = 0.25
    original.spritesheet_columns = 6
    original.spritesheet_rows = 3
    out = []
    original.serialize(out)
    assert out[0]["type"] == "Animator"
    restored = Animator()
    restored.deserialize(out[0]["data"])
    assert (restored.frame_width, restored.frame_height) == (32, 48)
    assert restored.frame_duration == original.frame_duration
    assert (restored.spritesheet_columns, restored.spritesheet_rows) == (6, 3)