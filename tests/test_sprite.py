import pytest

from stellargen.sprite import (
    Sprite,
    SpriteAnimation,
    SpriteBatch,
    SpriteSheet,
    SpriteVertex,
    create_animation,
    create_sprite_sheet_quad,
    quad_vertices,
)


def make_sheet(count=3):
    sheet = SpriteSheet("tex")
    for i in range(count):
        sheet.add_sprite((0, 0, 0), (1, 1), (i, 0), (1, 1))
    return sheet


def test_quad_vertices_corners():
    sprite = Sprite("tex", (1.0, 2.0, 3.0), (4.0, 5.0), (0.0, 0.0), (1.0, 1.0))
    bl, br, tr, tl = quad_vertices(sprite)
    assert bl == SpriteVertex(1.0, 2.0, 3.0, 0.0, 0.0)
    assert br.x - bl.x == 4.0
    assert tr.y - br.y == 5.0
    assert tr.u == 1.0 and tr.v == 1.0
    assert tl.x == bl.x


def test_sprite_rejects_bad_position():
    with pytest.raises(ValueError):
        Sprite("tex", (1.0, 2.0), (1, 1))


def test_sheet_add_returns_index():
    sheet = SpriteSheet("tex")
    assert sheet.add_sprite((0, 0, 0), (1, 1), (0, 0), (1, 1)) == 0
    assert sheet.add_sprite((0, 0, 0), (1, 1), (0, 0), (1, 1)) == 1
    assert len(sheet) == 2
    assert sheet.get_sprite(1).texture_handle == "tex"


def test_sheet_validity_and_errors():
    sheet = make_sheet(2)
    assert sheet.validity(1)
    assert not sheet.validity(2)
    assert not sheet.validity(-1)
    with pytest.raises(IndexError):
        sheet.get_sprite(2)


def test_sheet_quad_covers_texture():
    sheet = create_sprite_sheet_quad("tex", 64, 32, (16, 16), (1.0, 1.0))
    assert len(sheet) == 8
    last = sheet.get_sprite(len(sheet) - 1)
    assert last.texture_coord[0] + last.texture_dim[0] == pytest.approx(1.0)
    assert last.texture_coord[1] + last.texture_dim[1] == pytest.approx(1.0)
    assert sheet.get_sprite(0).texture_coord == (0.0, 0.0)
    assert all(s.dimension == (1.0, 1.0) for s in map(sheet.get_sprite, range(len(sheet))))


def test_animation_advances_and_wraps():
    sheet = make_sheet(3)
    anim = SpriteAnimation(sheet, 0, 2, 10)
    anim.update(5)
    assert anim.current_index == 0
    anim.update(6)
    assert anim.current_index == 1
    anim.update(30)
    assert anim.current_index == 1
    assert anim.current_sprite() == sheet.get_sprite(1)


def test_animation_exact_frame_time_does_not_advance():
    anim = SpriteAnimation(make_sheet(3), 0, 2, 10)
    anim.update(10)
    assert anim.current_index == 0


def test_animation_rejects_zero_frame_time():
    with pytest.raises(ValueError):
        SpriteAnimation(make_sheet(), 0, 2, 0)


def test_create_animation_swaps_bounds():
    anim = create_animation(make_sheet(3), 2, 0, 10)
    assert (anim.begin, anim.end) == (0, 2)
    assert anim.current_index == 0


def test_create_animation_out_of_range():
    with pytest.raises(IndexError):
        create_animation(make_sheet(3), 0, 3, 10)


def test_batch_indices_and_vertices():
    batch = SpriteBatch("tex")
    sheet = make_sheet(2)
    batch.submit_sprite(sheet.get_sprite(0))
    batch.submit_sprite(sheet.get_sprite(1))
    assert batch.indices == (0, 1, 2, 2, 3, 0, 4, 5, 6, 6, 7, 4)
    assert list(batch.vertices[4:]) == quad_vertices(sheet.get_sprite(1))


def test_batch_rejects_other_texture():
    batch = SpriteBatch("tex")
    with pytest.raises(ValueError):
        batch.submit_sprite(Sprite("other"))


def test_batch_reset():
    batch = SpriteBatch("tex")
    batch.submit_sprite(Sprite("tex"))
    batch.reset()
    assert batch.vertices == ()
    assert batch.indices == ()