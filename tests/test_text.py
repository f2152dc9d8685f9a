import pytest

from stellargen.text import Character, Font, TextBatch, TextVertex


def make_font():
    chars = {
        "a": Character(u=0.0, v=0.0, w=0.5, h=0.25, width=8, height=12,
                       bearing_x=0, bearing_y=12, advance=8 * 64),
        "b": Character(u=0.5, v=0.25, w=0.5, h=0.25, width=8, height=12,
                       bearing_x=0, bearing_y=12, advance=8 * 64),
    }
    return Font(chars, 16)


def test_get_char_known():
    font = make_font()
    assert font.get_char("a").width == 8


def test_get_char_unknown_is_empty():
    font = make_font()
    assert font.get_char("?") == Character()


def test_char_px_space():
    assert Font.char_px_space() == 2


def test_first_vertex_at_position():
    batch = TextBatch(make_font())
    batch.submit_text("a", (3.0, 4.0, 0.5), 0.1, 0.2, 0.3, 0.4)
    assert batch.vertices[0] == TextVertex(3.0, 4.0, 0.5, 0.1, 0.2, 0.3, 0.4, 0.0, 0.25)


def test_quad_corners_span_glyph_size():
    batch = TextBatch(make_font())
    batch.submit_text("a", (0.0, 0.0, 0.0), 1, 1, 1)
    bl, br, tr, tl = batch.vertices
    assert br.x - bl.x == 8
    assert tr.y - br.y == 12
    assert tl.x == bl.x
    assert tl.v == bl.v - 0.25


def test_default_alpha_is_one():
    batch = TextBatch(make_font())
    batch.submit_text("a", (0.0, 0.0, 0.0), 1, 1, 1)
    assert all(v.a == 1.0 for v in batch.vertices)


def test_adjacent_glyphs_abut():
    batch = TextBatch(make_font())
    batch.submit_text("ab", (0.0, 0.0, 0.0), 1, 1, 1)
    vs = batch.vertices
    assert vs[4].x == vs[1].x
    assert vs[4].y == vs[0].y


def test_newline_moves_down_and_back():
    font = make_font()
    batch = TextBatch(font)
    batch.submit_text("a\nb", (2.0, 5.0, 0.0), 1, 1, 1)
    vs = batch.vertices
    assert batch.char_count == 2
    assert vs[4].x == vs[0].x
    assert vs[4].y == vs[0].y - font.height


def test_indices_pattern():
    batch = TextBatch(make_font())
    batch.submit_text("ab", (0.0, 0.0, 0.0), 1, 1, 1)
    assert batch.indices == (0, 1, 2, 2, 3, 0, 4, 5, 6, 6, 7, 4)


def test_counts_match():
    batch = TextBatch(make_font())
    batch.submit_text("ab\nab", (0.0, 0.0, 0.0), 1, 1, 1)
    assert len(batch.vertices) == 4 * batch.char_count
    assert len(batch.indices) == 6 * batch.char_count


def test_reset_clears():
    batch = TextBatch(make_font())
    batch.submit_text("ab", (0.0, 0.0, 0.0), 1, 1, 1)
    batch.reset()
    assert batch.char_count == 0
    assert batch.vertices == ()
    batch.submit_text("a", (0.0, 0.0, 0.0), 1, 1, 1)
    assert batch.indices[:3] == (0, 1, 2)


def test_bad_position_raises():
    batch = TextBatch(make_font())
    with pytest.raises(ValueError):
        batch.submit_text("a", (0.0, 0.0), 1, 1, 1)