import pytest

from sdgame.color import Color
from sdgame.rectangle import Rectangle
from sdgame.spritebatch import (
    VERTICES_PER_GLYPH,
    SortOrder,
    SpriteBatch,
    Texture2D,
)
from sdgame.vector import Vector2

WHITE = Color(255, 255, 255, 255)
RED = Color(255, 0, 0, 255)
TEX_A = Texture2D(1, 8, 8)
TEX_B = Texture2D(2, 8, 8)
FULL = Rectangle(0.0, 0.0, 1.0, 1.0)


def _batch():
    batch = SpriteBatch()
    batch.begin()
    return batch


def test_plain_draw_positions_worked_example():
    batch = _batch()
    batch.draw_texture(TEX_A, Rectangle(1, 2, 3, 4), FULL, WHITE, 0.0)
    glyph = batch.glyphs[0]
    assert glyph.top_left.position == Vector2(10, -20)
    assert glyph.bottom_right.position == Vector2(40, -60)


def test_plain_draw_corners_form_axis_aligned_quad():
    batch = _batch()
    batch.draw_texture(TEX_A, Rectangle(3, 5, 7, 2), FULL, WHITE)
    g = batch.glyphs[0]
    assert g.top_left.position.x == g.bottom_left.position.x
    assert g.top_right.position.x == g.bottom_right.position.x
    assert g.top_left.position.y == g.top_right.position.y
    assert g.bottom_left.position.y == g.bottom_right.position.y
    width = g.top_right.position.x - g.top_left.position.x
    assert width == 7 * batch.scale.x


def test_plain_draw_rounds_destination_first():
    rounded = _batch()
    rounded.draw_texture(TEX_A, Rectangle(2, 3, 4, 4), FULL, WHITE)
    fractional = _batch()
    fractional.draw_texture(TEX_A, Rectangle(1.5, 2.6, 4.4, 3.5), FULL, WHITE)
    assert fractional.glyphs[0] == rounded.glyphs[0]


def test_uv_follows_source_rectangle():
    batch = _batch()
    source = Rectangle(0.25, 0.5, 0.5, 0.25)
    batch.draw_texture(TEX_A, Rectangle(0, 0, 1, 1), source, WHITE)
    g = batch.glyphs[0]
    assert g.bottom_left.uv == Vector2(0.25, 0.5)
    assert g.top_left.uv.x == g.bottom_left.uv.x
    assert g.top_left.uv.y - g.bottom_left.uv.y == pytest.approx(source.h)
    assert g.bottom_right.uv.x - g.bottom_left.uv.x == pytest.approx(source.w)


def test_zero_rotation_matches_plain_draw():
    plain = _batch()
    plain.draw_texture(TEX_A, Rectangle(1, 2, 3, 4), FULL, WHITE, 1.0)
    rotated = _batch()
    rotated.draw_texture(TEX_A, Rectangle(1, 2, 3, 4), FULL, WHITE, 1.0, Vector2(0, 0), 0.0)
    assert rotated.glyphs[0] == plain.glyphs[0]


def test_half_turn_flips_quad_around_anchor():
    plain = _batch()
    plain.draw_texture(TEX_A, Rectangle(1, 2, 3, 4), FULL, WHITE, 0.0, Vector2(0, 0), 0.0)
    turned = _batch()
    turned.draw_texture(TEX_A, Rectangle(1, 2, 3, 4), FULL, WHITE, 0.0, Vector2(0, 0), 180.0)
    p, t = plain.glyphs[0], turned.glyphs[0]
    assert t.top_left.position.x == pytest.approx(p.top_left.position.x, abs=1e-9)
    assert t.top_left.position.y == pytest.approx(p.top_left.position.y, abs=1e-9)
    plain_span = p.bottom_right.position - p.top_left.position
    turned_span = t.bottom_right.position - t.top_left.position
    assert turned_span.x == pytest.approx(-plain_span.x, abs=1e-9)
    assert turned_span.y == pytest.approx(-plain_span.y, abs=1e-9)


@pytest.mark.parametrize("angle", [30.0, 90.0, 217.0])
def test_rotation_preserves_quad_size(angle):
    plain = _batch()
    plain.draw_texture(TEX_A, Rectangle(2, 2, 5, 3), FULL, WHITE, 0.0, Vector2(1, 1), 0.0)
    turned = _batch()
    turned.draw_texture(TEX_A, Rectangle(2, 2, 5, 3), FULL, WHITE, 0.0, Vector2(1, 1), angle)
    p, t = plain.glyphs[0], turned.glyphs[0]
    for a, b in [("top_left", "bottom_right"), ("top_left", "top_right"), ("bottom_left", "top_left")]:
        expected = Vector2.distance(getattr(p, a).position, getattr(p, b).position)
        actual = Vector2.distance(getattr(t, a).position, getattr(t, b).position)
        assert actual == pytest.approx(expected)


def test_draw_rectangle_uses_pixel_texture_and_color():
    pixel = Texture2D(42)
    batch = SpriteBatch(pixel)
    batch.begin()
    batch.draw_rectangle(Rectangle(0, 0, 2, 2), RED, 3.0)
    g = batch.glyphs[0]
    assert g.texture == pixel
    assert g.depth == 3.0
    assert {v.color for v in (g.top_left, g.bottom_left, g.top_right, g.bottom_right)} == {RED}
    assert g.bottom_left.uv == Vector2(0.0, 0.0)
    assert g.top_right.uv == Vector2(1.0, 1.0)


def test_default_pixel_is_one_by_one():
    pixel = SpriteBatch().pixel
    assert (pixel.width, pixel.height) == (1, 1)


def test_end_builds_two_triangles_per_glyph():
    batch = _batch()
    batch.draw_texture(TEX_A, Rectangle(0, 0, 1, 1), FULL, WHITE)
    batch.draw_texture(TEX_A, Rectangle(2, 2, 1, 1), FULL, WHITE)
    batch.end()
    vertices = batch.vertices
    assert len(vertices) == VERTICES_PER_GLYPH * len(batch.glyphs)
    g = batch.glyphs[0]
    assert list(vertices[:6]) == [
        g.top_left,
        g.bottom_left,
        g.bottom_right,
        g.bottom_right,
        g.top_right,
        g.top_left,
    ]


def test_batches_split_on_texture_change_without_sorting():
    batch = SpriteBatch()
    batch.begin(sort_order=SortOrder.NONE)
    for texture in (TEX_B, TEX_B, TEX_A, TEX_B):
        batch.draw_texture(texture, Rectangle(0, 0, 1, 1), FULL, WHITE)
    batch.end()
    assert [b.texture for b in batch.batches] == [TEX_B, TEX_A, TEX_B]
    assert [b.vertex_count for b in batch.batches] == [
        2 * VERTICES_PER_GLYPH,
        VERTICES_PER_GLYPH,
        VERTICES_PER_GLYPH,
    ]
    offsets = [b.offset for b in batch.batches]
    counts = [b.vertex_count for b in batch.batches]
    assert offsets[0] == 0
    assert all(offsets[i] + counts[i] == offsets[i + 1] for i in range(len(offsets) - 1))
    assert offsets[-1] + counts[-1] == len(batch.vertices)


def test_texture_sort_groups_textures_stably():
    batch = SpriteBatch()
    batch.begin(sort_order=SortOrder.TEXTURE)
    batch.draw_texture(TEX_B, Rectangle(0, 0, 1, 1), FULL, WHITE, 1.0)
    batch.draw_texture(TEX_A, Rectangle(0, 0, 1, 1), FULL, WHITE, 2.0)
    batch.draw_texture(TEX_B, Rectangle(0, 0, 1, 1), FULL, WHITE, 3.0)
    batch.end()
    assert [g.texture for g in batch.glyphs] == [TEX_A, TEX_B, TEX_B]
    assert [g.depth for g in batch.glyphs] == [2.0, 1.0, 3.0]
    assert len(batch.batches) == 2


@pytest.mark.parametrize(
    "order, expected",
    [
        (SortOrder.BACK_TO_FRONT, [5.0, 2.0, 2.0, 1.0]),
        (SortOrder.FRONT_TO_BACK, [1.0, 2.0, 2.0, 5.0]),
        (SortOrder.NONE, [2.0, 5.0, 1.0, 2.0]),
    ],
)
def test_depth_sorting(order, expected):
    batch = SpriteBatch()
    batch.begin(sort_order=order)
    for depth in (2.0, 5.0, 1.0, 2.0):
        batch.draw_texture(TEX_A, Rectangle(0, 0, 1, 1), FULL, WHITE, depth)
    batch.end()
    assert [g.depth for g in batch.glyphs] == expected


def test_depth_sort_is_stable_for_equal_depths():
    batch = SpriteBatch()
    batch.begin(sort_order=SortOrder.BACK_TO_FRONT)
    batch.draw_texture(TEX_A, Rectangle(0, 0, 1, 1), FULL, WHITE, 1.0)
    batch.draw_texture(TEX_B, Rectangle(0, 0, 1, 1), FULL, WHITE, 1.0)
    batch.end()
    assert [g.texture for g in batch.glyphs] == [TEX_A, TEX_B]


def test_begin_clears_previous_frame():
    batch = _batch()
    batch.draw_texture(TEX_A, Rectangle(0, 0, 1, 1), FULL, WHITE)
    batch.end()
    batch.begin(sort_order=SortOrder.FRONT_TO_BACK)
    assert batch.glyphs == ()
    assert batch.vertices == ()
    assert batch.batches == ()
    assert batch.sort_order is SortOrder.FRONT_TO_BACK


def test_end_with_nothing_drawn():
    batch = _batch()
    batch.end()
    assert batch.vertices == ()
    assert batch.batches == ()


def test_projection_undoes_batch_scale():
    matrix = (
        (2.0, 0.0, 0.0, 0.5),
        (0.0, 3.0, 0.0, -0.5),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    batch = SpriteBatch()
    batch.begin(matrix, SortOrder.NONE)
    proj = batch.projection
    assert proj[0][0] * batch.scale.x == pytest.approx(matrix[0][0])
    assert proj[1][1] * batch.scale.y == pytest.approx(matrix[1][1])
    assert proj[0][3] == pytest.approx(matrix[0][3])
    assert proj[1][3] == pytest.approx(matrix[1][3])