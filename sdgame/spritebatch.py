"""Collects textured quads into vertex batches ready for rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

from sdgame.color import Color
from sdgame.mathutil import deg_to_rad
from sdgame.rectangle import Rectangle
from sdgame.vector import Vector2

Matrix4 = Tuple[Tuple[float, float, float, float], ...]

VERTICES_PER_GLYPH = 6

_IDENTITY: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _matmul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix4:
    columns = list(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, column)) for column in columns) for row in a
    )


def _scaling(x: float, y: float, z: float) -> Matrix4:
    return (
        (x, 0.0, 0.0, 0.0),
        (0.0, y, 0.0, 0.0),
        (0.0, 0.0, z, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


class SortOrder(Enum):
    """How glyphs are ordered before batching."""

    NONE = auto()
    FRONT_TO_BACK = auto()
    BACK_TO_FRONT = auto()
    TEXTURE = auto()


@dataclass(frozen=True)
class Texture2D:
    """A handle to a texture and its size in pixels."""

    id: int
    width: int = 1
    height: int = 1


@dataclass(frozen=True)
class Vertex:
    """One corner of a quad: position, colour and texture coordinate."""

    position: Vector2 = field(default_factory=Vector2)
    color: Color = field(default_factory=Color)
    uv: Vector2 = field(default_factory=Vector2)


@dataclass(frozen=True)
class Glyph:
    """The four corners of one drawn quad."""

    top_left: Vertex
    bottom_left: Vertex
    top_right: Vertex
    bottom_right: Vertex
    texture: Texture2D
    depth: float = 0.0

    def triangles(self) -> Tuple[Vertex, ...]:
        """The quad as two triangles."""
        return (
            self.top_left,
            self.bottom_left,
            self.bottom_right,
            self.bottom_right,
            self.top_right,
            self.top_left,
        )


@dataclass
class RenderBatch:
    """A run of consecutive vertices that share one texture."""

    offset: int
    vertex_count: int
    texture: Texture2D


class SpriteBatch:
    """Gathers quads between :meth:`begin` and :meth:`end`.

    World units are multiplied by :attr:`SCALE` before positions are stored;
    y is flipped so that it grows upward in vertex space.
    """

    SCALE = Vector2(10.0, 10.0)

    def __init__(self, pixel: Optional[Texture2D] = None) -> None:
        self._pixel = pixel if pixel is not None else Texture2D(0, 1, 1)
        self._glyphs: List[Glyph] = []
        self._batches: List[RenderBatch] = []
        self._vertices: List[Vertex] = []
        self._sort_order = SortOrder.TEXTURE
        self._projection: Matrix4 = _IDENTITY

    @property
    def pixel(self) -> Texture2D:
        """The 1x1 white texture used for plain rectangles."""
        return self._pixel

    @property
    def scale(self) -> Vector2:
        return self.SCALE

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    @property
    def projection(self) -> Matrix4:
        """The matrix given to :meth:`begin`, with the batch scale undone."""
        return self._projection

    @property
    def glyphs(self) -> Tuple[Glyph, ...]:
        return tuple(self._glyphs)

    @property
    def batches(self) -> Tuple[RenderBatch, ...]:
        return tuple(self._batches)

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        """Vertices built by the last :meth:`end`, six per glyph."""
        return tuple(self._vertices)

    def begin(
        self,
        matrix: Optional[Sequence[Sequence[float]]] = None,
        sort_order: SortOrder = SortOrder.TEXTURE,
    ) -> None:
        """Start a new batch with a view matrix and a sort order."""
        self._sort_order = sort_order
        self._glyphs.clear()
        self._batches.clear()
        self._vertices.clear()
        base = matrix if matrix is not None else _IDENTITY
        self._projection = _matmul(base, _scaling(1.0 / self.SCALE.x, 1.0 / self.SCALE.y, 1.0))

    def end(self) -> None:
        """Sort the glyphs and build the vertex list and batches."""
        self._sort_glyphs()
        self._create_batches()

    def draw_texture(
        self,
        texture: Texture2D,
        dest: Rectangle,
        source: Rectangle,
        color: Color,
        depth: float = 0.0,
        anchor: Optional[Vector2] = None,
        rotation: Optional[float] = None,
    ) -> None:
        """Queue ``source`` (in uv units) of ``texture`` drawn into ``dest``.

        With an ``anchor`` or a ``rotation`` (degrees), the quad is rotated
        around the anchor, given relative to the quad's top-left corner.
        """
        if anchor is None and rotation is None:
            self._draw_plain(texture, dest, source, color, depth)
        else:
            self._draw_rotated(
                texture,
                dest,
                source,
                color,
                depth,
                anchor if anchor is not None else Vector2(0.0, 0.0),
                rotation if rotation is not None else 0.0,
            )

    def draw_rectangle(
        self,
        dest: Rectangle,
        color: Color,
        depth: float = 0.0,
        anchor: Optional[Vector2] = None,
        rotation: Optional[float] = None,
    ) -> None:
        """Queue a solid rectangle in ``color``."""
        self.draw_texture(
            self._pixel, dest, Rectangle(0.0, 0.0, 1.0, 1.0), color, depth, anchor, rotation
        )

    def _draw_plain(
        self, texture: Texture2D, dest: Rectangle, source: Rectangle, color: Color, depth: float
    ) -> None:
        sx, sy = self.SCALE.x, self.SCALE.y
        x = _round_half_away(dest.x) * sx
        y = -(_round_half_away(dest.y) * sy)
        w = _round_half_away(dest.w) * sx
        h = _round_half_away(dest.h) * sy
        self._add_glyph(
            texture,
            depth,
            color,
            source,
            Vector2(x, y),
            Vector2(x, y - h),
            Vector2(x + w, y - h),
            Vector2(x + w, y),
        )

    def _draw_rotated(
        self,
        texture: Texture2D,
        dest: Rectangle,
        source: Rectangle,
        color: Color,
        depth: float,
        anchor: Vector2,
        rotation: float,
    ) -> None:
        sx, sy = self.SCALE.x, self.SCALE.y
        x, y = dest.x * sx, dest.y * sy
        w, h = dest.w * sx, dest.h * sy
        ax, ay = anchor.x * -sx, anchor.y * sy
        pivot = Vector2(ax, ay)

        corners = (
            Vector2(-ax, -ay),
            Vector2(-ax, -h - ay),
            Vector2(w - ax, -h - ay),
            Vector2(w - ax, -ay),
        )
        angle = deg_to_rad(rotation)
        tl, bl, br, tr = (Vector2.rotate(corner, angle) + pivot for corner in corners)

        origin = Vector2(_round_half_away(x), _round_half_away(-y))
        self._add_glyph(texture, depth, color, source, origin + tl, origin + bl, origin + br, origin + tr)

    def _add_glyph(
        self,
        texture: Texture2D,
        depth: float,
        color: Color,
        source: Rectangle,
        top_left: Vector2,
        bottom_left: Vector2,
        bottom_right: Vector2,
        top_right: Vector2,
    ) -> None:
        left, right = source.x, source.x + source.w
        low, high = source.y, source.y + source.h
        self._glyphs.append(
            Glyph(
                top_left=Vertex(top_left, color, Vector2(left, high)),
                bottom_left=Vertex(bottom_left, color, Vector2(left, low)),
                top_right=Vertex(top_right, color, Vector2(right, high)),
                bottom_right=Vertex(bottom_right, color, Vector2(right, low)),
                texture=texture,
                depth=depth,
            )
        )

    def _sort_glyphs(self) -> None:
        if self._sort_order is SortOrder.BACK_TO_FRONT:
            self._glyphs.sort(key=lambda glyph: glyph.depth, reverse=True)
        elif self._sort_order is SortOrder.FRONT_TO_BACK:
            self._glyphs.sort(key=lambda glyph: glyph.depth)
        elif self._sort_order is SortOrder.TEXTURE:
            self._glyphs.sort(key=lambda glyph: glyph.texture.id)

    def _create_batches(self) -> None:
        self._batches.clear()
        self._vertices.clear()
        for glyph in self._glyphs:
            if self._batches and self._batches[-1].texture == glyph.texture:
                self._batches[-1].vertex_count += VERTICES_PER_GLYPH
            else:
                self._batches.append(
                    RenderBatch(len(self._vertices), VERTICES_PER_GLYPH, glyph.texture)
                )
            self._vertices.extend(glyph.triangles())