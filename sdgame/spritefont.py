"""Bitmap fonts: packing glyphs into a texture atlas and drawing text with them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

from sdgame.color import Color
from sdgame.rectangle import Rectangle
from sdgame.spritebatch import SpriteBatch, Texture2D
from sdgame.vector import Vector2

FIRST_PRINTABLE_CHAR = chr(32)
LAST_PRINTABLE_CHAR = chr(126)
MAX_TEXTURE_RES = 4096

_WHITE = Color(255, 255, 255, 255)


class Justification(Enum):
    """Horizontal alignment of drawn text relative to its position."""

    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


@dataclass(frozen=True)
class CharGlyph:
    """One character of a font: its pixel size and its area of the atlas in uv units."""

    character: str
    uv_rect: Rectangle
    size: Vector2


class Partition(NamedTuple):
    """Glyph indices per atlas row, and the atlas size in pixels."""

    rows: List[List[int]]
    width: int
    height: int


def closest_pow2(i: int) -> int:
    """The smallest power of two that is at least ``i`` (1 for ``i`` <= 1)."""
    i -= 1
    result = 1
    while i > 0:
        i >>= 1
        result <<= 1
    return result


def create_rows(widths: Sequence[int], rows: int, padding: int) -> Tuple[List[List[int]], int]:
    """Spread glyph indices over ``rows`` rows, each going to the narrowest row so far.

    Returns the rows and the width of the widest one, padding included.
    """
    if rows < 1:
        raise ValueError(f"row count must be at least 1, got {rows}")
    layout: List[List[int]] = [[] for _ in range(rows)]
    row_widths = [padding] * rows
    for index, width in enumerate(widths):
        target = min(range(rows), key=row_widths.__getitem__)
        row_widths[target] += width + padding
        layout[target].append(index)
    return layout, max(row_widths)


def best_partition(widths: Sequence[int], font_height: int, padding: int) -> Partition:
    """Find the row count giving the smallest power-of-two atlas for the glyphs.

    Raises ValueError when no atlas of at most MAX_TEXTURE_RES pixels a side fits.
    """
    area = MAX_TEXTURE_RES * MAX_TEXTURE_RES
    best: Optional[Partition] = None
    rows = 1
    while rows <= len(widths):
        layout, width = create_rows(widths, rows, padding)
        height = rows * (padding + font_height) + padding
        width = closest_pow2(width)
        height = closest_pow2(height)

        if width > MAX_TEXTURE_RES or height > MAX_TEXTURE_RES:
            rows += 1
            continue

        if area >= width * height:
            best = Partition(layout, width, height)
            area = width * height
            rows += 1
        else:
            break

    if best is None:
        raise ValueError("glyphs cannot be mapped to a texture; try a lower resolution")
    return best


class SpriteFont:
    """A font whose characters are regions of one texture.

    ``glyphs`` holds one entry per character starting at ``first_char``,
    followed by the glyph drawn for characters outside that range.
    """

    def __init__(
        self,
        glyphs: Sequence[CharGlyph],
        font_height: int,
        first_char: Union[str, int] = FIRST_PRINTABLE_CHAR,
        texture: Optional[Texture2D] = None,
    ) -> None:
        if len(glyphs) < 1:
            raise ValueError("a sprite font needs at least the fallback glyph")
        self._glyphs = tuple(glyphs)
        self._reg_length = len(self._glyphs) - 1
        self._reg_start = ord(first_char) if isinstance(first_char, str) else int(first_char)
        self._font_height = font_height
        self._texture = texture if texture is not None else Texture2D(0)

    @classmethod
    def from_glyph_sizes(
        cls,
        sizes: Sequence[Tuple[int, int]],
        font_height: int,
        point_size: int,
        first_char: Union[str, int] = FIRST_PRINTABLE_CHAR,
        texture_id: int = 0,
    ) -> SpriteFont:
        """Lay out glyphs of the given pixel sizes in an atlas and build the font.

        ``sizes`` holds ``(width, height)`` per character from ``first_char``.
        The padding between glyphs is an eighth of ``point_size``.
        """
        start = ord(first_char) if isinstance(first_char, str) else int(first_char)
        padding = point_size // 8
        partition = best_partition([w for w, _ in sizes], font_height, padding)
        atlas_w, atlas_h = partition.width, partition.height

        rects: List[Tuple[int, int, int, int]] = [(0, 0, w, h) for w, h in sizes]
        line_y = padding
        for row in partition.rows:
            line_x = padding
            for index in row:
                w, h = sizes[index]
                rects[index] = (line_x, line_y, w, h)
                line_x += w + padding
            line_y += font_height + padding

        glyphs = [
            CharGlyph(
                chr(start + index),
                Rectangle(x / atlas_w, y / atlas_h, w / atlas_w, h / atlas_h),
                Vector2(float(w), float(h)),
            )
            for index, (x, y, w, h) in enumerate(rects)
        ]
        square = max(padding - 1, 0)
        glyphs.append(
            CharGlyph(
                " ",
                Rectangle(0.0, 0.0, square / atlas_w, square / atlas_h),
                glyphs[0].size,
            )
        )
        return cls(glyphs, font_height, start, Texture2D(texture_id, atlas_w, atlas_h))

    @property
    def font_height(self) -> int:
        return self._font_height

    @property
    def texture(self) -> Texture2D:
        return self._texture

    @property
    def glyphs(self) -> Tuple[CharGlyph, ...]:
        return self._glyphs

    def _glyph(self, char: str) -> CharGlyph:
        index = ord(char) - self._reg_start
        if index < 0 or index >= self._reg_length:
            index = self._reg_length
        return self._glyphs[index]

    def measure(self, text: str) -> Vector2:
        """The width of the widest line and the total height of ``text``."""
        width = 0.0
        height = float(self._font_height)
        line = 0.0
        for char in text:
            if char == "\n":
                height += self._font_height
                width = max(width, line)
                line = 0.0
            else:
                line += self._glyph(char).size.x
        return Vector2(max(width, line), height)

    def draw(
        self,
        batch: SpriteBatch,
        text: str,
        position: Vector2,
        scaling: Vector2 = Vector2(1.0, 1.0),
        depth: float = 0.0,
        tint: Color = _WHITE,
        justification: Justification = Justification.LEFT,
    ) -> None:
        """Queue ``text`` on ``batch`` with its first line starting at ``position``."""
        x, y = position.x, position.y
        if justification is Justification.MIDDLE:
            x -= self.measure(text).x * scaling.x / 2
        elif justification is Justification.RIGHT:
            x -= self.measure(text).x * scaling.x

        for char in text:
            if char == "\n":
                y += self._font_height * scaling.y
                x = position.x
                continue
            glyph = self._glyph(char)
            dest = Rectangle(x, y, glyph.size.x * scaling.x, glyph.size.y * scaling.y)
            uv = glyph.uv_rect
            source = Rectangle(uv.x, uv.y, uv.w, uv.h)
            batch.draw_texture(self._texture, dest, source, tint, depth)
            x += glyph.size.x * scaling.x