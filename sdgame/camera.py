"""A 2D camera: the player's view into the world."""

from __future__ import annotations

import math
from typing import Optional, Tuple, Union

from sdgame.rectangle import Rectangle
from sdgame.vector import Vector2

Matrix4 = Tuple[Tuple[float, float, float, float], ...]


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _matmul(a: Matrix4, b: Matrix4) -> Matrix4:
    columns = list(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, column)) for column in columns) for row in a
    )


def _ortho(left: float, right: float, bottom: float, top: float) -> Matrix4:
    return (
        (2.0 / (right - left), 0.0, 0.0, -(right + left) / (right - left)),
        (0.0, 2.0 / (top - bottom), 0.0, -(top + bottom) / (top - bottom)),
        (0.0, 0.0, -1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def _translation(x: float, y: float, z: float) -> Matrix4:
    return (
        (1.0, 0.0, 0.0, x),
        (0.0, 1.0, 0.0, y),
        (0.0, 0.0, 1.0, z),
        (0.0, 0.0, 0.0, 1.0),
    )


def _scaling(x: float, y: float, z: float) -> Matrix4:
    return (
        (x, 0.0, 0.0, 0.0),
        (0.0, y, 0.0, 0.0),
        (0.0, 0.0, z, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


_IDENTITY = _scaling(1.0, 1.0, 1.0)


class Camera2D:
    """View onto the world for a screen of the given size.

    The camera starts centred on the screen. Matrices are row-major
    (``matrix[row][column]``) and map world coordinates, with y flipped,
    to normalised device coordinates.
    """

    def __init__(self, width: int, height: int) -> None:
        self._scale = Vector2(1.0, 1.0)
        self._position = Vector2(0.0, 0.0)
        self._altered = True
        self._matrix: Matrix4 = _IDENTITY
        self._bounds = Rectangle()
        self._width = 0
        self._height = 0
        self._ortho: Matrix4 = _IDENTITY
        self.set_dimensions(width, height)
        self.set_position(width / 2.0, height / 2.0)

    def set_dimensions(self, width: int, height: int) -> None:
        """Set the screen size in pixels; both must be positive."""
        if width <= 0 or height <= 0:
            raise ValueError(f"screen dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._ortho = _ortho(0.0, float(width), 0.0, float(height))
        self._altered = True

    @property
    def dimensions(self) -> Vector2:
        return Vector2(float(self._width), float(self._height))

    @property
    def world_bounds(self) -> Rectangle:
        """The area of the world in view."""
        self._update_matrix()
        return self._bounds

    @property
    def position(self) -> Vector2:
        """The world point at the centre of the view."""
        return Vector2(self._position.x, -self._position.y)

    def set_position(self, x: Union[Vector2, float], y: Optional[float] = None) -> None:
        """Centre the view on ``(x, y)`` or on a given :class:`Vector2`."""
        if isinstance(x, Vector2):
            if y is not None:
                raise TypeError("y must not be given with a Vector2 position")
            x, y = x.x, x.y
        elif y is None:
            raise TypeError("set_position needs a Vector2 or both x and y")
        self._position = Vector2(x, -y)
        self._altered = True

    @property
    def scale(self) -> Vector2:
        return self._scale

    def set_scale(self, scale: Union[Vector2, float]) -> None:
        """Set the zoom, as one factor for both axes or one per axis."""
        if not isinstance(scale, Vector2):
            scale = Vector2(scale, scale)
        if scale.x == 0 or scale.y == 0:
            raise ValueError("camera scale components must be non-zero")
        self._scale = scale
        self._altered = True

    @property
    def matrix(self) -> Matrix4:
        """The combined view transform."""
        self._update_matrix()
        return self._matrix

    def screen_to_world(self, screen: Vector2) -> Vector2:
        """Convert a screen position to the world position under it."""
        offset = screen - Vector2(self._width * 0.5, self._height * 0.5)
        return offset / self._scale + self.position

    def _update_matrix(self) -> None:
        if not self._altered:
            return

        sx, sy = self._scale.x, self._scale.y
        tx = _round_half_away(self._position.x * sx) / sx
        ty = _round_half_away(self._position.y * sy) / sy

        translate = _translation(-tx + self._width / 2.0, -ty + self._height / 2.0, 0.0)
        cam = _matmul(self._ortho, translate)
        self._matrix = _matmul(_scaling(sx, sy, 0.0), cam)

        pos = self.screen_to_world(self._position)
        self._bounds = Rectangle(pos.x, pos.y, self._width / sx, self._height / sy)
        self._altered = False