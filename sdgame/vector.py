"""Two- and three-component vectors used for positions, sizes and scales."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

_Number = Union[int, float]


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_component(value: _Number) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:f}"


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector; ``w`` and ``h`` alias ``x`` and ``y``."""

    x: _Number = 0.0
    y: _Number = 0.0

    @property
    def w(self) -> _Number:
        """Width, the same component as ``x``."""
        return self.x

    @property
    def h(self) -> _Number:
        """Height, the same component as ``y``."""
        return self.y

    @staticmethod
    def distance(p1: Vector2, p2: Vector2) -> float:
        """Euclidean distance between two points."""
        return math.hypot(float(p1.x) - float(p2.x), float(p1.y) - float(p2.y))

    @staticmethod
    def rotate(v: Vector2, angle: float) -> Vector2:
        """Rotate ``v`` by ``angle`` radians around the origin."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return Vector2(v.x * cos_a - v.y * sin_a, v.x * sin_a + v.y * cos_a)

    def length(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """A vector of length 1 in the same direction; a zero vector is returned unchanged."""
        length = self.length()
        if length == 0:
            return self
        return Vector2(self.x / length, self.y / length)

    def __iter__(self) -> Iterator[_Number]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector2, _Number]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if _is_number(other):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Union[Vector2, _Number]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if _is_number(other):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{{{_format_component(self.x)}, {_format_component(self.y)}}}"


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: _Number = 0.0
    y: _Number = 0.0
    z: _Number = 0.0

    @staticmethod
    def distance(p1: Vector3, p2: Vector3) -> float:
        """Euclidean distance between two points."""
        return math.sqrt(
            (float(p1.x) - float(p2.x)) ** 2
            + (float(p1.y) - float(p2.y)) ** 2
            + (float(p1.z) - float(p2.z)) ** 2
        )

    def length(self) -> float:
        """Distance from the origin."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """A vector of length 1 in the same direction; a zero vector is returned unchanged."""
        length = self.length()
        if length == 0:
            return self
        return Vector3(self.x / length, self.y / length, self.z / length)

    def __iter__(self) -> Iterator[_Number]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vector3, _Number]) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if _is_number(other):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: Union[Vector3, _Number]) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        if _is_number(other):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented