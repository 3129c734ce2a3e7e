"""Axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_Number = Union[int, float]


@dataclass
class Rectangle:
    """A rectangle given by its top-left corner and its size."""

    x: _Number = 0
    y: _Number = 0
    w: _Number = 0
    h: _Number = 0

    @property
    def area(self) -> _Number:
        return self.w * self.h

    @property
    def left(self) -> _Number:
        return self.x

    @property
    def right(self) -> _Number:
        return self.x + self.w

    @property
    def top(self) -> _Number:
        return self.y

    @property
    def bottom(self) -> _Number:
        return self.y + self.h

    def is_empty(self) -> bool:
        """True when every field is zero."""
        return self == Rectangle()

    def intersects(self, other: Rectangle) -> bool:
        """True when the rectangles overlap or share an edge."""
        return not (
            other.top > self.bottom
            or other.bottom < self.top
            or other.right < self.left
            or other.left > self.right
        )