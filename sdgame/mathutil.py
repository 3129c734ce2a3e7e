"""Numeric helpers for movement, angles and wrapping.

Angles are in degrees unless stated; the y axis points down, so positive
angles go up the screen.
"""

from __future__ import annotations

import math
from typing import Union

from sdgame.vector import Vector2

_Number = Union[int, float]

PI = math.pi
RAD_TO_DEG = 180.0 / PI
DEG_TO_RAD = PI / 180.0


def lerp(val: float, dest: float, amt: float) -> float:
    """Linear interpolation from ``val`` towards ``dest`` by ``amt``."""
    return (dest - val) * amt + val


def rad_to_deg(rad: float) -> float:
    return rad * RAD_TO_DEG


def deg_to_rad(degrees: float) -> float:
    return degrees * DEG_TO_RAD


def trajectory_x(degrees: float, length: float) -> float:
    """Horizontal component of a movement of ``length`` at ``degrees``."""
    return math.cos(deg_to_rad(degrees)) * length


def trajectory_y(degrees: float, length: float) -> float:
    """Vertical component, negated to match a downward y axis."""
    return -(math.sin(deg_to_rad(degrees)) * length)


def trajectory(degrees: float, length: float) -> Vector2:
    """The vector of a movement of ``length`` at ``degrees``."""
    return Vector2(trajectory_x(degrees, length), trajectory_y(degrees, length))


def clamp(value: _Number, low: _Number, high: _Number) -> _Number:
    """Limit ``value`` to the range from ``low`` to ``high``."""
    return max(min(value, high), low)


def sign(n: _Number) -> _Number:
    """-1 for negative numbers and 1 otherwise, zero included."""
    result = -1 if n < 0 else 1
    return float(result) if isinstance(n, float) else result


def mod(x: _Number, n: _Number) -> float:
    """Modulo that does not reflect across zero."""
    return math.fmod(math.fmod(float(x), float(n)) + n, float(n))


def wrap(x: _Number, n1: _Number, n2: _Number) -> _Number:
    """Wrap ``x`` into the range between two boundaries given in either order."""
    if n1 == n2:
        return n1
    low, high = (n1, n2) if n1 < n2 else (n2, n1)
    result = mod(x - low, high - low) + low
    if all(isinstance(v, int) for v in (x, n1, n2)):
        return int(result)
    return result


def wrap_vector(val: Vector2, low: Vector2, high: Vector2) -> Vector2:
    """Wrap each component of ``val`` between the matching bounds."""
    return Vector2(wrap(val.x, low.x, high.x), wrap(val.y, low.y, high.y))


def _quadrant(x: float, y: float) -> int:
    # Quadrant 0 is bottom right, going clockwise to 3 at top right.
    if x > 0 and y >= 0:
        return 3
    if x <= 0 and y > 0:
        return 2
    if x < 0 and y <= 0:
        return 1
    if x >= 0 and y < 0:
        return 0
    return -1


def point_direction(x1: float, y1: float, x2: float, y2: float) -> float:
    """Direction in degrees from the first point to the second.

    Coincident points give NaN.
    """
    diff_x = x2 - x1
    diff_y = y2 - y1
    quadrant = _quadrant(diff_x, diff_y)
    if diff_x != 0:
        ratio = diff_y / diff_x
    elif diff_y != 0:
        ratio = math.inf
    else:
        ratio = math.nan
    angle = abs(rad_to_deg(math.atan(ratio)))
    if quadrant % 2 == 0:
        return angle + quadrant * 90.0
    return 90.0 - angle + quadrant * 90.0