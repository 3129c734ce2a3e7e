import math

import pytest

from sdgame.vector import Vector2, Vector3


def test_vector2_defaults_to_origin():
    assert Vector2() == Vector2(0.0, 0.0)


def test_vector2_add_sub_round_trip():
    a = Vector2(1.5, -2.25)
    b = Vector2(0.5, 4.0)
    assert (a + b) - b == a


def test_vector2_scalar_mul_matches_repeated_add():
    v = Vector2(1.25, -3.5)
    assert v * 2 == v + v


def test_vector2_div_undoes_mul():
    v = Vector2(3.0, -6.0)
    assert (v * 4) / 4 == v
    assert (v * Vector2(2.0, 8.0)) / Vector2(2.0, 8.0) == v


def test_vector2_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2(1.0, 1.0) / 0


def test_vector2_add_non_vector_raises():
    with pytest.raises(TypeError):
        Vector2(1.0, 1.0) + 3


def test_vector2_width_height_alias():
    v = Vector2(7, 9)
    assert (v.w, v.h) == (v.x, v.y)


def test_vector2_distance_properties():
    p1 = Vector2(1.0, 2.0)
    p2 = Vector2(-4.0, 6.5)
    assert Vector2.distance(p1, p1) == 0
    assert Vector2.distance(p1, p2) == pytest.approx(Vector2.distance(p2, p1))
    assert Vector2.distance(p1, p2) == pytest.approx((p1 - p2).length())


def test_vector2_rotate_quarter_turn():
    r = Vector2.rotate(Vector2(1.0, 0.0), math.pi / 2)
    assert r.x == pytest.approx(0.0, abs=1e-9)
    assert r.y == pytest.approx(1.0)


def test_vector2_rotate_preserves_length():
    v = Vector2(3.0, -7.0)
    assert Vector2.rotate(v, 1.234).length() == pytest.approx(v.length())


def test_vector2_normalized():
    v = Vector2(3.0, -7.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n * v.length() == Vector2(pytest.approx(v.x), pytest.approx(v.y))
    assert Vector2().normalized() == Vector2()


def test_vector2_str_formats():
    assert str(Vector2(1.0, 2.5)) == "{1.000000, 2.500000}"
    assert str(Vector2(1, 2)) == "{1, 2}"


def test_vector2_unpacks():
    x, y = Vector2(4.0, 5.0)
    assert (x, y) == (4.0, 5.0)


def test_vector3_add_sub_round_trip():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-0.5, 0.25, 8.0)
    assert (a + b) - b == a


def test_vector3_mul_div():
    v = Vector3(1.5, -2.0, 4.0)
    assert v * 2 == v + v
    assert (v * Vector3(2.0, 4.0, 8.0)) / Vector3(2.0, 4.0, 8.0) == v
    assert (v * 3) / 3 == v


def test_vector3_distance_and_length():
    p1 = Vector3(1.0, 2.0, 3.0)
    p2 = Vector3(4.0, -1.0, 0.5)
    assert Vector3.distance(p1, p1) == 0
    assert Vector3.distance(p1, p2) == pytest.approx((p1 - p2).length())


def test_vector3_normalized():
    n = Vector3(2.0, -3.0, 6.0).normalized()
    assert n.length() == pytest.approx(1.0)
    assert Vector3().normalized() == Vector3()


def test_vector3_sub_non_vector_raises():
    with pytest.raises(TypeError):
        Vector3(1.0, 1.0, 1.0) - 1