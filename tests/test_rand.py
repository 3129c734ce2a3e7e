import pytest

from sdgame.rand import Rand


def test_same_seed_gives_same_sequence():
    a = Rand(1234)
    b = Rand(1234)
    assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]


def test_next_in_unit_range():
    r = Rand(1)
    values = [r.next() for _ in range(500)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_next_scaled():
    r = Rand(2)
    assert all(0.0 <= r.next(8.0) < 8.0 for _ in range(500))


def test_inext_covers_range():
    r = Rand(3)
    values = {r.inext(5) for _ in range(1000)}
    assert values == set(range(5))


def test_range_bounds():
    r = Rand(4)
    assert all(-3.0 <= r.range(-3.0, 2.5) < 2.5 for _ in range(500))


def test_range_equal_bounds():
    assert Rand(5).range(4.0, 4.0) == 4.0


def test_range_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        Rand(6).range(5.0, 1.0)


def test_irange_returns_ints_in_bounds():
    r = Rand(7)
    values = [r.irange(2, 6) for _ in range(500)]
    assert all(isinstance(v, int) and 2 <= v < 6 for v in values)


@pytest.mark.parametrize("outof", [0, -3, 0.0, -1.5])
def test_chance_non_positive_outof_is_false(outof):
    r = Rand(8)
    assert not any(r.chance(1, outof) for _ in range(50))


def test_chance_certain_and_impossible_ints():
    r = Rand(9)
    assert all(r.chance(4, 4) for _ in range(200))
    assert not any(r.chance(0, 4) for _ in range(200))


def test_chance_certain_and_impossible_floats():
    r = Rand(10)
    assert all(r.chance(2.0, 2.0) for _ in range(200))
    assert not any(r.chance(0.0, 2.0) for _ in range(200))


def test_choose_returns_member_and_covers_all():
    r = Rand(11)
    items = ["a", "b", "c"]
    picks = {r.choose(items) for _ in range(300)}
    assert picks == set(items)


def test_choose_accepts_iterables():
    r = Rand(12)
    assert r.choose(x for x in (42,)) == 42


def test_choose_empty_raises():
    with pytest.raises(IndexError):
        Rand(13).choose([])