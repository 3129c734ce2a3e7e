import pytest

from sdgame.color import Color, FColor


def test_default_is_all_zero():
    assert Color() == Color(0, 0, 0, 0)


def test_rgb_string_is_opaque():
    assert Color.from_rgb_string("#ff0000") == Color(255, 0, 0, 255)


@pytest.mark.parametrize("rgba", [(0, 0, 0, 0), (1, 2, 3, 4), (255, 128, 16, 9), (171, 205, 239, 1)])
def test_rgba_string_round_trip(rgba):
    text = "#" + "".join(f"{v:02x}" for v in rgba)
    assert Color.from_rgba_string(text) == Color(*rgba)
    assert Color.from_rgba_string(text.upper()) == Color(*rgba)


@pytest.mark.parametrize("rgb", [(10, 20, 30), (255, 255, 255), (0, 170, 85)])
def test_rgb_string_round_trip(rgb):
    text = "#" + "".join(f"{v:02X}" for v in rgb)
    assert Color.from_rgb_string(text) == Color(*rgb, 255)


def test_from_hex_byte_order():
    assert Color.from_hex(0x11223344) == Color(0x11, 0x22, 0x33, 0x44)


def test_from_hex_matches_string():
    assert Color.from_hex(0xDEADBEEF) == Color.from_rgba_string("#deadbeef")


@pytest.mark.parametrize("value", [-1, 0x1_0000_0000])
def test_from_hex_out_of_range(value):
    with pytest.raises(ValueError):
        Color.from_hex(value)


@pytest.mark.parametrize("text", ["#fff", "#ff00000", "", "#ff0000ff0"])
def test_rgb_wrong_length(text):
    with pytest.raises(ValueError):
        Color.from_rgb_string(text)


@pytest.mark.parametrize("text", ["#ff0000", "#ff0000fff"])
def test_rgba_wrong_length(text):
    with pytest.raises(ValueError):
        Color.from_rgba_string(text)


def test_invalid_hex_char():
    with pytest.raises(ValueError):
        Color.from_rgb_string("#gg0000")


def test_component_out_of_range():
    with pytest.raises(ValueError):
        Color(256, 0, 0, 0)


def test_str_format():
    assert str(Color(1, 2, 3, 4)) == "{ 1, 2, 3, 4 }"


def test_to_fcolor_extremes():
    assert Color(255, 0, 255, 0).to_fcolor() == FColor(1.0, 0.0, 1.0, 0.0)


def test_to_fcolor_scales_by_255():
    c = Color(51, 102, 153, 204)
    f = c.to_fcolor()
    assert (f.r * 255, f.g * 255, f.b * 255, f.a * 255) == pytest.approx((51, 102, 153, 204))