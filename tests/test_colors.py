import pytest

from utils.colors import hex_to_rgb, is_hex_color, rgb_to_hex, with_alpha


def test_hex_to_rgb():
    assert hex_to_rgb("#9b5de5") == (155, 93, 229)
    assert hex_to_rgb("fff") == (255, 255, 255)


def test_hex_to_rgb_invalid():
    with pytest.raises(ValueError):
        hex_to_rgb("#12")


def test_is_hex_color():
    assert is_hex_color("#00f5d4")
    assert not is_hex_color("purple")


def test_rgb_to_hex():
    assert rgb_to_hex(155, 93, 229) == "#9b5de5"


def test_with_alpha_clamps():
    assert with_alpha("#ffffff", 2.0) == (255, 255, 255, 255)
    assert with_alpha("#000000", -1) == (0, 0, 0, 0)
