import pytest

from minirt.colors import (
    get_blue,
    get_green,
    get_red,
    make_argb,
    make_rgb,
    set_blue,
    set_green,
    set_red,
    tuple_to_argb,
    tuple_to_rgb,
)
from minirt.tuple import color


@pytest.mark.parametrize("r, g, b", [(0, 0, 0), (255, 0, 0), (12, 200, 99), (255, 255, 255)])
def test_make_rgb_round_trip(r, g, b):
    rgb = make_rgb(r, g, b)
    assert (get_red(rgb), get_green(rgb), get_blue(rgb)) == (r, g, b)
    assert rgb >> 24 == 0


def test_make_rgb_layout():
    assert make_rgb(255, 0, 0) == 0xFF0000
    assert make_rgb(0, 255, 0) == 0x00FF00
    assert make_rgb(0, 0, 255) == 0x0000FF


def test_set_red_clears_top_byte():
    value = set_red(0xAB123456, 0x11)
    assert get_red(value) == 0x11
    assert get_green(value) == 0x34
    assert get_blue(value) == 0x56
    assert value >> 24 == 0


def test_set_green_and_blue_keep_other_channels():
    base = make_rgb(10, 20, 30)
    g = set_green(base, 77)
    assert (get_red(g), get_green(g), get_blue(g)) == (10, 77, 30)
    b = set_blue(base, 88)
    assert (get_red(b), get_green(b), get_blue(b)) == (10, 20, 88)


def test_make_argb_repeats_red_as_alpha():
    value = make_argb(40, 50, 60)
    assert value >> 24 == 40
    assert (get_red(value), get_green(value), get_blue(value)) == (40, 50, 60)


def test_tuple_to_rgb_extremes():
    assert tuple_to_rgb(color(1, 1, 1)) == 0xFFFFFF
    assert tuple_to_rgb(color(0, 0, 0)) == 0
    assert tuple_to_rgb(color(3, 2, 1.5)) == 0xFFFFFF


def test_tuple_to_rgb_truncates():
    value = tuple_to_rgb(color(0.5, 0.25, 1))
    assert get_red(value) == int(0.5 * 255)
    assert get_green(value) == int(0.25 * 255)
    assert get_blue(value) == 255


def test_tuple_to_argb_clamps_to_127():
    value = tuple_to_argb(color(2, 1, 0))
    assert value >> 24 == 127
    assert (get_red(value), get_green(value), get_blue(value)) == (127, 127, 0)