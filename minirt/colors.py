"""Packing colours into 24-bit RGB and 32-bit ARGB integers."""

from __future__ import annotations

from .tuple import Tuple


def get_red(rgb: int) -> int:
    return (rgb >> 16) & 0xFF


def get_green(rgb: int) -> int:
    return (rgb >> 8) & 0xFF


def get_blue(rgb: int) -> int:
    return rgb & 0xFF


def set_red(rgb: int, red: int) -> int:
    """Replace the red byte; the byte above it is cleared."""
    return (rgb & 0xFFFF) | ((red & 0xFF) << 16)


def set_green(rgb: int, green: int) -> int:
    """Replace the green byte; the byte above red is cleared."""
    return (rgb & 0xFF00FF) | ((green & 0xFF) << 8)


def set_blue(rgb: int, blue: int) -> int:
    """Replace the blue byte; the byte above red is cleared."""
    return (rgb & 0xFFFF00) | (blue & 0xFF)


def make_rgb(r: int, g: int, b: int) -> int:
    return set_blue(set_green(set_red(0, r), g), b)


def make_argb(r: int, g: int, b: int) -> int:
    """Pack with the red value repeated in the top byte."""
    r &= 0xFF
    return (r << 24) | (r << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def _channel(value: float, scale: int) -> int:
    return min(max(int(value * scale), 0), scale)


def tuple_to_rgb(rgb_tuple: Tuple) -> int:
    """Convert a 0..1 colour to a 24-bit integer, clamping each channel."""
    return make_rgb(_channel(rgb_tuple.x, 255), _channel(rgb_tuple.y, 255),
                    _channel(rgb_tuple.z, 255))


def tuple_to_argb(rgb_tuple: Tuple) -> int:
    """Convert a 0..1 colour to ARGB with channels scaled to 0..127."""
    return make_argb(_channel(rgb_tuple.x, 127), _channel(rgb_tuple.y, 127),
                     _channel(rgb_tuple.z, 127))