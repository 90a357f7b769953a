"""Points, vectors and colours as four-component tuples."""

from __future__ import annotations

import math
from dataclasses import dataclass

IS_POINT = 1
IS_VECTOR = 0
IS_COLOR = 2

EPSILON = 0.00001

_KINDS = {"p": IS_POINT, "v": IS_VECTOR, "c": IS_COLOR}


@dataclass(frozen=True)
class Tuple:
    """A homogeneous tuple; ``w`` is 1 for points, 0 for vectors, 2 for colours."""

    x: float
    y: float
    z: float
    w: int | float = IS_POINT

    def __add__(self, other: Tuple) -> Tuple:
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z,
                     self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z,
                     self.w - other.w)

    def __mul__(self, scale: float) -> Tuple:
        return Tuple(self.x * scale, self.y * scale, self.z * scale, self.w)

    __rmul__ = __mul__

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def hadamard(self, other: Tuple) -> Tuple:
        """Component-wise product, used to blend colours."""
        return Tuple(self.x * other.x, self.y * other.y, self.z * other.z,
                     self.w * other.w)

    def is_vector(self) -> bool:
        return self.w == IS_VECTOR

    def approx_equals(self, other: Tuple) -> bool:
        """Compare x, y and z within ``EPSILON``."""
        return (abs(self.x - other.x) < EPSILON
                and abs(self.y - other.y) < EPSILON
                and abs(self.z - other.z) < EPSILON)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z
                         + self.w * self.w)

    def normalize(self) -> Tuple:
        """Return a vector of unit length pointing the same way."""
        size = self.length()
        return vector(self.x / size, self.y / size, self.z / size)

    def dot(self, other: Tuple) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Tuple) -> Tuple:
        return vector(self.y * other.z - self.z * other.y,
                      self.z * other.x - self.x * other.z,
                      self.x * other.y - self.y * other.x)

    def reflect(self, normal: Tuple) -> Tuple:
        """Reflect this vector about ``normal``."""
        return self - normal * (self.dot(normal) * 2)


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, IS_POINT)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, IS_VECTOR)


def color(r: float, g: float, b: float) -> Tuple:
    return Tuple(r, g, b, IS_COLOR)


def parse_tuple(value: str, kind: str) -> Tuple:
    """Parse ``"x,y,z"``; ``kind`` is ``'p'``, ``'v'`` or ``'c'``."""
    if kind not in _KINDS:
        raise ValueError(f"unknown tuple kind {kind!r}")
    parts = [part for part in value.split(",") if part]
    if len(parts) < 3:
        raise ValueError(f"expected three components in {value!r}")
    x, y, z = (float(part) for part in parts[:3])
    return Tuple(x, y, z, _KINDS[kind])


def _valid_component(text: str) -> bool:
    start = 1 if text.startswith("-") else 0
    for offset, char in enumerate(text[start:], start):
        if char == ".":
            if offset == 0 or offset == len(text) - 1:
                return False
        elif not char.isdigit() or not char.isascii():
            return False
    return True


def is_tuple(value: str, exclude_neg: bool) -> bool:
    """Tell whether ``value`` is three comma-separated numbers."""
    dots = 0
    for char in value:
        if char == ".":
            dots += 1
        if char == "," and dots == 1:
            dots = 0
        if (char == "-" and exclude_neg) or dots > 1:
            return False
    parts = [part for part in value.split(",") if part]
    return len(parts) == 3 and all(_valid_component(part) for part in parts)