"""Checks that a scene description is well formed before it is parsed."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields as dataclass_fields
from os import PathLike
from typing import Callable, Iterable

from .tuple import is_tuple

_INTEGER = re.compile(r"-?\d+")
_DOUBLE = re.compile(r"-?\d+(\.\d+)?")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(\d+(\.\d*)?|\.\d+))")


class SceneError(Exception):
    """Raised when a scene file cannot be read or holds incorrect data."""


@dataclass
class Counters:
    """How many times each kind of instruction appears in a scene."""

    resolution: int = 0
    ambient: int = 0
    cameras: int = 0
    lights: int = 0
    spheres: int = 0
    planes: int = 0
    squares: int = 0
    cubes: int = 0
    triangles: int = 0
    cylinders: int = 0
    cones: int = 0

    @property
    def shapes(self) -> int:
        """Number of shape instructions of every kind."""
        return (self.spheres + self.planes + self.squares + self.cubes
                + self.triangles + self.cylinders + self.cones)

    @property
    def total(self) -> int:
        """Number of instructions of every kind."""
        return sum(getattr(self, item.name) for item in dataclass_fields(self))


def _is_number(text: str) -> bool:
    return _INTEGER.fullmatch(text) is not None


def _is_double(text: str) -> bool:
    return _DOUBLE.fullmatch(text) is not None


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _atod(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _fail(fields: list[str]) -> SceneError:
    return SceneError(f"incorrect instruction: {' '.join(fields)}")


def _expect(condition: bool, fields: list[str]) -> None:
    if not condition:
        raise _fail(fields)


def _check_resolution(fields: list[str], counters: Counters) -> None:
    _expect(len(fields) == 3 and _is_number(fields[1])
            and _is_number(fields[2]), fields)
    _expect(_atoi(fields[1]) > 0 and _atoi(fields[2]) > 0, fields)
    counters.resolution += 1


def _check_ambient(fields: list[str], counters: Counters) -> None:
    _expect(len(fields) == 3 and _is_double(fields[1]), fields)
    ratio = _atod(fields[1])
    _expect(0 <= ratio <= 1 and is_tuple(fields[2], True), fields)
    counters.ambient += 1


def _check_camera(fields: list[str], counters: Counters) -> None:
    _expect(len(fields) == 5 and _is_double(fields[4]), fields)
    _expect(all(is_tuple(value, False) for value in fields[1:4])
            and _atod(fields[4]) > 0.0, fields)
    counters.cameras += 1


def _check_light(fields: list[str], counters: Counters) -> None:
    _expect(len(fields) == 4 and _is_double(fields[2]), fields)
    _expect(is_tuple(fields[1], False) and is_tuple(fields[3], True)
            and _atod(fields[2]) > 0.0, fields)
    counters.lights += 1


def _check_sphere(fields: list[str], counters: Counters) -> None:
    _expect(len(fields) == 5 and _is_double(fields[2])
            and _is_double(fields[3]), fields)
    _expect(is_tuple(fields[1], False) and is_tuple(fields[4], True)
            and _atod(fields[2]) > 0.0 and _atoi(fields[3]) in (0, 1), fields)
    counters.spheres += 1


def _check_plane(fields: list[str], counters: Counters) -> None:
    _expect(len(fields) == 5, fields)
    _expect(is_tuple(fields[1], False) and is_tuple(fields[2], False)
            and is_tuple(fields[4], True) and _atoi(fields[3]) >= 0, fields)
    counters.planes += 1


def _check_square_cube(fields: list[str], counters: Counters) -> None:
    _expect(len(fields) == 5 and _is_double(fields[3]), fields)
    _expect(is_tuple(fields[1], False) and is_tuple(fields[2], False)
            and is_tuple(fields[4], True) and _atod(fields[3]) > 0.0, fields)
    if fields[0] == "sq":
        counters.squares += 1
    else:
        counters.cubes += 1


def _check_triangle(fields: list[str], counters: Counters) -> None:
    _expect(len(fields) == 5, fields)
    _expect(all(is_tuple(value, False) for value in fields[1:4])
            and is_tuple(fields[4], True), fields)
    counters.triangles += 1


def _check_cone_cylinder(fields: list[str], counters: Counters) -> None:
    _expect(len(fields) == 7 and all(_is_double(value)
                                     for value in fields[3:6]), fields)
    _expect(is_tuple(fields[1], False) and is_tuple(fields[2], False)
            and is_tuple(fields[6], True)
            and _atod(fields[3]) > 0.0 and _atod(fields[4]) > 0.0
            and _atoi(fields[5]) in (0, 1), fields)
    if fields[0] == "co":
        counters.cones += 1
    else:
        counters.cylinders += 1


_CHECKERS: dict[str, Callable[[list[str], Counters], None]] = {
    "R": _check_resolution,
    "A": _check_ambient,
    "c": _check_camera,
    "l": _check_light,
    "sp": _check_sphere,
    "pl": _check_plane,
    "sq": _check_square_cube,
    "cu": _check_square_cube,
    "tr": _check_triangle,
    "co": _check_cone_cylinder,
    "cy": _check_cone_cylinder,
}


def strip_comment(line: str) -> str:
    """Return the part of ``line`` before the first ``#``."""
    return line.split("#", 1)[0]


def check_fields(fields: list[str], counters: Counters) -> None:
    """Check one instruction and count it; raise ``SceneError`` if it is wrong."""
    if not fields:
        raise SceneError("empty instruction")
    checker = _CHECKERS.get(fields[0])
    if checker is None:
        raise _fail(fields)
    checker(list(fields), counters)


def validate_lines(lines: Iterable[str]) -> Counters:
    """Check every line of a scene and return the instruction counts."""
    counters = Counters()
    for line in lines:
        fields = strip_comment(line).split()
        if fields:
            check_fields(fields, counters)
    if counters.resolution != 1 or counters.ambient > 1 or counters.cameras < 1:
        raise SceneError("scene needs one resolution, at most one ambient "
                         "light and at least one camera")
    return counters


def validate_file(path: str | PathLike[str]) -> Counters:
    """Check the scene file at ``path`` and return the instruction counts."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise SceneError(f"can't open the file '{path}'") from exc
    try:
        return validate_lines(lines)
    except SceneError as exc:
        raise SceneError(f"incorrect input data in '{path}': {exc}") from exc