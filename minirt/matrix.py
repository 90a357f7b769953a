"""Small dense matrices and the affine transforms built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .tuple import IS_POINT, IS_VECTOR, Tuple


@dataclass(frozen=True)
class Matrix:
    """An immutable matrix stored as a tuple of rows."""

    rows: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if rows and any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("all matrix rows must have the same length")
        object.__setattr__(self, "rows", rows)

    @property
    def h(self) -> int:
        return len(self.rows)

    @property
    def w(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return self.rows[row][column]

    def __matmul__(self, other: Matrix) -> Matrix:
        """Multiply; the result has the smaller height and the smaller width."""
        if not isinstance(other, Matrix):
            return NotImplemented
        width = min(self.w, other.w)
        columns = list(zip(*other.rows))[:width]
        return Matrix(tuple(
            tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in self.rows[:min(self.h, other.h)]
        ))

    def transpose(self) -> Matrix:
        return Matrix(tuple(zip(*self.rows)))

    def submatrix(self, row: int, column: int) -> Matrix:
        """Return the matrix without the given row and column."""
        return Matrix(tuple(
            tuple(value for j, value in enumerate(values) if j != column)
            for i, values in enumerate(self.rows) if i != row
        ))

    def minor(self, row: int, column: int) -> float:
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        value = self.minor(row, column)
        return -value if (row + column) % 2 else value

    def determinant(self) -> float:
        if self.h != self.w or self.h == 0:
            raise ValueError("determinant needs a non-empty square matrix")
        if self.h == 1:
            return self.rows[0][0]
        if self.h == 2:
            (a, b), (c, d) = self.rows
            return a * d - b * c
        return sum(value * self.cofactor(0, column)
                   for column, value in enumerate(self.rows[0]))

    def inverse(self) -> Matrix:
        """Return the inverse; raise ``ValueError`` if the matrix is singular."""
        det = self.determinant()
        if det == 0:
            raise ValueError("matrix is not invertible")
        cofactors = Matrix(tuple(
            tuple(self.cofactor(i, j) for j in range(self.w))
            for i in range(self.h)
        ))
        return Matrix(tuple(
            tuple(value / det for value in row)
            for row in cofactors.transpose().rows
        ))

    def apply(self, tup: Tuple) -> Tuple:
        """Transform ``tup``; the result is a vector if ``tup`` is one, else a point."""
        column = Matrix(((tup.x,), (tup.y,), (tup.z,), (tup.w,)))
        product = self @ column
        x, y, z = (product.rows[i][0] for i in range(3))
        return Tuple(x, y, z, IS_VECTOR if tup.is_vector() else IS_POINT)


def identity(size: int) -> Matrix:
    return Matrix(tuple(
        tuple(1.0 if i == j else 0.0 for j in range(size))
        for i in range(size)
    ))


def translation(offset: Tuple) -> Matrix:
    return Matrix((
        (1, 0, 0, offset.x),
        (0, 1, 0, offset.y),
        (0, 0, 1, offset.z),
        (0, 0, 0, 1),
    ))


def scaling(factors: Tuple) -> Matrix:
    return Matrix((
        (factors.x, 0, 0, 0),
        (0, factors.y, 0, 0),
        (0, 0, factors.z, 0),
        (0, 0, 0, 1),
    ))


def rotate_axis_angle(axis: Tuple, angle: float) -> Matrix:
    """Rotation by ``angle`` radians about the unit vector ``axis``."""
    s = math.sin(angle)
    c = math.cos(angle)
    k = 1 - c
    x, y, z = axis.x, axis.y, axis.z
    return Matrix((
        (x * x * k + c, y * x * k - s * z, z * x * k + s * y, 0),
        (x * y * k + s * z, y * y * k + c, z * y * k - s * x, 0),
        (x * z * k - s * y, y * z * k + s * x, z * z * k + c, 0),
        (0, 0, 0, 1),
    ))


def rotate_align(v1: Tuple, v2: Tuple) -> Matrix:
    """Rotation taking unit vector ``v1`` onto unit vector ``v2``."""
    cross = v1.cross(v2)
    if cross.length() == 0:
        raise ValueError("cannot align parallel vectors")
    dot = max(-1.0, min(1.0, v1.dot(v2)))
    return rotate_axis_angle(cross.normalize(), math.acos(dot))


def view_transform(origin: Tuple, to: Tuple, up: Tuple) -> Matrix:
    """World-to-camera matrix for an eye at ``origin`` looking at ``to``."""
    forward = (to - origin).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix((
        (left.x, left.y, left.z, 0),
        (true_up.x, true_up.y, true_up.z, 0),
        (-forward.x, -forward.y, -forward.z, 0),
        (0, 0, 0, 1),
    ))
    return orientation @ translation(-origin)