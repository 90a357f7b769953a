"""Rays with an origin point and a direction vector."""

from __future__ import annotations

from dataclasses import dataclass

from .matrix import Matrix
from .tuple import Tuple


@dataclass(frozen=True)
class Ray:
    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        """Return the point at distance ``t`` along the ray."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        return Ray(matrix.apply(self.origin), matrix.apply(self.direction))