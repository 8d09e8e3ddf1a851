"""Two- and three-dimensional vectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hephaestus.base import VectorBase


@dataclass
class Vector2(VectorBase):
    """A two-dimensional vector with components x and y."""

    x: Any
    y: Any


@dataclass
class Vector3(VectorBase):
    """A three-dimensional vector with components x, y and z.

    Multiplying two Vector3 values yields their cross product; multiplying
    by a scalar scales each component.
    """

    x: Any
    y: Any
    z: Any

    def _cross_components(self, other: Vector3) -> tuple[Any, Any, Any]:
        if not isinstance(other, Vector3):
            raise TypeError("cross product requires two Vector3 values")
        return (
            (self.y * other.z) - (other.y * self.z),
            (self.z * other.x) - (other.z * self.x),
            (self.x * other.y) - (other.x * self.y),
        )

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross (vector) product with another Vector3."""
        return Vector3(*self._cross_components(other))

    def apply_cross(self, other: Vector3) -> None:
        """Replace this vector in place with its cross product with another."""
        self.x, self.y, self.z = self._cross_components(other)

    def __mul__(self, other):
        if isinstance(other, Vector3):
            return self.cross(other)
        return super().__mul__(other)

    def __imul__(self, other):
        if isinstance(other, Vector3):
            self.apply_cross(other)
            return self
        return super().__imul__(other)