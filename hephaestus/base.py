"""Shared machinery for fixed-dimension vectors over numeric fields."""

from __future__ import annotations

import dataclasses
import math
from typing import Any, Iterable, Iterator

DIM = "dim"


def is_nan(value: Any) -> bool:
    """Return True if the value is a floating-point NaN."""
    return isinstance(value, float) and math.isnan(value)


def field_abs(value: Any) -> Any:
    """Return the absolute value of a field value."""
    return abs(value)


def field_sqrt(value: Any) -> Any:
    """Return the square root of a field value.

    Integers use the integer square root and reject negative values;
    floats yield NaN for negative input.
    """
    if isinstance(value, int):
        if value < 0:
            raise ValueError("cannot take the square root of a negative integer")
        return math.isqrt(value)
    if math.isnan(value) or value < 0:
        return math.nan
    return math.sqrt(value)


def _divide(numerator: Any, denominator: Any) -> Any:
    """Divide two field values: truncating for integers, IEEE-like for floats."""
    if isinstance(numerator, int) and isinstance(denominator, int):
        if denominator == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(numerator) // abs(denominator)
        return quotient if (numerator < 0) == (denominator < 0) else -quotient
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, VectorBase)


class VectorBase:
    """Base for dataclass vectors whose dimensions are numeric fields.

    If any dataclass field carries ``metadata={"dim": True}``, only those
    fields are dimensions; otherwise every field is. Dimension order is the
    declaration order.
    """

    @classmethod
    def _dimension_names(cls) -> tuple[str, ...]:
        if not dataclasses.is_dataclass(cls):
            raise TypeError(f"{cls.__name__} must be a dataclass to act as a vector")
        all_fields = dataclasses.fields(cls)
        marked = tuple(f.name for f in all_fields if f.metadata.get(DIM))
        return marked or tuple(f.name for f in all_fields)

    @classmethod
    def dimension_count(cls) -> int:
        """Return the number of dimensions of this vector type."""
        return len(cls._dimension_names())

    @classmethod
    def from_fields(cls, fields: Iterable[Any]):
        """Build a vector from its dimension values, in order."""
        values = list(fields)
        names = cls._dimension_names()
        if len(values) != len(names):
            raise ValueError(
                f"Expected a sequence of len {len(names)}, got len {len(values)}"
            )
        return cls(**dict(zip(names, values)))

    def fields(self) -> tuple[Any, ...]:
        """Return the dimension values, in order."""
        return tuple(getattr(self, name) for name in self._dimension_names())

    def _assign(self, values: Iterable[Any]) -> None:
        for name, value in zip(self._dimension_names(), values):
            setattr(self, name, value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.fields())

    def __len__(self) -> int:
        return self.dimension_count()

    def dot(self, other):
        """Return the dot (scalar) product with another vector of the same type."""
        if type(other) is not type(self):
            raise TypeError("dot product requires vectors of the same type")
        return sum((a * b for a, b in zip(self.fields(), other.fields())), 0)

    def magnitude(self):
        """Return the Euclidean length of the vector."""
        return field_sqrt(field_abs(self.dot(self)))

    def _usable_magnitude(self):
        magnitude = self.magnitude()
        if not is_nan(magnitude) and (magnitude > 0 or magnitude < 0):
            return magnitude
        return None

    def normalize(self) -> None:
        """Scale the vector in place to unit length; zero or NaN length leaves it unchanged."""
        magnitude = self._usable_magnitude()
        if magnitude is not None:
            self /= magnitude

    def normalized(self):
        """Return a unit-length copy; zero or NaN length returns an equal copy."""
        magnitude = self._usable_magnitude()
        if magnitude is None:
            return self.from_fields(self.fields())
        return self.from_fields(_divide(value, magnitude) for value in self.fields())

    def _zip_with(self, other, operation):
        return [operation(a, b) for a, b in zip(self.fields(), other.fields())]

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.from_fields(self._zip_with(other, lambda a, b: a + b))

    def __iadd__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        self._assign(self._zip_with(other, lambda a, b: a + b))
        return self

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.from_fields(self._zip_with(other, lambda a, b: a - b))

    def __isub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        self._assign(self._zip_with(other, lambda a, b: a - b))
        return self

    def __mul__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        return self.from_fields(value * scalar for value in self.fields())

    def __imul__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        self._assign([value * scalar for value in self.fields()])
        return self

    def __truediv__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        return self.from_fields(_divide(value, scalar) for value in self.fields())

    def __itruediv__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        self._assign([_divide(value, scalar) for value in self.fields()])
        return self