"""
Core Value Types
================

Plain immutable value objects shared by the coordinate systems and the
transform pipeline:
- Point: 2D position in normalized-data or pixel space
- DimRange: value range of one logical dimension
- BoundingBox: axis-aligned extent
- ValidationError: raised when a configuration is rejected
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray


class ValidationError(Exception):
    """Raised when input validation fails."""

    pass


def validate_finite(name: str, value: Any) -> float:
    """Validate that value is a finite real number and return it as float.

    Args:
        name: Field name used in the error message
        value: Value to check

    Raises:
        ValidationError: If value is not a real number or is not finite
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name} must be a number, got {type(value).__name__}")
    value_float = float(value)
    if not math.isfinite(value_float):
        raise ValidationError(f"{name} must be finite, got {value}")
    return value_float


@dataclass(frozen=True)
class Point:
    """A 2D coordinate.

    Whether the point lives in normalized-data space or in pixel space is
    decided by the caller.

    Attributes:
        x: First component
        y: Second component
    """

    x: float
    y: float

    @classmethod
    def coerce(cls, value: Point | Sequence[float] | NDArray[np.floating[Any]]) -> Point:
        """Build a Point from a Point, an (x, y) pair, or a (2,) array."""
        if isinstance(value, Point):
            return value
        arr = np.asarray(value, dtype=np.float64)
        if arr.shape != (2,):
            raise ValidationError(f"point must have shape (2,), got {arr.shape}")
        return cls(float(arr[0]), float(arr[1]))

    def as_array(self) -> NDArray[np.float64]:
        """Return the point as a numpy array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class DimRange:
    """Value range ``{start, end}`` of a logical dimension."""

    start: float
    end: float

    @property
    def span(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned extent with ``min_x <= max_x`` and ``min_y <= max_y``."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValidationError(
                f"bounding box must satisfy min <= max, got "
                f"x=[{self.min_x}, {self.max_x}] y=[{self.min_y}, {self.max_y}]"
            )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @classmethod
    def from_points(cls, xs: NDArray[np.float64], ys: NDArray[np.float64]) -> BoundingBox:
        """Compute the box enclosing the given coordinate arrays."""
        if len(xs) == 0 or len(ys) == 0:
            raise ValueError("bounding box needs at least one point")
        return cls(
            min_x=float(np.min(xs)),
            max_x=float(np.max(xs)),
            min_y=float(np.min(ys)),
            max_y=float(np.max(ys)),
        )
