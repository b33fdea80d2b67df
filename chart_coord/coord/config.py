"""
Coordinate Configuration
========================

Immutable configuration objects for coordinate systems:
- CoordConfig: plotting rectangle, transposition and affine post-transform
- PolarConfig: CoordConfig plus the angular sweep and radii
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from chart_coord.dataclasses import Point, ValidationError, validate_finite
from chart_coord.geometry import normalize_angle_range
from chart_coord.matrix import IDENTITY, Matrix3, validate_matrix


def _validate_point(name: str, value: Any) -> Point:
    try:
        point = Point.coerce(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} must be an (x, y) pair: {e}") from e
    validate_finite(f"{name}.x", point.x)
    validate_finite(f"{name}.y", point.y)
    return point


@dataclass(frozen=True)
class CoordConfig:
    """Shared configuration of every coordinate system.

    The plotting rectangle is given by two opposite corners. Charts
    usually pass the bottom-left corner as ``start`` and the top-right
    corner as ``end`` in pixel space, so ``end.y`` can be smaller than
    ``start.y``.

    Attributes:
        start: First corner of the plotting rectangle
        end: Opposite corner of the plotting rectangle
        is_transposed: Swap the roles of the two logical dimensions
        matrix: Optional 3x3 affine matrix applied after conversion.
            Defaults to identity.

    Raises:
        ValidationError: If a corner is not a finite (x, y) pair
        ValidationError: If the rectangle has zero width or height
        ValidationError: If matrix is malformed or singular
    """

    start: Point
    end: Point
    is_transposed: bool = False
    matrix: Matrix3 | None = None

    def __post_init__(self) -> None:
        # Use object.__setattr__ because the dataclass is frozen
        object.__setattr__(self, "start", _validate_point("start", self.start))
        object.__setattr__(self, "end", _validate_point("end", self.end))
        if self.width == 0 or self.height == 0:
            raise ValidationError(
                f"plotting rectangle must have a non-zero size, "
                f"got width={self.width} height={self.height}"
            )
        object.__setattr__(self, "is_transposed", bool(self.is_transposed))
        matrix = IDENTITY if self.matrix is None else validate_matrix(self.matrix)
        object.__setattr__(self, "matrix", matrix)

    @property
    def center(self) -> Point:
        return Point((self.start.x + self.end.x) / 2, (self.start.y + self.end.y) / 2)

    @property
    def width(self) -> float:
        return abs(self.end.x - self.start.x)

    @property
    def height(self) -> float:
        return abs(self.end.y - self.start.y)

    @classmethod
    def from_center(
        cls,
        center: Point | Sequence[float],
        width: Real,
        height: Real,
        **kwargs: Any,
    ):
        """Build a config from a center point and the rectangle size.

        The start corner is the bottom-left one in a y-down pixel space.
        """
        c = _validate_point("center", center)
        w = validate_finite("width", width)
        h = validate_finite("height", height)
        return cls(
            start=Point(c.x - w / 2, c.y + h / 2),
            end=Point(c.x + w / 2, c.y - h / 2),
            **kwargs,
        )

    @property
    def matrix_array(self) -> NDArray[np.float64]:
        """Return the affine matrix as a (3, 3) numpy array."""
        return np.array(self.matrix, dtype=np.float64)


@dataclass(frozen=True)
class PolarConfig(CoordConfig):
    """Configuration of a polar coordinate system.

    Attributes:
        start_angle: Sweep start in radians. Defaults to -π/2 (12 o'clock
            in a y-down pixel space).
        end_angle: Sweep end in radians. Defaults to 3π/2. Canonicalized
            so that end_angle >= start_angle.
        inner_radius: Hole size as a fraction of the radius, in [0, 1)
        radius: Optional radius. None or 0 means the largest radius that
            fits, a value in (0, 1] is a fraction of that, anything else
            is clamped to it.

    Raises:
        ValidationError: If an angle or radius is not a finite number
        ValidationError: If the canonical sweep is empty
        ValidationError: If inner_radius is outside [0, 1)
    """

    start_angle: float = -math.pi / 2
    end_angle: float = 3 * math.pi / 2
    inner_radius: float = 0.0
    radius: float | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        start_angle = validate_finite("start_angle", self.start_angle)
        end_angle = validate_finite("end_angle", self.end_angle)
        start_angle, end_angle = normalize_angle_range(start_angle, end_angle)
        if end_angle == start_angle:
            raise ValidationError(
                f"angle sweep must not be empty, got start_angle={start_angle} "
                f"end_angle={end_angle}"
            )
        object.__setattr__(self, "start_angle", start_angle)
        object.__setattr__(self, "end_angle", end_angle)

        inner_radius = validate_finite("inner_radius", self.inner_radius)
        if not 0.0 <= inner_radius < 1.0:
            raise ValidationError(f"inner_radius must be in [0, 1), got {inner_radius}")
        object.__setattr__(self, "inner_radius", inner_radius)

        if self.radius is not None:
            object.__setattr__(self, "radius", validate_finite("radius", self.radius))

