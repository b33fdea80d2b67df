"""
Base class shared by the coordinate systems.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Literal, TypeVar

import numpy as np
from numpy.typing import NDArray

from chart_coord.coord.config import CoordConfig
from chart_coord.dataclasses import DimRange, Point, ValidationError
from chart_coord.matrix import (
    about_point,
    apply_matrix,
    rotation_matrix,
    scaling_matrix,
    translation_matrix,
)

Dim = Literal["x", "y"]

CoordT = TypeVar("CoordT", bound="Coordinate")


class Coordinate(ABC):
    """
    Maps normalized data points into pixel space and back.

    Subclasses fill the ``x`` and ``y`` dimension ranges at construction
    and implement convert_point()/invert_point(). Instances are immutable:
    the affine helpers return new coordinates built from an updated config.
    """

    type: str = "coord"
    is_polar: bool = False

    x: DimRange
    y: DimRange

    def __init__(self, config: CoordConfig) -> None:
        self._config = config
        self._matrix = config.matrix_array
        self._inverse_matrix = np.linalg.inv(self._matrix)

    @property
    def config(self) -> CoordConfig:
        return self._config

    @property
    def is_transposed(self) -> bool:
        return self._config.is_transposed

    @property
    def center(self) -> Point:
        return self._config.center

    @property
    def width(self) -> float:
        return self._config.width

    @property
    def height(self) -> float:
        return self._config.height

    @property
    def matrix(self) -> NDArray[np.float64]:
        return self._matrix.copy()

    def _dim(self, dim: Dim) -> DimRange:
        if dim == "x":
            return self.x
        if dim == "y":
            return self.y
        raise ValidationError(f"dim must be 'x' or 'y', got {dim!r}")

    def convert_dim(self, percent: float, dim: Dim) -> float:
        """Interpolate a normalized value into the range of dim."""
        rng = self._dim(dim)
        return rng.start + percent * (rng.end - rng.start)

    def invert_dim(self, value: float, dim: Dim) -> float:
        """Express value as a fraction of the range of dim."""
        rng = self._dim(dim)
        return (value - rng.start) / (rng.end - rng.start)

    @abstractmethod
    def convert_point(self, point: Point) -> Point:
        """Map a normalized point to pixel space, ignoring the matrix."""

    @abstractmethod
    def invert_point(self, point: Point) -> Point:
        """Map a pixel point back to normalized values, ignoring the matrix."""

    def convert(self, point: Point) -> Point:
        """Convert a normalized point, then apply the affine matrix."""
        converted = self.convert_point(Point.coerce(point))
        return Point(*apply_matrix(self._matrix, converted.as_tuple()))

    def invert(self, point: Point) -> Point:
        """Undo the affine matrix, then invert the point."""
        raw = Point(*apply_matrix(self._inverse_matrix, Point.coerce(point).as_tuple()))
        return self.invert_point(raw)

    def apply_matrix(self: CoordT, matrix: NDArray[np.float64]) -> CoordT:
        """Return a copy whose output is further mapped by matrix."""
        combined = np.asarray(matrix, dtype=np.float64) @ self._matrix
        return type(self)(replace(self._config, matrix=combined))

    def translate(self: CoordT, tx: float, ty: float) -> CoordT:
        return self.apply_matrix(translation_matrix(tx, ty))

    def rotate(self: CoordT, angle: float) -> CoordT:
        """Rotate the output about the center of the plotting rectangle."""
        c = self.center
        return self.apply_matrix(about_point(rotation_matrix(angle), c.x, c.y))

    def scale(self: CoordT, sx: float, sy: float) -> CoordT:
        """Scale the output about the center of the plotting rectangle."""
        c = self.center
        return self.apply_matrix(about_point(scaling_matrix(sx, sy), c.x, c.y))

    def reflect(self: CoordT, dim: Dim) -> CoordT:
        """Mirror the output across the center line perpendicular to dim."""
        if dim == "x":
            return self.scale(-1.0, 1.0)
        if dim == "y":
            return self.scale(1.0, -1.0)
        raise ValidationError(f"dim must be 'x' or 'y', got {dim!r}")
