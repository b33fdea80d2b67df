"""
Polar coordinate system.

Maps a normalized (angle, radius) pair into pixel space around a circle
center chosen so that the swept wedge, not a hypothetical full circle,
is centered and as large as possible inside the plotting rectangle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from chart_coord.coord.base import Coordinate
from chart_coord.coord.config import PolarConfig
from chart_coord.dataclasses import BoundingBox, DimRange, Point
from chart_coord.debug import log_geometry
from chart_coord.geometry import (
    TWO_PI,
    angle_to,
    compute_one_box,
    is_number_equal,
    rotate_vector,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PolarGeometry:
    """
    Geometry of a polar coordinate, computed once at construction.

    Attributes:
        angle_range: Canonical (start, end) sweep in radians
        radius_range: (inner radius, radius) in pixels
        radius: Resolved outer radius in pixels
        max_radius: Largest radius keeping the wedge inside the rectangle
        circle_center: Pixel position of the circle center
        one_box: Bounding box of the wedge on the unit circle
    """

    angle_range: DimRange
    radius_range: DimRange
    radius: float
    max_radius: float
    circle_center: Point
    one_box: BoundingBox


def resolve_radius(radius: float | None, max_radius: float) -> float:
    """
    Resolve the configured radius against the largest radius that fits.

    None or 0 selects max_radius, a value in (0, 1] is a fraction of it,
    a negative value or one above max_radius is clamped to it. Anything
    else is an absolute radius in pixels.
    """
    if not radius:
        return max_radius
    if 0 < radius <= 1:
        return max_radius * radius
    if radius <= 0 or radius > max_radius:
        logger.debug("radius %s clamped to %s", radius, max_radius)
        return max_radius
    return radius


def compute_polar_geometry(config: PolarConfig) -> PolarGeometry:
    """
    Fit the wedge described by config into its plotting rectangle.

    The wedge's unit bounding box is scaled by whichever of width and height
    is the binding constraint. The circle center is then shifted from the
    rectangle center by the wedge's offset inside its own bounding box.

    Parameters:
        config: Validated polar configuration with a canonical sweep

    Returns:
        PolarGeometry for the configuration
    """
    start_angle, end_angle = config.start_angle, config.end_angle
    one_box = compute_one_box(start_angle, end_angle)

    one_width = one_box.width
    one_height = one_box.height
    left = abs(one_box.min_x) / one_width
    top = abs(one_box.min_y) / one_height
    width = config.width
    height = config.height
    center = config.center

    if height / one_height > width / one_width:
        # Width is binding
        max_radius = width / one_width
        circle_center = Point(
            center.x - (0.5 - left) * width,
            center.y - (0.5 - top) * max_radius * one_height,
        )
    else:
        # Height is binding
        max_radius = height / one_height
        circle_center = Point(
            center.x - (0.5 - left) * max_radius * one_width,
            center.y - (0.5 - top) * height,
        )

    radius = resolve_radius(config.radius, max_radius)

    return PolarGeometry(
        angle_range=DimRange(start_angle, end_angle),
        radius_range=DimRange(config.inner_radius * radius, radius),
        radius=radius,
        max_radius=max_radius,
        circle_center=circle_center,
        one_box=one_box,
    )


class PolarCoordinate(Coordinate):
    """
    Polar coordinate system.

    The x dimension is the angle, the y dimension the distance from the
    circle center. When transposed, the first field of a point drives the
    radius and the second the angle.

    Example:
        >>> config = PolarConfig.from_center((100, 100), 200, 200)
        >>> coord = PolarCoordinate(config)
        >>> coord.convert_point(Point(0.25, 1.0))
        Point(x=200.0, y=100.0)
    """

    type = "polar"
    is_polar = True

    def __init__(self, config: PolarConfig | None = None, **kwargs) -> None:
        if config is None:
            config = PolarConfig(**kwargs)
        elif kwargs:
            raise TypeError("pass either a PolarConfig or keyword arguments, not both")
        super().__init__(config)
        self._geometry = compute_polar_geometry(config)
        self.x = self._geometry.angle_range
        self.y = self._geometry.radius_range
        log_geometry(self, logger)

    @property
    def config(self) -> PolarConfig:
        return self._config  # type: ignore[return-value]

    @property
    def geometry(self) -> PolarGeometry:
        return self._geometry

    @property
    def start_angle(self) -> float:
        return self._geometry.angle_range.start

    @property
    def end_angle(self) -> float:
        return self._geometry.angle_range.end

    @property
    def inner_radius(self) -> float:
        return self.config.inner_radius

    @property
    def radius(self) -> float:
        return self._geometry.radius

    @property
    def circle_center(self) -> Point:
        return self._geometry.circle_center

    def get_center(self) -> Point:
        return self._geometry.circle_center

    def get_radius(self) -> float:
        return self._geometry.radius

    def get_one_box(self) -> BoundingBox:
        return self._geometry.one_box

    def convert_point(self, point: Point) -> Point:
        """
        Map a normalized (angle, radius) point to pixel space.

        Parameters:
            point: x holds the angle fraction of the sweep, y the radius
                fraction between the inner and outer radius (swapped when
                transposed)

        Returns:
            Pixel position on the circle
        """
        point = Point.coerce(point)
        center = self.get_center()
        x = point.y if self.is_transposed else point.x
        y = point.x if self.is_transposed else point.y

        angle = self.convert_dim(x, "x")
        radius = self.convert_dim(y, "y")

        return Point(
            float(center.x + np.cos(angle) * radius),
            float(center.y + np.sin(angle) * radius),
        )

    def invert_point(self, point: Point) -> Point:
        """
        Recover the normalized (angle, radius) point under a pixel.

        The angle is measured from the sweep start in the direction of the
        sweep. Angles within tolerance of a full turn are reported as 0.
        Points past the end of a partial sweep give an angle fraction
        above 1.

        Parameters:
            point: Pixel position

        Returns:
            Normalized point, swapped when transposed
        """
        point = Point.coerce(point)
        center = self.get_center()
        v_point = point.as_array() - center.as_array()
        x = self.x

        v_start = rotate_vector((1.0, 0.0), x.start)
        angle = angle_to(v_start, v_point, clockwise=x.end < x.start)
        if is_number_equal(angle, TWO_PI):
            angle = 0.0
        radius = float(np.hypot(*v_point))

        x_percent = angle / (x.end - x.start)
        x_percent = x_percent if x.end - x.start > 0 else -x_percent
        y_percent = self.invert_dim(radius, "y")

        if self.is_transposed:
            return Point(y_percent, x_percent)
        return Point(x_percent, y_percent)
