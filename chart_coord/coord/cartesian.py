"""
Cartesian coordinate system.
"""

from chart_coord.coord.base import Coordinate
from chart_coord.coord.config import CoordConfig
from chart_coord.dataclasses import DimRange, Point


class CartesianCoordinate(Coordinate):
    """Linear mapping of the unit square onto the plotting rectangle."""

    type = "cartesian"

    def __init__(self, config: CoordConfig) -> None:
        super().__init__(config)
        self.x = DimRange(config.start.x, config.end.x)
        self.y = DimRange(config.start.y, config.end.y)

    def convert_point(self, point: Point) -> Point:
        point = Point.coerce(point)
        x = point.y if self.is_transposed else point.x
        y = point.x if self.is_transposed else point.y
        return Point(self.convert_dim(x, "x"), self.convert_dim(y, "y"))

    def invert_point(self, point: Point) -> Point:
        point = Point.coerce(point)
        x_percent = self.invert_dim(point.x, "x")
        y_percent = self.invert_dim(point.y, "y")
        if self.is_transposed:
            return Point(y_percent, x_percent)
        return Point(x_percent, y_percent)
