"""
Chart Coordinates
=================

Public API for mapping normalized chart data into pixel space and back,
with polar and cartesian coordinate systems and a composable pipeline of
forward/inverse transformers.
"""

from chart_coord.coord import (
    CartesianCoordinate,
    CoordConfig,
    Coordinate,
    PolarConfig,
    PolarCoordinate,
    PolarGeometry,
)
from chart_coord.dataclasses import BoundingBox, DimRange, Point, ValidationError
from chart_coord.debug import (
    disable_debug_logging,
    format_angle,
    format_box,
    format_point,
    log_geometry,
    setup_debug_logging,
)
from chart_coord.geometry import (
    angle_to,
    compute_one_box,
    normalize_angle_range,
    wrap_angle,
)
from chart_coord.scale import LinearScale
from chart_coord.transforms import (
    TRANSFORMS,
    Transformer,
    TransformPipeline,
    create_transformer,
)

__all__ = [
    # Coordinate systems
    'Coordinate',
    'CartesianCoordinate',
    'PolarCoordinate',
    'PolarGeometry',
    'CoordConfig',
    'PolarConfig',
    # Value types
    'Point',
    'DimRange',
    'BoundingBox',
    'ValidationError',
    'LinearScale',
    # Angle utilities
    'wrap_angle',
    'normalize_angle_range',
    'angle_to',
    'compute_one_box',
    # Transform pipeline
    'Transformer',
    'TransformPipeline',
    'TRANSFORMS',
    'create_transformer',
    # Debug utilities
    'setup_debug_logging',
    'disable_debug_logging',
    'format_angle',
    'format_point',
    'format_box',
    'log_geometry',
]
__version__ = '0.1.0'
