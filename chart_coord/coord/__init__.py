"""
Coordinate Systems
==================

Stateful coordinate systems built once from an immutable configuration:
- CartesianCoordinate: unit square onto the plotting rectangle
- PolarCoordinate: angular sweep and radius around a fitted circle center
"""

from chart_coord.coord.base import Coordinate
from chart_coord.coord.cartesian import CartesianCoordinate
from chart_coord.coord.config import CoordConfig, PolarConfig
from chart_coord.coord.polar import PolarCoordinate, PolarGeometry

__all__ = [
    'Coordinate',
    'CartesianCoordinate',
    'CoordConfig',
    'PolarConfig',
    'PolarCoordinate',
    'PolarGeometry',
]
