"""
Debug logging helpers.

The package logs through the ``chart_coord`` logger hierarchy and never
configures handlers on import. Call setup_debug_logging() to see the
geometry computed for each coordinate system and pipeline.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from chart_coord.dataclasses import BoundingBox, Point

if TYPE_CHECKING:
    from chart_coord.coord.polar import PolarCoordinate

LOGGER_NAME = "chart_coord"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_installed_handlers: list[logging.Handler] = []


def setup_debug_logging(
    level: int = logging.DEBUG,
    handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Route package log records to a handler.

    Calling this more than once does not add duplicate handlers. A later
    call without a handler keeps the installed one and only updates the
    level; a later call with a different handler replaces it.

    Parameters:
        level: Logging level for the package logger
        handler: Handler to install, a StreamHandler by default

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if handler is not None and handler not in _installed_handlers:
        while _installed_handlers:
            logger.removeHandler(_installed_handlers.pop())

    if not _installed_handlers:
        if handler is None:
            handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        _installed_handlers.append(handler)

    for installed in _installed_handlers:
        installed.setLevel(level)

    return logger


def disable_debug_logging() -> None:
    """Remove the handlers installed by setup_debug_logging()."""
    logger = logging.getLogger(LOGGER_NAME)
    while _installed_handlers:
        logger.removeHandler(_installed_handlers.pop())
    logger.setLevel(logging.WARNING)


def format_angle(angle: float, precision: int = 4) -> str:
    """Format radians with the degree value alongside, e.g. '1.5708 rad (90.00°)'."""
    return f"{angle:.{precision}f} rad ({np.rad2deg(angle):.2f}°)"


def format_point(point: Point | Any, precision: int = 2) -> str:
    """Format a Point or (x, y) pair as '(x, y)'."""
    if isinstance(point, Point):
        x, y = point.x, point.y
    else:
        x, y = point[0], point[1]
    return f"({x:.{precision}f}, {y:.{precision}f})"


def format_box(box: BoundingBox, precision: int = 3) -> str:
    return (
        f"x=[{box.min_x:.{precision}f}, {box.max_x:.{precision}f}] "
        f"y=[{box.min_y:.{precision}f}, {box.max_y:.{precision}f}]"
    )


def log_geometry(coord: PolarCoordinate, logger: logging.Logger | None = None) -> None:
    """Log the frozen geometry of a polar coordinate at DEBUG level."""
    logger = logger or logging.getLogger(LOGGER_NAME)
    if not logger.isEnabledFor(logging.DEBUG):
        return
    geometry = coord.geometry
    logger.debug(
        "polar geometry: angles %s -> %s, radius %.3f (max %.3f), inner %.3f, "
        "center %s, one box %s",
        format_angle(geometry.angle_range.start),
        format_angle(geometry.angle_range.end),
        geometry.radius,
        geometry.max_radius,
        geometry.radius_range.start,
        format_point(geometry.circle_center),
        format_box(geometry.one_box),
    )
