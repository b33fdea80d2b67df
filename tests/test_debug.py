"""
Tests for the debug logging helpers.
"""

import logging
import math

import pytest

from chart_coord.coord import PolarConfig, PolarCoordinate
from chart_coord.dataclasses import BoundingBox, Point
from chart_coord.debug import (
    LOGGER_NAME,
    disable_debug_logging,
    format_angle,
    format_box,
    format_point,
    log_geometry,
    setup_debug_logging,
)


@pytest.fixture
def package_logger():
    """Package logger restored to its default state after the test."""
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    disable_debug_logging()
    logger.setLevel(logging.NOTSET)


class TestFormatting:
    """Tests for the format_* helpers."""

    def test_format_angle(self):
        assert format_angle(math.pi / 2) == "1.5708 rad (90.00°)"

    def test_format_angle_precision(self):
        assert format_angle(-math.pi, precision=2) == "-3.14 rad (-180.00°)"

    def test_format_point(self):
        assert format_point(Point(1.0, 2.5)) == "(1.00, 2.50)"
        assert format_point((3, -4), precision=1) == "(3.0, -4.0)"

    def test_format_box(self):
        box = BoundingBox(min_x=-1.0, max_x=1.0, min_y=0.0, max_y=0.5)
        assert format_box(box) == "x=[-1.000, 1.000] y=[0.000, 0.500]"


class TestDebugLogging:
    """Tests for setup_debug_logging() and disable_debug_logging()."""

    def test_setup_installs_single_handler(self, package_logger):
        handler = logging.NullHandler()
        setup_debug_logging(handler=handler)
        setup_debug_logging()
        setup_debug_logging(handler=handler)
        assert package_logger.handlers == [handler]
        assert package_logger.level == logging.DEBUG

    def test_setup_replaces_handler(self, package_logger):
        """A new handler on a later call takes the place of the old one."""
        first = logging.NullHandler()
        second = logging.NullHandler()
        setup_debug_logging(handler=first)
        setup_debug_logging(handler=second)
        assert package_logger.handlers == [second]
        disable_debug_logging()
        assert package_logger.handlers == []

    def test_setup_updates_level(self, package_logger):
        handler = logging.NullHandler()
        setup_debug_logging(handler=handler)
        setup_debug_logging(level=logging.INFO)
        assert package_logger.level == logging.INFO
        assert handler.level == logging.INFO

    def test_disable_removes_handler(self, package_logger):
        handler = logging.NullHandler()
        setup_debug_logging(handler=handler)
        disable_debug_logging()
        assert handler not in package_logger.handlers
        assert package_logger.level == logging.WARNING

    def test_log_geometry(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        coord = PolarCoordinate(PolarConfig.from_center((100, 100), 200, 200))
        caplog.clear()
        log_geometry(coord)
        assert len(caplog.records) == 1
        message = caplog.records[0].getMessage()
        assert message.startswith("polar geometry:")
        assert "radius 100.000" in message
        assert "center (100.00, 100.00)" in message

    def test_log_geometry_silent_above_debug(self, caplog):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)
        coord = PolarCoordinate(PolarConfig.from_center((100, 100), 200, 200))
        log_geometry(coord)
        assert caplog.records == []
