"""
Angle utilities and the wedge bounding box used by polar coordinates.
"""

import math
from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike

from chart_coord.dataclasses import BoundingBox

TWO_PI = 2 * np.pi

# Angular step used when sampling a wedge outline (10 degrees)
ONE_BOX_STEP = np.pi / 18

NUMBER_EQUAL_EPSILON = 1e-5


def is_number_equal(a: float, b: float, tolerance: float = NUMBER_EQUAL_EPSILON) -> bool:
    """Return True when |a - b| is below tolerance."""
    return abs(a - b) < tolerance


def wrap_angle(theta: float, min_angle: float, max_angle: float) -> float:
    """
    Shift theta by whole turns until it lies in [min_angle, max_angle].

    An angle below min_angle is lifted by the fewest turns that reach
    min_angle, then an angle above max_angle is lowered by the fewest turns
    that reach max_angle. The two passes are independent, so for a window
    narrower than 2π the result can still fall outside the window. A window
    at least 2π wide always contains the result.

    Parameters:
        theta: Angle in radians, typically an arctan2 result
        min_angle: Lower end of the target window
        max_angle: Upper end of the target window

    Returns:
        The shifted angle. Non-finite input is returned unchanged.
    """
    if not math.isfinite(theta):
        return theta
    # Offsets are reduced modulo a turn and added back to the bound, so
    # rounding can never step past the bound
    if theta < min_angle:
        theta = min_angle + (theta - min_angle) % TWO_PI
    if theta > max_angle:
        theta = max_angle - (max_angle - theta) % TWO_PI
    return float(theta)


def normalize_angle_range(start_angle: float, end_angle: float) -> Tuple[float, float]:
    """
    Canonicalize an angle range so that end_angle >= start_angle.

    Whole turns are added to end_angle while it is smaller than start_angle;
    start_angle is never adjusted and a range already wider than a full turn
    is kept as given.

    Parameters:
        start_angle: Sweep start in radians
        end_angle: Sweep end in radians

    Returns:
        Tuple of (start_angle, end_angle)
    """
    if end_angle < start_angle:
        end_angle = start_angle + (end_angle - start_angle) % TWO_PI
    return float(start_angle), float(end_angle)


def rotate_vector(vector: ArrayLike, angle: float) -> np.ndarray:
    """Rotate a 2D vector counter-clockwise (in math orientation) by angle."""
    vx, vy = np.asarray(vector, dtype=np.float64)
    c, s = np.cos(angle), np.sin(angle)
    return np.array([c * vx - s * vy, s * vx + c * vy], dtype=np.float64)


def cross_direction(v1: ArrayLike, v2: ArrayLike) -> float:
    """Z component of the cross product v1 x v2."""
    x1, y1 = np.asarray(v1, dtype=np.float64)
    x2, y2 = np.asarray(v2, dtype=np.float64)
    return float(x1 * y2 - x2 * y1)


def angle_between(v1: ArrayLike, v2: ArrayLike) -> float:
    """
    Unsigned angle in [0, π] between two vectors.

    A zero-length vector gives a cosine of 0, so the result is π/2.
    """
    a = np.asarray(v1, dtype=np.float64)
    b = np.asarray(v2, dtype=np.float64)
    mag = float(np.hypot(*a) * np.hypot(*b))
    cosine = float(np.dot(a, b)) / mag if mag else 0.0
    return float(np.arccos(min(max(cosine, -1.0), 1.0)))


def angle_to(v1: ArrayLike, v2: ArrayLike, clockwise: bool = False) -> float:
    """
    Directed angle in [0, 2π) swept from v1 to v2.

    Parameters:
        v1: Reference vector
        v2: Target vector
        clockwise: Measure towards decreasing angles instead of increasing ones

    Returns:
        Angle in radians. Values within floating-point noise of 2π can be
        returned for vectors that are almost aligned.
    """
    ang = angle_between(v1, v2)
    counter_clockwise_side = cross_direction(v1, v2) >= 0
    if clockwise:
        return TWO_PI - ang if counter_clockwise_side else ang
    return ang if counter_clockwise_side else TWO_PI - ang


def compute_one_box(start_angle: float, end_angle: float) -> BoundingBox:
    """
    Bounding box of the wedge swept on the unit circle.

    The wedge is the arc between start_angle and end_angle plus the circle
    center. A sweep of a full turn or more gives the unit box. Otherwise the
    arc is sampled at both endpoints and every ONE_BOX_STEP from the lower
    angle, so extrema at multiples of π/2 are only exact when a sample
    lands on them.

    Parameters:
        start_angle: Sweep start in radians
        end_angle: Sweep end in radians

    Returns:
        BoundingBox in unit-circle coordinates
    """
    if abs(end_angle - start_angle) >= TWO_PI:
        return BoundingBox(min_x=-1.0, max_x=1.0, min_y=-1.0, max_y=1.0)

    lo, hi = min(start_angle, end_angle), max(start_angle, end_angle)
    thetas = np.concatenate((
        [start_angle, end_angle],
        np.arange(lo, hi, ONE_BOX_STEP),
    ))
    xs = np.concatenate(([0.0], np.cos(thetas)))
    ys = np.concatenate(([0.0], np.sin(thetas)))
    return BoundingBox.from_points(xs, ys)
