"""
Polar transformers for the functional pipeline.

The output is a position inside the unit square with the polar origin at
its center, ready to be stretched onto the bounding box.
"""

from typing import Any, Sequence

import numpy as np

from chart_coord.geometry import wrap_angle
from chart_coord.scale import LinearScale
from chart_coord.transforms.types import (
    Transformer,
    Vector2,
    as_vector2,
    validate_box,
    validate_params,
)


def aspect_factors(width: float, height: float) -> Vector2:
    """
    Per-axis factors that keep a circle round inside a width x height box.

    The longer visual axis is compressed, so the layout is inscribed in the
    box instead of being clipped.
    """
    aspect = height / width
    sx = 1.0 if aspect > 1 else aspect
    sy = 1.0 / aspect if aspect > 1 else 1.0
    return sx, sy


def polar(
    params: Sequence[Any],
    x: float,
    y: float,
    width: float,
    height: float,
) -> Transformer:
    """
    Map a normalized (angle, radius) vector to a polar position.

    Used for rose diagrams and radial bar charts.

    Parameters:
        params: [start_angle, end_angle, inner_radius=0, outer_radius=1]
        x: x of the bounding box of the coordinate
        y: y of the bounding box of the coordinate
        width: Width of the bounding box of the coordinate
        height: Height of the bounding box of the coordinate

    Returns:
        Transformer over the unit square

    Raises:
        ValidationError: If params are malformed, a span is empty, or the
            box has no area
    """
    values = validate_params("polar", params, 2, 4)
    start_angle, end_angle = values[0], values[1]
    inner_radius = values[2] if len(values) > 2 else 0.0
    outer_radius = values[3] if len(values) > 3 else 1.0
    validate_box("polar", x, y, width, height, require_size=True)

    radius = LinearScale(range=(inner_radius, outer_radius))
    angle = LinearScale(range=(start_angle, end_angle))
    sx, sy = aspect_factors(width, height)

    def transform(vector: Sequence[float]) -> Vector2:
        v1, v2 = as_vector2(vector)
        theta = angle.map(v1)
        r = radius.map(v2)

        px = r * np.cos(theta) * sx
        py = r * np.sin(theta) * sy

        # Origin to the center of the unit square, unit length to half its side
        return float(px * 0.5 + 0.5), float(py * 0.5 + 0.5)

    def untransform(vector: Sequence[float]) -> Vector2:
        dx, dy = as_vector2(vector)
        px = (dx - 0.5) * 2 / sx
        py = (dy - 0.5) * 2 / sy
        r = float(np.hypot(px, py))
        t = float(np.arctan2(py, px))
        theta = wrap_angle(t, start_angle, end_angle)
        return angle.invert(theta), radius.invert(r)

    return Transformer(transform=transform, untransform=untransform, name="polar")


def polar_theta(
    params: Sequence[Any],
    x: float,
    y: float,
    width: float,
    height: float,
) -> Transformer:
    """
    Polar transformer whose radius is binarized to 0 or 1.

    Only the angular share carries information, as in pie and ring charts.
    Radius input exactly 0 stays 0, anything else becomes 1.
    """
    base = polar(params, x, y, width, height)

    def transform(vector: Sequence[float]) -> Vector2:
        theta, r = as_vector2(vector)
        return base.transform((theta, 0.0 if r == 0 else 1.0))

    return Transformer(transform=transform, untransform=base.untransform, name="polar_theta")


def polar_rho(
    params: Sequence[Any],
    x: float,
    y: float,
    width: float,
    height: float,
) -> Transformer:
    """
    Polar transformer whose angle is pinned to 1.

    Only the radial distance carries information, as in concentric circles.
    """
    base = polar(params, x, y, width, height)

    def transform(vector: Sequence[float]) -> Vector2:
        _, r = as_vector2(vector)
        return base.transform((1.0, r))

    return Transformer(transform=transform, untransform=base.untransform, name="polar_rho")
