"""
Helix (Archimedean spiral) transformer.
"""

from typing import Any, Sequence

import numpy as np

from chart_coord.geometry import TWO_PI, wrap_angle
from chart_coord.scale import LinearScale
from chart_coord.transforms.polar import aspect_factors
from chart_coord.transforms.types import (
    Transformer,
    Vector2,
    as_vector2,
    validate_box,
    validate_params,
)


def helix(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """
    Lay the first component along a spiral, the second across it.

    The spiral angle follows v1 over [start_angle, end_angle] while its base
    radius grows linearly from inner_radius to outer_radius. v2 in [0, 1]
    moves the point across a band as wide as the gap between two turns,
    0.5 being on the spiral itself. The untransform picks the turn whose
    base radius is closest, so it round-trips for v2 in (0, 1) as long as
    the radius stays positive.

    Parameters:
        params: [start_angle, end_angle, inner_radius=0, outer_radius=1]
        x: x of the bounding box of the coordinate
        y: y of the bounding box of the coordinate
        width: Width of the bounding box of the coordinate
        height: Height of the bounding box of the coordinate

    Returns:
        Transformer over the unit square, origin at its center
    """
    values = validate_params("helix", params, 2, 4)
    start_angle, end_angle = values[0], values[1]
    inner_radius = values[2] if len(values) > 2 else 0.0
    outer_radius = values[3] if len(values) > 3 else 1.0
    validate_box("helix", x, y, width, height, require_size=True)

    angle = LinearScale(range=(start_angle, end_angle))
    base_radius = LinearScale(range=(inner_radius, outer_radius))
    # Radial distance between consecutive turns
    gap = (outer_radius - inner_radius) * TWO_PI / (end_angle - start_angle)
    sx, sy = aspect_factors(width, height)

    def transform(vector: Sequence[float]) -> Vector2:
        v1, v2 = as_vector2(vector)
        theta = angle.map(v1)
        r = base_radius.map(v1) + (v2 - 0.5) * gap
        px = r * np.cos(theta) * sx
        py = r * np.sin(theta) * sy
        return float(px * 0.5 + 0.5), float(py * 0.5 + 0.5)

    def untransform(vector: Sequence[float]) -> Vector2:
        dx, dy = as_vector2(vector)
        px = (dx - 0.5) * 2 / sx
        py = (dy - 0.5) * 2 / sy
        r = float(np.hypot(px, py))
        theta = wrap_angle(float(np.arctan2(py, px)), start_angle, start_angle + TWO_PI)
        base = base_radius.map(angle.invert(theta))
        turns = round((r - base) / gap)
        v1 = angle.invert(theta + turns * TWO_PI)
        v2 = (r - base_radius.map(v1)) / gap + 0.5
        return v1, v2

    return Transformer(transform=transform, untransform=untransform, name="helix")
