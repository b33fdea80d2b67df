"""
Fisheye lens transformers.

Each axis offset from the focus is rescaled to [0, 1] and bent with

    g(t) = (d + 1) t / (d t + 1)

which magnifies the neighbourhood of the focus for distortion d > 0 and
keeps both the focus and the edges fixed. The inverse is
t = g / (d + 1 - d g).
"""

from typing import Any, Callable, Sequence

import numpy as np

from chart_coord.dataclasses import ValidationError
from chart_coord.transforms.types import (
    Transformer,
    Vector2,
    as_vector2,
    validate_box,
    validate_params,
)


def distort(t: float, distortion: float) -> float:
    return (distortion + 1) * t / (distortion * t + 1)


def undistort(g: float, distortion: float) -> float:
    # Singular at g = (d + 1) / d, outside the lens
    with np.errstate(divide="ignore"):
        return float(np.divide(g, distortion + 1 - distortion * g))


def _check_distortion(name: str, distortion: float) -> None:
    if distortion < 0:
        raise ValidationError(f"{name} distortion must be >= 0, got {distortion}")


def _axis_lens(focus: float, distortion: float) -> tuple[Callable[[float], float], Callable[[float], float]]:
    """Forward and inverse lens for one axis of the unit interval."""

    def extent(v: float) -> float:
        m = focus if v < focus else 1.0 - focus
        return m if m != 0 else 1.0

    def forward(v: float) -> float:
        m = extent(v)
        t = abs(v - focus) / m
        return float(np.copysign(m * distort(t, distortion), v - focus) + focus)

    def inverse(v: float) -> float:
        m = extent(v)
        g = abs(v - focus) / m
        return float(np.copysign(m * undistort(g, distortion), v - focus) + focus)

    return forward, inverse


def _axis_params(name: str, params: Sequence[Any]) -> tuple[float, float, bool]:
    params = list(params or [])
    is_visual = bool(params.pop()) if len(params) == 3 else False
    focus, distortion = validate_params(name, params, 2, 2)
    _check_distortion(name, distortion)
    return focus, distortion, is_visual


def fisheye_x(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """
    Fisheye along x.

    Parameters:
        params: [focus, distortion, is_visual=False]. The focus is a
            normalized position, or a pixel offset from the box origin when
            is_visual is set.
    """
    focus, distortion, is_visual = _axis_params("fisheye_x", params)
    _, _, width, _ = validate_box("fisheye_x", x, y, width, height, require_size=True)
    forward, inverse = _axis_lens(focus / width if is_visual else focus, distortion)
    return Transformer(
        transform=lambda vector: (forward(as_vector2(vector)[0]), float(vector[1])),
        untransform=lambda vector: (inverse(as_vector2(vector)[0]), float(vector[1])),
        name="fisheye_x",
    )


def fisheye_y(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """Fisheye along y, with the same params as fisheye_x."""
    focus, distortion, is_visual = _axis_params("fisheye_y", params)
    _, _, _, height = validate_box("fisheye_y", x, y, width, height, require_size=True)
    forward, inverse = _axis_lens(focus / height if is_visual else focus, distortion)
    return Transformer(
        transform=lambda vector: (float(vector[0]), forward(as_vector2(vector)[1])),
        untransform=lambda vector: (float(vector[0]), inverse(as_vector2(vector)[1])),
        name="fisheye_y",
    )


def fisheye(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """
    Independent fisheye lenses on both axes.

    Parameters:
        params: [focus_x, focus_y, distortion_x, distortion_y, is_visual=False]
    """
    params = list(params or [])
    is_visual = bool(params.pop()) if len(params) == 5 else False
    focus_x, focus_y, distortion_x, distortion_y = validate_params("fisheye", params, 4, 4)
    lens_x = fisheye_x([focus_x, distortion_x, is_visual], x, y, width, height)
    lens_y = fisheye_y([focus_y, distortion_y, is_visual], x, y, width, height)
    return Transformer(
        transform=lambda vector: lens_y.transform(lens_x.transform(vector)),
        untransform=lambda vector: lens_x.untransform(lens_y.untransform(vector)),
        name="fisheye",
    )


def fisheye_circular(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """
    Radial fisheye lens around a focus point.

    Distances are measured in pixels so the lens stays round on a
    non-square box. Points at or beyond the lens radius are left alone.

    Parameters:
        params: [focus_x, focus_y, radius, distortion, is_visual=False].
            Without is_visual the focus is normalized and the radius is a
            fraction of the shorter box side.
    """
    params = list(params or [])
    is_visual = bool(params.pop()) if len(params) == 5 else False
    focus_x, focus_y, radius, distortion = validate_params("fisheye_circular", params, 4, 4)
    _check_distortion("fisheye_circular", distortion)
    _, _, width, height = validate_box("fisheye_circular", x, y, width, height, require_size=True)
    if not is_visual:
        focus_x, focus_y = focus_x * width, focus_y * height
        radius = radius * min(width, height)
    if radius <= 0:
        raise ValidationError(f"fisheye_circular radius must be positive, got {radius}")

    def lens(vector: Sequence[float], bend: Callable[[float, float], float]) -> Vector2:
        v1, v2 = as_vector2(vector)
        dx = v1 * width - focus_x
        dy = v2 * height - focus_y
        dist = float(np.hypot(dx, dy))
        if dist == 0 or dist >= radius:
            return v1, v2
        k = radius * bend(dist / radius, distortion) / dist
        return (focus_x + dx * k) / width, (focus_y + dy * k) / height

    return Transformer(
        transform=lambda vector: lens(vector, distort),
        untransform=lambda vector: lens(vector, undistort),
        name="fisheye_circular",
    )
