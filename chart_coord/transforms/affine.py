"""
Affine transformers backed by 3x3 homogeneous matrices.

Rotation, scaling, reflection and shear act about the center of the
bounding box; translate and matrix act about the origin.
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from chart_coord.dataclasses import ValidationError
from chart_coord.matrix import (
    about_point,
    apply_matrix,
    rotation_matrix,
    scaling_matrix,
    shear_matrix,
    translation_matrix,
    validate_matrix,
)
from chart_coord.transforms.types import Transformer, validate_box, validate_params


def matrix_transformer(name: str, matrix: Any) -> Transformer:
    """
    Wrap an invertible matrix and its inverse as a Transformer.

    Raises:
        ValidationError: If the matrix is malformed or singular
    """
    forward = np.array(validate_matrix(matrix), dtype=np.float64)
    inverse = np.linalg.inv(forward)
    return Transformer(
        transform=lambda vector: apply_matrix(forward, vector[:2]),
        untransform=lambda vector: apply_matrix(inverse, vector[:2]),
        name=name,
    )


def _centered(
    name: str,
    matrix: NDArray[np.float64],
    x: float,
    y: float,
    width: float,
    height: float,
) -> Transformer:
    x, y, width, height = validate_box(name, x, y, width, height)
    return matrix_transformer(name, about_point(matrix, x + width / 2, y + height / 2))


def translate(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """Shift vectors by [tx, ty]."""
    tx, ty = validate_params("translate", params, 2, 2)
    return matrix_transformer("translate", translation_matrix(tx, ty))


def scale(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """Scale vectors by [sx, sy] about the box center. Zero factors are rejected."""
    sx, sy = validate_params("scale", params, 2, 2)
    if sx == 0 or sy == 0:
        raise ValidationError(f"scale factors must be non-zero, got sx={sx} sy={sy}")
    return _centered("scale", scaling_matrix(sx, sy), x, y, width, height)


def rotate(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """Rotate vectors by [theta] radians about the box center."""
    (theta,) = validate_params("rotate", params, 1, 1)
    return _centered("rotate", rotation_matrix(theta), x, y, width, height)


def reflect(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """Mirror both axes through the box center."""
    validate_params("reflect", params, 0, 0)
    return _centered("reflect", scaling_matrix(-1.0, -1.0), x, y, width, height)


def reflect_x(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """Mirror the x axis through the box center."""
    validate_params("reflect_x", params, 0, 0)
    return _centered("reflect_x", scaling_matrix(-1.0, 1.0), x, y, width, height)


def reflect_y(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """Mirror the y axis through the box center."""
    validate_params("reflect_y", params, 0, 0)
    return _centered("reflect_y", scaling_matrix(1.0, -1.0), x, y, width, height)


def shear_x(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """Shear along x by [theta] radians."""
    (theta,) = validate_params("shear_x", params, 1, 1)
    return _centered("shear_x", shear_matrix(theta, 0.0), x, y, width, height)


def shear_y(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """Shear along y by [theta] radians."""
    (theta,) = validate_params("shear_y", params, 1, 1)
    return _centered("shear_y", shear_matrix(0.0, theta), x, y, width, height)


def matrix(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """Apply an arbitrary matrix given as 9 row-major values or a 3x3 nested list."""
    params = list(params or [])
    if len(params) == 3:
        return matrix_transformer("matrix", params)
    values = validate_params("matrix", params, 9, 9)
    return matrix_transformer("matrix", np.asarray(values, dtype=np.float64).reshape(3, 3))


def transpose(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """Swap the two components."""
    validate_params("transpose", params, 0, 0)
    swap = np.array([[0.0, 1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)
    return matrix_transformer("transpose", swap)
