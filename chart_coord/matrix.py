"""
3x3 homogeneous matrices for 2D affine maps.

Matrices act on column vectors ``[x, y, 1]^T``, so ``b @ a`` applies ``a``
first and ``b`` second.
"""

from typing import Any, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from chart_coord.dataclasses import ValidationError

Matrix3 = Tuple[
    Tuple[float, float, float],
    Tuple[float, float, float],
    Tuple[float, float, float],
]

IDENTITY: Matrix3 = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def translation_matrix(tx: float, ty: float) -> NDArray[np.float64]:
    return np.array([[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]], dtype=np.float64)


def scaling_matrix(sx: float, sy: float) -> NDArray[np.float64]:
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)


def rotation_matrix(theta: float) -> NDArray[np.float64]:
    """Counter-clockwise rotation about the origin (math orientation)."""
    c, s = np.cos(theta), np.sin(theta)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)


def shear_matrix(theta_x: float, theta_y: float) -> NDArray[np.float64]:
    """Shear by angles: x += tan(theta_x) * y and y += tan(theta_y) * x."""
    return np.array(
        [[1.0, np.tan(theta_x), 0.0], [np.tan(theta_y), 1.0, 0.0], [0.0, 0.0, 1.0]],
        dtype=np.float64,
    )


def about_point(matrix: NDArray[np.float64], px: float, py: float) -> NDArray[np.float64]:
    """Conjugate matrix so that it acts about (px, py) instead of the origin."""
    return translation_matrix(px, py) @ matrix @ translation_matrix(-px, -py)


def apply_matrix(matrix: NDArray[np.float64], vector: ArrayLike) -> Tuple[float, float]:
    """
    Apply a homogeneous matrix to a 2D vector.

    Parameters:
        matrix: Array of shape (3, 3)
        vector: (x, y) pair

    Returns:
        Transformed (x, y) tuple
    """
    x, y = np.asarray(vector, dtype=np.float64)
    out = matrix @ np.array([x, y, 1.0], dtype=np.float64)
    return float(out[0] / out[2]), float(out[1] / out[2])


def validate_matrix(matrix: Any) -> Matrix3:
    """Validate a 3x3 homogeneous matrix and return it as nested tuples.

    Args:
        matrix: Array-like of shape (3, 3), or a flat sequence of 9 values
            in row-major order

    Raises:
        ValidationError: If the shape is wrong, a value is not finite, or
            the matrix is singular
    """
    try:
        arr = np.asarray(matrix, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"matrix must be numeric: {e}") from e
    if arr.shape == (9,):
        arr = arr.reshape(3, 3)
    if arr.shape != (3, 3):
        raise ValidationError(f"matrix must have shape (3, 3), got {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValidationError("matrix must contain only finite values")
    if abs(np.linalg.det(arr)) < 1e-12:
        raise ValidationError("matrix must be invertible")
    return tuple(tuple(float(v) for v in row) for row in arr)  # type: ignore[return-value]
