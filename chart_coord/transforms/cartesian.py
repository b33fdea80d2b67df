"""
Cartesian and user-supplied transformers.
"""

from typing import Any, Sequence

from chart_coord.dataclasses import ValidationError
from chart_coord.scale import LinearScale
from chart_coord.transforms.types import (
    Transformer,
    Vector2,
    as_vector2,
    validate_box,
    validate_params,
)


def cartesian(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """
    Stretch the unit square onto the bounding box.

    Parameters:
        params: Unused, must be empty
        x: x of the bounding box of the coordinate
        y: y of the bounding box of the coordinate
        width: Width of the bounding box of the coordinate
        height: Height of the bounding box of the coordinate

    Returns:
        Transformer from [0, 1]^2 to [x, x + width] x [y, y + height]
    """
    validate_params("cartesian", params, 0, 0)
    x, y, width, height = validate_box("cartesian", x, y, width, height, require_size=True)
    sx = LinearScale(range=(x, x + width))
    sy = LinearScale(range=(y, y + height))

    def transform(vector: Sequence[float]) -> Vector2:
        v1, v2 = as_vector2(vector)
        return sx.map(v1), sy.map(v2)

    def untransform(vector: Sequence[float]) -> Vector2:
        v1, v2 = as_vector2(vector)
        return sx.invert(v1), sy.invert(v2)

    return Transformer(transform=transform, untransform=untransform, name="cartesian")


def custom(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """
    Delegate to a user callback.

    Parameters:
        params: [callback] where callback(x, y, width, height) returns a
            Transformer or a (transform, untransform) pair

    Raises:
        ValidationError: If the callback is missing or returns something else
    """
    params = list(params or [])
    if len(params) != 1 or not callable(params[0]):
        raise ValidationError("custom expects a single callable param")
    result = params[0](x, y, width, height)
    if isinstance(result, Transformer):
        return result
    if (
        isinstance(result, (tuple, list))
        and len(result) == 2
        and all(callable(fn) for fn in result)
    ):
        return Transformer(transform=result[0], untransform=result[1], name="custom")
    raise ValidationError(
        f"custom callback must return a Transformer or a (transform, untransform) pair, "
        f"got {type(result).__name__}"
    )
