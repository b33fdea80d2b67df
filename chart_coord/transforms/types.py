"""
Transformer protocol shared by every transform kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Protocol, Sequence, Tuple

from chart_coord.dataclasses import ValidationError, validate_finite

Vector2 = Tuple[float, float]

VectorFn = Callable[[Sequence[float]], Tuple[float, ...]]


@dataclass(frozen=True)
class Transformer:
    """
    Pair of pure functions mapping vectors forward and back.

    Both functions are total: they never raise for numeric input and only
    produce nan/inf at genuine singularities.

    Attributes:
        transform: Forward mapping
        untransform: Inverse mapping
        name: Transform kind, used in logs and reprs
    """

    transform: VectorFn
    untransform: VectorFn
    name: str = "custom"


class TransformerFactory(Protocol):
    """Builds a Transformer from params and the coordinate bounding box."""

    def __call__(
        self,
        params: Sequence[Any],
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> Transformer: ...


def validate_params(
    name: str,
    params: Sequence[Any] | None,
    min_count: int,
    max_count: int,
) -> list[float]:
    """Validate the numeric params of a factory and return them as floats.

    Args:
        name: Transform name used in error messages
        params: Parameter sequence, None is treated as empty
        min_count: Minimum number of params
        max_count: Maximum number of params

    Raises:
        ValidationError: If the count is out of bounds or a value is not finite
    """
    params = list(params or [])
    if not min_count <= len(params) <= max_count:
        expected = str(min_count) if min_count == max_count else f"{min_count} to {max_count}"
        raise ValidationError(f"{name} expects {expected} params, got {len(params)}")
    return [validate_finite(f"{name} params[{i}]", p) for i, p in enumerate(params)]


def validate_box(
    name: str,
    x: Real,
    y: Real,
    width: Real,
    height: Real,
    require_size: bool = False,
) -> Tuple[float, float, float, float]:
    """Validate a bounding box, optionally requiring a positive size."""
    box = (
        validate_finite(f"{name} x", x),
        validate_finite(f"{name} y", y),
        validate_finite(f"{name} width", width),
        validate_finite(f"{name} height", height),
    )
    if require_size and (box[2] <= 0 or box[3] <= 0):
        raise ValidationError(
            f"{name} needs a positive width and height, got width={width} height={height}"
        )
    return box


def as_vector2(vector: Sequence[float]) -> Vector2:
    """Unpack the first two components of a vector as floats."""
    v1, v2 = vector[0], vector[1]
    return float(v1), float(v2)

