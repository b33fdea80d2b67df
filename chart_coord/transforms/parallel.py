"""
Parallel coordinates transformer.
"""

from typing import Any, Sequence, Tuple

from chart_coord.dataclasses import ValidationError
from chart_coord.scale import LinearScale
from chart_coord.transforms.types import Transformer, validate_params


def parallel(params: Sequence[Any], x: float, y: float, width: float, height: float) -> Transformer:
    """
    Spread an N-component vector over N evenly spaced vertical axes.

    Unlike the other transformers the output is not a 2-vector: it is the
    flattened list of axis points ``[x_0, y_0, x_1, y_1, ...]``. The
    untransform reads the y components back.

    Parameters:
        params: [x0, x1, y0, y1], defaults to [0, 1, 0, 1]

    Returns:
        Transformer over vectors of any length
    """
    values = validate_params("parallel", params, 0, 4) or [0.0, 1.0, 0.0, 1.0]
    if len(values) != 4:
        raise ValidationError(f"parallel expects 0 or 4 params, got {len(values)}")
    x0, x1, y0, y1 = values
    sy = LinearScale(range=(y0, y1))

    def transform(vector: Sequence[float]) -> Tuple[float, ...]:
        n = len(vector)
        step = (x1 - x0) / (n - 1) if n > 1 else 0.0
        out: list[float] = []
        for i, v in enumerate(vector):
            out.extend((x0 + i * step, sy.map(float(v))))
        return tuple(out)

    def untransform(vector: Sequence[float]) -> Tuple[float, ...]:
        return tuple(sy.invert(float(v)) for v in vector[1::2])

    return Transformer(transform=transform, untransform=untransform, name="parallel")
