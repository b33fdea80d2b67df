"""
Ordered composition of transformers and the registry of transform kinds.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, Sequence, Tuple

from chart_coord.dataclasses import ValidationError
from chart_coord.transforms.affine import (
    matrix,
    reflect,
    reflect_x,
    reflect_y,
    rotate,
    scale,
    shear_x,
    shear_y,
    translate,
    transpose,
)
from chart_coord.transforms.cartesian import cartesian, custom
from chart_coord.transforms.fisheye import fisheye, fisheye_circular, fisheye_x, fisheye_y
from chart_coord.transforms.helix import helix
from chart_coord.transforms.parallel import parallel
from chart_coord.transforms.polar import polar, polar_rho, polar_theta
from chart_coord.transforms.types import Transformer, TransformerFactory

logger = logging.getLogger(__name__)

TRANSFORMS: Dict[str, TransformerFactory] = {
    "translate": translate,
    "scale": scale,
    "rotate": rotate,
    "reflect": reflect,
    "reflect_x": reflect_x,
    "reflect_y": reflect_y,
    "shear_x": shear_x,
    "shear_y": shear_y,
    "matrix": matrix,
    "transpose": transpose,
    "cartesian": cartesian,
    "custom": custom,
    "polar": polar,
    "polar_theta": polar_theta,
    "polar_rho": polar_rho,
    "helix": helix,
    "parallel": parallel,
    "fisheye": fisheye,
    "fisheye_x": fisheye_x,
    "fisheye_y": fisheye_y,
    "fisheye_circular": fisheye_circular,
}

TransformSpec = Tuple[str, Sequence[Any]]


def create_transformer(
    name: str,
    params: Sequence[Any],
    x: float,
    y: float,
    width: float,
    height: float,
) -> Transformer:
    """
    Build a registered transformer by name.

    Raises:
        ValidationError: If name is not registered or the factory rejects params
    """
    try:
        factory = TRANSFORMS[name]
    except KeyError:
        raise ValidationError(
            f"unknown transform {name!r}, expected one of {sorted(TRANSFORMS)}"
        ) from None
    return factory(params, x, y, width, height)


class TransformPipeline:
    """
    Immutable ordered sequence of transformers.

    transform() applies every transformer in order, untransform() applies
    every untransform in reverse order.

    Example:
        >>> import math
        >>> pipeline = TransformPipeline.from_specs(
        ...     [("polar", [0, math.pi, 0, 1]), ("cartesian", [])],
        ...     0, 0, 200, 100,
        ... )
        >>> x, y = pipeline.transform((0.25, 1.0))
    """

    def __init__(self, transformers: Iterable[Transformer] = ()) -> None:
        self._transformers: Tuple[Transformer, ...] = tuple(transformers)
        for transformer in self._transformers:
            if not isinstance(transformer, Transformer):
                raise ValidationError(
                    f"pipeline items must be Transformer instances, "
                    f"got {type(transformer).__name__}"
                )
        logger.debug("pipeline: %s", " -> ".join(self.names) or "<identity>")

    @classmethod
    def from_specs(
        cls,
        specs: Iterable[TransformSpec],
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> TransformPipeline:
        """Build a pipeline from (name, params) pairs sharing one bounding box."""
        return cls(
            create_transformer(name, params, x, y, width, height)
            for name, params in specs
        )

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(t.name for t in self._transformers)

    def __len__(self) -> int:
        return len(self._transformers)

    def __iter__(self) -> Iterator[Transformer]:
        return iter(self._transformers)

    def __repr__(self) -> str:
        return f"TransformPipeline({list(self.names)})"

    def then(self, *transformers: Transformer) -> TransformPipeline:
        """Return a new pipeline with transformers appended."""
        return TransformPipeline(self._transformers + transformers)

    def transform(self, vector: Sequence[float]) -> Tuple[float, ...]:
        out = tuple(float(v) for v in vector)
        for transformer in self._transformers:
            out = tuple(transformer.transform(out))
        return out

    def untransform(self, vector: Sequence[float]) -> Tuple[float, ...]:
        out = tuple(float(v) for v in vector)
        for transformer in reversed(self._transformers):
            out = tuple(transformer.untransform(out))
        return out
