"""
Linear scale mapping a normalized domain value into a numeric range.
"""

from dataclasses import dataclass
from typing import Tuple

from chart_coord.dataclasses import ValidationError, validate_finite


@dataclass(frozen=True)
class LinearScale:
    """
    Monotonic linear mapping between a domain and a range.

    Values outside the domain are extrapolated, never clamped.

    Attributes:
        range: (start, end) of the output interval
        domain: (start, end) of the input interval, [0, 1] by default
    """

    range: Tuple[float, float]
    domain: Tuple[float, float] = (0.0, 1.0)

    def __post_init__(self) -> None:
        for name in ("range", "domain"):
            bounds = getattr(self, name)
            if len(bounds) != 2:
                raise ValidationError(
                    f"{name} must have exactly 2 elements, got {len(bounds)} elements"
                )
            lo = validate_finite(f"{name} start", bounds[0])
            hi = validate_finite(f"{name} end", bounds[1])
            if lo == hi:
                raise ValidationError(f"{name} must not be empty, got [{lo}, {hi}]")
            object.__setattr__(self, name, (lo, hi))

    def map(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        return d0 + (value - r0) / (r1 - r0) * (d1 - d0)
