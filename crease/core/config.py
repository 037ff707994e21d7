"""Tolerance configuration threaded through classification and separation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .constants import EPS


@dataclass(frozen=True)
class Tolerance:
    """Separately tunable tolerances.

    Attributes
    ----------
    distance : float
        Squared-length threshold below which a vector or a point offset is
        treated as zero.
    angle : float
        Threshold on ``1 - |cos(theta)|`` below which two directions count
        as parallel.
    separation : float
        Minimum projection gap required along an axis for two shapes to be
        reported as separated.
    """
    distance: float = EPS
    angle: float = EPS
    separation: float = EPS

    def __post_init__(self):
        for name in ('distance', 'angle', 'separation'):
            value = getattr(self, name)
            if not value >= 0.0:
                raise ValueError(f'Tolerance.{name} must be non-negative, got {value!r}')

    @classmethod
    def uniform(cls, eps: float) -> 'Tolerance':
        return cls(distance=eps, angle=eps, separation=eps)

    @classmethod
    def coerce(cls, value: Optional[Union[float, 'Tolerance']]) -> 'Tolerance':
        """Accept None (defaults), a bare float (used for all three) or a Tolerance."""
        if value is None:
            return DEFAULT_TOLERANCE
        if isinstance(value, Tolerance):
            return value
        if isinstance(value, bool):
            raise TypeError('tolerance must be a float or Tolerance, not bool')
        return cls.uniform(float(value))


DEFAULT_TOLERANCE = Tolerance()

ToleranceLike = Union[float, Tolerance, None]

__all__ = ['Tolerance', 'DEFAULT_TOLERANCE', 'ToleranceLike']
