"""Exceptions and degeneracy reasons shared across crease modules.

Ordinary geometric degeneracy is never raised: it is reported by returning
None, or by a ``reason`` field on structured results. Exceptions are kept
for caller contract violations only.
"""
from __future__ import annotations

from enum import Enum


class Degeneracy(str, Enum):
    """Why a geometric operation had no well-defined answer."""
    ZERO_MAGNITUDE = 'zero_magnitude'
    PARALLEL = 'parallel'
    COLLINEAR = 'collinear'
    COINCIDENT = 'coincident'


class CreaseError(Exception):
    """Base class for errors raised by crease."""


class DimensionMismatchError(CreaseError, ValueError):
    """Vectors passed to one operation have different lengths."""


class UnsupportedDimensionError(CreaseError, ValueError):
    """An operation was called with vectors of a dimension it does not handle."""


__all__ = ['Degeneracy', 'CreaseError', 'DimensionMismatchError', 'UnsupportedDimensionError']
