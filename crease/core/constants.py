"""Central numerical tolerances.

Every tolerance literal used by the package lives here so comparisons can
be tuned consistently instead of scattering magic numbers.
"""
from __future__ import annotations

# Single default tolerance for magnitude, parallelism and separation tests
EPS: float = 1e-6

# Number of vertices of a triangle; edges are (i, (i+1) % TRIANGLE_SIZE)
TRIANGLE_SIZE: int = 3

__all__ = [
    'EPS',
    'TRIANGLE_SIZE',
]
