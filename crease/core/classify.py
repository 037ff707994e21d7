"""Intrinsic dimension of a small point set.

The classifier is a greedy consistency check anchored on the first point
and the first qualifying direction, not a least-squares fit. It is exact
for exact inputs and tolerance-bounded for noisy ones; reordering the
input can change which representative direction or normal is reported
(but not the dimension of well-separated configurations).
"""
from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence

import numpy as np

from .config import Tolerance, ToleranceLike
from .errors import Degeneracy, UnsupportedDimensionError
from .logging_utils import get_logger
from .vectors import VectorLike, as_vector, check_same_dim, cross, lift3, parallel, unit

__all__ = ['Classification', 'classify', 'directions_from']

logger = get_logger('crease.classify')


class Classification(NamedTuple):
    """Intrinsic dimension of a point set and a characteristic vector.

    ``representative`` is the anchor point for dimension 0, the line
    direction for dimension 1, the unit plane normal (always 3D) for
    dimension 2 and None for dimension 3.
    """
    dimension: int
    representative: Optional[np.ndarray]

    @property
    def reason(self) -> Optional[Degeneracy]:
        if self.dimension == 0:
            return Degeneracy.COINCIDENT
        if self.dimension == 1:
            return Degeneracy.COLLINEAR
        return None


def directions_from(p0: np.ndarray, points: Sequence[np.ndarray], eps: float) -> List[np.ndarray]:
    """Unit directions from ``p0`` to every point farther than ``sqrt(eps)``."""
    dirs = []
    for p in points:
        d = p - p0
        if float(np.dot(d, d)) > eps:
            dirs.append(unit(d, eps))
    return dirs


def classify(points: Sequence[VectorLike], tol: ToleranceLike = None) -> Classification:
    """Classify a point set as a point (0), a line (1), a plane (2) or 3-space (3).

    Points may be 1D, 2D or 3D; lower dimensions are padded with zeros
    before the plane normal is computed.
    """
    tol = Tolerance.coerce(tol)
    pts = [as_vector(p) for p in points]
    if not pts:
        raise ValueError('cannot classify an empty point set')
    if check_same_dim(*pts) > 3:
        raise UnsupportedDimensionError(f'classification supports up to 3D points, got {pts[0].shape[0]}D')

    p0 = pts[0]
    dirs = directions_from(p0, pts[1:], tol.distance)
    if not dirs:
        logger.debug('classify: %d points coincide', len(pts))
        return Classification(0, p0)

    d0 = dirs[0]
    off_line = [d for d in dirs if not parallel(d, d0, tol.angle)]
    if not off_line:
        logger.debug('classify: %d points collinear along %s', len(pts), d0)
        return Classification(1, d0)

    # Lifting happens after the collinear check so 1D/2D inputs keep their shape there
    d0_3 = lift3(d0)
    # |d x d0|^2 = sin^2 >= 1 - |cos| for unit directions, so nothing off_line drops here
    normals = [unit(cross(lift3(d), d0_3), tol.angle) for d in off_line]
    normals = [n for n in normals if n is not None]
    if not normals:
        return Classification(1, d0)
    n0 = normals[0]
    if all(parallel(n, n0, tol.angle) for n in normals):
        logger.debug('classify: %d points coplanar, normal %s', len(pts), n0)
        return Classification(2, n0)
    logger.debug('classify: %d points in general position', len(pts))
    return Classification(3, None)
