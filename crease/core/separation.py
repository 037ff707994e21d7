"""Separating-axis test between two triangles.

The search adapts to the intrinsic dimension of the six vertices:

* point or line configurations are reported separated without a search;
* coplanar triangles try the in-plane normals of all six edges;
* triangles in general position try, for each edge ``p -> p'`` of one
  triangle, the normals of the planes through that edge and every vertex
  (which include the triangle's own face normal), followed by the edge x
  edge directions of the two triangles.

The first candidate along which one triangle lies strictly beyond the
other wins. Candidate order is fixed, so results are deterministic.
"""
from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .classify import classify
from .config import Tolerance, ToleranceLike
from .constants import EPS, TRIANGLE_SIZE
from .errors import UnsupportedDimensionError
from .logging_utils import get_logger
from .vectors import VectorLike, as_vector, check_same_dim, cross, lift3, parallel, unit

__all__ = [
    'SeparationResult', 'above', 'sep_normal', 'triangles_intersect',
    'find_overlapping_pairs',
]

logger = get_logger('crease.separation')

Triangle = Sequence[VectorLike]


class SeparationResult(NamedTuple):
    """Outcome of :func:`sep_normal`.

    Attributes
    ----------
    dimension : int
        Intrinsic dimension of the six vertices (0..3).
    separated : bool
        True when ``axis`` strictly separates the triangles. Always True
        for dimensions 0 and 1, where ``axis`` is only the classifier's
        representative and carries no separating meaning.
    axis : ndarray or None
        The separating unit axis, oriented so that the second triangle
        lies beyond the first; when not separated, the plane normal for
        coplanar input and None otherwise.
    """
    dimension: int
    separated: bool
    axis: Optional[np.ndarray]


def _triangle(tri: Triangle) -> List[np.ndarray]:
    pts = [as_vector(p) for p in tri]
    if len(pts) != TRIANGLE_SIZE:
        raise ValueError(f'a triangle needs exactly {TRIANGLE_SIZE} vertices, got {len(pts)}')
    check_same_dim(*pts)
    return pts


def _edges(tri: Sequence[np.ndarray]) -> Iterator[Tuple[np.ndarray, np.ndarray]]:
    for i in range(TRIANGLE_SIZE):
        yield tri[i], tri[(i + 1) % TRIANGLE_SIZE]


def above(ps: Sequence[VectorLike], qs: Sequence[VectorLike], axis: VectorLike, eps: float = EPS) -> bool:
    """True when every point of ``qs`` projects more than ``eps`` beyond all of ``ps`` along ``axis``."""
    axis = as_vector(axis)
    p_proj = np.asarray(ps, dtype=np.float64) @ axis
    q_proj = np.asarray(qs, dtype=np.float64) @ axis
    return float(q_proj.min() - p_proj.max()) > eps


def _coplanar_axes(t1, t2, normal: np.ndarray, tol: Tolerance) -> Iterator[np.ndarray]:
    for tri in (t1, t2):
        for p, p_next in _edges(tri):
            e = unit(p_next - p, tol.distance)
            if e is None:
                continue
            m = unit(cross(e, normal), tol.distance)
            if m is not None:
                yield m


def _spanned_normal(e1: Optional[np.ndarray], e2: Optional[np.ndarray], tol: Tolerance) -> Optional[np.ndarray]:
    # e1, e2 are unit directions; their cross is dimensionless, so it is gated on the angle tolerance
    if e1 is None or e2 is None or parallel(e1, e2, tol.angle):
        return None
    return unit(cross(e1, e2), tol.angle)


def _spatial_axes(t1, t2, tol: Tolerance) -> Iterator[np.ndarray]:
    for x1, x2 in ((t1, t2), (t2, t1)):
        for p, p_next in _edges(x1):
            e1 = unit(p_next - p, tol.distance)
            if e1 is None:
                continue
            for q in list(x1) + list(x2):
                m = _spanned_normal(e1, unit(q - p, tol.distance), tol)
                if m is not None:
                    yield m
    for p, p_next in _edges(t1):
        e1 = unit(p_next - p, tol.distance)
        for q, q_next in _edges(t2):
            m = _spanned_normal(e1, unit(q_next - q, tol.distance), tol)
            if m is not None:
                yield m


def _first_separating(t1, t2, candidates, eps: float) -> Optional[np.ndarray]:
    for m in candidates:
        if above(t1, t2, m, eps):
            return m
        if above(t2, t1, m, eps):
            return -m
    return None


def sep_normal(t1: Triangle, t2: Triangle, tol: ToleranceLike = None) -> SeparationResult:
    """Search for an axis separating triangles ``t1`` and ``t2``.

    Both triangles must have the same dimension, at most 3. Lower
    dimensional input is lifted into 3D with zero coordinates; separating
    axes (and the dimension 0/1 representative) are returned in the input
    dimension, while a coplanar plane normal stays 3D.
    """
    tol = Tolerance.coerce(tol)
    a = _triangle(t1)
    b = _triangle(t2)
    dim = check_same_dim(a[0], b[0])
    if dim > 3:
        raise UnsupportedDimensionError(f'separating-axis test supports up to 3D, got {dim}D')
    a = [lift3(p) for p in a]
    b = [lift3(p) for p in b]

    d, rep = classify(a + b, tol)
    if d in (0, 1):
        logger.debug('sep_normal: degenerate configuration (dimension %d)', d)
        return SeparationResult(d, True, rep[:dim])

    if d == 2:
        candidates = _coplanar_axes(a, b, rep, tol)
    else:
        candidates = _spatial_axes(a, b, tol)
    axis = _first_separating(a, b, candidates, tol.separation)
    if axis is None:
        logger.debug('sep_normal: no separating axis (dimension %d)', d)
        return SeparationResult(d, False, rep)
    logger.debug('sep_normal: separated along %s (dimension %d)', axis, d)
    return SeparationResult(d, True, axis[:dim])


def triangles_intersect(t1: Triangle, t2: Triangle, tol: ToleranceLike = None) -> bool:
    """True when the triangles touch or overlap (no separating axis exists)."""
    return not sep_normal(t1, t2, tol).separated


def find_overlapping_pairs(triangles: Sequence[Triangle], tol: ToleranceLike = None) -> List[Tuple[int, int]]:
    """Index pairs ``(i, j)``, ``i < j``, of triangles that touch or overlap.

    Pairs whose axis-aligned bounding boxes are apart by more than the
    separation tolerance along some coordinate are geometrically separated
    and skipped without running :func:`sep_normal`. Only pairs within that
    bounding-box band are decided by :func:`sep_normal`, so the result is
    approximate to within the tolerance: a pair whose boxes are just over
    ``tol.separation`` apart is dropped even when none of the finite
    candidate axes of :func:`sep_normal` shows a gap that wide.
    """
    tol = Tolerance.coerce(tol)
    tris = np.asarray(triangles, dtype=np.float64)
    if tris.size == 0:
        return []
    if tris.ndim != 3 or tris.shape[1] != TRIANGLE_SIZE:
        raise ValueError(f'expected an array of shape (N, 3, dim), got {tris.shape}')
    lo = tris.min(axis=1)
    hi = tris.max(axis=1)
    gap = tol.separation
    apart = np.any(
        (hi[:, None, :] + gap < lo[None, :, :]) | (hi[None, :, :] + gap < lo[:, None, :]),
        axis=2,
    )
    candidates = np.argwhere(np.triu(~apart, k=1))
    logger.debug('find_overlapping_pairs: %d of %d pairs survive the bbox filter',
                 len(candidates), len(tris) * (len(tris) - 1) // 2)
    out = []
    for i, j in candidates:
        if not sep_normal(tris[i], tris[j], tol).separated:
            out.append((int(i), int(j)))
    return out
