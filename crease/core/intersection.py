"""2D line and segment intersection.

Lines and segments are given as a pair of 2D points ``(p, q)``. The
parametric solve uses an exact zero-determinant test rather than a
tolerance: parallel lines only report no intersection when the 2x2 system
is exactly singular.
"""
from __future__ import annotations

from typing import NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .errors import Degeneracy
from .vectors import VectorLike, as_vector, check_same_dim, cross2, linear_interpolate

__all__ = [
    'LineParameters', 'orient', 'parametric_line_intersect',
    'segment_intersect_segment', 'line_intersect_line',
    'intervals_overlap', 'segments_cross', 'segments_cross_many',
]

Segment = Sequence[VectorLike]


class LineParameters(NamedTuple):
    """Parameters ``(s, t)`` of the crossing point along two lines.

    Both are None when the lines are parallel or collinear, or when one of
    them has zero length; ``reason`` then says which.
    """
    s: Optional[float]
    t: Optional[float]
    reason: Optional[Degeneracy] = None


def _endpoints(seg: Segment) -> Tuple[np.ndarray, np.ndarray]:
    if len(seg) != 2:
        raise ValueError(f'a segment needs exactly 2 endpoints, got {len(seg)}')
    p = as_vector(seg[0]); q = as_vector(seg[1])
    check_same_dim(p, q)
    return p, q


def orient(a: VectorLike, b: VectorLike, c: VectorLike) -> float:
    """2D orientation (signed area * 2) for points a,b,c.

    Positive when (a,b,c) is counter-clockwise, negative when clockwise,
    zero when collinear.
    """
    a = as_vector(a); b = as_vector(b); c = as_vector(c)
    return float((b[0]-a[0])*(c[1]-a[1]) - (b[1]-a[1])*(c[0]-a[0]))


def parametric_line_intersect(line1: Segment, line2: Segment) -> LineParameters:
    """Solve ``p1 + s*(q1-p1) == p2 + t*(q2-p2)`` for ``(s, t)``."""
    p1, q1 = _endpoints(line1)
    p2, q2 = _endpoints(line2)
    check_same_dim(p1, p2)
    u = q1 - p1
    v = q2 - p2
    denom = cross2(u, v)
    if denom == 0.0:
        # a zero-length input spans no line at all
        if not u.any() or not v.any():
            return LineParameters(None, None, Degeneracy.ZERO_MAGNITUDE)
        return LineParameters(None, None, Degeneracy.PARALLEL)
    w = p2 - p1
    s = cross2(w, v) / denom
    t = cross2(w, u) / denom
    return LineParameters(s, t)


def segment_intersect_segment(s1: Segment, s2: Segment) -> Optional[np.ndarray]:
    """Crossing point of two bounded segments, or None if they miss each other."""
    s, t, _ = parametric_line_intersect(s1, s2)
    if s is None or t is None:
        return None
    if not (0.0 <= s <= 1.0 and 0.0 <= t <= 1.0):
        return None
    return linear_interpolate(s, s1[0], s1[1])


def line_intersect_line(l1: Segment, l2: Segment) -> Optional[np.ndarray]:
    """Crossing point of two unbounded lines, or None if they are parallel."""
    s, _, _ = parametric_line_intersect(l1, l2)
    if s is None:
        return None
    return linear_interpolate(s, l1[0], l1[1])


def intervals_overlap(i1: Sequence[float], i2: Sequence[float]) -> bool:
    """Closed-interval overlap; endpoints of each pair may come in any order."""
    lo1, hi1 = sorted(i1)
    lo2, hi2 = sorted(i2)
    return not (hi1 < lo2 or hi2 < lo1)


def segments_cross(seg1: Segment, seg2: Segment) -> bool:
    """True if two non-collinear segments properly cross.

    Disjoint x or y extents reject early; otherwise each segment's
    endpoints must sit strictly on opposite sides of the other's line.
    Exactly collinear segments are reported as not crossing.
    """
    a, b = _endpoints(seg1)
    c, d = _endpoints(seg2)
    if not intervals_overlap((a[0], b[0]), (c[0], d[0])):
        return False
    if not intervals_overlap((a[1], b[1]), (c[1], d[1])):
        return False
    o1 = orient(a, b, c); o2 = orient(a, b, d)
    o3 = orient(c, d, a); o4 = orient(c, d, b)
    return (o1*o2 < 0) and (o3*o4 < 0)


def segments_cross_many(a_pts, b_pts, c_pts, d_pts) -> np.ndarray:
    """Vectorized :func:`segments_cross` for equal-length arrays of segments.

    a_pts, b_pts, c_pts, d_pts are arrays of shape (M,2); element i tests
    segment a[i]-b[i] against c[i]-d[i]. Returns a boolean array (M,).
    """
    a = np.asarray(a_pts, dtype=np.float64)
    b = np.asarray(b_pts, dtype=np.float64)
    c = np.asarray(c_pts, dtype=np.float64)
    d = np.asarray(d_pts, dtype=np.float64)
    if a.size == 0:
        return np.zeros((0,), dtype=bool)
    if not (a.shape == b.shape == c.shape == d.shape):
        raise ValueError('segment endpoint arrays must share one shape')
    overlap = ~(
        (np.maximum(a[:,0], b[:,0]) < np.minimum(c[:,0], d[:,0]))
        | (np.maximum(c[:,0], d[:,0]) < np.minimum(a[:,0], b[:,0]))
        | (np.maximum(a[:,1], b[:,1]) < np.minimum(c[:,1], d[:,1]))
        | (np.maximum(c[:,1], d[:,1]) < np.minimum(a[:,1], b[:,1]))
    )
    o1 = (b[:,0]-a[:,0])*(c[:,1]-a[:,1]) - (b[:,1]-a[:,1])*(c[:,0]-a[:,0])
    o2 = (b[:,0]-a[:,0])*(d[:,1]-a[:,1]) - (b[:,1]-a[:,1])*(d[:,0]-a[:,0])
    o3 = (d[:,0]-c[:,0])*(a[:,1]-c[:,1]) - (d[:,1]-c[:,1])*(a[:,0]-c[:,0])
    o4 = (d[:,0]-c[:,0])*(b[:,1]-c[:,1]) - (d[:,1]-c[:,1])*(b[:,0]-c[:,0])
    return overlap & (o1*o2 < 0) & (o3*o4 < 0)
