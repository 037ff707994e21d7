"""Vector algebra on equal-length numeric vectors.

Inputs may be any array-like of reals; every operation returns a new
float64 ``numpy.ndarray`` (or a Python float for scalar results) and never
mutates its arguments. Degenerate cases (a vector too short to normalize)
return None instead of raising, and operations composed on top of ``unit``
propagate that None.
"""
from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence, Union

import numpy as np

from .constants import EPS
from .errors import DimensionMismatchError, UnsupportedDimensionError

__all__ = [
    'as_vector', 'check_same_dim',
    'add', 'scale', 'subtract', 'dot', 'magnitude_squared', 'magnitude',
    'unit', 'cross', 'cross2', 'angle_between', 'parallel', 'rotate',
    'angle2d', 'linear_interpolate', 'distance', 'distance_squared',
    'direction', 'project', 'centroid', 'lift3',
]

VectorLike = Union[Sequence[float], np.ndarray]


def as_vector(a: VectorLike) -> np.ndarray:
    """Return ``a`` as a 1-D float64 array (always a copy)."""
    v = np.array(a, dtype=np.float64)
    if v.ndim != 1:
        raise ValueError(f'expected a 1-D vector, got shape {v.shape}')
    return v


def check_same_dim(*vectors: np.ndarray) -> int:
    """Raise DimensionMismatchError unless all vectors share one length."""
    dims = {v.shape[0] for v in vectors}
    if len(dims) > 1:
        raise DimensionMismatchError(f'vectors have mixed dimensions {sorted(dims)}')
    return dims.pop() if dims else 0


def _pair(a: VectorLike, b: VectorLike):
    a = as_vector(a); b = as_vector(b)
    check_same_dim(a, b)
    return a, b


def add(a: VectorLike, b: VectorLike) -> np.ndarray:
    a, b = _pair(a, b)
    return a + b


def scale(a: VectorLike, s: float) -> np.ndarray:
    return as_vector(a) * float(s)


def subtract(a: VectorLike, b: VectorLike) -> np.ndarray:
    a, b = _pair(a, b)
    return a - b


def dot(a: VectorLike, b: VectorLike) -> float:
    a, b = _pair(a, b)
    return float(np.dot(a, b))


def magnitude_squared(a: VectorLike) -> float:
    return dot(a, a)


def magnitude(a: VectorLike) -> float:
    return math.sqrt(magnitude_squared(a))


def unit(a: VectorLike, eps: float = EPS) -> Optional[np.ndarray]:
    """Return ``a`` scaled to length 1, or None when ``|a|^2 < eps``."""
    v = as_vector(a)
    m2 = float(np.dot(v, v))
    if m2 < eps:
        return None
    return v / math.sqrt(m2)


def cross(a: VectorLike, b: VectorLike) -> np.ndarray:
    """3D cross product; component i uses indices (i+1) % 3 and (i+2) % 3."""
    a, b = _pair(a, b)
    if a.shape[0] != 3:
        raise UnsupportedDimensionError(f'cross product needs 3D vectors, got {a.shape[0]}D')
    n = 3
    return np.array([
        a[(i + 1) % n] * b[(i + 2) % n] - a[(i + 2) % n] * b[(i + 1) % n]
        for i in range(n)
    ])


def cross2(a: VectorLike, b: VectorLike) -> float:
    """Scalar 2D cross product ``a.x*b.y - a.y*b.x``."""
    a, b = _pair(a, b)
    return float(a[0] * b[1] - a[1] * b[0])


def angle_between(a: VectorLike, b: VectorLike, eps: float = EPS) -> Optional[float]:
    """Unsigned angle between ``a`` and ``b`` in radians, in ``[0, pi]``."""
    ua = unit(a, eps); ub = unit(b, eps)
    if ua is None or ub is None:
        return None
    return math.acos(float(np.clip(dot(ua, ub), -1.0, 1.0)))


def parallel(a: VectorLike, b: VectorLike, eps: float = EPS) -> Optional[bool]:
    """True when ``a`` and ``b`` point along the same line (either sense)."""
    ua = unit(a, eps); ub = unit(b, eps)
    if ua is None or ub is None:
        return None
    return 1.0 - abs(dot(ua, ub)) < eps


def rotate(a: VectorLike, u: VectorLike, t: float, eps: float = EPS) -> Optional[np.ndarray]:
    """Rotate 3D vector ``a`` by angle ``t`` (radians) about axis ``u``.

    Uses Rodrigues' formula with the right-hand rule; ``u`` need not be
    normalized but must not be degenerate.
    """
    a = as_vector(a)
    k = unit(u, eps)
    if k is None:
        return None
    c, s = math.cos(t), math.sin(t)
    return a * c + cross(k, a) * s + k * (dot(k, a) * (1.0 - c))


def angle2d(v: VectorLike, eps: float = EPS) -> Optional[float]:
    """Polar angle ``atan2(y, x)`` of a 2D vector, in ``(-pi, pi]``."""
    v = as_vector(v)
    if float(np.dot(v, v)) < eps:
        return None
    ang = math.atan2(v[1], v[0])
    # atan2 gives -pi for y == -0.0 on the negative x-axis
    return ang if ang > -math.pi else math.pi


def linear_interpolate(t: float, a: VectorLike, b: VectorLike) -> np.ndarray:
    a, b = _pair(a, b)
    return (1.0 - t) * a + t * b


def distance_squared(a: VectorLike, b: VectorLike) -> float:
    d = subtract(b, a)
    return float(np.dot(d, d))


def distance(a: VectorLike, b: VectorLike) -> float:
    return math.sqrt(distance_squared(a, b))


def direction(a: VectorLike, b: VectorLike, eps: float = EPS) -> Optional[np.ndarray]:
    """Unit vector pointing from ``a`` to ``b``; None when they coincide."""
    return unit(subtract(b, a), eps)


def project(a: VectorLike, onto: VectorLike, eps: float = EPS) -> Optional[np.ndarray]:
    """Vector projection of ``a`` onto the line spanned by ``onto``."""
    u = unit(onto, eps)
    if u is None:
        return None
    return u * dot(a, u)


def centroid(points: Iterable[VectorLike]) -> np.ndarray:
    pts = [as_vector(p) for p in points]
    if not pts:
        raise ValueError('empty set')
    check_same_dim(*pts)
    return np.mean(pts, axis=0)


def lift3(a: VectorLike) -> np.ndarray:
    """Pad a 1D/2D vector with zeros to 3D; 3D vectors are returned as copies."""
    v = as_vector(a)
    n = v.shape[0]
    if n > 3:
        raise UnsupportedDimensionError(f'cannot lift a {n}D vector to 3D')
    if n == 3:
        return v
    return np.concatenate([v, np.zeros(3 - n)])
