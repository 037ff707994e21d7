"""2D polygon orientation, signed area and angular ordering."""
from __future__ import annotations

import math
from typing import Callable, List, Optional, Sequence

import numpy as np

from .constants import EPS
from .vectors import VectorLike, angle2d, as_vector, cross, lift3, subtract, unit

__all__ = [
    'signed_area_2x', 'signed_area', 'orientation',
    'sort_by_angle', 'sorted_by_angle',
    'interior_angle', 'turn_angle', 'triangle_normal',
]

_TWO_PI = 2.0 * math.pi


def _wrap(theta: float) -> float:
    r = theta % _TWO_PI
    # float modulo of a tiny negative can land exactly on 2*pi
    return 0.0 if r >= _TWO_PI else r


def signed_area_2x(points: Sequence[VectorLike]) -> float:
    """Twice the signed area of a closed 2D polygon (shoelace sum).

    Positive for counter-clockwise vertex order, negative for clockwise.
    """
    pts = np.asarray(points, dtype=np.float64)
    if pts.shape[0] == 0:
        return 0.0
    x = pts[:, 0]; y = pts[:, 1]
    xn = np.roll(x, -1); yn = np.roll(y, -1)
    return float(np.sum(x * yn - xn * y))


def signed_area(points: Sequence[VectorLike]) -> float:
    return 0.5 * signed_area_2x(points)


def orientation(points: Sequence[VectorLike]) -> int:
    """+1 for counter-clockwise, -1 for clockwise, 0 for degenerate polygons."""
    a = signed_area_2x(points)
    if a > 0:
        return 1
    if a < 0:
        return -1
    return 0


def _angle_key(origin: np.ndarray, mapping: Callable, eps: float):
    def key(p):
        ang = angle2d(subtract(mapping(p), origin), eps)
        # Points on the origin have no angle; they sort ahead of everything
        return (0, 0.0) if ang is None else (1, ang)
    return key


def sort_by_angle(points: List, origin: VectorLike,
                  mapping: Optional[Callable] = None, eps: float = EPS) -> None:
    """Sort ``points`` in place by the polar angle of ``mapping(p) - mapping(origin)``.

    ``mapping`` projects an element to a 2D position and defaults to the
    identity, so the list may hold arbitrary objects as long as a mapping is
    supplied. Angles are compared as values in ``(-pi, pi]``, which is a total
    order, so ordering stays consistent across the -pi/pi seam. The sort is
    stable and, like ``list.sort``, returns None. The caller must not share
    the list with other writers during the call.
    """
    if mapping is None:
        mapping = as_vector
    o = as_vector(mapping(origin))
    points.sort(key=_angle_key(o, mapping, eps))


def sorted_by_angle(points, origin: VectorLike,
                    mapping: Optional[Callable] = None, eps: float = EPS) -> list:
    """Copying variant of :func:`sort_by_angle`."""
    out = list(points)
    sort_by_angle(out, origin, mapping, eps)
    return out


def interior_angle(a: VectorLike, b: VectorLike, c: VectorLike, eps: float = EPS) -> Optional[float]:
    """Counter-clockwise angle at ``b`` from ray b->c to ray b->a, in ``[0, 2*pi)``.

    For a counter-clockwise polygon ``... a, b, c ...`` this is the interior
    angle at ``b``; reflex vertices give values above ``pi``.
    """
    t_out = angle2d(subtract(c, b), eps)
    t_in = angle2d(subtract(a, b), eps)
    if t_out is None or t_in is None:
        return None
    return _wrap(t_in - t_out)


def turn_angle(a: VectorLike, b: VectorLike, c: VectorLike, eps: float = EPS) -> Optional[float]:
    """Counter-clockwise turn from direction a->b to direction b->c, in ``[0, 2*pi)``."""
    t_in = angle2d(subtract(b, a), eps)
    t_out = angle2d(subtract(c, b), eps)
    if t_out is None or t_in is None:
        return None
    return _wrap(t_out - t_in)


def triangle_normal(a: VectorLike, b: VectorLike, c: VectorLike, eps: float = EPS) -> Optional[np.ndarray]:
    """Unit normal of triangle ``abc`` (right-hand winding), None for zero area.

    2D triangles are lifted to the z=0 plane, so their normal is +/- z.
    """
    a = lift3(a); b = lift3(b); c = lift3(c)
    return unit(cross(subtract(b, a), subtract(c, b)), eps)
