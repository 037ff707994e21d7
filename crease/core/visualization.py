"""Plotting helpers for inspecting separating-axis results.

Kept out of the eager imports of ``crease`` so the core library does not
require matplotlib. Nothing here writes files; callers decide whether to
show or save the returned figure.
"""
from __future__ import annotations

import os as _os

import matplotlib as _mpl
# Non-interactive backend in headless environments, before pyplot is imported
if not _os.environ.get('MPLBACKEND') and not _os.environ.get('DISPLAY'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt

from .logging_utils import get_logger
from .separation import SeparationResult, sep_normal

__all__ = ['plot_separation']

logger = get_logger('crease.viz')


def _closed(tri: np.ndarray) -> np.ndarray:
    return np.vstack([tri, tri[:1]])


def plot_separation(t1, t2, result: SeparationResult = None, ax=None, tol=None):
    """Draw two triangles and, if they are separated, the separating axis.

    Args:
        t1, t2: triangles as (3, 2) or (3, 3) array-likes
        result: precomputed result of sep_normal(t1, t2); computed if omitted
        ax: matplotlib Axes to draw on (3D axes for 3D input); a new figure
            is created when omitted
        tol: tolerance forwarded to sep_normal when result is None

    Returns:
        The Axes that was drawn on.
    """
    a = np.asarray(t1, dtype=np.float64)
    b = np.asarray(t2, dtype=np.float64)
    dim = a.shape[1]
    if dim not in (2, 3):
        raise ValueError(f'can only plot 2D or 3D triangles, got {dim}D')
    if result is None:
        result = sep_normal(a, b, tol)
    if ax is None:
        fig = plt.figure(figsize=(6, 6))
        ax = fig.add_subplot(111, projection='3d' if dim == 3 else None)

    for tri, color, label in ((a, 'tab:blue', 't1'), (b, 'tab:orange', 't2')):
        loop = _closed(tri)
        ax.plot(*[loop[:, k] for k in range(dim)], color=color, lw=1.5, label=label)

    if result.separated and result.dimension >= 2 and result.axis is not None:
        axis = np.asarray(result.axis, dtype=np.float64)[:dim]
        origin = np.vstack([a, b]).mean(axis=0)
        span = float(np.ptp(np.vstack([a, b]), axis=0).max()) or 1.0
        tip = origin + axis * 0.5 * span
        ax.plot(*[[origin[k], tip[k]] for k in range(dim)], color='tab:green', lw=2.0, label='axis')
    else:
        logger.debug('plot_separation: no separating axis to draw (dimension %d)', result.dimension)

    title = 'separated' if result.separated else 'intersecting'
    ax.set_title(f'{title} (dimension {result.dimension})')
    if dim == 2:
        ax.set_aspect('equal')
    ax.legend(loc='best')
    return ax
