"""Public package API for the crease geometry toolkit.

This facade provides a flat import surface on top of the internal
implementation package ``crease.core`` while deferring optional,
dependency-rich modules (plotting) until first use so ``import crease``
only needs numpy.

Example
-------
    from crease import sep_normal, classify, segment_intersect_segment

The deeper modules (``crease.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("crease-geom")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_const = _imp('crease.core.constants')
_config = _imp('crease.core.config')
_errors = _imp('crease.core.errors')
_log = _imp('crease.core.logging_utils')
_vec = _imp('crease.core.vectors')
_poly = _imp('crease.core.polygon')
_inter = _imp('crease.core.intersection')
_cls = _imp('crease.core.classify')
_sep = _imp('crease.core.separation')


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)

        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m

        def __getattr__(self, item):
            if item == '_m':
                raise AttributeError(item)
            return getattr(self._load(), item)

        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# Lazily loaded optional modules (matplotlib)
visualization = _lazy_module('crease.core.visualization')

# Tolerances and configuration
EPS = _const.EPS
Tolerance = _config.Tolerance
DEFAULT_TOLERANCE = _config.DEFAULT_TOLERANCE
configure_logging = _log.configure_logging

# Errors and degeneracy reasons
Degeneracy = _errors.Degeneracy
CreaseError = _errors.CreaseError
DimensionMismatchError = _errors.DimensionMismatchError
UnsupportedDimensionError = _errors.UnsupportedDimensionError

# Vector algebra
add = _vec.add
scale = _vec.scale
subtract = _vec.subtract
dot = _vec.dot
magnitude_squared = _vec.magnitude_squared
magnitude = _vec.magnitude
unit = _vec.unit
cross = _vec.cross
angle_between = _vec.angle_between
parallel = _vec.parallel
rotate = _vec.rotate
angle2d = _vec.angle2d
linear_interpolate = _vec.linear_interpolate
distance = _vec.distance
distance_squared = _vec.distance_squared
direction = _vec.direction
project = _vec.project
centroid = _vec.centroid

# Polygon orientation
signed_area_2x = _poly.signed_area_2x
signed_area = _poly.signed_area
orientation = _poly.orientation
sort_by_angle = _poly.sort_by_angle
sorted_by_angle = _poly.sorted_by_angle
interior_angle = _poly.interior_angle
turn_angle = _poly.turn_angle
triangle_normal = _poly.triangle_normal

# Intersections
LineParameters = _inter.LineParameters
parametric_line_intersect = _inter.parametric_line_intersect
segment_intersect_segment = _inter.segment_intersect_segment
line_intersect_line = _inter.line_intersect_line
segments_cross = _inter.segments_cross
segments_cross_many = _inter.segments_cross_many

# Classification and separation
Classification = _cls.Classification
classify = _cls.classify
SeparationResult = _sep.SeparationResult
above = _sep.above
sep_normal = _sep.sep_normal
triangles_intersect = _sep.triangles_intersect
find_overlapping_pairs = _sep.find_overlapping_pairs

# Namespace submodules for exploratory users
constants = _const
config = _config
vectors = _vec
polygon = _poly
intersection = _inter

__all__ = [
    '__version__',
    # tolerances / config
    'EPS', 'Tolerance', 'DEFAULT_TOLERANCE', 'configure_logging',
    # errors
    'Degeneracy', 'CreaseError', 'DimensionMismatchError', 'UnsupportedDimensionError',
    # vectors
    'add', 'scale', 'subtract', 'dot', 'magnitude_squared', 'magnitude', 'unit',
    'cross', 'angle_between', 'parallel', 'rotate', 'angle2d', 'linear_interpolate',
    'distance', 'distance_squared', 'direction', 'project', 'centroid',
    # polygons
    'signed_area_2x', 'signed_area', 'orientation', 'sort_by_angle', 'sorted_by_angle',
    'interior_angle', 'turn_angle', 'triangle_normal',
    # intersections
    'LineParameters', 'parametric_line_intersect', 'segment_intersect_segment',
    'line_intersect_line', 'segments_cross', 'segments_cross_many',
    # classification / separation
    'Classification', 'classify', 'SeparationResult', 'above', 'sep_normal',
    'triangles_intersect', 'find_overlapping_pairs',
    # submodules / namespaces
    'constants', 'config', 'vectors', 'polygon', 'intersection', 'visualization',
]
