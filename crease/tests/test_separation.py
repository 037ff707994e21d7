"""Tests for the dimension-adaptive separating-axis test."""
import numpy as np
import pytest

from crease.core.config import Tolerance
from crease.core.errors import DimensionMismatchError, UnsupportedDimensionError
from crease.core.separation import (
    above,
    find_overlapping_pairs,
    sep_normal,
    triangles_intersect,
)
from crease.core.vectors import parallel

T_FLOOR = [[0, 0, 0], [1, 0, 0], [0, 1, 0]]
T_RAISED = [[0, 0, 5], [1, 0, 5], [0, 1, 5]]


def _assert_separates(t1, t2, axis):
    """axis is a unit vector along which t2 lies strictly beyond t1."""
    assert abs(np.linalg.norm(axis) - 1.0) < 1e-9
    assert above(t1, t2, axis)


class TestAbove:

    def test_strictly_beyond(self):
        assert above([[0, 0], [1, 0]], [[0, 2], [1, 3]], [0, 1])
        assert not above([[0, 2], [1, 3]], [[0, 0], [1, 0]], [0, 1])

    def test_touching_is_not_above(self):
        assert not above([[0, 0], [1, 1]], [[1, 1], [2, 2]], [1, 0])

    def test_gap_must_exceed_eps(self):
        assert not above([[0, 0]], [[0, 0.5]], [0, 1], eps=1.0)


class TestSpatial:

    def test_stacked_triangles_are_separated_along_z(self):
        res = sep_normal(T_FLOOR, T_RAISED)
        assert res.dimension == 3
        assert res.separated
        assert parallel(res.axis, [0, 0, 1])
        _assert_separates(T_FLOOR, T_RAISED, res.axis)

    def test_axis_points_from_first_to_second(self):
        res = sep_normal(T_RAISED, T_FLOOR)
        assert res.separated
        assert np.allclose(res.axis, [0, 0, -1])

    def test_piercing_triangles_intersect(self):
        t1 = [[0, 0, 0], [4, 0, 0], [0, 4, 0]]
        t2 = [[1, 1, -1], [1, 1, 1], [2, 1, 0]]
        res = sep_normal(t1, t2)
        assert res.dimension == 3
        assert not res.separated
        assert res.axis is None
        assert triangles_intersect(t1, t2)

    def test_edge_edge_axis_separates_skew_triangles(self):
        # Neither face plane separates these; only the direction across the
        # two skew edges (x-axis edge vs y-axis edge) does.
        h = 0.1
        t1 = [[-1, 0, 0], [1, 0, 0], [0, 1, -1]]
        t2 = [[0, -1, h], [0, 1, h], [1, 0, h + 1]]
        res = sep_normal(t1, t2)
        assert res.dimension == 3
        assert res.separated
        assert np.allclose(res.axis, [0, 0, 1])
        _assert_separates(t1, t2, res.axis)

    def test_separation_tolerance_is_threaded(self):
        t2 = [[0, 0, 0.01], [1, 0, 0.01], [0, 1, 0.01]]
        assert sep_normal(T_FLOOR, t2).separated
        res = sep_normal(T_FLOOR, t2, Tolerance(separation=0.1))
        assert res.dimension == 3
        assert not res.separated

    def test_bare_float_tolerance(self):
        assert sep_normal(T_FLOOR, T_RAISED, 1e-3).separated


class TestCoplanar:

    def test_identical_triangles_overlap(self):
        res = sep_normal(T_FLOOR, T_FLOOR)
        assert res.dimension == 2
        assert not res.separated
        assert parallel(res.axis, [0, 0, 1])

    def test_disjoint_coplanar_triangles(self):
        t2 = [[3, 0, 0], [4, 0, 0], [3, 1, 0]]
        res = sep_normal(T_FLOOR, t2)
        assert res.dimension == 2
        assert res.separated
        assert abs(res.axis[2]) < 1e-12
        _assert_separates(T_FLOOR, t2, res.axis)

    def test_triangles_sharing_an_edge_touch(self):
        t2 = [[1, 0, 0], [0, 1, 0], [1, 1, 0]]
        res = sep_normal(T_FLOOR, t2)
        assert res.dimension == 2
        assert not res.separated

    def test_2d_triangles_return_2d_axis(self):
        t1 = [[0, 0], [1, 0], [0, 1]]
        t2 = [[3, 0], [4, 0], [3, 1]]
        res = sep_normal(t1, t2)
        assert res.separated
        assert res.axis.shape == (2,)
        _assert_separates(t1, t2, res.axis)

    def test_2d_overlap_reports_plane_normal(self):
        t1 = [[0, 0], [2, 0], [0, 2]]
        t2 = [[0.5, 0.5], [3, 0.5], [0.5, 3]]
        res = sep_normal(t1, t2)
        assert not res.separated
        assert np.allclose(np.abs(res.axis), [0, 0, 1])


class TestDegenerate:

    def test_all_points_coincide(self):
        p = [2, 2, 2]
        res = sep_normal([p, p, p], [p, p, p])
        assert res.dimension == 0
        assert res.separated
        assert np.allclose(res.axis, p)

    def test_collinear_configuration(self):
        t1 = [[0, 0, 0], [1, 0, 0], [2, 0, 0]]
        t2 = [[1, 0, 0], [3, 0, 0], [5, 0, 0]]
        res = sep_normal(t1, t2)
        assert res.dimension == 1
        assert res.separated
        assert np.allclose(res.axis, [1, 0, 0])

    def test_malformed_triangle(self):
        with pytest.raises(ValueError):
            sep_normal([[0, 0, 0], [1, 0, 0]], T_FLOOR)

    def test_mixed_dimensions(self):
        with pytest.raises(DimensionMismatchError):
            sep_normal([[0, 0], [1, 0], [0, 1]], T_FLOOR)

    def test_four_dimensions_unsupported(self):
        t = [[0, 0, 0, 0], [1, 0, 0, 0], [0, 1, 0, 0]]
        with pytest.raises(UnsupportedDimensionError):
            sep_normal(t, t)


class TestOverlappingPairs:

    def test_finds_only_overlapping_pair(self):
        tris = [T_FLOOR, T_RAISED, T_FLOOR]
        assert find_overlapping_pairs(tris) == [(0, 2)]

    def test_empty_collection(self):
        assert find_overlapping_pairs([]) == []

    def test_bad_shape(self):
        with pytest.raises(ValueError):
            find_overlapping_pairs([[[0, 0], [1, 0]]])

    def test_bbox_band_follows_separation_tolerance(self):
        # closest features are two vertices a hair over the default tolerance apart in x
        g = 1.05e-6
        t1 = [[0, 0], [-1, 2], [-2, -1]]
        t2 = [[g, 0], [g + 1, 2], [g + 2, -1]]
        assert find_overlapping_pairs([t1, t2]) == []
        # once the band covers the gap, sep_normal decides and finds no wider axis
        assert find_overlapping_pairs([t1, t2], Tolerance(separation=1e-5)) == [(0, 1)]
