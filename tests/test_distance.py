"""Tests for mpd_palette.core.distance — LAB distance matrix."""

from itertools import combinations

import numpy as np
import pytest
from mpd_palette.core.colourspace import hex_to_lab
from mpd_palette.core.distance import build_distance_matrix, pairwise_distances
from mpd_palette.core.errors import InvalidColourError

RGBW = ['#FF0000', '#00FF00', '#0000FF', '#FFFFFF']


class TestPairwiseDistances:
    def test_simple_points(self):
        d = pairwise_distances(np.array([[0.0, 0.0, 0.0], [3.0, 4.0, 0.0], [0.0, 0.0, 1.0]]))
        assert d[0, 1] == pytest.approx(5.0)
        assert d[0, 2] == pytest.approx(1.0)
        assert d[1, 2] == pytest.approx(np.sqrt(26.0))


class TestBuildDistanceMatrix:
    def test_shape_and_names(self):
        dm = build_distance_matrix(RGBW)
        assert dm.values.shape == (4, 4)
        assert dm.names == tuple(RGBW)
        assert len(dm) == 4

    def test_symmetric_non_negative_zero_diagonal(self):
        dm = build_distance_matrix(RGBW + ['#123456', '#abcdef'])
        assert np.array_equal(dm.values, dm.values.T)
        assert np.all(dm.values >= 0)
        assert np.all(np.diag(dm.values) == 0)

    def test_matches_lab_euclidean(self):
        dm = build_distance_matrix(RGBW)
        for a, b in combinations(RGBW, 2):
            expected = np.linalg.norm(np.subtract(hex_to_lab(a), hex_to_lab(b)))
            assert dm.lookup(a, b) == pytest.approx(expected)

    def test_read_only(self):
        dm = build_distance_matrix(RGBW)
        with pytest.raises(ValueError):
            dm.values[0, 1] = 0.0

    def test_max_pair_is_green_blue(self):
        a, b, dist = build_distance_matrix(RGBW).max_pair()
        assert (a, b) == ('#00FF00', '#0000FF')
        assert dist == pytest.approx(258.7, abs=0.5)

    def test_duplicates_keep_their_own_rows(self):
        dm = build_distance_matrix(['#ff0000', '#ff0000', '#0000ff'])
        assert dm.values[0, 1] == 0.0
        assert dm.values[0, 2] == dm.values[1, 2]

    def test_names_are_stripped(self):
        dm = build_distance_matrix([' #ff0000', '#0000ff '])
        assert dm.names == ('#ff0000', '#0000ff')
        assert dm.lookup('#ff0000', '#0000ff') > 0

    def test_malformed_colour(self):
        with pytest.raises(InvalidColourError):
            build_distance_matrix(['#ff0000', '#zzzzzz'])
