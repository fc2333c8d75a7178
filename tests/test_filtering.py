"""Tests for mpd_palette.core.filtering — saturation/lightness thresholds."""

import pytest
from mpd_palette.core.errors import (
    EmptyResultError,
    InsufficientCandidatesError,
    InvalidColourError,
    InvalidThresholdError,
)
from mpd_palette.core.filtering import filter_candidates, palette_reduce

# red (S=1, L=.5), grey (S=0, L=.502), white (S=0, L=1), black (S=0, L=0), pink (S=1, L=.751)
PALETTE = ['#ff0000', '#808080', '#ffffff', '#000000', '#ff8080']


class TestPaletteReduce:
    def test_no_thresholds_keeps_everything(self):
        assert palette_reduce(PALETTE) == PALETTE

    def test_saturation(self):
        assert palette_reduce(PALETTE, sat_thresh=0.5) == ['#ff0000', '#ff8080']

    def test_light_thresh_is_a_maximum(self):
        assert palette_reduce(PALETTE, light_thresh=0.6) == ['#ff0000', '#808080', '#000000']

    def test_dark_thresh_is_a_minimum(self):
        assert palette_reduce(PALETTE, dark_thresh=0.1) == ['#ff0000', '#808080', '#ffffff', '#ff8080']

    def test_all_thresholds_combined(self):
        assert palette_reduce(PALETTE, sat_thresh=0.5, light_thresh=0.6, dark_thresh=0.1) == ['#ff0000']

    def test_bounds_are_inclusive(self):
        assert palette_reduce(['#ff0000'], sat_thresh=1.0, light_thresh=0.5, dark_thresh=0.5) == ['#ff0000']

    def test_zero_threshold_is_a_constraint_not_absent(self):
        assert palette_reduce(PALETTE, light_thresh=0.0) == ['#000000']

    def test_preserves_order_and_duplicates(self):
        pal = ['#ff8080', '#ff0000', '#ff8080', '#808080']
        assert palette_reduce(pal, sat_thresh=0.5) == ['#ff8080', '#ff0000', '#ff8080']

    def test_tightening_never_grows_the_set(self):
        sizes = [len(palette_reduce(PALETTE, sat_thresh=t)) for t in (0.0, 0.25, 0.5, 0.75, 1.0)]
        assert sizes == sorted(sizes, reverse=True)
        sizes = [len(palette_reduce(PALETTE, light_thresh=t)) for t in (1.0, 0.8, 0.6, 0.4, 0.0)]
        assert sizes == sorted(sizes, reverse=True)
        sizes = [len(palette_reduce(PALETTE, dark_thresh=t)) for t in (0.0, 0.3, 0.51, 0.8, 1.0)]
        assert sizes == sorted(sizes, reverse=True)

    @pytest.mark.parametrize('kwargs', [{'sat_thresh': -0.1}, {'light_thresh': 1.5}, {'dark_thresh': 2}])
    def test_out_of_range_threshold(self, kwargs):
        with pytest.raises(InvalidThresholdError):
            palette_reduce(PALETTE, **kwargs)

    def test_malformed_colour_fails_even_without_thresholds(self):
        with pytest.raises(InvalidColourError):
            palette_reduce(['#ff0000', 'not-a-colour'])


    def test_returns_stripped_codes(self):
        assert palette_reduce([' #ff0000', '#00ff00\t', '#808080 '], sat_thresh=0.5) == ['#ff0000', '#00ff00']


class TestFilterCandidates:
    def test_passes_through(self):
        assert filter_candidates(PALETTE, sat_thresh=0.5) == ['#ff0000', '#ff8080']

    def test_nothing_left(self):
        with pytest.raises(EmptyResultError):
            filter_candidates(['#000000', '#808080', '#ffffff'], sat_thresh=0.5)

    def test_one_left(self):
        with pytest.raises(InsufficientCandidatesError):
            filter_candidates(['#ff0000', '#808080', '#ffffff'], sat_thresh=0.5)
