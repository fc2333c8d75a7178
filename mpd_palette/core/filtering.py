"""Threshold filtering of candidate colours.

sat_thresh is a minimum HLS saturation, light_thresh a maximum HLS lightness,
dark_thresh a minimum HLS lightness. None means no constraint. Every colour is
parsed even when no threshold is given, so malformed hex codes fail here.
"""

from collections.abc import Sequence

from mpd_palette.core.colourspace import make_colour
from mpd_palette.core.errors import EmptyResultError, InsufficientCandidatesError, InvalidThresholdError


def _check_threshold(name: str, value: float | None) -> None:
    if value is None:
        return
    if not 0.0 <= value <= 1.0:
        raise InvalidThresholdError(f'{name} must be between 0 and 1, got {value}')


def palette_reduce(
    palette: Sequence[str],
    sat_thresh: float | None = None,
    light_thresh: float | None = None,
    dark_thresh: float | None = None,
) -> list[str]:
    """Return the colours of `palette` that pass every supplied threshold, in order.

    Codes come back stripped of surrounding whitespace.
    """
    _check_threshold('sat_thresh', sat_thresh)
    _check_threshold('light_thresh', light_thresh)
    _check_threshold('dark_thresh', dark_thresh)

    kept = []
    for hex_str in palette:
        colour = make_colour(hex_str)
        if sat_thresh is not None and colour.saturation < sat_thresh:
            continue
        if light_thresh is not None and colour.lightness > light_thresh:
            continue
        if dark_thresh is not None and colour.lightness < dark_thresh:
            continue
        kept.append(colour.hex)
    return kept


def filter_candidates(
    palette: Sequence[str],
    sat_thresh: float | None = None,
    light_thresh: float | None = None,
    dark_thresh: float | None = None,
) -> list[str]:
    """palette_reduce, then insist on at least two survivors."""
    kept = palette_reduce(palette, sat_thresh=sat_thresh, light_thresh=light_thresh, dark_thresh=dark_thresh)
    if len(kept) == 0:
        raise EmptyResultError('No colours after thresholding')
    if len(kept) < 2:
        raise InsufficientCandidatesError('Too few colours after thresholding')
    return kept
