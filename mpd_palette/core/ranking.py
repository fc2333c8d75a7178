"""Pick the top scoring draws out of all sampled subsets.

Draws are first collapsed by exact score value, keeping the first draw that
produced each value. If fewer distinct values exist than were asked for, all
of them are kept and a FewerPalettesWarning is issued. Otherwise a draw is kept
when the rank of its score (highest = 1, equal scores share their average
rank) is within nreturn, so an exact tie at the cutoff keeps every tied draw.

Kept draws are returned in draw order, not score order.
"""

import warnings

import numpy as np

from mpd_palette.core.errors import FewerPalettesWarning, InvalidParameterError


def first_unique(scores: np.ndarray) -> np.ndarray:
    """Indices of the first draw for each distinct score, ascending."""
    _values, first = np.unique(np.asarray(scores), return_index=True)
    return np.sort(first)


def average_rank(values: np.ndarray) -> np.ndarray:
    """1-based ascending ranks; tied values share the mean of their positions."""
    values = np.asarray(values)
    order = np.argsort(values, kind='stable')
    sorted_vals = values[order]
    ranks = np.empty(len(values))
    start = 0
    while start < len(values):
        end = start
        while end + 1 < len(values) and sorted_vals[end + 1] == sorted_vals[start]:
            end += 1
        ranks[order[start : end + 1]] = (start + end) / 2.0 + 1.0
        start = end + 1
    return ranks


def select_top(scores: np.ndarray, nreturn: int) -> tuple[np.ndarray, bool]:
    """Return (kept draw indices in draw order, truncated flag)."""
    if nreturn < 1:
        raise InvalidParameterError(f'nreturn must be a positive integer, got {nreturn}')
    scores = np.asarray(scores, dtype=float)
    unique = first_unique(scores)

    if nreturn > len(unique):
        warnings.warn(
            f'There were fewer than nreturn ({nreturn}) palettes generated; '
            f'returning all {len(unique)} palettes',
            FewerPalettesWarning,
            stacklevel=2,
        )
        return unique, True

    ranks = average_rank(-scores[unique])
    return unique[ranks <= nreturn], False
