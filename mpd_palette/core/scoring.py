"""Mean pairwise distance (MPD) of subsets.

MPD is the mean over all unordered pairs of members of their distance:
the sum of pair distances divided by k(k-1)/2. Higher means the members are,
on average, further apart.

Identical membership rows must give bit-identical scores, since duplicate
draws are collapsed later by exact score equality. Scores are therefore summed
over sorted index gathers in a fixed order, never through matrix products.
"""

from collections.abc import Sequence

import numpy as np

from mpd_palette.core.distance import DistanceMatrix

# Upper bound on gathered distance entries held at once (float64, so ~32 MB per copy)
SCORE_BUDGET = 4_000_000


def block_rows(k: int) -> int:
    """Rows scored per block so a (rows, k, k) gather stays within SCORE_BUDGET."""
    return max(1, SCORE_BUDGET // (k * k))


def _values(distances: DistanceMatrix | np.ndarray) -> np.ndarray:
    if isinstance(distances, DistanceMatrix):
        return distances.values
    return np.asarray(distances, dtype=float)


def score_subsets(distances: DistanceMatrix | np.ndarray, memberships: np.ndarray) -> np.ndarray:
    """MPD for every row of a (R, N) boolean membership array.

    All rows must have the same member count k >= 2.
    """
    values = _values(distances)
    mask = np.asarray(memberships, dtype=bool)
    if mask.ndim == 1:
        mask = mask[None, :]
    if mask.shape[1] != values.shape[0]:
        raise ValueError(f'Membership width {mask.shape[1]} does not match {values.shape[0]} candidates')
    counts = mask.sum(axis=1)
    if len(counts) == 0:
        return np.zeros(0)
    k = int(counts[0])
    if k < 2:
        raise ValueError('A subset needs at least two members to have a pairwise distance')
    if np.any(counts != k):
        raise ValueError('Every subset must have the same number of members')

    n_pairs = k * (k - 1) / 2.0
    scores = np.empty(len(mask))
    rows = block_rows(k)
    for start in range(0, len(mask), rows):
        block = mask[start : start + rows]
        # nonzero walks rows in order, columns ascending: sorted member indices per row
        idx = np.nonzero(block)[1].reshape(-1, k)
        sub = values[idx[:, :, None], idx[:, None, :]]
        # Full k x k block counts each pair twice; diagonal is zero.
        # cumsum adds strictly left to right, so the result never depends on the block height.
        totals = sub.reshape(len(block), k * k).cumsum(axis=1)[:, -1]
        scores[start : start + len(block)] = totals / 2.0 / n_pairs
    return scores


def mean_pairwise_distance(distances: DistanceMatrix | np.ndarray, membership: np.ndarray) -> float:
    """MPD of a single subset given as a boolean membership vector."""
    return float(score_subsets(distances, np.asarray(membership, dtype=bool)[None, :])[0])


def palette_mpd(distances: DistanceMatrix, palette: Sequence[str]) -> float:
    """MPD of a subset named by its hex codes."""
    membership = np.zeros(len(distances), dtype=bool)
    for name in palette:
        membership[distances.index(name)] = True
    return mean_pairwise_distance(distances, membership)
