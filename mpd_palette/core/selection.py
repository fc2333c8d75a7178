"""Select colours from a palette to maximise the perceptual distance between them.

Pipeline: threshold filter -> LAB distance matrix -> nreps random subsets of
ncolours -> MPD per subset -> top nreturn distinct palettes.

This is a randomised search: more repetitions make finding the best subset more
likely but never guarantee it.
"""

import math
from collections.abc import Sequence

import numpy as np

from mpd_palette.core.distance import build_distance_matrix
from mpd_palette.core.errors import InvalidParameterError, InvalidSubsetSizeError
from mpd_palette.core.filtering import filter_candidates
from mpd_palette.core.ranking import select_top
from mpd_palette.core.sampling import RandomSource, sample_subsets
from mpd_palette.core.scoring import score_subsets
from mpd_palette.core.types import Selection

DEFAULT_NREPS = 10000


def default_ncolours(palette: Sequence[str]) -> int:
    """Half the palette, rounded up."""
    return math.ceil(len(palette) / 2)


def select_palettes(
    pal: Sequence[str],
    sat_thresh: float | None = None,
    light_thresh: float | None = None,
    dark_thresh: float | None = None,
    nreps: int = DEFAULT_NREPS,
    ncolours: int | None = None,
    nreturn: int = 1,
    seed: RandomSource = None,
    workers: int = 1,
) -> Selection:
    """Run the full selection and return every kept palette with its score.

    Args:
        pal: hex colour codes, e.g. ['#FF0000', '#00FF00'].
        sat_thresh: minimum HLS saturation of kept colours (0..1).
        light_thresh: maximum HLS lightness of kept colours (0..1).
        dark_thresh: minimum HLS lightness of kept colours (0..1).
        nreps: number of random palettes to sample.
        ncolours: colours per palette; defaults to half of `pal`, rounded up.
        nreturn: number of palettes to return.
        seed: int, SeedSequence or numpy Generator; None uses OS entropy.
        workers: threads used for sampling.
    """
    pal = list(pal)
    if ncolours is None:
        ncolours = default_ncolours(pal)
    if ncolours > len(pal):
        raise InvalidSubsetSizeError(
            'Number of colours to select must be less than the total number of colours in the palette'
        )
    if ncolours < 2:
        raise InvalidSubsetSizeError('You must select at least two colours')
    if nreps < 1:
        raise InvalidParameterError(f'nreps must be a positive integer, got {nreps}')
    if nreturn < 1:
        raise InvalidParameterError(f'nreturn must be a positive integer, got {nreturn}')

    candidates = filter_candidates(pal, sat_thresh=sat_thresh, light_thresh=light_thresh, dark_thresh=dark_thresh)
    if ncolours > len(candidates):
        raise InvalidSubsetSizeError(
            f'Number of colours to select ({ncolours}) exceeds the {len(candidates)} colours left after thresholding'
        )

    distances = build_distance_matrix(candidates)
    memberships = sample_subsets(len(candidates), ncolours, nreps, rng=seed, workers=workers)
    scores = score_subsets(distances, memberships)
    kept, truncated = select_top(scores, nreturn)

    names = np.asarray(candidates, dtype=object)
    return Selection(
        candidates=candidates,
        ncolours=ncolours,
        nreps=nreps,
        nreturn=nreturn,
        palettes=[list(names[memberships[i]]) for i in kept],
        scores=[float(scores[i]) for i in kept],
        draw_indices=[int(i) for i in kept],
        distinct=int(len(np.unique(scores))),
        truncated=truncated,
    )


def mpd_select_colours(
    pal: Sequence[str],
    sat_thresh: float | None = None,
    light_thresh: float | None = None,
    dark_thresh: float | None = None,
    nreps: int = DEFAULT_NREPS,
    ncolours: int | None = None,
    nreturn: int = 1,
    seed: RandomSource = None,
    workers: int = 1,
) -> list[str] | list[list[str]]:
    """Select colours from `pal` maximising mean perceptual distance.

    Returns one palette (a list of hex codes) when nreturn is 1, otherwise a
    list of palettes in the order they were first sampled. See select_palettes
    for the arguments.
    """
    selection = select_palettes(
        pal,
        sat_thresh=sat_thresh,
        light_thresh=light_thresh,
        dark_thresh=dark_thresh,
        nreps=nreps,
        ncolours=ncolours,
        nreturn=nreturn,
        seed=seed,
        workers=workers,
    )
    if nreturn == 1 and not selection.truncated:
        return selection.palettes[0]
    return selection.palettes
