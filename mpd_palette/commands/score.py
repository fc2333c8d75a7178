"""Score the given colours as one palette: mean pairwise perceptual distance.

Reports the MPD together with the closest and furthest pair distances, so a
hand-picked palette can be compared with what `select` finds.

Example:
    mpd-palette score '#1b9e77' '#d95f02' '#7570b3'
"""

import numpy as np

from mpd_palette.core.distance import build_distance_matrix
from mpd_palette.core.errors import InsufficientCandidatesError
from mpd_palette.core.scoring import mean_pairwise_distance
from mpd_palette.core.types import Command, Report

command = Command(
    name='score',
    help='Mean pairwise perceptual distance of the given colours as one palette.',
)


@command.run
def run(colours: list[str], report: Report, args) -> None:
    if len(colours) < 2:
        raise InsufficientCandidatesError('Scoring needs at least two colours')
    dm = build_distance_matrix(colours)
    upper = dm.values[np.triu_indices(len(dm), k=1)]
    report.add(
        'score',
        {
            'colours': list(dm.names),
            'mpd': round(mean_pairwise_distance(dm, np.ones(len(dm), dtype=bool)), 4),
            'min_distance': round(float(upper.min()), 4),
            'max_distance': round(float(upper.max()), 4),
        },
    )
