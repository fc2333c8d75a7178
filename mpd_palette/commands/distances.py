"""Print CIE LAB coordinates and the pairwise perceptual distance matrix.

Distances are Euclidean in LAB (CIE76 ΔE). The most distant pair is
reported at the end. Thresholds are applied first if given.

Example:
    mpd-palette distances '#ff0000' '#00ff00' '#0000ff' '#ffffff'
"""

from mpd_palette.core.distance import build_distance_matrix
from mpd_palette.core.filtering import filter_candidates
from mpd_palette.core.types import Command, Report

command = Command(
    name='distances',
    help='Print LAB coordinates and the pairwise distance matrix.',
)


@command.run
def run(colours: list[str], report: Report, args) -> None:
    candidates = filter_candidates(
        colours,
        sat_thresh=args.sat_thresh,
        light_thresh=args.light_thresh,
        dark_thresh=args.dark_thresh,
    )
    dm = build_distance_matrix(candidates)
    a, b, dist = dm.max_pair()
    report.add(
        'distances',
        {
            'names': list(dm.names),
            'lab': {name: [round(float(v), 4) for v in row] for name, row in zip(dm.names, dm.lab)},
            'matrix': [[round(float(v), 4) for v in row] for row in dm.values],
            'max_pair': {'a': a, 'b': b, 'distance': round(dist, 4)},
        },
    )
