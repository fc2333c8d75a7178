"""Pick the most perceptually distinct palette(s) from the given colours.

Filters the colours by the optional thresholds, samples --nreps random
palettes of --ncolours colours (default: half the input, rounded up), scores
each by mean pairwise CIE LAB distance (MPD) and keeps the --nreturn best
distinct palettes.

Palettes are listed in the order they were first sampled, not by score.
If fewer distinct palettes turn up than were requested, all of them are
listed and a warning is printed.

Use --seed (or MPD_PALETTE_SEED) for reproducible output.
Use --swatch PATH to also save the palettes as a PNG.

Example:
    mpd-palette select '#e41a1c' '#377eb8' '#4daf4a' '#984ea3' '#ff7f00' -k 3 -r 2
    mpd-palette select -f colours.txt -s 0.3 -l 0.8 --seed 1 --swatch out/best.png
"""

from mpd_palette.core.selection import select_palettes
from mpd_palette.core.swatch import save_swatch
from mpd_palette.core.types import Command, Report

command = Command(
    name='select',
    help='Pick the palette(s) with the highest mean perceptual distance.',
)


@command.run
def run(colours: list[str], report: Report, args) -> None:
    selection = select_palettes(
        colours,
        sat_thresh=args.sat_thresh,
        light_thresh=args.light_thresh,
        dark_thresh=args.dark_thresh,
        nreps=args.nreps,
        ncolours=args.ncolours,
        nreturn=args.nreturn,
        seed=args.seed,
        workers=args.workers,
    )
    data: dict = {
        'candidates': selection.candidates,
        'ncolours': selection.ncolours,
        'nreps': selection.nreps,
        'nreturn': selection.nreturn,
        'distinct': selection.distinct,
        'palettes': [
            {'colours': pal, 'mpd': round(score, 4), 'draw': draw}
            for pal, score, draw in zip(selection.palettes, selection.scores, selection.draw_indices)
        ],
    }
    if getattr(args, 'swatch', None):
        data['swatch'] = str(save_swatch(selection.palettes, args.swatch))
    report.add('select', data)
