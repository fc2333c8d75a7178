"""Apply saturation/lightness thresholds and list the surviving colours.

--sat-thresh drops colours below that HLS saturation, --light-thresh drops
colours above that HLS lightness, --dark-thresh drops colours below that HLS
lightness. Useful for tuning thresholds before running `select`.

Example:
    mpd-palette filter -f colours.txt -s 0.4 -d 0.2
"""

from mpd_palette.core.colourspace import make_colour
from mpd_palette.core.filtering import palette_reduce
from mpd_palette.core.types import Command, Report

command = Command(
    name='filter',
    help='Apply saturation/lightness thresholds and list surviving colours.',
)


@command.run
def run(colours: list[str], report: Report, args) -> None:
    kept = palette_reduce(
        colours,
        sat_thresh=args.sat_thresh,
        light_thresh=args.light_thresh,
        dark_thresh=args.dark_thresh,
    )
    remaining = list(kept)
    dropped = []
    for hex_str in colours:
        if remaining and remaining[0] == hex_str.strip():
            remaining.pop(0)
        else:
            dropped.append(hex_str)

    details = []
    for hex_str in kept:
        c = make_colour(hex_str)
        details.append({'hex': c.hex, 'saturation': round(c.saturation, 4), 'lightness': round(c.lightness, 4)})
    report.add('filter', {'kept': details, 'dropped': dropped})
    if len(kept) < 2:
        report.warn(f'only {len(kept)} colour(s) survive thresholding; select needs at least 2')
