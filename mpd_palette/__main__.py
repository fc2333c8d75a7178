"""mpd-palette — Pick maximally distinct colours from a palette.

Usage: mpd-palette <command> [colours ...] [options]

Commands are auto-discovered from mpd_palette/commands/.
Each command module's docstring is its documentation.
Run `mpd-palette help <command>` for full module docs.

Colours are hex codes (#RGB or #RRGGBB) given on the command line and/or
read from --file (one per line, '#'-prefixed hex codes allowed, blank lines
and lines starting with '//' ignored).

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, mpd-palette looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import os
import sys
import warnings

from mpd_palette import registry
from mpd_palette.core.env import env_int, load_env
from mpd_palette.core.errors import FewerPalettesWarning, PaletteError
from mpd_palette.core.report import format_json, format_text
from mpd_palette.core.selection import DEFAULT_NREPS
from mpd_palette.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'mpd_palette.commands.{name}')


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  mpd-palette select '#e41a1c' '#377eb8' '#4daf4a' '#984ea3' -k 2\n"
        '  mpd-palette select -f colours.txt -s 0.3 -r 3 --seed 7 --json\n'
        '  mpd-palette select -f colours.txt --swatch out/palette.png\n'
        '  mpd-palette filter -f colours.txt -l 0.85 -d 0.15\n'
        "  mpd-palette distances '#ff0000' '#00ff00' '#0000ff'\n"
        "  mpd-palette score '#1b9e77' '#d95f02' '#7570b3'\n"
        '  mpd-palette help select\n'
        '\n'
        'Config env vars (set in .env or environment):\n'
        '  MPD_PALETTE_NREPS    default --nreps\n'
        '  MPD_PALETTE_SEED     default --seed\n'
        '  MPD_PALETTE_WORKERS  default --workers\n'
    )
    parser = argparse.ArgumentParser(
        prog='mpd-palette',
        description='Pick maximally distinct colours from a palette (mean perceptual distance in CIE LAB).',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        mod = _load_command_module(name)
        short_help = (mod.__doc__ or '').strip().splitlines()[0] if (mod.__doc__ or '').strip() else cmd.help

        p = sub.add_parser(name, help=short_help)
        p.add_argument('colours', nargs='*', help='Hex colour codes, e.g. #ff0000')
        p.add_argument('-f', '--file', help='Read colours from a file, one per line')
        p.add_argument('-s', '--sat-thresh', type=float, default=None, metavar='S', help='Minimum saturation (0-1)')
        p.add_argument('-l', '--light-thresh', type=float, default=None, metavar='L', help='Maximum lightness (0-1)')
        p.add_argument('-d', '--dark-thresh', type=float, default=None, metavar='L', help='Minimum lightness (0-1)')
        p.add_argument(
            '-n',
            '--nreps',
            type=int,
            default=None,
            metavar='N',
            help=f'Random palettes to sample (default: $MPD_PALETTE_NREPS or {DEFAULT_NREPS})',
        )
        p.add_argument(
            '-k',
            '--ncolours',
            type=int,
            default=None,
            metavar='K',
            help='Colours per palette (default: half, rounded up)',
        )
        p.add_argument('-r', '--nreturn', type=int, default=1, metavar='M', help='Palettes to return (default: 1)')
        p.add_argument('--seed', type=int, default=None, help='Random seed (default: $MPD_PALETTE_SEED or OS entropy)')
        p.add_argument(
            '-w', '--workers', type=int, default=None, help='Sampling threads (default: $MPD_PALETTE_WORKERS or 1)'
        )
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('--swatch', metavar='PATH', default=None, help='Save result palettes as a PNG swatch')

    # `help` subcommand: prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            mod = _load_command_module(name)
            short = (mod.__doc__ or '').strip().splitlines()[0] if (mod.__doc__ or '').strip() else cmd.help
            print(f'  {name:<10} {short}')
        print('\nRun: mpd-palette help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    mod = _load_command_module(topic)
    doc = (mod.__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def read_colour_file(path: str) -> list[str]:
    """Read hex colours from a text file, one per line."""
    colours = []
    with open(path, encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('//'):
                continue
            # Allow trailing comments: "#ff0000  // red"
            colours.append(line.split('//', 1)[0].strip())
    return colours


def _apply_env_defaults(args: argparse.Namespace) -> None:
    """Fill options left unset on the command line from MPD_PALETTE_* variables."""
    if args.nreps is None:
        args.nreps = env_int('NREPS', DEFAULT_NREPS)
    if args.seed is None:
        args.seed = env_int('SEED')
    if args.workers is None:
        args.workers = env_int('WORKERS', 1)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'mpd-palette: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    colours = list(args.colours)
    if args.file:
        if not os.path.isfile(args.file):
            print(f'Error: colour file not found: {args.file}', file=sys.stderr)
            sys.exit(1)
        colours = read_colour_file(args.file) + colours
    if not colours:
        print('Error: no colours given (pass hex codes or --file)', file=sys.stderr)
        sys.exit(1)

    report = Report(colours=colours, source=args.file)
    cmd = registry.get(args.command)
    try:
        _apply_env_defaults(args)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always', FewerPalettesWarning)
            cmd.execute(colours, report, args)
    except PaletteError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)

    for w in caught:
        if issubclass(w.category, FewerPalettesWarning):
            report.warn(str(w.message))
        else:
            warnings.warn_explicit(w.message, w.category, w.filename, w.lineno)
    for message in report.warnings:
        print(f'mpd-palette: warning: {message}', file=sys.stderr)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
