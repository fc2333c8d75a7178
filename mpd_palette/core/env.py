"""Configuration for the mpd-palette CLI.

Option defaults come from MPD_PALETTE_* variables:
  MPD_PALETTE_NREPS    number of random palettes to sample (default 10000)
  MPD_PALETTE_SEED     integer seed for reproducible runs (default: OS entropy)
  MPD_PALETTE_WORKERS  sampling threads (default 1)

Explicit command-line options beat variables. Variables already present in
the process environment beat a .env file. The .env file is either the one
named by --env-file or the nearest one found by climbing from the working
directory; the climb ends at the first directory holding .git, so a .env
outside the current repository is never read.
"""

import os
from pathlib import Path

from mpd_palette.core.errors import InvalidParameterError

ENV_PREFIX = 'MPD_PALETTE_'


def _find_dotenv(start: Path) -> Path | None:
    """Nearest .env at or above `start`, without crossing a repository root."""
    start = start.resolve()
    for directory in (start, *start.parents):
        if (directory / '.env').is_file():
            return directory / '.env'
        # A worktree has a .git file rather than a directory
        if (directory / '.git').exists():
            break
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value lines; quotes around values and a leading `export` are dropped."""
    result: dict[str, str] = {}
    for raw_line in path.read_text(encoding='utf-8').splitlines():
        line = raw_line.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        key, sep, value = line.partition('=')
        key = key.strip()
        if line.startswith('#') or not sep or not key:
            continue
        result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env entries into os.environ without overriding existing variables.

    Returns the file that was read, or None when there was nothing to read.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None
    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def env_int(name: str, default: int | None = None) -> int | None:
    """Read MPD_PALETTE_<name> as an int, or return default when unset/blank."""
    key = ENV_PREFIX + name
    raw = os.environ.get(key, '').strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidParameterError(f'{key} must be an integer, got {raw!r}') from None
