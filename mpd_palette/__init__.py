"""mpd-palette: select maximally distinct colours from a palette.

    >>> from mpd_palette import mpd_select_colours
    >>> mpd_select_colours(['#ff0000', '#00ff00', '#0000ff', '#ffffff'], ncolours=2, seed=1)
    ['#00ff00', '#0000ff']
"""

from mpd_palette.core.errors import (
    EmptyResultError,
    FewerPalettesWarning,
    InsufficientCandidatesError,
    InvalidColourError,
    InvalidParameterError,
    InvalidSubsetSizeError,
    InvalidThresholdError,
    PaletteError,
)
from mpd_palette.core.filtering import palette_reduce
from mpd_palette.core.selection import mpd_select_colours, select_palettes
from mpd_palette.core.types import Selection

__all__ = [
    'EmptyResultError',
    'FewerPalettesWarning',
    'InsufficientCandidatesError',
    'InvalidColourError',
    'InvalidParameterError',
    'InvalidSubsetSizeError',
    'InvalidThresholdError',
    'PaletteError',
    'Selection',
    'mpd_select_colours',
    'palette_reduce',
    'select_palettes',
]
