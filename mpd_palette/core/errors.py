"""Error kinds raised by mpd-palette, plus the one non-fatal warning.

All errors subclass PaletteError (itself a ValueError) so callers can catch the
whole family at once. None of them are retried internally.
"""


class PaletteError(ValueError):
    """Base class for every hard error raised while selecting a palette."""


class InvalidSubsetSizeError(PaletteError):
    """Subset size is below 2 or larger than the available palette."""


class EmptyResultError(PaletteError):
    """No colours left after threshold filtering."""


class InsufficientCandidatesError(PaletteError):
    """Fewer than two colours left after threshold filtering."""


class InvalidColourError(PaletteError):
    """A colour string could not be parsed as a hex colour."""


class InvalidThresholdError(PaletteError):
    """A saturation or lightness threshold lies outside [0, 1]."""


class InvalidParameterError(PaletteError):
    """A repetition count, return count, worker count or config value is unusable."""


class FewerPalettesWarning(UserWarning):
    """Fewer distinct palettes were found than were requested."""
