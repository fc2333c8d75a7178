"""Colour-space adapter: hex parsing, CIE LAB coordinates, HLS saturation/lightness.

Hex codes are accepted as #RGB or #RRGGBB, with or without the leading '#',
in any case. They are decoded with PIL.ImageColor. LAB conversion treats the
input as gamma-encoded sRGB under a D65 white point (skimage.color.rgb2lab).
Saturation and lightness are the HLS components from colorsys.
"""

import colorsys
import re
from collections.abc import Sequence

import numpy as np
from PIL import ImageColor
from skimage.color import rgb2lab

from mpd_palette.core.errors import InvalidColourError
from mpd_palette.core.types import Colour

_HEX_RE = re.compile(r'^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """Parse a hex colour into an (r, g, b) tuple of 0..255 ints."""
    if not isinstance(hex_str, str) or not _HEX_RE.match(hex_str.strip()):
        raise InvalidColourError(f'Not a hex colour: {hex_str!r}')
    code = hex_str.strip()
    if not code.startswith('#'):
        code = '#' + code
    r, g, b = ImageColor.getrgb(code)[:3]
    return (r, g, b)


def rgb_to_lab(rgbs: Sequence[tuple[int, int, int]] | np.ndarray) -> np.ndarray:
    """Convert 0..255 sRGB triples to an (N, 3) array of L*, a*, b*."""
    arr = np.asarray(rgbs, dtype=float).reshape(-1, 3) / 255.0
    if len(arr) == 0:
        return np.zeros((0, 3))
    return rgb2lab(arr.reshape(-1, 1, 3)).reshape(-1, 3)


def hex_to_lab(hex_str: str) -> tuple[float, float, float]:
    L, a, b = rgb_to_lab([hex_to_rgb(hex_str)])[0]
    return (float(L), float(a), float(b))


def _hls(hex_str: str) -> tuple[float, float, float]:
    r, g, b = hex_to_rgb(hex_str)
    return colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)


def saturation_of(hex_str: str) -> float:
    """HLS saturation of a hex colour, 0..1."""
    return _hls(hex_str)[2]


def lightness_of(hex_str: str) -> float:
    """HLS lightness of a hex colour, 0..1."""
    return _hls(hex_str)[1]


def make_colour(hex_str: str) -> Colour:
    """Build a Colour with every derived attribute filled in.

    The identity is the code as given, minus surrounding whitespace.
    """
    rgb = hex_to_rgb(hex_str)
    _h, lightness, saturation = colorsys.rgb_to_hls(rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0)
    L, a, b = rgb_to_lab([rgb])[0]
    return Colour(
        hex=hex_str.strip(),
        rgb=rgb,
        saturation=saturation,
        lightness=lightness,
        lab=(float(L), float(a), float(b)),
    )
