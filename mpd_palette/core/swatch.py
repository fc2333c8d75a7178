"""Render palettes to a PNG swatch: one row per palette, one square per colour."""

from collections.abc import Sequence
from pathlib import Path

from PIL import Image, ImageDraw

from mpd_palette.core.colourspace import hex_to_rgb

CELL = 48
GAP = 4
BACKGROUND = (255, 255, 255)


def render_swatch(palettes: Sequence[Sequence[str]], cell: int = CELL, gap: int = GAP) -> Image.Image:
    """Draw palettes as rows of filled squares on a white background."""
    rows = len(palettes)
    cols = max((len(p) for p in palettes), default=0)
    width = max(1, cols * cell + (cols + 1) * gap)
    height = max(1, rows * cell + (rows + 1) * gap)
    image = Image.new('RGB', (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)
    for r, palette in enumerate(palettes):
        y1 = gap + r * (cell + gap)
        for c, hex_str in enumerate(palette):
            x1 = gap + c * (cell + gap)
            draw.rectangle((x1, y1, x1 + cell - 1, y1 + cell - 1), fill=hex_to_rgb(hex_str))
    return image


def save_swatch(palettes: Sequence[Sequence[str]], path: str | Path) -> Path:
    """Render and save a swatch PNG, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    render_swatch(palettes).save(path)
    return path
