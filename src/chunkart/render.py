"""Render a 16-bit RGBA sample grid as rows of glyphs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np

from .aggregate import RGB, aggregate
from .glyphs import to_glyph
from .image_source import read_pixels
from .partition import StepTooSmallError, checked_partition

logger = logging.getLogger(__name__)

# Terminal cells are roughly twice as tall as they are wide
DEFAULT_CHAR_ASPECT = 2.0

ANSI_RESET = "\033[0m"


@dataclass(frozen=True)
class RenderOptions:
    """Settings for one conversion."""

    width: int
    invert: bool = False
    color: bool = False
    char_aspect: float = DEFAULT_CHAR_ASPECT

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("width must be positive")
        if self.char_aspect <= 0:
            raise ValueError("char_aspect must be positive")


def rows_for(
    image_width: int, image_height: int, width: int, char_aspect: float = DEFAULT_CHAR_ASPECT
) -> int:
    """Return how many glyph rows keep the image's proportions at *width* columns.

    Computed in single precision.
    """
    rows = np.float32(width) * np.float32(image_height) / np.float32(image_width)
    return int(rows / np.float32(char_aspect))


def colorize(glyph: str, rgb: RGB) -> str:
    """Wrap *glyph* in a 24-bit foreground colour escape."""
    r, g, b = rgb
    return f"\033[38;2;{r};{g};{b}m{glyph}{ANSI_RESET}"


def render_lines(pixels: np.ndarray, options: RenderOptions) -> list[str]:
    """Return one string of ``options.width`` glyphs per output row.

    Raises :class:`StepTooSmallError` when the image is too small to give
    every glyph at least one pixel.
    """
    height, width = pixels.shape[:2]
    rows = rows_for(width, height, options.width, options.char_aspect)
    logger.debug("Splitting %dx%d pixels into %dx%d chunks", width, height, options.width, rows)
    if rows < 1:
        raise StepTooSmallError("Step too small")
    steps_x = checked_partition(width, options.width)
    steps_y = checked_partition(height, rows)

    lines: list[str] = []
    for iy in range(len(steps_y)):
        row_chars: list[str] = []
        for ix in range(len(steps_x)):
            average = aggregate(steps_x, steps_y, ix, iy, pixels, with_rgb=options.color)
            glyph = to_glyph(average.luma, options.invert)
            if options.color:
                glyph = colorize(glyph, average.rgb)
            row_chars.append(glyph)
        lines.append("".join(row_chars))
    return lines


def render_text(pixels: np.ndarray, options: RenderOptions) -> str:
    """Return the rendered rows as one string, with a line break before each row."""
    return "".join("\n" + line for line in render_lines(pixels, options))


def convert_image(path: Union[str, Path], options: RenderOptions) -> str:
    """Decode the image at *path* and return its glyph rendering."""
    return render_text(read_pixels(path), options)
