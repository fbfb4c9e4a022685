"""Brightness to glyph mapping."""

from __future__ import annotations

# Dense to light; suits dark text on a light background
GLYPH_RAMP = (
    "W", "M", "N", "X", "K", "O", "0", "d", "k", "x",
    "o", "c", "l", ";", ":", "'", ",", ".", " ",
)
INVERTED_GLYPH_RAMP = GLYPH_RAMP[::-1]
FALLBACK_GLYPH = "+"

_BUCKET_WIDTH = 255 / len(GLYPH_RAMP)


def ramp(inverted: bool = False) -> tuple[str, ...]:
    """Return the glyph ramp, light to dense when *inverted*."""
    return INVERTED_GLYPH_RAMP if inverted else GLYPH_RAMP


def glyph_index(luma: int) -> int:
    """Return the ramp index for *luma*, or ``-1`` above the last bucket."""
    for index in range(len(GLYPH_RAMP)):
        if _BUCKET_WIDTH * (index + 1) >= luma:
            return index
    return -1


def to_glyph(luma: int, inverted: bool = False) -> str:
    """Map a 0-255 luma average to a glyph."""
    index = glyph_index(luma)
    if index < 0:
        return FALLBACK_GLYPH
    return ramp(inverted)[index]
