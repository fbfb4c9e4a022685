"""Convert raster images into (optionally coloured) ASCII art."""

from .glyphs import GLYPH_RAMP, to_glyph
from .partition import StepTooSmallError, partition
from .render import RenderOptions, convert_image

__all__ = [
    "GLYPH_RAMP",
    "RenderOptions",
    "StepTooSmallError",
    "convert_image",
    "partition",
    "to_glyph",
]

__version__ = "0.1.0"
