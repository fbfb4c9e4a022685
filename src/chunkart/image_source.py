"""Image decoding and 16-bit RGBA sampling."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("JPEG", "PNG")
CHANNEL_MAX = 0xFFFF

# Single channel modes Pillow uses for 16-bit greyscale PNGs
GRAY16_MODES = ("I;16", "I;16L", "I;16B", "I")


class ImageLoadError(Exception):
    """Raised when an image cannot be opened or decoded."""


def load_image(path: Union[str, Path]) -> Image.Image:
    """Open and fully decode the JPEG or PNG image at *path*.

    16-bit greyscale images keep their mode; everything else becomes RGBA.
    """
    try:
        with Image.open(path, formats=SUPPORTED_FORMATS) as image:
            image.load()
            logger.debug("Decoded %s: %s %s %sx%s", path, image.format, image.mode, *image.size)
            if image.mode in GRAY16_MODES:
                return image.copy()
            return image.convert("RGBA")
    except (OSError, Image.DecompressionBombError) as exc:
        raise ImageLoadError(str(exc)) from exc


def _gray16_to_rgba16(image: Image.Image) -> np.ndarray:
    gray = np.clip(np.asarray(image), 0, CHANNEL_MAX).astype(np.uint32)
    samples = np.empty(gray.shape + (4,), dtype=np.uint32)
    samples[..., :3] = gray[..., np.newaxis]
    samples[..., 3] = CHANNEL_MAX
    return samples


def to_rgba16(image: Image.Image) -> np.ndarray:
    """Return a ``(height, width, 4)`` array of 16-bit RGBA samples.

    Colour channels are premultiplied by alpha, so a fully transparent pixel
    samples as black.
    """
    if image.mode in GRAY16_MODES:
        return _gray16_to_rgba16(image)

    # 65535 * 65535 still fits in 32 bits
    samples = np.array(image.convert("RGBA"), dtype=np.uint32)
    samples *= 257
    alpha = samples[..., 3:4]
    if (alpha != CHANNEL_MAX).any():
        samples[..., :3] *= alpha
        samples[..., :3] //= CHANNEL_MAX
    return samples


def read_pixels(path: Union[str, Path]) -> np.ndarray:
    """Decode *path* and return its 16-bit RGBA sample grid."""
    return to_rgba16(load_image(path))
