"""Per-chunk brightness and colour averaging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

# NTSC luma weights, single precision
R_WEIGHT = np.float32(0.299)
G_WEIGHT = np.float32(0.587)
B_WEIGHT = np.float32(0.114)

# 65535 / 255: brings a 16-bit luma sum down to 0-255
LUMA_DIVISOR = 257
RGB_DIVISOR = 255

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class ChunkAverage:
    """Average brightness and colour of one chunk."""

    luma: int
    rgb: Optional[RGB] = None


def chunk_bounds(steps: Sequence[int], index: int) -> tuple[int, int]:
    """Return the ``(start, stop)`` pixel span of chunk *index*."""
    start = steps[index - 1] if index > 0 else 0
    return start, steps[index]


def aggregate(
    steps_x: Sequence[int],
    steps_y: Sequence[int],
    ix: int,
    iy: int,
    pixels: np.ndarray,
    with_rgb: bool = True,
) -> ChunkAverage:
    """Average the chunk ``(ix, iy)`` of a 16-bit RGBA sample grid.

    Each pixel contributes ``int(0.299 R + 0.587 G + 0.114 B)`` to the luma
    sum, which is normalised with ``dx * dy * 257``. Channel sums are
    normalised with ``dx * dy * 255`` instead, so averaged colours range over
    0-257 rather than 0-255.
    """
    x0, x1 = chunk_bounds(steps_x, ix)
    y0, y1 = chunk_bounds(steps_y, iy)
    dx = x1 - x0
    dy = y1 - y0
    if dx <= 0 or dy <= 0:
        raise ValueError(f"chunk ({ix}, {iy}) is empty")

    region = pixels[y0:y1, x0:x1, :3]
    channels = region.astype(np.float32)
    weighted = (
        channels[..., 0] * R_WEIGHT
        + channels[..., 1] * G_WEIGHT
        + channels[..., 2] * B_WEIGHT
    )
    weighted_sum = int(weighted.astype(np.int64).sum())
    luma = weighted_sum // (dx * dy * LUMA_DIVISOR)

    if not with_rgb:
        return ChunkAverage(luma)

    count = dx * dy * RGB_DIVISOR
    sums = region.reshape(-1, 3).astype(np.uint64).sum(axis=0)
    rgb = (int(sums[0]) // count, int(sums[1]) // count, int(sums[2]) // count)
    return ChunkAverage(luma, rgb)
