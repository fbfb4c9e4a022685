"""Even partitioning of an integer pixel extent into chunk boundaries."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)


class StepTooSmallError(ValueError):
    """Raised when a partition would contain an empty chunk."""


def _spacing(count: int) -> list[float]:
    # count + 1 single precision positions; the trailing 1.0 is only ever compared against
    return (np.arange(count + 1, dtype=np.float32) / np.float32(count)).tolist()


def partition(max_value: int, width: int) -> tuple[int, ...]:
    """Split ``[0, max_value)`` into *width* near-equal steps.

    Returns the cumulative boundary of each step, so the last entry is always
    *max_value*. Step lengths take at most two values, ``max_value // width``
    and one more than that, and the longer steps are spread through the
    sequence rather than grouped at one end::

        >>> partition(10, 3)
        (3, 7, 10)
    """
    if width <= 0:
        raise ValueError("width must be positive")
    if max_value <= 0:
        raise ValueError("max_value must be positive")

    small_step = max_value // width
    big_step = small_step + 1
    big_count = max_value - small_step * width
    small_count = width - big_count

    steps: list[int] = []
    total = 0
    if big_count == 0:
        for _ in range(width):
            total += small_step
            steps.append(total)
        return tuple(steps)

    small_positions = _spacing(small_count)
    big_positions = _spacing(big_count)
    small_index = 0
    big_index = 0
    for _ in range(width):
        if small_positions[small_index] <= big_positions[big_index]:
            total += small_step
            small_index += 1
        else:
            total += big_step
            big_index += 1
        steps.append(total)
    return tuple(steps)


def step_lengths(steps: Sequence[int]) -> list[int]:
    """Return the length of each step of a cumulative partition."""
    previous = 0
    lengths = []
    for boundary in steps:
        lengths.append(boundary - previous)
        previous = boundary
    return lengths


def has_empty_step(steps: Sequence[int]) -> bool:
    """Return ``True`` if any step of *steps* covers no pixels."""
    return any(length <= 0 for length in step_lengths(steps))


def checked_partition(max_value: int, width: int) -> tuple[int, ...]:
    """Like :func:`partition` but reject partitions with empty steps."""
    if width <= 0:
        logger.debug("No steps requested for extent %d", max_value)
        raise StepTooSmallError("Step too small")
    if max_value < width:
        logger.debug("Extent %d cannot be split into %d non-empty steps", max_value, width)
        raise StepTooSmallError("Step too small")
    return partition(max_value, width)
