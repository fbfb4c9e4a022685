"""
Shared fixtures for chunkart tests.

Images are generated with Pillow into ``tmp_path`` so the suite needs no
binary fixtures on disk.
"""
from pathlib import Path

import numpy as np
import pytest
from PIL import Image


def write_image(path: Path, size, color, mode="RGB", fmt=None) -> Path:
    """Write a solid ``color`` image of ``size`` to ``path`` and return it."""
    Image.new(mode, size, color=color).save(path, format=fmt)
    return path


@pytest.fixture
def black_png(tmp_path):
    """100x100 solid black PNG."""
    return write_image(tmp_path / "black.png", (100, 100), (0, 0, 0))


@pytest.fixture
def white_png(tmp_path):
    """4x4 solid white PNG."""
    return write_image(tmp_path / "white.png", (4, 4), (255, 255, 255))


@pytest.fixture
def red_png(tmp_path):
    """4x4 solid red PNG."""
    return write_image(tmp_path / "red.png", (4, 4), (255, 0, 0))


@pytest.fixture
def quad_png(tmp_path):
    """2x2 PNG with red, green, blue and black pixels."""
    image = Image.new("RGB", (2, 2))
    image.putpixel((0, 0), (255, 0, 0))
    image.putpixel((1, 0), (0, 255, 0))
    image.putpixel((0, 1), (0, 0, 255))
    image.putpixel((1, 1), (0, 0, 0))
    path = tmp_path / "quad.png"
    image.save(path)
    return path


@pytest.fixture
def gray16_png(tmp_path):
    """20x20 16-bit greyscale PNG, every sample at 32768."""
    path = tmp_path / "gray16.png"
    Image.fromarray(np.full((20, 20), 32768, dtype=np.uint16)).save(path)
    return path
