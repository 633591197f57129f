"""Shared fixtures for collidergen tests."""

import numpy as np
import pytest

from collidergen.shared.config import GenerationConfig, Settings


def _rgba_image(width, height, *rects, alpha=255):
    """Transparent RGBA image with opaque (x, y, w, h) rectangles."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    for x, y, w, h in rects:
        pixels[y:y + h, x:x + w] = (180, 90, 40, alpha)
    return pixels


@pytest.fixture
def rgba_image():
    """Factory for RGBA test images."""
    return _rgba_image


@pytest.fixture
def make_settings():
    """Factory for settings with generation overrides."""
    def factory(**generation):
        return Settings(generation=GenerationConfig(**generation))
    return factory


@pytest.fixture
def ring_image():
    """4x4 opaque image with a transparent pixel inside."""
    pixels = _rgba_image(4, 4, (0, 0, 4, 4))
    pixels[1, 1, 3] = 0
    return pixels


@pytest.fixture
def two_blob_image():
    """Two separate blobs; the right-hand one starts on an earlier row."""
    return _rgba_image(8, 6, (5, 0, 2, 2), (0, 3, 3, 2))


@pytest.fixture
def disc_image():
    """Filled disc of radius 10 on a 32x32 canvas."""
    yy, xx = np.mgrid[0:32, 0:32]
    pixels = np.zeros((32, 32, 4), dtype=np.uint8)
    inside = (xx - 15.5) ** 2 + (yy - 15.5) ** 2 <= 10 ** 2
    pixels[inside] = (0, 0, 0, 255)
    return pixels
