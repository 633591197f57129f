"""Tests for image buffers and alpha classification."""

import numpy as np
import pytest
from PIL import Image

from collidergen.shared.errors import UnsupportedFormatError
from collidergen.vision.image_buffer import ImageBuffer, as_image_buffer
from collidergen.vision.pixel_classifier import PixelClassifier


def test_classify_any_nonzero_alpha_is_visible():
    """Test that only fully transparent pixels are background."""
    pixels = np.zeros((1, 4, 4), dtype=np.uint8)
    pixels[0, :, 3] = [0, 1, 128, 255]

    mask = PixelClassifier().classify(ImageBuffer(pixels))

    assert mask.dtype == bool
    assert mask.tolist() == [[False, True, True, True]]


def test_classify_alpha_only_array():
    """Test that a 2-D array is read as alpha values."""
    alpha = np.array([[0, 10], [0, 0]], dtype=np.uint8)

    mask = PixelClassifier().classify(ImageBuffer(alpha))

    assert mask.tolist() == [[False, True], [False, False]]


def test_classify_rgb_image_rejected():
    """Test that an image without alpha is a usage error."""
    buffer = ImageBuffer(np.zeros((4, 4, 3), dtype=np.uint8))

    assert not buffer.has_alpha
    with pytest.raises(UnsupportedFormatError):
        PixelClassifier().classify(buffer)


def test_mode_channel_mismatch_rejected():
    """Test that an explicit mode must match the array layout."""
    with pytest.raises(UnsupportedFormatError):
        ImageBuffer(np.zeros((2, 2, 3), dtype=np.uint8), mode="RGBA")

    with pytest.raises(UnsupportedFormatError):
        ImageBuffer(np.zeros((2, 2, 2, 2), dtype=np.uint8))


def test_buffer_is_read_only_view(rgba_image):
    """Test that the buffer borrows the caller's pixels read-only."""
    pixels = rgba_image(3, 2, (0, 0, 1, 1))
    buffer = ImageBuffer(pixels)

    assert buffer.width == 3
    assert buffer.height == 2
    assert buffer.mode == "RGBA"
    assert buffer.alpha_at(0, 0) == 255
    assert not buffer.pixels.flags.writeable
    assert pixels.flags.writeable


def test_from_pil_rgba():
    """Test wrapping a Pillow RGBA image."""
    image = Image.new("RGBA", (5, 3), (0, 0, 0, 0))
    image.putpixel((4, 2), (255, 255, 255, 200))

    buffer = ImageBuffer.from_pil(image)

    assert (buffer.width, buffer.height) == (5, 3)
    assert buffer.alpha_at(4, 2) == 200
    assert buffer.alpha_at(0, 0) == 0


def test_from_pil_palette_with_transparency():
    """Test that palette transparency is honoured."""
    image = Image.new("P", (3, 3), 0)
    image.putpalette([0, 0, 0, 255, 255, 255])
    image.info["transparency"] = 0
    image.putpixel((1, 1), 1)

    mask = PixelClassifier().classify(ImageBuffer.from_pil(image))

    assert mask.sum() == 1
    assert mask[1, 1]


def test_from_pil_without_transparency_rejected():
    """Test that opaque Pillow images are refused."""
    with pytest.raises(UnsupportedFormatError):
        ImageBuffer.from_pil(Image.new("RGB", (2, 2)))


def test_as_image_buffer_accepts_all_inputs(rgba_image):
    """Test coercion of buffers, arrays and Pillow images."""
    pixels = rgba_image(2, 2, (0, 0, 1, 1))
    buffer = ImageBuffer(pixels)

    assert as_image_buffer(buffer) is buffer
    assert as_image_buffer(pixels).mode == "RGBA"
    assert as_image_buffer(Image.fromarray(pixels)).alpha_at(0, 0) == 255
