"""
Read-only view over decoded pixel data.

Decoding is left to the caller; this module only accepts pixels that are
already in memory, either as numpy arrays or as Pillow images.
"""

from typing import Any, Optional

import numpy as np
from PIL import Image

from collidergen.shared.errors import UnsupportedFormatError


class ImageBuffer:
    """
    Decoded image exposing width, height and a per-pixel alpha accessor.

    Supported layouts:
    - RGBA: H x W x 4
    - LA:   H x W x 2
    - A:    H x W (alpha only)
    - RGB:  H x W x 3 (no alpha)
    - L:    H x W (no alpha, only by explicit mode)
    """

    # mode -> (channel count, alpha channel index or None)
    MODES = {
        "RGBA": (4, 3),
        "LA": (2, 1),
        "A": (1, 0),
        "RGB": (3, None),
        "L": (1, None),
    }

    # Pillow modes that may carry transparency and convert cleanly to RGBA
    _PIL_CONVERTIBLE = {"PA", "La", "RGBa"}

    def __init__(self, pixels: Any, mode: Optional[str] = None):
        array = np.asarray(pixels)
        if array.ndim not in (2, 3):
            raise UnsupportedFormatError(mode, f"expected a 2-D or 3-D array, got {array.ndim}-D")

        mode = mode or self._infer_mode(array)
        if mode not in self.MODES:
            raise UnsupportedFormatError(mode, "unknown pixel mode")

        channels, _ = self.MODES[mode]
        actual = 1 if array.ndim == 2 else array.shape[2]
        if actual != channels:
            raise UnsupportedFormatError(
                mode, f"mode needs {channels} channel(s), array has {actual}"
            )

        view = array.view()
        view.flags.writeable = False
        self._pixels = view
        self._mode = mode

    @staticmethod
    def _infer_mode(array: np.ndarray) -> Optional[str]:
        if array.ndim == 2:
            return "A"
        return {4: "RGBA", 2: "LA", 3: "RGB", 1: "A"}.get(array.shape[2])

    @classmethod
    def from_pil(cls, image: Image.Image) -> "ImageBuffer":
        """
        Wrap a Pillow image.

        Palette, greyscale and RGB images are accepted only when they carry
        transparency information, in which case they are converted to RGBA.

        Args:
            image: Decoded Pillow image

        Returns:
            ImageBuffer over the image's pixels
        """
        mode = image.mode

        if mode in ("P", "L", "RGB") and "transparency" in image.info:
            image = image.convert("RGBA")
        elif mode in cls._PIL_CONVERTIBLE:
            image = image.convert("RGBA")
        elif mode not in ("RGBA", "LA"):
            raise UnsupportedFormatError(mode)

        return cls(np.asarray(image), mode=image.mode)

    @property
    def pixels(self) -> np.ndarray:
        """Underlying read-only pixel array."""
        return self._pixels

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def has_alpha(self) -> bool:
        """Check if the buffer carries a transparency channel."""
        return self.MODES[self._mode][1] is not None

    @property
    def alpha(self) -> np.ndarray:
        """H x W alpha channel."""
        _, index = self.MODES[self._mode]
        if index is None:
            raise UnsupportedFormatError(self._mode)
        if self._pixels.ndim == 2:
            return self._pixels
        return self._pixels[:, :, index]

    def alpha_at(self, x: int, y: int) -> int:
        """Alpha value of a single pixel."""
        return int(self.alpha[y, x])

    def __repr__(self) -> str:
        return f"ImageBuffer({self.width}x{self.height}, mode={self._mode!r})"


def as_image_buffer(image: Any) -> ImageBuffer:
    """Coerce an ImageBuffer, numpy array or Pillow image to an ImageBuffer."""
    if isinstance(image, ImageBuffer):
        return image
    if isinstance(image, Image.Image):
        return ImageBuffer.from_pil(image)
    return ImageBuffer(image)
