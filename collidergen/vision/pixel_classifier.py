"""
Alpha-based pixel classification.
"""

import logging

import numpy as np

from collidergen.vision.image_buffer import ImageBuffer

logger = logging.getLogger(__name__)


class PixelClassifier:
    """Marks every pixel that is not fully transparent as object."""

    # alpha > VISIBLE_ALPHA is object; soft edges are not thresholded further
    VISIBLE_ALPHA = 0

    def classify(self, image: ImageBuffer) -> np.ndarray:
        """
        Build the occupancy mask for an image.

        Args:
            image: Decoded image with an alpha channel

        Returns:
            H x W boolean mask, True where the pixel belongs to an object

        Raises:
            UnsupportedFormatError: If the image has no alpha channel
        """
        mask = np.asarray(image.alpha > self.VISIBLE_ALPHA, dtype=bool)
        logger.debug(f"Classified {int(mask.sum())} of {mask.size} pixels as visible")
        return mask
