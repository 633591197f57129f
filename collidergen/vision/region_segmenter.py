"""
Connected-component segmentation of the occupancy mask.

Each connected group of visible pixels becomes an independent region.
Region indices follow the row-major position of each region's first
pixel, so they are stable across runs and across OpenCV's labelling
strategy.
"""

import logging

import cv2
import numpy as np

from collidergen.shared.models import BoundingBox, Connectivity, Region

logger = logging.getLogger(__name__)


class RegionSegmenter:
    """Splits an occupancy mask into connected regions."""

    def __init__(self, connectivity: Connectivity = Connectivity.EIGHT):
        """
        Initialize region segmenter.

        Args:
            connectivity: 4 or 8 neighbour adjacency
        """
        self.connectivity = Connectivity(connectivity)

    def segment(self, mask: np.ndarray) -> list[Region]:
        """
        Label connected regions of the mask.

        Args:
            mask: H x W boolean occupancy mask

        Returns:
            Regions ordered by row-major discovery of their first pixel.
            Empty when the mask has no occupied pixels.
        """
        if mask.size == 0 or not mask.any():
            return []

        binary = mask.astype(np.uint8)
        _, labels, stats, _ = cv2.connectedComponentsWithStats(
            binary,
            connectivity=int(self.connectivity),
        )

        # First flat index of every label is its row-major discovery point
        found, first_index = np.unique(labels.ravel(), return_index=True)
        order = [int(found[i]) for i in np.argsort(first_index) if found[i] != 0]

        regions = []
        for index, label in enumerate(order):
            x, y, w, h, area = (int(v) for v in stats[label])
            crop = labels[y:y + h, x:x + w] == label
            regions.append(
                Region(
                    index=index,
                    bounds=BoundingBox(x=x, y=y, width=w, height=h),
                    mask=crop,
                    area=area,
                )
            )

        logger.debug(
            f"Segmented {len(regions)} region(s) with {int(self.connectivity)}-connectivity"
        )
        return regions
