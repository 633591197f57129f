"""
Contour tracing for collider generation.
"""

import logging

import cv2
import numpy as np

from collidergen.shared.models import Boundary, Region
from collidergen.vectorization.polygon import (
    cross,
    drop_collinear,
    drop_consecutive_duplicates,
    reverse_winding,
    rotate_to_start,
    signed_area,
    unique_in_order,
)

logger = logging.getLogger(__name__)


class ContourTracer:
    """
    Traces the outer perimeter of a region.

    The boundary starts at the region's topmost-then-leftmost pixel and
    runs clockwise as seen on screen. Interior holes are ignored.

    Regions too small or too thin to form a polygon (fewer than three
    pixels, or every pixel on one straight line) have no area between
    their pixel coordinates. They get a synthetic outline around the
    pixel cells at the two ends of the run instead, so every region
    always yields a polygon with non-zero area. For a straight stroke
    that outline is a thin quad or hexagon hugging the stroke.
    """

    def trace(self, region: Region) -> Boundary:
        """
        Trace one region.

        Args:
            region: Region from the segmenter

        Returns:
            Closed boundary in image coordinates
        """
        if region.area < 3:
            return self._synthetic_boundary(region)

        # Pad so pixels on the crop edge still have a background neighbour
        padded = np.pad(region.mask.astype(np.uint8), 1)
        contours, _ = cv2.findContours(
            padded,
            cv2.RETR_EXTERNAL,
            cv2.CHAIN_APPROX_NONE,
        )
        assert contours, f"region {region.index} produced no contour"

        outline = max(contours, key=len).reshape(-1, 2)
        offset_x = region.bounds.x - 1
        offset_y = region.bounds.y - 1
        points = drop_consecutive_duplicates(
            [(int(x) + offset_x, int(y) + offset_y) for x, y in outline]
        )

        if self._is_collinear(points):
            return self._synthetic_boundary(region)

        start = min(range(len(points)), key=lambda i: (points[i][1], points[i][0]))
        points = rotate_to_start(points, start)
        if signed_area(points) < 0:
            points = reverse_winding(points)

        logger.debug(f"Traced region {region.index}: {len(points)} boundary points")
        return Boundary(region_index=region.index, points=points)

    @staticmethod
    def _is_collinear(points: list[tuple[int, int]]) -> bool:
        unique = unique_in_order(points)
        if len(unique) < 3:
            return True
        first, second = unique[0], unique[1]
        return all(cross(first, second, p) == 0 for p in unique[2:])

    @staticmethod
    def _synthetic_boundary(region: Region) -> Boundary:
        pixels = sorted(region.pixels(), key=lambda p: (p[1], p[0]))
        (ax, ay), (bx, by) = pixels[0], pixels[-1]

        # Hull of the end cells; the last pixel is never above the first
        if bx >= ax:
            corners = [
                (ax, ay), (ax + 1, ay), (bx + 1, by),
                (bx + 1, by + 1), (bx, by + 1), (ax, ay + 1),
            ]
        else:
            corners = [
                (ax, ay), (ax + 1, ay), (ax + 1, ay + 1),
                (bx + 1, by + 1), (bx, by + 1), (bx, by),
            ]
        points = drop_collinear(drop_consecutive_duplicates(corners))

        logger.debug(
            f"Region {region.index} ({region.area} px) is degenerate; "
            f"using {len(points)}-vertex outline around its end pixels"
        )
        return Boundary(
            region_index=region.index,
            points=points,
            synthetic=True,
            pixels=pixels,
        )
