"""
Convex hull construction for collider generation.
"""

import logging
from typing import Sequence

import cv2
import numpy as np

from collidergen.vectorization.polygon import (
    Coordinate,
    cross,
    drop_collinear,
    reverse_winding,
    rotate_to_start,
    signed_area,
    unique_in_order,
)

logger = logging.getLogger(__name__)


def convex_hull(points: Sequence[Coordinate]) -> list:
    """
    Compute the minimal convex polygon around a point sequence.

    Hull vertices are a subset of the input points. Points lying on a
    hull edge are discarded so only the edge's end points remain. The
    hull winds the same way as the input outline (clockwise in image
    space when the input has no winding of its own) and starts at the
    vertex that appears earliest in the input.

    Args:
        points: Ordered outline

    Returns:
        Hull vertices. Inputs with three or fewer unique points are
        returned unchanged.
    """
    unique = unique_in_order(points)
    if len(unique) <= 3:
        return unique

    array = np.asarray(unique)
    array = array.astype(np.int32 if np.issubdtype(array.dtype, np.integer) else np.float32)
    indices = cv2.convexHull(array, returnPoints=False).ravel()

    # OpenCV may keep points lying on hull edges
    hull = drop_collinear([unique[int(i)] for i in indices])
    if len(hull) < 3:
        return hull

    wanted = signed_area(unique)
    if wanted == 0:
        wanted = 1.0
    if (signed_area(hull) > 0) != (wanted > 0):
        hull = reverse_winding(hull)

    position = {p: i for i, p in enumerate(unique)}
    start = min(range(len(hull)), key=lambda i: position[hull[i]])
    return rotate_to_start(hull, start)


def reduce_vertices(hull: Sequence[Coordinate], max_vertices: int) -> list:
    """
    Shrink a convex polygon to at most ``max_vertices`` vertices.

    Repeatedly drops the vertex whose triangle with its two neighbours has
    the smallest area. The result stays convex and keeps the winding, but
    no longer encloses every original point.
    """
    if max_vertices < 3:
        raise ValueError(f"max_vertices must be at least 3, got {max_vertices}")

    reduced = list(hull)
    while len(reduced) > max_vertices:
        count = len(reduced)
        areas = [
            abs(cross(reduced[i - 1], reduced[i], reduced[(i + 1) % count]))
            for i in range(count)
        ]
        del reduced[areas.index(min(areas))]

    reduced = drop_collinear(reduced)
    if len(reduced) != len(hull):
        logger.debug(f"Reduced hull from {len(hull)} to {len(reduced)} vertices")
    return reduced
