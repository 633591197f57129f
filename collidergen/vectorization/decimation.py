"""
Near-collinear vertex removal for polylines.
"""

import logging
from typing import Optional, Sequence

from collidergen.vectorization.polygon import Coordinate, distance_to_line

logger = logging.getLogger(__name__)

MIN_VERTICES = 3


def decimate(
    points: Sequence[Coordinate],
    tolerance: Optional[float],
    closed: bool = True,
) -> list:
    """
    Remove vertices lying within ``tolerance`` of the line through their neighbours.

    Passes repeat until one removes nothing, so the output is a fixed point:
    decimating it again at the same tolerance returns it unchanged. Closed
    outlines keep at least three vertices; open ones keep their endpoints.

    Args:
        points: Ordered outline
        tolerance: Max perpendicular distance of a removed vertex; None disables
        closed: Whether the last point connects back to the first

    Returns:
        Decimated outline
    """
    kept = [tuple(p) for p in points]
    if tolerance is None:
        return kept
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")

    original = len(kept)
    changed = True
    while changed and len(kept) > MIN_VERTICES:
        changed = False
        i = 0 if closed else 1
        while len(kept) > MIN_VERTICES:
            last = len(kept) if closed else len(kept) - 1
            if i >= last:
                break
            prev = kept[i - 1]
            nxt = kept[(i + 1) % len(kept)]
            if distance_to_line(kept[i], prev, nxt) <= tolerance:
                del kept[i]
                changed = True
            else:
                i += 1

    if len(kept) != original:
        logger.debug(f"Decimated polyline from {original} to {len(kept)} points")
    return kept
