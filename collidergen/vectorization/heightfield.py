"""
Heightfield sampling of a boundary.

Heightfields suit silhouettes that span the full width of their
bounding box, such as terrain strips. Outlines with overhangs or
indentations are reduced to their top (or bottom) profile, and columns
the boundary never crosses are filled from their neighbours, so the
result is only an approximation for such shapes.
"""

import logging
from typing import Sequence

from collidergen.shared.models import HeightfieldSide
from collidergen.vectorization.polygon import Coordinate

logger = logging.getLogger(__name__)


def heights_from_points(
    points: Sequence[Coordinate],
    side: HeightfieldSide = HeightfieldSide.TOP,
) -> list[tuple[int, float]]:
    """
    Collect one height per pixel column of the points' bounding box.

    For the top side a column's height runs from the bounding box bottom up
    to the highest point in that column (smallest image y), counting both
    end pixels. The bottom side measures from the bounding box top down to
    the lowest point instead.

    Columns without any point take the previous column's height.

    Args:
        points: Outline in image coordinates (y down)
        side: Which profile to sample

    Returns:
        (column_index, height) pairs, one per column, left to right
    """
    assert points, "heightfield needs at least one point"
    side = HeightfieldSide(side)

    xs = [int(round(p[0])) for p in points]
    ys = [p[1] for p in points]
    left = min(xs)
    width = max(xs) - left + 1
    top, bottom = min(ys), max(ys)

    extremes: dict[int, float] = {}
    for x, y in zip(xs, ys):
        column = x - left
        current = extremes.get(column)
        if side == HeightfieldSide.TOP:
            if current is None or y < current:
                extremes[column] = y
        elif current is None or y > current:
            extremes[column] = y

    def height_of(y: float) -> float:
        if side == HeightfieldSide.TOP:
            return float(bottom - y + 1)
        return float(y - top + 1)

    # Column 0 always holds the left-most point, so previous is set from the start
    samples = []
    previous = height_of(extremes[0])
    gaps = 0
    for column in range(width):
        if column in extremes:
            previous = height_of(extremes[column])
        else:
            gaps += 1
        samples.append((column, previous))

    if gaps:
        logger.warning(
            f"Heightfield has {gaps} of {width} column(s) with no boundary "
            f"crossing; filled from neighbouring columns"
        )
    return samples
