"""
Small polygon helpers shared by the tracer and the shape projectors.

Orientation conventions: in image space (y down) a positive signed area
means the outline runs clockwise on screen. In engine space (y up) a
positive signed area means counter-clockwise.
"""

import math
from typing import Sequence

Coordinate = tuple[float, float]


def cross(o: Coordinate, a: Coordinate, b: Coordinate) -> float:
    """Z component of (a - o) x (b - o)."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def signed_area(points: Sequence[Coordinate]) -> float:
    """Shoelace area of a closed outline; sign gives the winding."""
    if len(points) < 3:
        return 0.0
    total = 0.0
    for i, (x1, y1) in enumerate(points):
        x2, y2 = points[(i + 1) % len(points)]
        total += x1 * y2 - x2 * y1
    return total / 2.0


def distance_to_line(point: Coordinate, a: Coordinate, b: Coordinate) -> float:
    """Distance from point to the infinite line through a and b."""
    length = math.hypot(b[0] - a[0], b[1] - a[1])
    if length == 0:
        return math.hypot(point[0] - a[0], point[1] - a[1])
    return abs(cross(a, b, point)) / length


def unique_in_order(points: Sequence[Coordinate]) -> list:
    """Drop repeated points, keeping first occurrences."""
    return list(dict.fromkeys(tuple(p) for p in points))


def drop_consecutive_duplicates(points: Sequence[Coordinate]) -> list:
    """Drop points equal to their predecessor, treating the outline as closed."""
    result = []
    for p in points:
        p = tuple(p)
        if not result or result[-1] != p:
            result.append(p)
    while len(result) > 1 and result[-1] == result[0]:
        result.pop()
    return result


def drop_collinear(points: Sequence[Coordinate]) -> list:
    """Drop vertices lying on the line through their two neighbours."""
    result = list(points)
    changed = True
    while changed and len(result) >= 3:
        changed = False
        count = len(result)
        for i in range(count):
            if cross(result[i - 1], result[i], result[(i + 1) % count]) == 0:
                del result[i]
                changed = True
                break
    return result


def rotate_to_start(points: Sequence[Coordinate], start: int) -> list:
    """Cyclically rotate so that points[start] comes first."""
    points = list(points)
    return points[start:] + points[:start]


def reverse_winding(points: Sequence[Coordinate]) -> list:
    """Reverse the traversal direction, keeping the first point in place."""
    points = list(points)
    if len(points) < 3:
        return points
    return [points[0]] + points[:0:-1]


def is_convex(points: Sequence[Coordinate]) -> bool:
    """
    Check that every corner turns the same way.

    Collinear corners count as non-convex, so a hull with leftover
    interior points on an edge fails the check.
    """
    if len(points) < 3:
        return False
    sign = 0
    count = len(points)
    for i in range(count):
        turn = cross(points[i - 1], points[i], points[(i + 1) % count])
        if turn == 0:
            return False
        current = 1 if turn > 0 else -1
        if sign == 0:
            sign = current
        elif current != sign:
            return False
    return True
