"""
Image-space to engine-space coordinate conversion.
"""

from typing import Sequence

import numpy as np

from collidergen.shared.models import CoordinateMode, Point


class CoordinateFrame:
    """
    Flips image coordinates (y down) into a y-up engine frame.

    A pixel coordinate refers to the pixel's top-left corner, so pixel
    (x, y) maps to (x, H - y) in raw mode and (x - W / 2, H / 2 - y) in
    translated mode.
    """

    def __init__(
        self,
        width: int,
        height: int,
        mode: CoordinateMode = CoordinateMode.TRANSLATED,
    ):
        self.width = width
        self.height = height
        self.mode = CoordinateMode(mode)

    @property
    def offset(self) -> Point:
        """Amount subtracted after flipping."""
        if self.mode == CoordinateMode.TRANSLATED:
            return (self.width / 2, self.height / 2)
        return (0.0, 0.0)

    def to_engine(self, points: Sequence[Sequence[float]]) -> list[Point]:
        """Convert image-space points to engine space."""
        if len(points) == 0:
            return []
        array = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        engine = np.empty_like(array)
        engine[:, 0] = array[:, 0]
        engine[:, 1] = self.height - array[:, 1]
        engine -= self.offset
        return [(float(x), float(y)) for x, y in engine]

    def point_to_engine(self, x: float, y: float) -> Point:
        """Convert a single image-space point to engine space."""
        return self.to_engine([(x, y)])[0]
