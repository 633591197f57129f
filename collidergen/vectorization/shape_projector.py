"""
Projection of traced boundaries into collider geometry.
"""

import logging
from typing import Iterable, Optional

from collidergen.shared.models import (
    Boundary,
    ColliderGeometry,
    ConvexHullCollider,
    ConvexPolylineCollider,
    HeightfieldCollider,
    HeightfieldSide,
    PolylineCollider,
    ShapeKind,
)
from collidergen.vectorization.coordinates import CoordinateFrame
from collidergen.vectorization.decimation import decimate
from collidergen.vectorization.heightfield import heights_from_points
from collidergen.vectorization.hull import convex_hull, reduce_vertices
from collidergen.vectorization.polygon import reverse_winding, signed_area

logger = logging.getLogger(__name__)


class ShapeProjector:
    """
    Turns a boundary into one or more collider shapes.

    All geometry is computed in image space and converted to the engine
    frame once, on the way out.
    """

    def __init__(
        self,
        frame: CoordinateFrame,
        decimation_tolerance: Optional[float] = None,
        max_hull_vertices: Optional[int] = None,
        heightfield_side: HeightfieldSide = HeightfieldSide.TOP,
    ):
        """
        Initialize shape projector.

        Args:
            frame: Engine coordinate frame of the source image
            decimation_tolerance: Polyline decimation tolerance, None keeps every point
            max_hull_vertices: Vertex budget for convex polylines
            heightfield_side: Profile sampled by heightfields
        """
        self.frame = frame
        self.decimation_tolerance = decimation_tolerance
        self.max_hull_vertices = max_hull_vertices
        self.heightfield_side = HeightfieldSide(heightfield_side)

        self._projections = {
            ShapeKind.POLYLINE: self.polyline,
            ShapeKind.CONVEX_HULL: self.convex_hull,
            ShapeKind.CONVEX_POLYLINE: self.convex_polyline,
            ShapeKind.HEIGHTFIELD: self.heightfield,
        }

    def project(
        self,
        boundary: Boundary,
        kinds: Iterable[ShapeKind],
    ) -> dict[ShapeKind, ColliderGeometry]:
        """
        Generate every requested shape for one boundary.

        Args:
            boundary: Traced region boundary
            kinds: Shape kinds to generate

        Returns:
            Geometry keyed by shape kind, in request order
        """
        result = {}
        for kind in kinds:
            kind = ShapeKind(kind)
            result[kind] = self._projections[kind](boundary)
        return result

    def polyline(self, boundary: Boundary) -> PolylineCollider:
        """Boundary as-is, decimated when a tolerance is configured."""
        self._check(boundary)
        points = decimate(boundary.points, self.decimation_tolerance)
        return PolylineCollider(points=self.frame.to_engine(points))

    def convex_hull(self, boundary: Boundary) -> ConvexHullCollider:
        """Minimal enclosing convex polygon, same winding as the boundary."""
        self._check(boundary)
        hull = convex_hull(boundary.points)
        return ConvexHullCollider(points=self.frame.to_engine(hull))

    def convex_polyline(self, boundary: Boundary) -> ConvexPolylineCollider:
        """Convex hull, vertex-limited, counter-clockwise in engine space."""
        self._check(boundary)
        hull = convex_hull(boundary.points)
        if self.max_hull_vertices is not None and len(hull) > self.max_hull_vertices:
            hull = reduce_vertices(hull, self.max_hull_vertices)

        points = self.frame.to_engine(hull)
        if signed_area(points) < 0:
            points = reverse_winding(points)
        return ConvexPolylineCollider(points=points)

    def heightfield(self, boundary: Boundary) -> HeightfieldCollider:
        """One height per pixel column of the region's bounding box."""
        self._check(boundary)
        # A synthetic outline runs along pixel edges, so sample the pixels
        source = boundary.pixels or boundary.points
        samples = heights_from_points(source, self.heightfield_side)

        left = min(p[0] for p in source)
        bottom = max(p[1] for p in source)
        # Bottom edge of the lowest pixel row
        origin = self.frame.point_to_engine(left, bottom + 1)
        return HeightfieldCollider(samples=samples, origin=origin)

    @staticmethod
    def _check(boundary: Boundary) -> None:
        assert len(boundary) >= 1, (
            f"boundary of region {boundary.region_index} has no points"
        )
