"""
Vectorization module for collidergen.

Converts region masks to boundaries and boundaries to collider geometry.
"""

from collidergen.vectorization.contour_tracer import ContourTracer
from collidergen.vectorization.coordinates import CoordinateFrame
from collidergen.vectorization.decimation import decimate
from collidergen.vectorization.heightfield import heights_from_points
from collidergen.vectorization.hull import convex_hull, reduce_vertices
from collidergen.vectorization.shape_projector import ShapeProjector

__all__ = [
    "ContourTracer",
    "CoordinateFrame",
    "ShapeProjector",
    "convex_hull",
    "decimate",
    "heights_from_points",
    "reduce_vertices",
]
