"""
Shared configuration, models and errors for collidergen.
"""

from collidergen.shared.config import Settings, get_settings
from collidergen.shared.errors import ColliderGenError, UnsupportedFormatError
from collidergen.shared.models import (
    Boundary,
    BoundingBox,
    ColliderGeometry,
    Connectivity,
    ConvexHullCollider,
    ConvexPolylineCollider,
    CoordinateMode,
    ExecutionMode,
    GenerationResult,
    HeightfieldCollider,
    HeightfieldSide,
    PolylineCollider,
    Region,
    RegionColliders,
    ShapeKind,
)

__all__ = [
    "Settings",
    "get_settings",
    "ColliderGenError",
    "UnsupportedFormatError",
    "Boundary",
    "BoundingBox",
    "ColliderGeometry",
    "Connectivity",
    "ConvexHullCollider",
    "ConvexPolylineCollider",
    "CoordinateMode",
    "ExecutionMode",
    "GenerationResult",
    "HeightfieldCollider",
    "HeightfieldSide",
    "PolylineCollider",
    "Region",
    "RegionColliders",
    "ShapeKind",
]
