"""
collidergen: 2D physics collider shapes from transparent images.

Pixels that are not fully transparent are grouped into connected
regions; each region's outline is traced and turned into polyline,
convex hull, convex polyline or heightfield geometry.
"""

from collidergen.orchestration import (
    ColliderGenerationHandler,
    generate_collider,
    generate_colliders,
)
from collidergen.shared import (
    ColliderGenError,
    GenerationResult,
    Settings,
    ShapeKind,
    UnsupportedFormatError,
    get_settings,
)
from collidergen.vision import ImageBuffer

__all__ = [
    "ColliderGenerationHandler",
    "generate_collider",
    "generate_colliders",
    "ColliderGenError",
    "GenerationResult",
    "ImageBuffer",
    "Settings",
    "ShapeKind",
    "UnsupportedFormatError",
    "get_settings",
]

__version__ = "0.1.0"
