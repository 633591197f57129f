"""
Core data models for collidergen.

These models define the regions, boundaries and collider geometry that
flow through the pipeline, from the segmented mask to the final
per-region collider sets handed back to the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Literal, Optional, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field


Point = tuple[float, float]


# =============================================================================
# Enumerations
# =============================================================================

class ShapeKind(str, Enum):
    """Collider shape that can be generated from a boundary."""

    POLYLINE = "polyline"
    CONVEX_HULL = "convex_hull"
    CONVEX_POLYLINE = "convex_polyline"
    HEIGHTFIELD = "heightfield"


class Connectivity(int, Enum):
    """Pixel adjacency used when grouping pixels into regions."""

    FOUR = 4
    EIGHT = 8


class ExecutionMode(str, Enum):
    """How per-region tracing and projection are scheduled."""

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


class CoordinateMode(str, Enum):
    """Placement of engine-space coordinates."""

    # Centered on the image, on either side of (0, 0)
    TRANSLATED = "translated"
    # All coordinates non-negative
    RAW = "raw"


class HeightfieldSide(str, Enum):
    """Which silhouette profile a heightfield samples."""

    TOP = "top"
    BOTTOM = "bottom"


# =============================================================================
# Pipeline intermediates
# =============================================================================

class BoundingBox(BaseModel):
    """Pixel-aligned bounding box in image space (y down)."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(description="Column of the left-most pixel")
    y: int = Field(description="Row of the top-most pixel")
    width: int = Field(description="Number of pixel columns")
    height: int = Field(description="Number of pixel rows")

    @property
    def x2(self) -> int:
        """Column just past the right edge."""
        return self.x + self.width

    @property
    def y2(self) -> int:
        """Row just past the bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> int:
        """Area of bounding box in pixels."""
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        """Check if a pixel lies inside the bounding box."""
        return self.x <= x < self.x2 and self.y <= y < self.y2


@dataclass(frozen=True, eq=False)
class Region:
    """
    One connected set of visible pixels.

    The mask is cropped to ``bounds``; ``mask[r, c]`` is pixel
    ``(bounds.x + c, bounds.y + r)`` of the source image.
    """

    index: int
    bounds: BoundingBox
    mask: np.ndarray
    area: int

    def pixels(self) -> frozenset[tuple[int, int]]:
        """Absolute (x, y) coordinates of every pixel in the region."""
        rows, cols = np.nonzero(self.mask)
        return frozenset(
            (int(c) + self.bounds.x, int(r) + self.bounds.y)
            for r, c in zip(rows, cols)
        )


@dataclass(frozen=True)
class Boundary:
    """Closed, clockwise perimeter of a region in image space."""

    region_index: int
    points: list[tuple[int, int]] = field(default_factory=list)
    synthetic: bool = False
    # Region pixels behind a synthetic outline, row-major
    pixels: list[tuple[int, int]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)


# =============================================================================
# Collider geometry
# =============================================================================

class PolylineCollider(BaseModel):
    """Boundary points, optionally decimated."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["polyline"] = "polyline"
    points: list[Point]
    closed: bool = True

    def indices(self) -> list[tuple[int, int]]:
        """Segment index pairs, including the closing segment."""
        count = len(self.points)
        if count < 2:
            return []
        pairs = [(i, i + 1) for i in range(count - 1)]
        if self.closed and count > 2:
            pairs.append((count - 1, 0))
        return pairs


class ConvexHullCollider(BaseModel):
    """Minimal convex polygon around a boundary, same winding as the boundary."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["convex_hull"] = "convex_hull"
    points: list[Point]


class ConvexPolylineCollider(BaseModel):
    """Convex outline in counter-clockwise order for convex-polyline consumers."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["convex_polyline"] = "convex_polyline"
    points: list[Point]


class HeightfieldCollider(BaseModel):
    """One height per pixel column of the region's bounding box."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["heightfield"] = "heightfield"
    samples: list[tuple[int, float]]
    column_width: float = 1.0
    origin: Point = Field(
        default=(0.0, 0.0),
        description="Engine-space position of the bounding box bottom-left corner",
    )

    @property
    def heights(self) -> list[float]:
        """Heights without their column indices."""
        return [height for _, height in self.samples]

    @property
    def span(self) -> float:
        """Horizontal distance from the first to the last sample."""
        return self.column_width * max(len(self.samples) - 1, 0)


ColliderGeometry = Annotated[
    Union[
        PolylineCollider,
        ConvexHullCollider,
        ConvexPolylineCollider,
        HeightfieldCollider,
    ],
    Field(discriminator="kind"),
]


# =============================================================================
# Results
# =============================================================================

class RegionColliders(BaseModel):
    """Collider geometry generated for one region."""

    model_config = ConfigDict(frozen=True)

    region_index: int
    bounds: BoundingBox
    area: int
    synthetic_boundary: bool = False
    colliders: dict[ShapeKind, ColliderGeometry] = Field(default_factory=dict)

    def get(self, kind: ShapeKind) -> Optional[ColliderGeometry]:
        """Get the collider of one kind, if it was requested."""
        return self.colliders.get(ShapeKind(kind))


class GenerationResult(BaseModel):
    """Per-region collider sets for one image, in region discovery order."""

    model_config = ConfigDict(frozen=True)

    image_width: int
    image_height: int
    kinds: list[ShapeKind]
    regions: list[RegionColliders] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when the image had no visible pixels."""
        return not self.regions

    def colliders(self, kind: ShapeKind) -> list[ColliderGeometry]:
        """All colliders of one kind, indexed by region."""
        kind = ShapeKind(kind)
        if kind not in self.kinds:
            raise KeyError(f"Shape kind {kind.value!r} was not generated")
        return [region.colliders[kind] for region in self.regions]
