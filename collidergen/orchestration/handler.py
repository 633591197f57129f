"""
Main handler for collider generation.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Iterable, Optional

from collidergen.shared.config import Settings, get_settings
from collidergen.shared.models import (
    ColliderGeometry,
    GenerationResult,
    Point,
    Region,
    RegionColliders,
    ShapeKind,
)
from collidergen.vectorization.contour_tracer import ContourTracer
from collidergen.vectorization.coordinates import CoordinateFrame
from collidergen.vectorization.shape_projector import ShapeProjector
from collidergen.vision.image_buffer import ImageBuffer, as_image_buffer
from collidergen.vision.pixel_classifier import PixelClassifier
from collidergen.vision.region_segmenter import RegionSegmenter

logger = logging.getLogger(__name__)


class ColliderGenerationHandler:
    """
    Main collider generation handler.

    Runs the full pipeline for one image:
    - Alpha classification into an occupancy mask
    - Connected-region segmentation
    - Boundary tracing per region
    - Shape projection per region and requested kind

    Regions are independent after segmentation, so in parallel mode
    tracing and projection run on a thread pool. Results always follow
    region discovery order.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize collider generation handler."""
        self.settings = settings or get_settings()

        self.classifier = PixelClassifier()
        self.segmenter = RegionSegmenter(self.settings.generation.connectivity)
        self.tracer = ContourTracer()

    def generate(
        self,
        image: Any,
        kinds: Optional[Iterable[ShapeKind]] = None,
    ) -> GenerationResult:
        """
        Generate colliders for every region of an image.

        Args:
            image: ImageBuffer, numpy array or Pillow image with alpha
            kinds: Shape kinds to generate; defaults to the configured ones

        Returns:
            Collider sets in region discovery order

        Raises:
            UnsupportedFormatError: If the image has no alpha channel
        """
        buffer = as_image_buffer(image)
        config = self.settings.generation
        kinds = list(dict.fromkeys(ShapeKind(k) for k in (kinds or config.shape_kinds)))

        logger.info(
            f"Generating {', '.join(k.value for k in kinds)} colliders "
            f"for {buffer.width}x{buffer.height} image"
        )

        regions = self._segment(buffer)
        if not regions:
            logger.info("Image has no visible pixels; returning empty result")
            return GenerationResult(
                image_width=buffer.width,
                image_height=buffer.height,
                kinds=kinds,
            )

        projector = self._projector(buffer)
        process = partial(self._process_region, projector=projector, kinds=kinds)

        if self.settings.is_parallel and len(regions) > 1:
            with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
                # map yields in submission order, not completion order
                region_colliders = list(executor.map(process, regions))
        else:
            region_colliders = [process(region) for region in regions]

        logger.info(f"Generated colliders for {len(region_colliders)} region(s)")

        return GenerationResult(
            image_width=buffer.width,
            image_height=buffer.height,
            kinds=kinds,
            regions=region_colliders,
        )

    def boundaries(self, image: Any) -> list[list[Point]]:
        """
        Trace every region and return its boundary in engine coordinates.

        Useful for drawing filled shapes that line up with the colliders.
        """
        buffer = as_image_buffer(image)
        frame = self._frame(buffer)
        return [
            frame.to_engine(self.tracer.trace(region).points)
            for region in self._segment(buffer)
        ]

    def _segment(self, buffer: ImageBuffer) -> list[Region]:
        mask = self.classifier.classify(buffer)
        regions = self.segmenter.segment(mask)
        logger.info(f"Found {len(regions)} region(s)")
        return regions

    def _frame(self, buffer: ImageBuffer) -> CoordinateFrame:
        return CoordinateFrame(
            buffer.width,
            buffer.height,
            self.settings.generation.coordinate_mode,
        )

    def _projector(self, buffer: ImageBuffer) -> ShapeProjector:
        config = self.settings.generation
        return ShapeProjector(
            self._frame(buffer),
            decimation_tolerance=config.decimation_tolerance,
            max_hull_vertices=config.max_hull_vertices,
            heightfield_side=config.heightfield_side,
        )

    def _process_region(
        self,
        region: Region,
        projector: ShapeProjector,
        kinds: list[ShapeKind],
    ) -> RegionColliders:
        boundary = self.tracer.trace(region)
        return RegionColliders(
            region_index=region.index,
            bounds=region.bounds,
            area=region.area,
            synthetic_boundary=boundary.synthetic,
            colliders=projector.project(boundary, kinds),
        )


def generate_colliders(
    image: Any,
    kind: ShapeKind,
    settings: Optional[Settings] = None,
) -> list[ColliderGeometry]:
    """
    Generate one collider of the given kind per region in the image.

    Args:
        image: ImageBuffer, numpy array or Pillow image with alpha
        kind: Shape kind to generate
        settings: Optional settings, defaults to the cached ones

    Returns:
        Colliders in region discovery order
    """
    kind = ShapeKind(kind)
    result = ColliderGenerationHandler(settings).generate(image, kinds=[kind])
    return result.colliders(kind)


def generate_collider(
    image: Any,
    kind: ShapeKind,
    settings: Optional[Settings] = None,
) -> Optional[ColliderGeometry]:
    """
    Generate a collider for the first region of the image.

    Returns:
        Collider of region 0, or None when the image has no visible pixels
    """
    colliders = generate_colliders(image, kind, settings)
    return colliders[0] if colliders else None
