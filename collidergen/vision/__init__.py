"""
Vision module for collidergen.

Turns decoded pixels into an occupancy mask and connected regions.
"""

from collidergen.vision.image_buffer import ImageBuffer, as_image_buffer
from collidergen.vision.pixel_classifier import PixelClassifier
from collidergen.vision.region_segmenter import RegionSegmenter

__all__ = [
    "ImageBuffer",
    "as_image_buffer",
    "PixelClassifier",
    "RegionSegmenter",
]
