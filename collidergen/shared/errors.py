"""
Exceptions raised by collidergen.
"""

from typing import Optional


class ColliderGenError(Exception):
    """Base exception for collider generation errors."""
    pass


class UnsupportedFormatError(ColliderGenError):
    """Image buffer has no usable transparency channel."""

    def __init__(self, mode: Optional[str], reason: Optional[str] = None):
        self.mode = mode
        self.reason = reason or "no alpha channel present"
        super().__init__(f"Unsupported image format {mode!r}: {self.reason}")
