"""
Orchestration module for collidergen.
"""

from collidergen.orchestration.handler import (
    ColliderGenerationHandler,
    generate_collider,
    generate_colliders,
)

__all__ = [
    "ColliderGenerationHandler",
    "generate_collider",
    "generate_colliders",
]
