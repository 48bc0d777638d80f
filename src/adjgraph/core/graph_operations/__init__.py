"""Graph algorithms that operate on the vertex/edge model."""

from .models import NOT_FOUND_DISTANCE, PathResult
from .utils import TraversalGuard

__all__ = [
    "NOT_FOUND_DISTANCE",
    "PathResult",
    "TraversalGuard",
]
