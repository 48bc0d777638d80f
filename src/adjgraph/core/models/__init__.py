"""
Core domain models package.

This package provides the vertex and edge records that make up a graph.
"""

from .base import validate_vertex_value
from .edge import Edge
from .vertex import Vertex

__all__ = [
    "validate_vertex_value",
    "Edge",
    "Vertex",
]
