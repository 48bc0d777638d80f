"""
adjgraph - In-memory Graph Data Structures

This package provides adjacency-list graphs addressed by vertex value. It
includes:

- Directed and undirected graphs with optional vertex and edge weights
- Reachability, path search, cycle detection and Euler analysis
- Adjacency and incidence matrix export
- A lock-guarded wrapper for sharing a graph between threads

For more information, please see the documentation.
"""

__version__ = "0.1.0"
__author__ = "adjgraph Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("adjgraph requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.config import GraphConfig
from .core.graph import Graph
from .core.models import Edge, Vertex
from .core.synchronized import SynchronizedGraph

__all__ = [
    "Edge",
    "Graph",
    "GraphConfig",
    "SynchronizedGraph",
    "Vertex",
]
