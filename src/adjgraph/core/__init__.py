"""Core graph functionality."""

from .config import GraphConfig
from .exceptions import (
    ConfigurationError,
    GraphOperationError,
    InvalidVertexError,
    TraversalAbortedError,
    WeightMismatchError,
)
from .models import Edge, Vertex
from .numeric import ArithmeticNumber, IntegerNumber, RealNumber
from .policies import DIRECTED, UNDIRECTED, DirectionPolicy, Weighting
from .graph import Graph
from .graph_operations import NOT_FOUND_DISTANCE, PathResult, TraversalGuard
from .synchronized import SynchronizedGraph, synchronized

__all__ = [
    "ArithmeticNumber",
    "ConfigurationError",
    "DIRECTED",
    "DirectionPolicy",
    "Edge",
    "Graph",
    "GraphConfig",
    "GraphOperationError",
    "IntegerNumber",
    "InvalidVertexError",
    "NOT_FOUND_DISTANCE",
    "PathResult",
    "RealNumber",
    "SynchronizedGraph",
    "TraversalAbortedError",
    "TraversalGuard",
    "UNDIRECTED",
    "Vertex",
    "WeightMismatchError",
    "Weighting",
    "synchronized",
]
