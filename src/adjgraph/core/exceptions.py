"""
Custom exceptions for the graph library.

Ordinary "not found" conditions are never raised: queries answer them with
sentinel values (``-1``, ``None``, ``False`` or an empty collection). The
exceptions below are reserved for programming errors, such as using ``None``
as a vertex value or asking for a weight the graph does not carry, and for
traversals aborted by their guard.
"""


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This is the base class of every error raised by the graph engine.

    Examples:
        * Invalid vertex values
        * Weight category mismatches
        * Aborted traversals
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class InvalidVertexError(GraphOperationError):
    """
    Raised when a value cannot identify a vertex.

    Vertex values are identity keys, so they must be hashable and not ``None``.

    Examples:
        * ``graph.insert_vertex(None)``
        * ``graph.degree([1, 2])``
    """


class WeightMismatchError(GraphOperationError):
    """
    Raised when a weight disagrees with the graph's weighting category.

    Examples:
        * Inserting an edge without a weight into an edge-weighted graph
        * Passing a vertex weight to a graph without vertex weights
        * Reading edge weights from a graph that carries none
        * Negative edge weights given to a minimum-weight search
    """


class TraversalAbortedError(GraphOperationError):
    """
    Raised when a traversal exceeds its budget or is cancelled.

    Examples:
        * Step budget exhausted
        * Memory growth above the configured ceiling
        * Cancellation event set by another thread
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown configuration keys
        * Values of the wrong type
        * Non-positive traversal budgets
    """
