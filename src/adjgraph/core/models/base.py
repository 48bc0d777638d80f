"""
Common validation used across the graph models.
"""

from typing import Any, Hashable

from ..exceptions import InvalidVertexError


def validate_vertex_value(value: Any) -> Hashable:
    """Validate that a value can act as a vertex identity key."""
    if value is None:
        raise InvalidVertexError("vertex value must not be None")
    try:
        hash(value)
    except TypeError as e:
        raise InvalidVertexError(
            f"vertex value must be hashable; got {type(value).__name__}"
        ) from e
    return value
