"""
Graph configuration.

A ``GraphConfig`` fixes the direction and weighting of a graph together with
the traversal limits applied to its searches. Configurations coming from
untrusted mappings are validated against a JSON schema before use.

Example:
    >>> config = GraphConfig.from_dict({"directed": True, "weighted_edges": True})
    >>> graph = Graph.from_config(config)
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .exceptions import ConfigurationError
from .graph_operations.utils import TraversalGuard
from .policies import DirectionPolicy, Weighting, direction_for

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "directed": {"type": "boolean"},
        "weighted_vertices": {"type": "boolean"},
        "weighted_edges": {"type": "boolean"},
        "max_traversal_steps": {"type": ["integer", "null"], "minimum": 1},
        "max_memory_mb": {"type": ["number", "null"], "exclusiveMinimum": 0},
        "log_level": {"type": ["string", "null"], "enum": [*LOG_LEVELS, None]},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class GraphConfig:
    """
    Construction-time settings of a graph.

    Attributes:
        directed: Whether edges are one-way
        weighted_vertices: Whether every vertex carries a weight
        weighted_edges: Whether every edge carries a weight
        max_traversal_steps: Vertex expansions allowed per traversal
        max_memory_mb: RSS growth allowed per traversal
        log_level: Level applied to the package logger, untouched if None
    """

    directed: bool = False
    weighted_vertices: bool = False
    weighted_edges: bool = False
    max_traversal_steps: Optional[int] = None
    max_memory_mb: Optional[float] = None
    log_level: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.max_traversal_steps is not None and self.max_traversal_steps < 1:
            raise ConfigurationError("max_traversal_steps must be positive")
        if self.max_memory_mb is not None and self.max_memory_mb <= 0:
            raise ConfigurationError("max_memory_mb must be positive")
        if self.log_level is not None and self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphConfig":
        """
        Build a configuration from a plain mapping.

        Raises:
            ConfigurationError: If the mapping does not match the schema
        """
        try:
            json_validate(instance=dict(data), schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid graph configuration: {e.message}") from e
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @property
    def direction(self) -> DirectionPolicy:
        return direction_for(self.directed)

    @property
    def weighting(self) -> Weighting:
        return Weighting(vertices=self.weighted_vertices, edges=self.weighted_edges)

    def make_guard(self) -> TraversalGuard:
        return TraversalGuard(
            max_steps=self.max_traversal_steps,
            max_memory_mb=self.max_memory_mb,
        )

    def apply_logging(self) -> None:
        """Set the package logger level when one is configured."""
        if self.log_level is not None:
            logging.getLogger("adjgraph").setLevel(self.log_level)
