"""
Utility functions for traversal operations.

Every traversal in the package runs as an explicit-stack or queue loop and
ticks a ``TraversalGuard`` once per expanded vertex. The guard bounds the work
a single call may do and lets another thread cancel it.
"""

import gc
import logging
import os
import time
from threading import Event
from typing import Optional

import psutil

from ..exceptions import TraversalAbortedError

logger = logging.getLogger(__name__)

# Check memory at most every 100ms
MEMORY_CHECK_INTERVAL = 0.1


class TraversalGuard:
    """
    Step, memory and cancellation limits for graph traversals.

    Attributes:
        max_steps: Maximum vertex expansions per traversal, unlimited if None
        max_memory_mb: Maximum RSS growth during a traversal, unlimited if None
        cancel_event: Event that aborts running traversals once set
    """

    def __init__(
        self,
        max_steps: Optional[int] = None,
        max_memory_mb: Optional[float] = None,
        cancel_event: Optional[Event] = None,
    ):
        self.max_steps = max_steps
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.cancel_event = cancel_event or Event()
        self.steps = 0
        self.start_memory = get_memory_usage() if self.max_memory else 0
        self._peak_memory = self.start_memory
        self._last_check = time.time()

    def start(self) -> "TraversalGuard":
        """Reset the per-traversal counters."""
        self.steps = 0
        if self.max_memory:
            self.start_memory = get_memory_usage()
            self._peak_memory = self.start_memory
        self._last_check = time.time()
        return self

    def tick(self) -> None:
        """Account for one vertex expansion."""
        if self.cancel_event.is_set():
            logger.error(f"Traversal cancelled after {self.steps} steps")
            raise TraversalAbortedError("traversal cancelled")

        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            logger.error(f"Traversal exceeded step budget of {self.max_steps}")
            raise TraversalAbortedError(f"traversal exceeded {self.max_steps} steps")

        if self.max_memory:
            self._check_memory()

    def cancel(self) -> None:
        self.cancel_event.set()

    def reset_cancel(self) -> None:
        self.cancel_event.clear()

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024

    def _check_memory(self) -> None:
        current_time = time.time()
        if current_time - self._last_check < MEMORY_CHECK_INTERVAL:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)
        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory before giving up
            gc.collect()
            current = get_memory_usage()
            if current - self.start_memory > self.max_memory:
                logger.error(
                    f"Traversal memory usage {current / 1024 / 1024:.1f}MB exceeds "
                    f"limit of {self.max_memory / 1024 / 1024:.1f}MB"
                )
                raise TraversalAbortedError(
                    f"traversal memory growth exceeds {self.max_memory / 1024 / 1024:.1f}MB"
                )


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
