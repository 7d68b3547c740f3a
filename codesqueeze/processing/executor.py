"""
Execution context for offloaded processing.

An ``ExecutionContext`` is an explicit handle on an isolated worker pool.
It is acquired and released by its owner (or used as a context manager, which
releases it on every exit path). Requests and replies cross the boundary as
plain message dicts.

There is no timeout, retry or cancellation: a reply that never arrives
leaves the caller waiting.
"""

import logging
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from types import TracebackType
from typing import Optional

from ..core.models import TransformRequest, TransformResult
from ..utils.config import OFFLOAD_BACKENDS, ProcessingConfig
from .worker import handle_message

logger = logging.getLogger(__name__)


class ExecutionContext:
    """Explicitly managed pool that runs requests outside the caller's thread."""

    def __init__(
        self,
        backend: str = "process",
        max_workers: int = 1,
        config: Optional[ProcessingConfig] = None,
    ):
        if backend not in OFFLOAD_BACKENDS:
            raise ValueError(
                f"backend must be one of {', '.join(OFFLOAD_BACKENDS)}"
            )
        if max_workers < 1:
            raise ValueError("max_workers must be positive")
        self.backend = backend
        self.max_workers = max_workers
        self.config = config
        self._executor: Optional[Executor] = None

    @classmethod
    def from_config(cls, config: ProcessingConfig) -> "ExecutionContext":
        return cls(
            backend=config.offload_backend,
            max_workers=config.max_workers,
            config=config,
        )

    @property
    def active(self) -> bool:
        return self._executor is not None

    def acquire(self) -> "ExecutionContext":
        """Start the worker pool. Acquiring an active context is a no-op."""
        if self._executor is None:
            if self.backend == "process":
                self._executor = ProcessPoolExecutor(max_workers=self.max_workers)
            else:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix="codesqueeze",
                )
            logger.debug(
                "Acquired %s execution context (%d workers)",
                self.backend,
                self.max_workers,
            )
        return self

    def release(self) -> None:
        """Shut the worker pool down, waiting for running requests."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
            logger.debug("Released %s execution context", self.backend)

    def submit(self, request: TransformRequest) -> TransformResult:
        """Send one request to the pool and block until its reply arrives."""
        if self._executor is None:
            raise RuntimeError("execution context has not been acquired")
        future = self._executor.submit(
            handle_message, request.to_message(), self.config
        )
        return TransformResult.from_message(future.result())

    def __enter__(self) -> "ExecutionContext":
        return self.acquire()

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.release()
