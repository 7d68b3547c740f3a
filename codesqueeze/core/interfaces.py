"""
Core interfaces and protocols for codesqueeze.

These define the contracts of pluggable pieces: repair steps composed into
a pipeline, and executors that run requests outside the caller's thread.
"""

from typing import Any, Protocol

from .models import TransformRequest, TransformResult


class RepairStep(Protocol):
    """Protocol for steps in the JSON repair pipeline."""

    def process(self, text: str, config: Any) -> str:
        """Rewrite the text according to this step."""
        ...

    def should_apply(self, config: Any) -> bool:
        """Determine if this step should be applied given the settings."""
        ...


class Offloader(Protocol):
    """Runs a request in an isolated context and replies exactly once."""

    def submit(self, request: TransformRequest) -> TransformResult:
        """Execute the request and return its result."""
        ...
