"""
Base classes for JSON repair steps.

This module contains the base class used by repair steps so they can be
composed in a pipeline.
"""

from ..utils.config import RepairSettings


class RepairStepBase:
    """Base class for repair steps with common functionality."""

    def should_apply(self, _settings: RepairSettings) -> bool:
        """Default implementation - always apply. Override in subclasses."""
        return True

    def process(self, text: str, _settings: RepairSettings) -> str:
        """Process the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")
