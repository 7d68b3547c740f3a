"""
Repair pipeline for composable JSON repair steps.

This module implements the pipeline pattern so the lenient-to-strict rewrite
runs as an ordered sequence of steps selected by configuration.
"""

from typing import Optional

from ..core.interfaces import RepairStep
from ..utils.config import RepairSettings
from .repairers import (
    BareValueDetector,
    CommentStripper,
    KeyQuoter,
    SingleQuoteConverter,
    TrailingCommaRemover,
)


class RepairPipeline:
    """Manages a sequence of repair steps applied to JSON-like text."""

    def __init__(self, steps: Optional[list[RepairStep]] = None):
        self.steps = steps or []

    def add_step(self, step: RepairStep) -> None:
        """Add a repair step to the pipeline."""
        self.steps.append(step)

    def process(self, text: str, settings: Optional[RepairSettings] = None) -> str:
        """Trim the text, then apply all applicable steps in order."""
        if settings is None:
            settings = RepairSettings()

        result = text.strip()
        for step in self.steps:
            if step.should_apply(settings):
                result = step.process(result, settings)
        return result

    @classmethod
    def create_default_pipeline(cls) -> "RepairPipeline":
        """Create the standard repair pipeline. Step order matters."""
        pipeline = cls()
        pipeline.add_step(CommentStripper())
        pipeline.add_step(TrailingCommaRemover())
        pipeline.add_step(KeyQuoter())
        pipeline.add_step(SingleQuoteConverter(SingleQuoteConverter.KEYS))
        pipeline.add_step(SingleQuoteConverter(SingleQuoteConverter.VALUES))
        pipeline.add_step(BareValueDetector())
        return pipeline


def repair(text: str, settings: Optional[RepairSettings] = None) -> str:
    """
    Rewrite JS-object-literal-like text into strict JSON.

    Raises:
        MalformedInputError: when unquoted identifiers are used as values
    """
    return RepairPipeline.create_default_pipeline().process(text, settings)
