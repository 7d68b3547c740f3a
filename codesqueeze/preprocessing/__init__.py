"""
JSON repair module.

This module provides the repair pipeline that turns loosely formatted,
JS-object-literal-like text into strict JSON before parsing. The repair is
broken down into small ordered steps composed into a pipeline.
"""

from .base import RepairStepBase
from .pipeline import RepairPipeline, repair
from .repairers import (
    BareValueDetector,
    CommentStripper,
    KeyQuoter,
    SingleQuoteConverter,
    TrailingCommaRemover,
)

__all__ = [
    "RepairPipeline",
    "RepairStepBase",
    "repair",
    "CommentStripper",
    "TrailingCommaRemover",
    "KeyQuoter",
    "SingleQuoteConverter",
    "BareValueDetector",
]
