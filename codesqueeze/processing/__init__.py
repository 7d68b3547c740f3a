"""
codesqueeze processing layer.

This module provides the dispatcher, the offload execution context and the
statistics helpers.
"""

from .dispatcher import ProcessingDispatcher, run, run_auto
from .executor import ExecutionContext
from .stats import byte_length, compute_stats, format_bytes
from .worker import execute_request, handle_message, resolve_kind, resolve_operation

__all__ = [
    "ProcessingDispatcher",
    "ExecutionContext",
    "run",
    "run_auto",
    "execute_request",
    "handle_message",
    "resolve_operation",
    "resolve_kind",
    "compute_stats",
    "byte_length",
    "format_bytes",
]
