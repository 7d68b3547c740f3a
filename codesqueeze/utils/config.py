"""
Configuration for codesqueeze processing.

This module defines the repair, formatting and dispatch settings used by the
transforms and the processing dispatcher.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from ..core.constants import DEFAULT_INDENT, DEFAULT_SIZE_THRESHOLD_BYTES

OFFLOAD_BACKENDS = ("process", "thread")


@dataclass
class RepairSettings:
    """Granular control over JSON repair steps.

    Bare value detection is not a setting: it always runs.
    """

    strip_comments: bool = True
    remove_trailing_commas: bool = True
    quote_keys: bool = True
    convert_single_quotes: bool = True

    @classmethod
    def conservative(cls) -> "RepairSettings":
        """Only remove things strict JSON never contains."""
        return cls(quote_keys=False, convert_single_quotes=False)

    @classmethod
    def aggressive(cls) -> "RepairSettings":
        return cls()

    @classmethod
    def from_features(cls, enabled_features: Iterable[str]) -> "RepairSettings":
        """Create settings with only the named repair steps enabled."""
        settings = cls(
            strip_comments=False,
            remove_trailing_commas=False,
            quote_keys=False,
            convert_single_quotes=False,
        )
        for feature_name in enabled_features:
            if hasattr(settings, feature_name):
                setattr(settings, feature_name, True)
        return settings


@dataclass
class FormattingSettings:
    """Indentation used by the format operations."""

    json_indent: int = DEFAULT_INDENT
    js_indent: int = DEFAULT_INDENT


@dataclass
class DispatchSettings:
    """Sync/offload routing settings."""

    size_threshold_bytes: int = DEFAULT_SIZE_THRESHOLD_BYTES
    offload_backend: str = "process"
    max_workers: int = 1


@dataclass
class ProcessingConfig:
    """Configuration options for codesqueeze processing."""

    repair: Optional[RepairSettings] = None
    formatting: Optional[FormattingSettings] = None
    dispatch: Optional[DispatchSettings] = None

    def __init__(
        self,
        *,
        repair: Optional[RepairSettings] = None,
        formatting: Optional[FormattingSettings] = None,
        dispatch: Optional[DispatchSettings] = None,
        **config_options: Any,
    ):
        self.repair = repair or RepairSettings()

        if formatting is not None:
            self.formatting = formatting
        else:
            self.formatting = FormattingSettings(
                json_indent=config_options.get("json_indent", DEFAULT_INDENT),
                js_indent=config_options.get("js_indent", DEFAULT_INDENT),
            )

        if dispatch is not None:
            self.dispatch = dispatch
        else:
            self.dispatch = DispatchSettings(
                size_threshold_bytes=config_options.get(
                    "size_threshold_bytes", DEFAULT_SIZE_THRESHOLD_BYTES
                ),
                offload_backend=config_options.get("offload_backend", "process"),
                max_workers=config_options.get("max_workers", 1),
            )

        if self.dispatch.size_threshold_bytes < 0:
            raise ValueError("size_threshold_bytes must not be negative")
        if self.dispatch.offload_backend not in OFFLOAD_BACKENDS:
            raise ValueError(
                f"offload_backend must be one of {', '.join(OFFLOAD_BACKENDS)}"
            )
        if self.dispatch.max_workers < 1:
            raise ValueError("max_workers must be positive")
        if self.formatting.json_indent < 0 or self.formatting.js_indent < 0:
            raise ValueError("indent must not be negative")

    @property
    def size_threshold_bytes(self) -> int:
        """Inputs larger than this many UTF-8 bytes are offloaded."""
        assert self.dispatch is not None
        return self.dispatch.size_threshold_bytes

    @property
    def offload_backend(self) -> str:
        assert self.dispatch is not None
        return self.dispatch.offload_backend

    @property
    def max_workers(self) -> int:
        assert self.dispatch is not None
        return self.dispatch.max_workers

    @property
    def json_indent(self) -> int:
        assert self.formatting is not None
        return self.formatting.json_indent

    @property
    def js_indent(self) -> int:
        assert self.formatting is not None
        return self.formatting.js_indent
