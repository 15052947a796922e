"""Configuration and logging setup shared by every medscribe component."""

from __future__ import annotations

from medscribe.core.config import (
    AppSettings,
    DocxConfig,
    ObservabilityConfig,
    RasterLayoutConfig,
    SnapshotConfig,
)
from medscribe.core.logging_config import setup_logging

__all__ = [
    "AppSettings",
    "DocxConfig",
    "ObservabilityConfig",
    "RasterLayoutConfig",
    "SnapshotConfig",
    "setup_logging",
]
