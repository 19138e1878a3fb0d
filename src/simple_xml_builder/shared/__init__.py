"""Shared utilities for XML document building.

This module provides the render configuration, result and diagnostic types,
and logging helpers used across the escaping, tree and api layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    RenderConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import (
    ConversionResult,
    DiagnosticEntry,
    DiagnosticSeverity,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "RenderConfig",
    "CorrelationLogger",
    "get_logger",
    "ConversionResult",
    "DiagnosticEntry",
    "DiagnosticSeverity",
]
