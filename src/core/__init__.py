"""
Core module for cross-cutting concerns.

This module provides:
- Structured logging configuration
- The CLI execution guard
- Common utilities
"""

from core.logging import bind_context, clear_context, configure_logging, get_logger
from core.runtime import BrowserEnvironmentError, ensure_cli_environment
from core.utils import normalize_string_set, round_half_up

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "BrowserEnvironmentError",
    "ensure_cli_environment",
    "normalize_string_set",
    "round_half_up",
]
