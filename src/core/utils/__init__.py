"""
Shared utilities for logging and wildcard pattern handling.
"""

from src.core.utils.logging import configure_logging, log_operation, log_structured
from src.core.utils.patterns import compile_wildcard, has_wildcard, wildcard_match, wildcard_to_regex

__all__ = [
    "configure_logging",
    "log_operation",
    "log_structured",
    "compile_wildcard",
    "has_wildcard",
    "wildcard_match",
    "wildcard_to_regex",
]
