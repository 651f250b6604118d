"""Core package exports for the scrolling pager indicator."""

# Re-export commonly used modules for convenience.
from . import dot_config, dots, indicator, pager, settle, transitions, window

__all__ = [
    "dot_config",
    "dots",
    "indicator",
    "pager",
    "settle",
    "transitions",
    "window",
]
