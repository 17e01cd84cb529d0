"""Utility functions for guide_outlines package."""

from .format import (
    format_hierarchy_path,
    format_outline,
    format_search_results,
    format_statistics,
)

__all__ = [
    "format_hierarchy_path",
    "format_outline",
    "format_search_results",
    "format_statistics",
]
