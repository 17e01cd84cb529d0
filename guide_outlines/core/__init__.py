"""Core functionality for guide_outlines package."""

from .config import Config, validate_config
from .validate import check_outline, validate_outline
from .codec import dumps, loads, load_outline, save_outline, read_outline
from .navigate import flatten_outline, find_section, outline_statistics
from .search import OutlineSearch, SearchType, SearchResult

__all__ = [
    "Config",
    "validate_config",
    "check_outline",
    "validate_outline",
    "dumps",
    "loads",
    "load_outline",
    "save_outline",
    "read_outline",
    "flatten_outline",
    "find_section",
    "outline_statistics",
    "OutlineSearch",
    "SearchType",
    "SearchResult",
]
