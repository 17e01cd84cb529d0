"""
guide-outlines - 가이드 문서 목차 카탈로그

jQuery 가이드와 Core-JS 가이드의 섹션/소절 목차를 정적 데이터로 제공하고,
JSON 내보내기, 구조 검사, 평탄화와 제목 검색을 지원하는 패키지입니다.
"""

__version__ = "0.1.0"

# Catalog
from .catalog import (
    JQUERY_OUTLINE,
    CORE_JS_OUTLINE,
    list_outlines,
    get_outline,
    get_raw_outline,
)

# Core classes and functions
from .core.config import Config, validate_config
from .core.validate import check_outline, validate_outline
from .core.codec import dumps, loads, load_outline, save_outline, read_outline
from .core.navigate import flatten_outline, find_section, outline_statistics
from .core.search import OutlineSearch, SearchType, SearchResult

# Data models
from .models.outline import Outline, OutlineSection, SubsectionGroup
from .models.entry import OutlineEntry

# Utilities
from .utils.format import (
    format_hierarchy_path,
    format_outline,
    format_search_results,
    format_statistics,
)

__all__ = [
    # Version info
    "__version__",
    # Catalog
    "JQUERY_OUTLINE",
    "CORE_JS_OUTLINE",
    "list_outlines",
    "get_outline",
    "get_raw_outline",
    # Core
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
    # Data models
    "Outline",
    "OutlineSection",
    "SubsectionGroup",
    "OutlineEntry",
    # Utilities
    "format_hierarchy_path",
    "format_outline",
    "format_search_results",
    "format_statistics",
]
