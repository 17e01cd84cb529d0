"""
등록된 가이드 목차 카탈로그

목차 리터럴을 이름으로 조회하고 Outline 모델로 변환합니다.
"""

import copy
import logging
from typing import List, Dict, Any, Tuple

from ..models.outline import Outline
from .jquery import JQUERY_OUTLINE
from .core_js import CORE_JS_OUTLINE

logger = logging.getLogger(__name__)

# 이름 -> (제목, 리터럴)
OUTLINES: Dict[str, Tuple[str, List[Dict[str, Any]]]] = {
    "jquery": ("jQuery", JQUERY_OUTLINE),
    "core-js": ("Core-JS", CORE_JS_OUTLINE),
}


def normalize_name(name: str) -> str:
    return name.strip().lower().replace("_", "-")


def _resolve(name: str) -> str:
    key = normalize_name(name)
    if key not in OUTLINES:
        raise KeyError(
            f"알 수 없는 목차입니다: {name!r} (사용 가능: {', '.join(OUTLINES)})"
        )
    return key


def list_outlines() -> List[str]:
    """등록된 목차 이름 목록 (등록 순서)"""
    return list(OUTLINES)


def get_raw_outline(name: str) -> List[Dict[str, Any]]:
    """목차 리터럴의 깊은 복사본을 반환합니다."""
    _, data = OUTLINES[_resolve(name)]
    return copy.deepcopy(data)


def get_outline(name: str) -> Outline:
    """
    이름으로 목차를 조회합니다.

    Args:
        name: 목차 이름 (대소문자, '_'/'-' 구분 없음)

    Returns:
        Outline 인스턴스

    Raises:
        KeyError: 등록되지 않은 이름인 경우
    """
    key = _resolve(name)
    title, data = OUTLINES[key]
    outline = Outline.from_list(key, title, data)
    logger.debug(f"목차 로드: {key} ({len(outline)}개 섹션)")
    return outline


__all__ = [
    "OUTLINES",
    "JQUERY_OUTLINE",
    "CORE_JS_OUTLINE",
    "list_outlines",
    "normalize_name",
    "get_outline",
    "get_raw_outline",
]
