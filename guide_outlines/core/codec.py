"""
목차 JSON 직렬화 및 파일 입출력
"""

import json
import logging
from pathlib import Path
from typing import List, Dict, Any, Optional, Union

from ..models.outline import Outline
from .validate import validate_outline

logger = logging.getLogger(__name__)


def _as_literal(outline: Union[Outline, List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    if isinstance(outline, Outline):
        return outline.to_list()
    return outline


def dumps(
    outline: Union[Outline, List[Dict[str, Any]]], indent: Optional[int] = None
) -> str:
    """목차를 JSON 문자열로 변환합니다."""
    return json.dumps(_as_literal(outline), indent=indent, ensure_ascii=False)


def loads(text: str, allow_groups: bool = True) -> List[Dict[str, Any]]:
    """
    JSON 문자열에서 목차 리터럴을 읽고 구조를 검사합니다.

    Raises:
        ValueError: JSON 파싱에 실패했거나 구조가 올바르지 않은 경우
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON 파싱 오류: {e}") from e

    validate_outline(data, allow_groups=allow_groups)
    return data


def load_outline(text: str, name: str, title: Optional[str] = None) -> Outline:
    """JSON 문자열에서 Outline을 생성합니다."""
    return Outline.from_list(name, title or name, loads(text))


def save_outline(
    outline: Union[Outline, List[Dict[str, Any]]],
    path: Union[str, Path],
    indent: Optional[int] = 2,
) -> Path:
    """
    목차를 JSON 파일로 저장합니다.

    Args:
        outline: 저장할 목차
        path: 저장 경로 (상위 디렉토리는 자동 생성)
        indent: JSON 들여쓰기

    Returns:
        저장된 파일 경로
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        f.write(dumps(outline, indent=indent))
        f.write("\n")

    logger.info(f"목차를 저장했습니다: {path}")
    return path


def read_outline(
    path: Union[str, Path], name: Optional[str] = None, allow_groups: bool = True
) -> Outline:
    """
    JSON 파일에서 목차를 읽습니다.

    이름을 지정하지 않으면 파일 이름(확장자 제외)을 사용합니다.
    """
    path = Path(path)
    logger.info(f"목차 파일을 읽는 중: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = loads(f.read(), allow_groups=allow_groups)

    name = name or path.stem
    return Outline.from_list(name, name, data)
