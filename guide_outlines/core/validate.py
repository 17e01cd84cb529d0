"""
목차 리터럴의 구조 검사

섹션/소절 형태가 올바른지 확인하고 발견된 모든 오류를 모아서 보고합니다.
"""

import logging
from typing import List, Any

logger = logging.getLogger(__name__)

SECTION_KEYS = {"section", "subsections"}
GROUP_KEYS = {"subsection", "subsubSections"}


def _check_group(entry: Any, where: str) -> List[str]:
    errors = []

    if set(entry) != GROUP_KEYS:
        errors.append(
            f"{where}: 소절 그룹의 키는 {sorted(GROUP_KEYS)} 이어야 합니다 (현재: {sorted(entry, key=str)})"
        )

    title = entry.get("subsection")
    if not isinstance(title, str) or not title:
        errors.append(f"{where}: 'subsection'은 비어 있지 않은 문자열이어야 합니다.")

    items = entry.get("subsubSections")
    if not isinstance(items, list):
        errors.append(f"{where}: 'subsubSections'는 리스트여야 합니다.")
    else:
        for k, item in enumerate(items):
            if not isinstance(item, str):
                errors.append(
                    f"{where}.subsubSections[{k}]: 문자열이어야 합니다 (현재: {type(item).__name__})"
                )

    return errors


def check_outline(data: Any, allow_groups: bool = True) -> List[str]:
    """
    목차 리터럴의 구조를 검사합니다.

    Args:
        data: 검사할 목차 리터럴
        allow_groups: 소절 그룹(subsection/subsubSections) 허용 여부

    Returns:
        오류 메시지 리스트 (비어 있으면 올바른 구조)
    """
    if not isinstance(data, list):
        return [f"목차는 리스트여야 합니다 (현재: {type(data).__name__})"]

    errors = []

    for i, entry in enumerate(data):
        where = f"[{i}]"

        if not isinstance(entry, dict):
            errors.append(f"{where}: 섹션은 딕셔너리여야 합니다.")
            continue

        if set(entry) != SECTION_KEYS:
            errors.append(
                f"{where}: 섹션의 키는 {sorted(SECTION_KEYS)} 이어야 합니다 (현재: {sorted(entry, key=str)})"
            )

        title = entry.get("section")
        if not isinstance(title, str) or not title:
            errors.append(f"{where}: 'section'은 비어 있지 않은 문자열이어야 합니다.")

        subsections = entry.get("subsections")
        if not isinstance(subsections, list):
            errors.append(f"{where}: 'subsections'는 리스트여야 합니다.")
            continue

        for j, sub in enumerate(subsections):
            sub_where = f"{where}.subsections[{j}]"
            if isinstance(sub, str):
                continue
            if isinstance(sub, dict) and allow_groups:
                errors.extend(_check_group(sub, sub_where))
            elif isinstance(sub, dict):
                errors.append(f"{sub_where}: 이 목차에서는 소절 그룹을 사용할 수 없습니다.")
            else:
                errors.append(
                    f"{sub_where}: 소절은 문자열이어야 합니다 (현재: {type(sub).__name__})"
                )

    logger.debug(f"목차 구조 검사: {len(data)}개 섹션, {len(errors)}개 오류")
    return errors


def validate_outline(data: Any, allow_groups: bool = True) -> None:
    """
    목차 구조 유효성 검사 함수

    Raises:
        ValueError: 구조가 올바르지 않은 경우
    """
    errors = check_outline(data, allow_groups=allow_groups)
    if errors:
        error_message = "목차 구조 오류가 발견되었습니다:\n" + "\n".join(
            f"  - {error}" for error in errors
        )
        raise ValueError(error_message)
