"""
목차 탐색: 계층 평탄화, 섹션 조회, 통계
"""

import logging
from typing import List, Dict, Any, Optional

from ..models.outline import Outline, OutlineSection, SubsectionGroup
from ..models.entry import OutlineEntry

logger = logging.getLogger(__name__)


def flatten_outline(outline: Outline) -> List[OutlineEntry]:
    """
    목차를 문서 순서대로 평탄화합니다.

    레벨 0은 섹션, 1은 소절(또는 소절 그룹), 2는 그룹의 하위 항목입니다.

    Args:
        outline: 평탄화할 목차

    Returns:
        OutlineEntry 리스트
    """
    entries = []

    for index, section in enumerate(outline.sections):
        section_path = (section.section,)
        entries.append(
            OutlineEntry(
                title=section.section, level=0, path=section_path, section_index=index
            )
        )

        for sub in section.subsections:
            if isinstance(sub, SubsectionGroup):
                group_path = section_path + (sub.subsection,)
                entries.append(
                    OutlineEntry(
                        title=sub.subsection,
                        level=1,
                        path=group_path,
                        section_index=index,
                    )
                )
                for item in sub.subsub_sections:
                    entries.append(
                        OutlineEntry(
                            title=item,
                            level=2,
                            path=group_path + (item,),
                            section_index=index,
                        )
                    )
            else:
                entries.append(
                    OutlineEntry(
                        title=sub, level=1, path=section_path + (sub,), section_index=index
                    )
                )

    logger.debug(f"목차 평탄화: {outline.name} -> {len(entries)}개 항목")
    return entries


def find_section(outline: Outline, title: str) -> Optional[OutlineSection]:
    """제목으로 섹션을 찾습니다 (대소문자 무시)."""
    wanted = title.strip().casefold()
    for section in outline.sections:
        if section.section.casefold() == wanted:
            return section
    return None


def outline_statistics(outline: Outline) -> Dict[str, Any]:
    """
    목차 통계 정보를 조회합니다.

    Returns:
        섹션/소절/그룹/하위 항목 개수
    """
    subsection_count = 0
    group_count = 0
    leaf_item_count = 0
    empty_group_count = 0

    for section in outline.sections:
        subsection_count += len(section.subsections)
        for group in section.groups():
            group_count += 1
            leaf_item_count += len(group.subsub_sections)
            if not group.subsub_sections:
                empty_group_count += 1

    section_count = len(outline.sections)
    return {
        "name": outline.name,
        "title": outline.title,
        "section_count": section_count,
        "subsection_count": subsection_count,
        "group_count": group_count,
        "leaf_item_count": leaf_item_count,
        "empty_group_count": empty_group_count,
        "entry_count": section_count + subsection_count + leaf_item_count,
    }
