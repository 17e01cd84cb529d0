"""
목차, 검색 결과, 통계 포맷팅 유틸리티
"""

from typing import List, Dict, Any, Sequence

from ..models.outline import Outline, SubsectionGroup
from ..core.search import SearchResult


def format_hierarchy_path(path: Sequence[str]) -> str:
    """
    계층 경로를 "섹션 > 소절 > 항목" 형태로 포맷팅합니다.

    Args:
        path: 루트부터의 제목 목록

    Returns:
        포맷팅된 계층 경로
    """
    if not path:
        return "(최상위)"
    return " > ".join(path)


def format_outline(outline: Outline, indent: str = "  ") -> str:
    """
    목차를 들여쓰기된 텍스트 트리로 포맷팅합니다.

    Args:
        outline: 포맷팅할 목차
        indent: 레벨당 들여쓰기 문자열

    Returns:
        텍스트 트리
    """
    lines = [f"📖 {outline.title}"]

    for i, section in enumerate(outline.sections, 1):
        lines.append(f"{i}. {section.section}")
        for sub in section.subsections:
            if isinstance(sub, SubsectionGroup):
                marker = "" if sub.subsub_sections else " (비어 있음)"
                lines.append(f"{indent}- {sub.subsection}{marker}")
                for item in sub.subsub_sections:
                    lines.append(f"{indent * 2}· {item}")
            else:
                lines.append(f"{indent}- {sub}")

    return "\n".join(lines)


def format_search_results(results: List[SearchResult]) -> str:
    """검색 결과를 포맷팅합니다."""
    if not results:
        return "검색 결과가 없습니다."

    formatted_results = []

    for i, result in enumerate(results, 1):
        formatted_results.append(
            f"📄 결과 {i} [{result.outline}] 점수: {result.score:.2f} (레벨 {result.level})\n"
            f"📍 위치: {format_hierarchy_path(result.path)}"
        )

    return "\n".join(formatted_results)


def format_statistics(stats: Dict[str, Any]) -> str:
    """목차 통계를 포맷팅합니다."""
    return "\n".join(
        [
            f"📊 {stats.get('title', stats.get('name', ''))} 목차 통계:",
            f"   - 섹션 수: {stats.get('section_count', 0):,}",
            f"   - 소절 수: {stats.get('subsection_count', 0):,}",
            f"   - 소절 그룹 수: {stats.get('group_count', 0):,}",
            f"   - 하위 항목 수: {stats.get('leaf_item_count', 0):,}",
            f"   - 빈 그룹 수: {stats.get('empty_group_count', 0):,}",
            f"   - 전체 항목 수: {stats.get('entry_count', 0):,}",
        ]
    )
