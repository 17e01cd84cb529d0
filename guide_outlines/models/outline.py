"""Outline (목차) related data models."""

from typing import List, Dict, Any, Tuple, Union
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SubsectionGroup:
    """하위 항목 목록을 가진 소절 (예: API 모듈과 멤버 목록)"""

    subsection: str
    subsub_sections: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subsection": self.subsection,
            "subsubSections": list(self.subsub_sections),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SubsectionGroup":
        """
        리터럴 형태의 딕셔너리에서 소절 그룹을 생성합니다.

        Raises:
            ValueError: 필수 키가 없거나 타입이 올바르지 않은 경우
        """
        if not isinstance(data, dict):
            raise ValueError(f"소절 그룹은 딕셔너리여야 합니다: {data!r}")

        title = data.get("subsection")
        items = data.get("subsubSections")
        if not isinstance(title, str) or not title:
            raise ValueError(f"'subsection'은 비어 있지 않은 문자열이어야 합니다: {data!r}")
        if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
            raise ValueError(
                f"'subsubSections'는 문자열 리스트여야 합니다: {title}"
            )

        return cls(subsection=title, subsub_sections=tuple(items))


SubsectionEntry = Union[str, SubsectionGroup]


@dataclass(frozen=True)
class OutlineSection:
    """목차의 최상위 섹션"""

    section: str
    subsections: Tuple[SubsectionEntry, ...] = ()

    def titles(self) -> List[str]:
        """소절 제목 목록 (그룹은 그룹 제목)"""
        return [
            entry.subsection if isinstance(entry, SubsectionGroup) else entry
            for entry in self.subsections
        ]

    def groups(self) -> List[SubsectionGroup]:
        return [e for e in self.subsections if isinstance(e, SubsectionGroup)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "section": self.section,
            "subsections": [
                entry.to_dict() if isinstance(entry, SubsectionGroup) else entry
                for entry in self.subsections
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OutlineSection":
        """
        리터럴 형태의 딕셔너리에서 섹션을 생성합니다.

        Args:
            data: {"section": ..., "subsections": [...]} 형태의 딕셔너리

        Returns:
            OutlineSection 인스턴스

        Raises:
            ValueError: 구조가 올바르지 않은 경우
        """
        if not isinstance(data, dict):
            raise ValueError(f"섹션은 딕셔너리여야 합니다: {data!r}")

        title = data.get("section")
        raw_subsections = data.get("subsections")
        if not isinstance(title, str) or not title:
            raise ValueError(f"'section'은 비어 있지 않은 문자열이어야 합니다: {data!r}")
        if not isinstance(raw_subsections, list):
            raise ValueError(f"'subsections'는 리스트여야 합니다: {title}")

        subsections: List[SubsectionEntry] = []
        for entry in raw_subsections:
            if isinstance(entry, str):
                subsections.append(entry)
            else:
                subsections.append(SubsectionGroup.from_dict(entry))

        return cls(section=title, subsections=tuple(subsections))


@dataclass(frozen=True)
class Outline:
    """이름이 붙은 문서 목차"""

    name: str
    title: str
    sections: Tuple[OutlineSection, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.sections)

    def __iter__(self):
        return iter(self.sections)

    def section_titles(self) -> List[str]:
        return [s.section for s in self.sections]

    def to_list(self) -> List[Dict[str, Any]]:
        """목차를 원래의 리터럴 형태(중첩 리스트/딕셔너리)로 변환합니다."""
        return [s.to_dict() for s in self.sections]

    @classmethod
    def from_list(
        cls, name: str, title: str, data: List[Dict[str, Any]]
    ) -> "Outline":
        if not isinstance(data, list):
            raise ValueError(f"목차는 섹션 리스트여야 합니다: {type(data).__name__}")
        return cls(
            name=name,
            title=title,
            sections=tuple(OutlineSection.from_dict(item) for item in data),
        )
