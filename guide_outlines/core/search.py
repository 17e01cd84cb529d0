"""
목차 제목 검색 시스템
키워드 검색(Keyword)과 정확한 제목 검색(Exact)을 제공합니다.
"""

import logging
from typing import List, Optional, Tuple
from enum import Enum
from dataclasses import dataclass

from ..models.outline import Outline
from ..catalog import get_outline, list_outlines
from .navigate import flatten_outline

logger = logging.getLogger(__name__)


class SearchType(Enum):
    """검색 유형 열거형"""

    EXACT = "exact"
    KEYWORD = "keyword"


@dataclass
class SearchResult:
    """검색 결과를 나타내는 데이터 클래스"""

    outline: str
    title: str
    level: int
    path: Tuple[str, ...]
    score: float


class OutlineSearch:
    """목차 검색 시스템 클래스"""

    def __init__(self, outlines: Optional[List[Outline]] = None):
        """
        검색 시스템을 초기화합니다.

        Args:
            outlines: 검색 대상 목차 (없으면 카탈로그의 모든 목차)
        """
        if outlines is None:
            outlines = [get_outline(name) for name in list_outlines()]
        self.outlines = list(outlines)
        logger.info(f"검색 시스템 초기화: {len(self.outlines)}개 목차")

    def keyword_search(self, query: str, limit: int = 10) -> List[SearchResult]:
        """
        키워드 검색을 수행합니다.

        점수는 질의어 중 제목에 포함된 단어의 비율입니다.

        Args:
            query: 검색 쿼리
            limit: 반환할 결과 수

        Returns:
            검색 결과 리스트
        """
        logger.info(f"키워드 검색 수행: '{query}'")
        terms = query.casefold().split()

        scored = []
        for outline_index, outline in enumerate(self.outlines):
            for entry_index, entry in enumerate(flatten_outline(outline)):
                title = entry.title.casefold()
                hits = sum(1 for term in terms if term in title)
                if not hits:
                    continue
                score = hits / len(terms)
                scored.append(
                    (
                        -score,
                        outline_index,
                        entry_index,
                        SearchResult(
                            outline=outline.name,
                            title=entry.title,
                            level=entry.level,
                            path=entry.path,
                            score=score,
                        ),
                    )
                )

        scored.sort(key=lambda item: item[:3])
        results = [item[3] for item in scored[:limit]]
        logger.info(f"키워드 검색 결과: {len(results)}개")
        return results

    def exact_search(self, query: str, limit: int = 10) -> List[SearchResult]:
        """제목 전체가 일치하는 항목을 찾습니다 (대소문자 무시)."""
        logger.info(f"정확한 제목 검색 수행: '{query}'")
        wanted = query.strip().casefold()

        results = []
        for outline in self.outlines:
            for entry in flatten_outline(outline):
                if entry.title.casefold() == wanted:
                    results.append(
                        SearchResult(
                            outline=outline.name,
                            title=entry.title,
                            level=entry.level,
                            path=entry.path,
                            score=1.0,
                        )
                    )

        logger.info(f"정확한 제목 검색 결과: {len(results[:limit])}개")
        return results[:limit]

    def search(
        self,
        query: str,
        search_type: SearchType = SearchType.KEYWORD,
        limit: int = 10,
    ) -> List[SearchResult]:
        """
        통합 검색 인터페이스

        Raises:
            ValueError: 질의가 비어 있거나 limit이 0 이하인 경우
        """
        if not query or not query.strip():
            raise ValueError("검색어가 비어 있습니다.")
        if limit <= 0:
            raise ValueError("limit은 0보다 커야 합니다.")

        if search_type == SearchType.EXACT:
            return self.exact_search(query, limit)
        elif search_type == SearchType.KEYWORD:
            return self.keyword_search(query, limit)
        else:
            raise ValueError(f"지원하지 않는 검색 타입: {search_type}")
