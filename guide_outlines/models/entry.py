"""Flattened outline entry data models."""

from typing import Tuple
from dataclasses import dataclass


@dataclass
class OutlineEntry:
    """평탄화된 목차 항목을 나타내는 데이터 클래스"""

    title: str
    level: int
    path: Tuple[str, ...]
    section_index: int
