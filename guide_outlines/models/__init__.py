"""Data models for guide_outlines package."""

from .outline import Outline, OutlineSection, SubsectionGroup, SubsectionEntry
from .entry import OutlineEntry

__all__ = [
    "Outline",
    "OutlineSection",
    "SubsectionGroup",
    "SubsectionEntry",
    "OutlineEntry",
]
