"""Tests for outline data models."""

import dataclasses

import pytest

from guide_outlines import (
    CORE_JS_OUTLINE,
    JQUERY_OUTLINE,
    Outline,
    OutlineSection,
    SubsectionGroup,
)


def make_section(**overrides):
    base = {"section": "Intro", "subsections": ["What", "Why"]}
    base.update(overrides)
    return base


def test_section_from_dict():
    section = OutlineSection.from_dict(make_section())
    assert section.section == "Intro"
    assert section.subsections == ("What", "Why")
    assert section.titles() == ["What", "Why"]


def test_section_with_group():
    section = OutlineSection.from_dict(
        make_section(
            subsections=["Plain", {"subsection": "Array", "subsubSections": ["map"]}]
        )
    )
    assert section.subsections[1] == SubsectionGroup("Array", ("map",))
    assert section.titles() == ["Plain", "Array"]
    assert section.groups() == [SubsectionGroup("Array", ("map",))]


def test_group_allows_empty_items():
    group = SubsectionGroup.from_dict({"subsection": "Date", "subsubSections": []})
    assert group.subsub_sections == ()
    assert group.to_dict() == {"subsection": "Date", "subsubSections": []}


@pytest.mark.parametrize(
    "data",
    [
        make_section(section=""),
        make_section(section=3),
        make_section(subsections="What"),
        {"subsections": []},
        "Intro",
    ],
)
def test_section_rejects_bad_shape(data):
    with pytest.raises(ValueError):
        OutlineSection.from_dict(data)


@pytest.mark.parametrize(
    "data",
    [
        {"subsection": "Array"},
        {"subsection": "", "subsubSections": []},
        {"subsection": "Array", "subsubSections": ["map", 1]},
        ["Array"],
    ],
)
def test_group_rejects_bad_shape(data):
    with pytest.raises(ValueError):
        SubsectionGroup.from_dict(data)


def test_models_are_frozen():
    section = OutlineSection.from_dict(make_section())
    with pytest.raises(dataclasses.FrozenInstanceError):
        section.section = "Other"


def test_outline_to_list_matches_literals():
    assert Outline.from_list("jquery", "jQuery", JQUERY_OUTLINE).to_list() == JQUERY_OUTLINE
    assert Outline.from_list("core-js", "Core-JS", CORE_JS_OUTLINE).to_list() == CORE_JS_OUTLINE


def test_outline_to_list_returns_new_lists():
    outline = Outline.from_list("x", "X", [make_section()])
    data = outline.to_list()
    data[0]["subsections"].append("Extra")
    assert outline.sections[0].subsections == ("What", "Why")


def test_outline_from_list_rejects_non_list():
    with pytest.raises(ValueError):
        Outline.from_list("x", "X", make_section())
