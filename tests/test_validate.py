"""Tests for outline structure checks."""

import pytest

from guide_outlines import CORE_JS_OUTLINE, JQUERY_OUTLINE, check_outline, validate_outline


def make_outline(*subsections):
    return [{"section": "Modules", "subsections": list(subsections)}]


def test_catalog_outlines_are_well_formed():
    assert check_outline(JQUERY_OUTLINE, allow_groups=False) == []
    assert check_outline(CORE_JS_OUTLINE) == []


def test_core_js_needs_groups():
    errors = check_outline(CORE_JS_OUTLINE, allow_groups=False)
    assert len(errors) == 14
    assert all("[2].subsections" in e for e in errors)


def test_top_level_must_be_list():
    errors = check_outline({"section": "A", "subsections": []})
    assert len(errors) == 1


def test_empty_outline_is_well_formed():
    assert check_outline([]) == []


def test_collects_every_error():
    data = [
        {"section": "", "subsections": ["ok", 5]},
        "not a section",
        {"section": "B", "subsections": "nope"},
        {"section": "C", "subsections": [], "extra": 1},
    ]
    errors = check_outline(data)
    assert len(errors) == 5
    assert errors[0].startswith("[0]")
    assert errors[1].startswith("[0].subsections[1]")
    assert errors[2].startswith("[1]")
    assert errors[3].startswith("[2]")
    assert errors[4].startswith("[3]")


@pytest.mark.parametrize(
    "group",
    [
        {"subsection": "Array"},
        {"subsection": "Array", "subsubSections": "map"},
        {"subsection": "Array", "subsubSections": [None]},
        {"subsection": "", "subsubSections": []},
        {"subsection": "Array", "subsubSections": [], "note": "x"},
    ],
)
def test_bad_groups(group):
    assert check_outline(make_outline(group)) != []


@pytest.mark.parametrize(
    "data",
    [
        [{"section": "A", "subsections": [], 1: "x"}],
        make_outline({"subsection": "Array", "subsubSections": [], None: "x"}),
    ],
)
def test_mixed_key_types_are_reported(data):
    errors = check_outline(data)
    assert len(errors) == 1
    assert "1" in errors[0] or "None" in errors[0]


def test_empty_group_is_allowed():
    assert check_outline(make_outline({"subsection": "Date", "subsubSections": []})) == []


def test_validate_outline_raises_with_all_errors():
    with pytest.raises(ValueError) as excinfo:
        validate_outline([{"section": "", "subsections": [1, 2]}])
    message = str(excinfo.value)
    assert "subsections[0]" in message
    assert "subsections[1]" in message


def test_validate_outline_accepts_catalog():
    validate_outline(JQUERY_OUTLINE, allow_groups=False)
    validate_outline(CORE_JS_OUTLINE)
