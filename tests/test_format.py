"""Tests for text formatting helpers."""

from guide_outlines import (
    OutlineSearch,
    format_hierarchy_path,
    format_outline,
    format_search_results,
    format_statistics,
    get_outline,
    outline_statistics,
)


def test_format_hierarchy_path():
    assert format_hierarchy_path(("Modules and APIs", "Array", "map")) == (
        "Modules and APIs > Array > map"
    )
    assert format_hierarchy_path(()) == "(최상위)"


def test_format_outline_jquery():
    lines = format_outline(get_outline("jquery")).splitlines()
    assert lines[0] == "📖 jQuery"
    assert lines[1] == "1. Introduction to jQuery"
    assert lines[2] == "  - What is jQuery?"
    assert lines[-1] == "  - Further Resources"
    assert len(lines) == 1 + 9 + 47


def test_format_outline_groups():
    text = format_outline(get_outline("core-js"))
    assert "3. Modules and APIs" in text
    assert "  - Array\n    · forEach\n    · map" in text
    assert "  - Date (비어 있음)" in text
    assert "  - Number\n" in text


def test_format_search_results():
    results = OutlineSearch([get_outline("core-js")]).search("Array", limit=1)
    text = format_search_results(results)
    assert "[core-js]" in text
    assert "Modules and APIs > Array" in text


def test_format_empty_search_results():
    assert format_search_results([]) == "검색 결과가 없습니다."


def test_format_statistics():
    text = format_statistics(outline_statistics(get_outline("core-js")))
    assert text.splitlines()[0].startswith("📊 Core-JS")
    assert "103" in text
