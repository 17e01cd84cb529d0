"""Tests for flattening, lookup and statistics."""

from guide_outlines import (
    Outline,
    find_section,
    flatten_outline,
    get_outline,
    outline_statistics,
)


def test_flatten_jquery():
    entries = flatten_outline(get_outline("jquery"))

    assert len(entries) == 9 + 47
    assert entries[0].title == "Introduction to jQuery"
    assert entries[0].level == 0
    assert entries[0].path == ("Introduction to jQuery",)
    assert entries[1].title == "What is jQuery?"
    assert entries[1].level == 1
    assert entries[1].path == ("Introduction to jQuery", "What is jQuery?")
    assert entries[-1].section_index == 8
    assert max(e.level for e in entries) == 1


def test_flatten_core_js_groups():
    entries = flatten_outline(get_outline("core-js"))

    array = next(e for e in entries if e.title == "Array")
    assert array.level == 1
    assert array.path == ("Modules and APIs", "Array")

    for_each = entries[entries.index(array) + 1]
    assert for_each.title == "forEach"
    assert for_each.level == 2
    assert for_each.path == ("Modules and APIs", "Array", "forEach")
    assert for_each.section_index == 2

    date = entries.index(next(e for e in entries if e.title == "Date"))
    assert entries[date + 1].title == "Map"


def test_flatten_empty_outline():
    assert flatten_outline(Outline("empty", "Empty")) == []


def test_find_section():
    outline = get_outline("jquery")
    assert find_section(outline, "ajax").section == "AJAX"
    assert find_section(outline, "  Effects ").section == "Effects"
    assert find_section(outline, "Selector") is None


def test_statistics_jquery():
    stats = outline_statistics(get_outline("jquery"))
    assert stats["section_count"] == 9
    assert stats["subsection_count"] == 47
    assert stats["group_count"] == 0
    assert stats["leaf_item_count"] == 0
    assert stats["entry_count"] == 56


def test_statistics_core_js():
    stats = outline_statistics(get_outline("core-js"))
    assert stats["name"] == "core-js"
    assert stats["section_count"] == 5
    assert stats["subsection_count"] == 34
    assert stats["group_count"] == 14
    assert stats["leaf_item_count"] == 29 + 11 + 20 + 4
    assert stats["empty_group_count"] == 10
    assert stats["entry_count"] == 5 + 34 + 64
    assert stats["entry_count"] == len(flatten_outline(get_outline("core-js")))
