"""Tests for converting PDF bookmark rows into TOC entries."""

from docbrowser_project.src.models.pdf_document import outline_to_toc


def test_nested_levels_become_children():
    rows = [
        [1, "Intro", 1],
        [1, "Rules", 3],
        [2, "Movement", 3],
        [2, "Combat", 5],
        [3, "Melee", 6],
        [1, "Index", 9],
    ]
    toc = outline_to_toc(rows)
    assert [e.name for e in toc] == ["Intro", "Rules", "Index"]
    rules = toc[1]
    assert [c.name for c in rules.items] == ["Movement", "Combat"]
    assert rules.items[1].items[0].name == "Melee"


def test_skipped_level_attaches_to_deepest_open_entry():
    toc = outline_to_toc([[1, "A", 1], [3, "deep", 2], [1, "B", 4]])
    assert [e.name for e in toc] == ["A", "B"]
    assert toc[0].items[0].name == "deep"


def test_unresolved_targets_are_dropped():
    toc = outline_to_toc([[1, "Broken", -1], [1, "Ok", 2]])
    assert [e.name for e in toc] == ["Ok"]
