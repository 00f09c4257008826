"""Tests for sorting the timestamp rows of a section."""

from hw_command_server.schemas import WHOLE_DOCUMENT, Section, SectionChoice
from hw_command_server.sections import locate_section
from hw_command_server.sorter import collect_entries, sort_section


def _whole(lines):
    return locate_section(lines, WHOLE_DOCUMENT)


def test_sorts_latest_first_and_moves_notes_after():
    lines = ["- 20240101 - A", "note", "- 20240601 - B"]
    result = sort_section(lines, _whole(lines))
    assert result.lines == ["- 20240601 - B", "- 20240101 - A", "note"]
    assert result.sorted_count == 2
    assert result.modified


def test_already_sorted_section_is_unchanged():
    lines = ["# H", "- 202406011200 - B", "- 20240101 - A", "trailing note", "# Next"]
    section = locate_section(lines, SectionChoice(label="H", line=0))
    result = sort_section(lines, section)
    assert result.lines == lines


def test_only_the_section_is_rewritten():
    lines = [
        "- 20200101 - outside before",
        "## Log",
        "- 20240101 - A",
        "",
        "- 20240601 - B",
        "## After",
        "- 20190101 - outside after",
        "- 20250101 - outside after 2",
    ]
    section = locate_section(lines, SectionChoice(label=" Log", line=1))
    result = sort_section(lines, section)
    assert result.lines[:2] == lines[:2]
    assert result.lines[2:5] == ["- 20240601 - B", "- 20240101 - A", ""]
    assert result.lines[5:] == lines[5:]


def test_blank_lines_are_dropped_and_padding_added_at_end():
    lines = ["", "- 20240101 - A", "   ", "note", "", "- 20240601 - B", ""]
    result = sort_section(lines, _whole(lines))
    assert result.lines == ["- 20240601 - B", "- 20240101 - A", "note", "", "", "", ""]
    assert len(result.lines) == len(lines)


def test_malformed_rows_rise_to_the_top_in_encounter_order():
    lines = [
        "- 20240101 - A",
        "- 2024010112 - ten digits",
        "- 20241340 - impossible",
        "- 202406011200 - B",
    ]
    result = sort_section(lines, _whole(lines))
    assert result.lines == [
        "- 2024010112 - ten digits",
        "- 20241340 - impossible",
        "- 202406011200 - B",
        "- 20240101 - A",
    ]


def test_equal_timestamps_keep_relative_order():
    lines = ["- 20240101 - first", "- 20240601 - B", "- 202401010000 - second"]
    result = sort_section(lines, _whole(lines))
    assert result.lines == ["- 20240601 - B", "- 20240101 - first", "- 202401010000 - second"]


def test_section_without_timestamp_rows_is_left_alone():
    lines = ["# H", "just", "", "prose", "# I", "- 20240101 - A"]
    section = locate_section(lines, SectionChoice(label="H", line=0))
    result = sort_section(lines, section)
    assert result.sorted_count == 0
    assert not result.modified
    assert result.lines == lines


def test_empty_section_is_left_alone():
    lines = ["text", "# End"]
    result = sort_section(lines, Section(label="End", start_line=2, end_line=1))
    assert result.lines == lines
    assert result.sorted_count == 0


def test_collect_entries_uses_absolute_positions():
    lines = ["# H", "x", "- 20240101 - A", "- 123456789 - loose"]
    section = locate_section(lines, SectionChoice(label="H", line=0))
    entries, others = collect_entries(lines, section)
    assert [(e.original_position, e.timestamp is None) for e in entries] == [(2, False), (3, True)]
    assert others == ["x"]


def test_line_count_is_conserved():
    lines = ["# H", "a", "- 20240101 - A", "", "b", "- 20230101 - B", "", "# I", "c"]
    section = locate_section(lines, SectionChoice(label="H", line=0))
    result = sort_section(lines, section)
    assert len(result.lines) == len(lines)
    assert result.lines[1:7] == ["- 20240101 - A", "- 20230101 - B", "a", "b", "", ""]
