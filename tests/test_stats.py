"""Tests for statusgen.stats.GenStats."""

from statusgen.stats import GenStats
from statusgen.table_parser import parse_table

from .helpers import SMALL_TABLE


def _filled() -> GenStats:
    s = GenStats()
    s.errors = 250
    s.warnings = 10
    s.successes = 1
    s.described = 261
    s.files_written = ["states.py"]
    s.lines_changed = 12
    return s


# ---------------------------------------------------------------------------
# record_entries
# ---------------------------------------------------------------------------


def test_record_entries_counts_severities():
    s = GenStats()
    s.record_entries(parse_table(SMALL_TABLE))
    assert s.errors == 3
    assert s.warnings == 2
    assert s.successes == 1
    assert s.described == 5
    assert s.total_entries == 6


def test_record_entries_accumulates():
    s = GenStats()
    entries = parse_table(SMALL_TABLE)
    s.record_entries(entries)
    s.record_entries(entries)
    assert s.total_entries == 12


def test_record_entries_empty():
    s = GenStats()
    s.record_entries({})
    assert s == GenStats()


# ---------------------------------------------------------------------------
# count_lines_changed
# ---------------------------------------------------------------------------


def test_count_lines_changed_identical():
    s = GenStats()
    s.count_lines_changed("a\nb\n", "a\nb\n")
    assert s.lines_changed == 0


def test_count_lines_changed_replacement():
    s = GenStats()
    s.count_lines_changed("a\nb\nc\n", "a\nB\nc\n")
    assert s.lines_changed == 2  # one removed, one added


def test_count_lines_changed_from_empty():
    s = GenStats()
    s.count_lines_changed("", "x\ny\nz\n")
    assert s.lines_changed == 3


# ---------------------------------------------------------------------------
# format_summary
# ---------------------------------------------------------------------------


def test_format_summary_filled():
    lines = _filled().format_summary()
    assert lines[0] == "--- statusgen summary ---"
    assert "  error:       250" in lines
    assert "  warning:     10" in lines
    assert "  success:     1" in lines
    assert "  total:       261" in lines
    assert "  described:   261" in lines
    assert "files written (1): states.py" in lines
    assert lines[-1] == "lines changed: 12"


def test_format_summary_nothing_written():
    lines = GenStats().format_summary()
    assert "files written: none" in lines
    assert "  total:       0" in lines
