"""Tests for the high-level parse_roster/parse_file API."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date
from pathlib import Path

from roster_parser import RosterParser, parse_file, parse_roster
from roster_parser.models import RosterDocument


def test_parse_roster_returns_document(sample_roster: str) -> None:
    document = parse_roster(sample_roster, "Fallback", date(2020, 1, 1), source="inline")

    assert isinstance(document, RosterDocument)
    assert len(document) == 6
    assert document.report is not None
    assert document.report.source == "inline"
    assert document.get_group("thai") is not None
    assert document.get_group("korean") is None


def test_parse_file_uses_stem_as_fallback_title(tmp_path: Path) -> None:
    input_path = tmp_path / "friday_roster.txt"
    input_path.write_text("(Thai) Nok 8 pm - 2 am 300\n", encoding="utf-8")

    document = parse_file(input_path, fallback_day=date(2025, 9, 5))

    assert document.title == "friday_roster"
    assert document.report.source == str(input_path)
    assert document.records[0].name == "Nok"


def test_parse_file_accepts_str_path(sample_roster_path: Path) -> None:
    document = parse_file(str(sample_roster_path), "Ignored")

    assert document.title == "Saturday 6/9/2025"


def test_keep_order_option(sample_roster: str) -> None:
    document = parse_roster(sample_roster, sort_by_start=False)

    assert [r.name for r in document.get_group("vietnamese").records] == ["Ami", "Saka"]


def test_parsing_is_deterministic(sample_roster: str) -> None:
    first = parse_roster(sample_roster, "Fallback", date(2020, 1, 1))
    second = parse_roster(sample_roster, "Fallback", date(2020, 1, 1))

    assert asdict(first) == asdict(second)


def test_parser_state_resets_between_calls(sample_roster: str) -> None:
    parser = RosterParser()

    parser.parse(sample_roster, "Fallback", date(2020, 1, 1))
    second = parser.parse("(Thai) Nok 8 pm - 2 am", "Second", date(2025, 1, 1))

    assert [r.name for r in second.records] == ["Nok"]
    assert parser.report.rows_seen == 1
    assert parser.report.skipped_rows == []
    assert second.grammar == "lines"
    assert second.title == "Second"


def test_none_and_empty_input_parse_to_empty_document() -> None:
    for raw in ("", None):
        document = parse_roster(raw, "Empty", date(2025, 1, 1))
        assert document.records == []
        assert document.title == "Empty"
