"""Tests for CSV, Markdown, BBCode and JSON exports."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import date

import pytest

from roster_parser import RosterDocument, RosterParser, parse_roster
from roster_parser.export import CSV_HEADER, document_to_dict, to_bbcode, to_csv, to_markdown
from roster_parser.models import Record
from roster_parser.nationality import FLAG_MAP

SMALL_ROSTER = """[TABLE]
[TR][TD][SIZE=3]Nationality[/SIZE][/TD][TD][SIZE=3]Name[/SIZE][/TD][TD][SIZE=3]Time[/SIZE][/TD][TD][SIZE=3]Rate[/SIZE][/TD][/TR]
[TR][TD]Japanese[/TD][TD]Yuki[/TD][TD]10 am - 6 pm[/TD][TD]300/h[/TD][/TR]
[TR][TD]Thai[/TD][TD]Nok[/TD][TD]8 pm - 2 am[/TD][TD][/TD][/TR]
[/TABLE]
"""


@pytest.fixture
def small_document() -> RosterDocument:
    return parse_roster(SMALL_ROSTER, "Small", date(2025, 9, 6))


def test_csv_export(small_document: RosterDocument) -> None:
    expected = (
        "Flag,Name,Start,Finish,Rate\n"
        f"{FLAG_MAP['japanese']},Yuki,2025-09-06T10:00:00,2025-09-06T18:00:00,300/H\n"
        f"{FLAG_MAP['thai']},Nok,2025-09-06T20:00:00,2025-09-07T02:00:00,\n"
    )

    assert to_csv(small_document.records) == expected


def test_csv_export_leaves_unparsed_times_empty() -> None:
    record = Record(name="Zed", nationality_key="martian", time_label="whenever", rate="300/H")

    lines = to_csv([record]).splitlines()

    assert lines[0] == ",".join(CSV_HEADER)
    assert lines[1] == ",Zed,,,300/H"


def test_markdown_export(small_document: RosterDocument) -> None:
    assert to_markdown(small_document.records) == (
        "|  | Name | Time | Rate |\n"
        "|---|---|---|---|\n"
        f"| {FLAG_MAP['japanese']} | Yuki | 10 am - 6 pm | 300/H |\n"
        f"| {FLAG_MAP['thai']} | Nok | 8 pm - 2 am |  |\n"
    )


def test_markdown_escapes_pipes() -> None:
    record = Record(name="A|B", nationality_key="", time_label="1pm|2pm")

    assert to_markdown([record]).splitlines()[-1] == "|  | A\\|B | 1pm\\|2pm |  |"


def test_document_to_dict_is_json_ready(small_document: RosterDocument) -> None:
    payload = document_to_dict(small_document)

    assert payload["title"] == "Small"
    assert payload["day"] == "2025-09-06"
    assert payload["records"][1]["end"] == "2025-09-07T02:00:00"
    assert payload["groups"][0]["key"] == "japanese"
    assert payload["report"]["rows_parsed"] == 2
    json.dumps(payload)


def test_bbcode_header_carries_custom_tags(sample_roster: str) -> None:
    document = parse_roster(sample_roster, "Fallback", date(2020, 1, 1))

    rendered = to_bbcode(document)

    assert "[SIZE=4]Saturday[/SIZE]" in rendered
    assert "[SIZE=4]6/9/2025[/SIZE]" in rendered
    assert "[SIZE=3]Name (((HOT)))[/SIZE]" in rendered
    assert '[URL="https://roster.example.com/profile/ami/"]Ami[/URL]' in rendered


def test_bbcode_export_reads_back_to_same_records(sample_roster: str) -> None:
    document = parse_roster(sample_roster, "Fallback", date(2020, 1, 1))

    reparsed = RosterParser().parse(to_bbcode(document), "Other", date(2021, 1, 1))

    assert reparsed.title == document.title
    assert reparsed.day == document.day
    assert [g.key for g in reparsed.groups] == [g.key for g in document.groups]
    assert [asdict(r) for r in reparsed.records] == [asdict(r) for r in document.records]
