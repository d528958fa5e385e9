"""BBCode table export, readable back by the tabular grammar."""

from __future__ import annotations

from typing import Iterable

from roster_parser.labels import TAG_PATTERNS
from roster_parser.models import Record, RosterDocument
from roster_parser.parser.title import WEEKDAYS
from roster_parser.text_utils import titleize

BODY_COLUMNS = ("Nationality", "Name", "Time", "Rate", "Service")


def _header_hints(records: Iterable[Record]) -> list[str]:
    """Non built-in tags, merged so each record's relative tag order survives."""
    hints: list[str] = []
    for record in records:
        custom = [t for t in record.tags if t not in TAG_PATTERNS]
        for i, tag in enumerate(custom):
            if tag in hints:
                continue
            following = next((t for t in custom[i + 1 :] if t in hints), None)
            if following is None:
                hints.append(tag)
            else:
                hints.insert(hints.index(following), tag)
    return hints


def _name_cell(record: Record) -> str:
    if record.profile_url:
        return f'[URL="{record.profile_url}"]{record.name}[/URL]'
    return record.name


def _row(cells: Iterable[str]) -> str:
    return "[TR]\n" + "".join(f"[TD]{c}[/TD]\n" for c in cells) + "[/TR]\n"


def to_bbcode(document: RosterDocument) -> str:
    """Render the document as a title table followed by the roster table."""
    day = document.day
    title_table = (
        "[TABLE]\n"
        + _row(
            [
                f"[B][SIZE=4]{WEEKDAYS[day.weekday()]}[/SIZE][/B]",
                f"[SIZE=4]{day.day}/{day.month}/{day.year}[/SIZE]",
            ]
        )
        + "[/TABLE]\n"
    )

    hints = _header_hints(document.records)
    header = list(BODY_COLUMNS)
    if hints:
        header[1] = f"Name ((({', '.join(hints)})))"

    body = [_row(f"[SIZE=3]{h}[/SIZE]" for h in header)]
    for r in document.records:
        body.append(
            _row(
                [
                    titleize(r.nationality_key),
                    _name_cell(r),
                    r.time_label,
                    r.rate or "",
                    " ".join(r.tags),
                ]
            )
        )
    return title_table + "\n" + '[TABLE="width: 500"]\n' + "".join(body) + "[/TABLE]\n"
