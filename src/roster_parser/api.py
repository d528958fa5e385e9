"""High-level library API for parsing roster text and files."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from roster_parser.models import RosterDocument
from roster_parser.parser.engine import DEFAULT_TITLE, RosterParser


def parse_roster(
    raw: str,
    fallback_title: str = DEFAULT_TITLE,
    fallback_day: Optional[date] = None,
    *,
    source: str = "<text>",
    sort_by_start: bool = True,
) -> RosterDocument:
    """Parse roster markup and return the grouped document."""
    parser = RosterParser(source=source, sort_by_start=sort_by_start)
    return parser.parse(raw, fallback_title=fallback_title, fallback_day=fallback_day)


def parse_file(
    input_path: str | Path,
    fallback_title: Optional[str] = None,
    fallback_day: Optional[date] = None,
    *,
    sort_by_start: bool = True,
) -> RosterDocument:
    """Parse a roster file from disk; the fallback title defaults to the file stem."""
    path = Path(input_path)
    raw = path.read_text(encoding="utf-8")
    return parse_roster(
        raw,
        fallback_title=fallback_title or path.stem,
        fallback_day=fallback_day,
        source=str(path),
        sort_by_start=sort_by_start,
    )
