"""Paste-friendly Markdown table export."""

from __future__ import annotations

from typing import Iterable

from roster_parser.models import Record

MARKDOWN_HEADER = "|  | Name | Time | Rate |\n|---|---|---|---|"


def _cell(value: str) -> str:
    return value.replace("|", "\\|")


def to_markdown(records: Iterable[Record]) -> str:
    """Render records as a ``glyph | name | time | rate`` table."""
    body = [
        f"| {_cell(r.flag)} | {_cell(r.name)} | {_cell(r.time_label)} | {_cell(r.rate or '')} |"
        for r in records
    ]
    return "\n".join([MARKDOWN_HEADER, *body]) + "\n"
