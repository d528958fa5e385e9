"""Shared parser state and common lifecycle helpers."""

from __future__ import annotations

import re
from datetime import date
from typing import Callable, Optional

from roster_parser.models import ParseReport, Record
from roster_parser.parser.title import TitleResolution, resolve_title

GRAMMAR_TABLE = "table"
GRAMMAR_LINES = "lines"

TABLE_OPEN_RE = re.compile(r"\[TABLE\b[^\]]*\]", re.IGNORECASE)

TitleResolver = Callable[[str, str, date], TitleResolution]


class ParserStateMixin:
    """Shared parser state and common helper methods."""

    def __init__(
        self,
        source: str = "<text>",
        *,
        sort_by_start: bool = True,
        title_resolver: Optional[TitleResolver] = None,
    ):
        self.source = source
        self.sort_by_start = sort_by_start
        self.title_resolver: TitleResolver = title_resolver or resolve_title
        self._reset()

    def _reset(self) -> None:
        self.records: list[Record] = []
        self.report = ParseReport(source=self.source)
        self.grammar = GRAMMAR_TABLE
        self.day: date = date.today()
        self.title = ""

    def _detect_grammar(self, raw: str) -> None:
        self.grammar = GRAMMAR_TABLE if TABLE_OPEN_RE.search(raw) else GRAMMAR_LINES
        self.report.grammar = self.grammar

    def _skip_row(self, row: int, reason: str, text: str) -> None:
        self.report.skipped_rows.append({"row": row, "reason": reason, "text": text[:120]})

    def _add_record(self, record: Record) -> None:
        self.records.append(record)
        self.report.rows_parsed += 1
