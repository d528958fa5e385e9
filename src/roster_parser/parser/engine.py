"""Parser engine that orchestrates the full parsing pipeline."""

from __future__ import annotations

from datetime import date
from typing import Optional

from roster_parser.models import RosterDocument
from roster_parser.parser.assembly import AssemblyMixin
from roster_parser.parser.grouping import flatten_groups, group_records
from roster_parser.parser.lines import LinesParserMixin
from roster_parser.parser.state import GRAMMAR_TABLE, ParserStateMixin
from roster_parser.parser.tables import TablesParserMixin
from roster_parser.timeparse import build_date_note

DEFAULT_TITLE = "Roster"


class RosterParser(
    TablesParserMixin,
    LinesParserMixin,
    AssemblyMixin,
    ParserStateMixin,
):
    """Parser for forum roster markup (tabular or free-line)."""

    def parse(
        self,
        raw: str,
        fallback_title: str = DEFAULT_TITLE,
        fallback_day: Optional[date] = None,
    ) -> RosterDocument:
        self._reset()
        raw = raw or ""

        resolution = self.title_resolver(raw, fallback_title, fallback_day or date.today())
        self.title, self.day = resolution.title, resolution.day
        self.report.title_source = "markup" if resolution.from_markup else "fallback"

        self._detect_grammar(raw)
        if self.grammar == GRAMMAR_TABLE:
            rows = self._extract_table_rows(raw)
        else:
            rows = self._extract_line_rows(raw)

        for cells in rows:
            record = self._assemble_record(cells)
            if record is not None:
                self._add_record(record)

        groups = group_records(self.records, sort_by_start=self.sort_by_start)
        records = flatten_groups(groups)
        return RosterDocument(
            title=self.title,
            day=self.day,
            groups=groups,
            records=records,
            date_note=build_date_note((r.start, r.end) for r in records),
            grammar=self.grammar,
            report=self.report,
        )
