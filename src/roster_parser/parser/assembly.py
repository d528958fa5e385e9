"""Row assembly: turns grammar rows into typed records."""

from __future__ import annotations

from typing import Optional

from roster_parser.labels import extract_tags, strip_inline_tag_words
from roster_parser.models import Record, RowCells
from roster_parser.nationality import guess_flag, normalize_nationality
from roster_parser.rates import clean_rate
from roster_parser.text_utils import extract_link_and_text, strip_markup
from roster_parser.timeparse import parse_time_range


class AssemblyMixin:
    """Mixin that builds one Record per extracted row."""

    def _assemble_record(self, cells: RowCells) -> Optional[Record]:
        text, url = extract_link_and_text(cells.name)
        name = strip_inline_tag_words(text, cells.header_hints)
        if not name:
            self._skip_row(cells.row, "empty name", text)
            return None

        nationality_key = normalize_nationality(strip_markup(cells.nationality))
        flag = guess_flag(nationality_key)
        if nationality_key and not flag and nationality_key not in self.report.unknown_nationalities:
            self.report.unknown_nationalities.append(nationality_key)

        start, end = parse_time_range(self.day, cells.time_label)
        if start is None and cells.time_label:
            self.report.unparsed_times.append({"name": name, "time_label": cells.time_label})

        return Record(
            name=name,
            nationality_key=nationality_key,
            time_label=cells.time_label,
            flag=flag,
            start=start,
            end=end,
            rate=clean_rate(cells.rate) or clean_rate(cells.service),
            tags=extract_tags([cells.service, cells.name], cells.header_hints),
            profile_url=url or cells.url,
        )
