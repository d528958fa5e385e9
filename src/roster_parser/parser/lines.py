"""Free-line grammar: ``(Nationality) Name 10am - 6pm $300/hr`` per line."""

from __future__ import annotations

import re

from roster_parser.models import RowCells
from roster_parser.text_utils import LINK_TARGET_RE, normalize_dashes, strip_markup

_CLOCK = r"\d{1,2}(?::\d{2})?\s*(?:am|pm)?"

LINE_RE = re.compile(
    r"^\(\s*(?P<nationality>[^)]*?)\s*\)\s*"
    r"(?P<name>.+?)\s+"
    r"(?P<start>" + _CLOCK + r")\s*-\s*(?P<end>" + _CLOCK + r")"
    r"(?:[\s,;]+(?P<rest>.*))?$",
    re.IGNORECASE,
)


class LinesParserMixin:
    """Mixin that extracts roster rows from the free-line grammar."""

    def _extract_line_rows(self, raw: str) -> list[RowCells]:
        out: list[RowCells] = []
        for line_no, line in enumerate(raw.splitlines()):
            text = normalize_dashes(strip_markup(line))
            if not text:
                continue
            m = LINE_RE.match(text)
            if not m:
                # Only lines that open like a roster entry are worth reporting.
                if text.startswith("("):
                    self.report.rows_seen += 1
                    self._skip_row(line_no, "no match", text)
                continue

            self.report.rows_seen += 1
            link = LINK_TARGET_RE.search(line)
            rest = m.group("rest") or None
            out.append(
                RowCells(
                    row=line_no,
                    nationality=m.group("nationality"),
                    name=m.group("name"),
                    time_label=f"{m.group('start').strip()} - {m.group('end').strip()}",
                    rate=rest,
                    service=rest,
                    url=link.group(1).strip() if link else None,
                )
            )
        return out
