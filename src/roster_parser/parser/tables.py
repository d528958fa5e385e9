"""Tabular grammar: ``[TABLE]``/``[TR]``/``[TD]`` blocks with a header row."""

from __future__ import annotations

import re
from typing import Optional

from roster_parser.labels import HEADER_HINT_RE, extract_header_tags
from roster_parser.models import RowCells
from roster_parser.text_utils import normalize_time_label, strip_markup

TABLE_RE = re.compile(r"\[TABLE\b[^\]]*\](.*?)\[/TABLE\]", re.IGNORECASE | re.DOTALL)
ROW_RE = re.compile(r"\[TR\b[^\]]*\](.*?)\[/TR\]", re.IGNORECASE | re.DOTALL)
CELL_RE = re.compile(r"\[TD\b[^\]]*\](.*?)\[/TD\]", re.IGNORECASE | re.DOTALL)
HEADER_MARK_RE = re.compile(r"\[SIZE=\"?3\"?\]", re.IGNORECASE)

# Roles are tried in this order for each header cell; a cell takes the first
# unassigned role whose keyword it contains.
HEADER_ROLES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("nationality", ("national", "country")),
    ("name", ("name",)),
    ("start", ("start",)),
    ("finish", ("finish",)),
    ("time", ("time", "hours")),
    ("rate", ("rate", "price")),
    ("service", ("service",)),
)

POSITIONAL_FALLBACKS = {"nationality": 0, "name": 1, "time": 2, "rate": 3}


def split_rows(table_body: str) -> list[str]:
    return [m.group(1) for m in ROW_RE.finditer(table_body)]


def split_cells(row: str) -> list[str]:
    return [m.group(1) for m in CELL_RE.finditer(row)]


def is_header_row(row: str) -> bool:
    """Heuristic: the header row is the one styled with ``[SIZE=3]``."""
    return bool(HEADER_MARK_RE.search(row))


def header_label(cell: str) -> str:
    """Lower-cased plain text of a header cell, without ``(((hint)))`` annotations."""
    return strip_markup(HEADER_HINT_RE.sub(" ", cell)).lower()


def resolve_columns(header_cells: Optional[list[str]]) -> dict[str, int]:
    """
    Map column roles to cell indexes.

    Without a header row every role takes its positional fallback. With one,
    the mandatory roles fall back positionally and rate/service stay absent
    unless a header names them.
    """
    columns: dict[str, int] = {}
    if header_cells is not None:
        for idx, cell in enumerate(header_cells):
            label = header_label(cell)
            for role, keywords in HEADER_ROLES:
                if role not in columns and any(k in label for k in keywords):
                    columns[role] = idx
                    break

    columns.setdefault("nationality", POSITIONAL_FALLBACKS["nationality"])
    columns.setdefault("name", POSITIONAL_FALLBACKS["name"])

    if "start" in columns or "finish" in columns:
        if "finish" not in columns:
            columns["finish"] = columns["start"] + 1
        if "start" not in columns:
            columns["start"] = max(columns["finish"] - 1, 0)
        columns.pop("time", None)
    else:
        columns.setdefault("time", POSITIONAL_FALLBACKS["time"])

    if header_cells is None:
        columns.setdefault("rate", POSITIONAL_FALLBACKS["rate"])
    return columns


def mandatory_roles(columns: dict[str, int]) -> tuple[str, ...]:
    if "time" in columns:
        return ("nationality", "name", "time")
    return ("nationality", "name", "start", "finish")


class TablesParserMixin:
    """Mixin that extracts roster rows from the tabular grammar."""

    def _select_table(self, raw: str) -> tuple[list[str], Optional[int]]:
        """
        Return the rows of the body table and the index of its header row.

        The body table is the last table holding a header row; without one
        anywhere, the last table is used with no header.
        """
        tables = [split_rows(m.group(1)) for m in TABLE_RE.finditer(raw)]
        for rows in reversed(tables):
            header_idx = next((i for i, row in enumerate(rows) if is_header_row(row)), None)
            if header_idx is not None:
                return rows, header_idx
        return (tables[-1] if tables else []), None

    def _extract_table_rows(self, raw: str) -> list[RowCells]:
        rows, header_idx = self._select_table(raw)

        header_cells = split_cells(rows[header_idx]) if header_idx is not None else None
        columns = resolve_columns(header_cells)
        required = mandatory_roles(columns)
        hints: list[str] = []
        if header_cells is not None and columns["name"] < len(header_cells):
            hints = extract_header_tags(header_cells[columns["name"]])

        header_labels = [header_label(c) for c in header_cells] if header_cells is not None else None
        data_start = header_idx + 1 if header_idx is not None else 0
        out: list[RowCells] = []
        for row_no, row in enumerate(rows[data_start:], start=data_start):
            self.report.rows_seen += 1
            cells = split_cells(row)
            if header_labels is not None and [header_label(c) for c in cells] == header_labels:
                self._skip_row(row_no, "repeated header", strip_markup(row))
                continue
            if any(columns[role] >= len(cells) for role in required):
                self._skip_row(row_no, "missing cells", strip_markup(row))
                continue

            def cell(role: str) -> Optional[str]:
                idx = columns.get(role)
                return cells[idx] if idx is not None and idx < len(cells) else None

            if "time" in columns:
                time_label = normalize_time_label(cells[columns["time"]])
            else:
                parts = (normalize_time_label(cells[columns[r]]) for r in ("start", "finish"))
                time_label = " - ".join(p for p in parts if p)

            out.append(
                RowCells(
                    row=row_no,
                    nationality=cells[columns["nationality"]],
                    name=cells[columns["name"]],
                    time_label=time_label,
                    rate=cell("rate"),
                    service=cell("service"),
                    header_hints=list(hints),
                )
            )
        return out
