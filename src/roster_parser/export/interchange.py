"""CSV and JSON interchange forms of a parsed roster."""

from __future__ import annotations

import csv
import io
from dataclasses import asdict
from datetime import date, datetime
from typing import Any, Iterable, Optional

from roster_parser.models import Record, RosterDocument

CSV_HEADER = ("Flag", "Name", "Start", "Finish", "Rate")


def _timestamp(value: Optional[datetime]) -> str:
    return value.isoformat(timespec="seconds") if value is not None else ""


def to_csv(records: Iterable[Record]) -> str:
    """Serialize records as CSV with ISO-8601 start/finish timestamps."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for r in records:
        writer.writerow([r.flag, r.name, _timestamp(r.start), _timestamp(r.end), r.rate or ""])
    return buf.getvalue()


def _jsonable(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat(timespec="seconds")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


def document_to_dict(document: RosterDocument) -> dict[str, Any]:
    """Plain JSON-ready dict of the document, timestamps as ISO strings."""
    return _jsonable(asdict(document))
