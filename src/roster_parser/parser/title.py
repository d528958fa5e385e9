"""Roster title and calendar-day resolution from free markup text."""

from __future__ import annotations

import re
from datetime import date
from typing import NamedTuple, Optional

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_WEEKDAY_ALT = "|".join(WEEKDAYS)

# Day-first date enclosed by tags, e.g. "[SIZE=4]6/9/2025[/SIZE]".
TAGGED_DATE_RE = re.compile(r"\]\s*(\d{1,2})/(\d{1,2})/(\d{4})\s*\[")
TAGGED_WEEKDAY_RE = re.compile(r"\]\s*(" + _WEEKDAY_ALT + r")\s*\[", re.IGNORECASE)
# Free-line title, e.g. "Saturday 6/9/2025" on a line of its own.
TITLE_LINE_RE = re.compile(
    r"^\s*(?:(" + _WEEKDAY_ALT + r")\s*,?\s+)?(\d{1,2})/(\d{1,2})/(\d{4})\s*$",
    re.IGNORECASE | re.MULTILINE,
)


class TitleResolution(NamedTuple):
    title: str
    day: date
    from_markup: bool


def _to_date(day: str, month: str, year: str) -> Optional[date]:
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def _title(weekday: Optional[str], d: str, m: str, y: str) -> str:
    token = f"{d}/{m}/{y}"
    return f"{weekday.capitalize()} {token}" if weekday else token


def resolve_title(raw: str, fallback_title: str, fallback_day: date) -> TitleResolution:
    """
    Find the roster title and day in ``raw``.

    A tagged ``D/M/YYYY`` token wins, optionally prefixed by a tagged weekday
    name; otherwise a line holding only ``[Weekday] D/M/YYYY`` is used. When no
    valid date is present the fallbacks are returned unchanged.
    """
    raw = raw or ""

    m = TAGGED_DATE_RE.search(raw)
    if m:
        day = _to_date(*m.groups())
        if day is not None:
            weekday = TAGGED_WEEKDAY_RE.search(raw)
            return TitleResolution(
                _title(weekday.group(1) if weekday else None, *m.groups()),
                day,
                True,
            )

    m = TITLE_LINE_RE.search(raw)
    if m:
        weekday, d, mo, y = m.groups()
        day = _to_date(d, mo, y)
        if day is not None:
            return TitleResolution(_title(weekday, d, mo, y), day, True)

    return TitleResolution(fallback_title, fallback_day, False)
