"""Clock-time parsing anchored to a roster calendar day."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional

from roster_parser.text_utils import normalize_dashes, normalize_text

MERIDIEM_RE = re.compile(r"^(\d{1,2})(?::(\d{2}))?\s*(am|pm)$")
HOUR_MINUTE_RE = re.compile(r"^(\d{1,2}):(\d{2})$")
HOUR_ONLY_RE = re.compile(r"^(\d{1,2})$")

ONE_DAY = timedelta(days=1)


def _at(day: date, hours: int, minutes: int) -> datetime:
    return datetime.combine(day, time.min) + timedelta(hours=hours, minutes=minutes)


def parse_clock_time(day: date, text: Optional[str]) -> Optional[datetime]:
    """
    Parse a clock time on ``day``.

    Accepts ``H[:MM] am|pm``, ``H:MM``, a bare ``H``/``HH`` (24-hour) and the
    end-of-day marker ``24``/``24:00``, which lands on the next midnight. Any
    other shape, and out-of-range values, return None.
    """
    if not text:
        return None
    s = normalize_text(normalize_dashes(text).lower())

    m = MERIDIEM_RE.match(s)
    if m:
        hours = int(m.group(1))
        minutes = int(m.group(2) or 0)
        if not 1 <= hours <= 12 or minutes > 59:
            return None
        if m.group(3) == "pm" and hours != 12:
            hours += 12
        if m.group(3) == "am" and hours == 12:
            hours = 0
        return _at(day, hours, minutes)

    m = HOUR_MINUTE_RE.match(s)
    if m:
        hours, minutes = int(m.group(1)), int(m.group(2))
    elif HOUR_ONLY_RE.match(s):
        hours, minutes = int(s), 0
    else:
        return None

    if hours > 24 or minutes > 59 or (hours == 24 and minutes):
        return None
    return _at(day, hours, minutes)


def split_time_label(label: str) -> tuple[str, str]:
    """Split a time label on its single hyphen into ``(start, end)`` text."""
    parts = normalize_dashes(label or "").split("-")
    if len(parts) == 1:
        return parts[0].strip(), ""
    if len(parts) == 2:
        return parts[0].strip(), parts[1].strip()
    return "", ""


def parse_time_range(day: date, label: str) -> tuple[Optional[datetime], Optional[datetime]]:
    """
    Parse ``start - end`` on ``day``.

    An end at or before the start is moved to the next day, once.
    """
    start_text, end_text = split_time_label(label)
    start = parse_clock_time(day, start_text)
    end = parse_clock_time(day, end_text)
    if start is not None and end is not None and end <= start:
        end = end + ONE_DAY
    return start, end


def format_hm(value: datetime) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"


def build_date_note(spans: Iterable[tuple[Optional[datetime], Optional[datetime]]]) -> Optional[str]:
    """Summarize the earliest start and latest end, e.g. ``10:00 - 22:00``."""
    starts: list[datetime] = []
    ends: list[datetime] = []
    for start, end in spans:
        if start is not None:
            starts.append(start)
        if end is not None:
            ends.append(end)
    if not starts or not ends:
        return None

    first, last = min(starts), max(ends)
    if first.date() == last.date():
        return f"{format_hm(first)} - {format_hm(last)}"
    return f"{format_hm(first)} → next day {format_hm(last)}"
