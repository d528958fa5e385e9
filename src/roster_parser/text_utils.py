"""Text and markup helpers shared by the roster grammars and extractors."""

import re
from typing import Optional

STYLE_TAGS = ("SIZE", "B", "I", "U", "COLOR", "FONT", "CENTER", "TABLE", "TR", "TD", "URL")

LINK_LABEL_RE = re.compile(r"\[URL=[^\]]+\]([^\[]+)\[/URL\]", re.IGNORECASE)
LINK_TARGET_RE = re.compile(r"\[URL=\"?([^\]\"]+)\"?\]([^\[]+)\[/URL\]", re.IGNORECASE)
STYLE_TAG_RE = re.compile(r"\[/?(?:" + "|".join(STYLE_TAGS) + r")\b[^\]]*\]", re.IGNORECASE)
DASH_RE = re.compile(r"[\u2010-\u2015\u2212]")
RANGE_DASH_RE = re.compile(r"\s*-\s*")


def normalize_text(text: str) -> str:
    """Normalize whitespace and trim."""
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def strip_markup(text: str) -> str:
    """
    Reduce a markup cell to plain text.

    Labeled links collapse to their label, recognized style and table tags are
    dropped, and unknown tags are left in place.
    """
    if not text:
        return ""
    text = LINK_LABEL_RE.sub(r"\1", text)
    text = STYLE_TAG_RE.sub("", text)
    return normalize_text(text)


def extract_link_and_text(cell: str) -> tuple[str, Optional[str]]:
    """
    Return ``(text, url)`` for a cell.

    ``text`` is the plain cell text with any labeled link collapsed to its
    label; ``url`` is the first labeled link's target, or None.
    """
    m = LINK_TARGET_RE.search(cell or "")
    url = m.group(1).strip() if m else None
    return strip_markup(cell), url


def normalize_dashes(text: str) -> str:
    """Map unicode dash variants to an ASCII hyphen."""
    return DASH_RE.sub("-", text)


def normalize_time_label(text: str) -> str:
    """Plain-text time range with a single spaced hyphen, e.g. ``10 am - 6 pm``."""
    text = normalize_dashes(strip_markup(text))
    return normalize_text(RANGE_DASH_RE.sub(" - ", text))


def titleize(text: str) -> str:
    """Upper-case the first letter of every word."""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), text)
