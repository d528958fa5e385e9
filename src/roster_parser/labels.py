"""Annotation label (tag) parsing utilities used by the row assembler."""

import re
from typing import Iterable, Optional

from roster_parser.text_utils import strip_markup

# Canonical label -> whole-word pattern, tested against upper-cased text.
TAG_PATTERNS: dict[str, re.Pattern[str]] = {
    "NEW": re.compile(r"\bNEW\b(?!\s*ZEALAND)"),
    "TOP": re.compile(r"\b(?:TOP|PREMIUM|ELITE)\b"),
    "JAV": re.compile(r"\bJAV\b"),
    "VIP": re.compile(r"\bVIP\b"),
    "CAME BACK!": re.compile(r"\b(?:CAME\s*BACK|RETURN(?:ED|ING|S)?|BACK\s*TODAY)\b"),
    "SPECIAL": re.compile(r"\bSPECIAL\b"),
}

INLINE_TAG_WORDS = (
    "new",
    "vip",
    "jav",
    "top",
    "premium",
    "elite",
    "special",
    "came back",
    "back today",
    "returned",
    "returning",
    "returns",
    "return",
)

PROTECTED_PHRASES = (re.compile(r"\bnew\s+zealand\b", re.IGNORECASE),)

HEADER_HINT_RE = re.compile(r"\(\(\(\s*([^)]+?)\s*\)\)\)")
HEADER_HINT_SPLIT_RE = re.compile(r"[,\s|/]+")
_PLACEHOLDER = "\ue000{}\ue001"


def _word_pattern(word: str, flags: int = 0) -> re.Pattern[str]:
    parts = (re.escape(p) for p in word.split())
    return re.compile(r"(?<!\w)" + r"\s+".join(parts) + r"(?!\w)", flags)


def extract_header_tags(header_cell: str) -> list[str]:
    """Extract upper-cased hint labels from ``(((A, B)))`` annotations in a header cell."""
    tokens: list[str] = []
    for m in HEADER_HINT_RE.finditer(header_cell or ""):
        for token in HEADER_HINT_SPLIT_RE.split(m.group(1)):
            token = token.strip().upper()
            if token and token not in tokens:
                tokens.append(token)
    return tokens


def extract_tags(sources: Iterable[Optional[str]], header_hints: Iterable[str] = ()) -> list[str]:
    """
    Collect annotation labels found in the combined text of ``sources``.

    Built-in labels come first in TAG_PATTERNS order, then every header hint
    that appears as a whole word. Labels are deduplicated.
    """
    raw = " ".join(strip_markup(s or "") for s in sources).upper()
    tags: list[str] = []

    def add(label: str, pattern: re.Pattern[str]) -> None:
        if label not in tags and pattern.search(raw):
            tags.append(label)

    for label, pattern in TAG_PATTERNS.items():
        add(label, pattern)
    for hint in header_hints:
        hint = hint.strip().upper()
        if hint:
            add(hint, _word_pattern(hint))
    return tags


def strip_inline_tag_words(name: str, extra_words: Iterable[str] = ()) -> str:
    """
    Remove annotation words from a display name.

    Protected phrases such as ``New Zealand`` are swapped for placeholders
    before stripping and restored afterwards.
    """
    if not name:
        return ""

    protected: list[str] = []

    def protect(m: re.Match[str]) -> str:
        protected.append(m.group(0))
        return _PLACEHOLDER.format(len(protected) - 1)

    for pattern in PROTECTED_PHRASES:
        name = pattern.sub(protect, name)

    words = list(INLINE_TAG_WORDS) + [w.lower() for w in extra_words if w.strip()]
    # Longest first so "came back" wins over a shorter overlapping word.
    for word in sorted(words, key=len, reverse=True):
        name = _word_pattern(word, re.IGNORECASE).sub("", name)
    name = re.sub(r"(?<!\w)!+", "", name)

    for idx, phrase in enumerate(protected):
        name = name.replace(_PLACEHOLDER.format(idx), phrase)
    return re.sub(r"\s{2,}", " ", name).strip()
