"""Nationality key normalization and glyph lookup."""

import re

# Lookup is by substring in table order: the first key contained in the
# nationality wins ("vietnamese-chinese" resolves to "chinese").
FLAG_MAP: dict[str, str] = {
    "japanese": "🇯🇵",
    "chinese": "🇨🇳",
    "vietnamese": "🇻🇳",
    "thai": "🇹🇭",
    "turkish": "🇹🇷",
    "korean": "🇰🇷",
    "taiwanese": "🇹🇼",
    "indonesian": "🇮🇩",
    "malaysian": "🇲🇾",
    "filipin": "🇵🇭",
    "singapore": "🇸🇬",
    "indian": "🇮🇳",
    "australian": "🇦🇺",
    "new zealand": "🇳🇿",
    "brazilian": "🇧🇷",
    "colombian": "🇨🇴",
    "russian": "🇷🇺",
    "ukrainian": "🇺🇦",
}

STRAY_NEW_RE = re.compile(r"\bnew\b(?!\s*zealand)")


def normalize_nationality(raw: str) -> str:
    """Lower-case grouping key with the stray word ``new`` removed (``new zealand`` kept)."""
    key = STRAY_NEW_RE.sub("", (raw or "").lower())
    return re.sub(r"\s+", " ", key).strip()


def guess_flag(nationality: str) -> str:
    """Return the glyph of the first table key found in ``nationality``, or ``""``."""
    s = re.sub(r"\s+", " ", (nationality or "").lower()).strip()
    if not s:
        return ""
    for key, glyph in FLAG_MAP.items():
        if key in s:
            return glyph
    return ""
