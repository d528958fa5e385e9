"""Rate token normalization."""

import re
from typing import Optional

from roster_parser.text_utils import strip_markup

CURRENCY_SIGILS = "$€£¥"
RATE_SUFFIX = "/H"

_AMOUNT = r"\d{2,4}(?:[.,]\d{2})?"
_UNIT = r"\s*(?:/?\s*h(?:ou)?r?s?\b)?"

SIGIL_RATE_RE = re.compile(r"([" + re.escape(CURRENCY_SIGILS) + r"]\s*" + _AMOUNT + r")" + _UNIT, re.IGNORECASE)
RATE_RE = re.compile(r"([" + re.escape(CURRENCY_SIGILS) + r"]?\s*" + _AMOUNT + r")" + _UNIT, re.IGNORECASE)


def clean_rate(token: Optional[str]) -> Optional[str]:
    """
    Normalize a rate cell to a compact upper-case token such as ``$300/H``.

    An amount carrying a currency sigil wins over a bare number anywhere in
    the cell, so ``60 min $300`` gives ``$300/H``. Returns None when the cell
    holds no 2-4 digit amount.
    """
    if not token:
        return None
    text = strip_markup(token)
    m = SIGIL_RATE_RE.search(text) or RATE_RE.search(text)
    if not m:
        return None
    amount = re.sub(r"\s+", "", m.group(1))
    return f"{amount}{RATE_SUFFIX}".upper()
