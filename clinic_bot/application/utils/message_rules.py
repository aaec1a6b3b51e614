from __future__ import annotations

import re


# ASCII digits only: "١" or "１" are not menu choices.
_LEADING_INT_RE = re.compile(r"^[+-]?[0-9]+")


def normalize_text(text: str | None) -> str:
    return (text or "").strip()


def parse_choice(text: str | None) -> int | None:
    """
    Read a menu choice from user text.

    Only the leading integer counts, so "2" and "2 por favor" both give 2.
    Returns None when the text does not start with a number, or when the
    number is too long to convert (no menu has that many entries anyway).
    """
    match = _LEADING_INT_RE.match(normalize_text(text))
    if not match:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        return None
