"""Digits-only normalizer for phone and identity-document values.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import re

_NON_DIGIT = re.compile(r"\D")


def normalize_digits(raw: str | None) -> str | None:
    """Return *raw* with every non-digit character removed.

    Returns ``None`` when *raw* is ``None``, empty, or whitespace-only.  A
    value with no digits at all (``"abc"``) yields ``""``.  Callers treat
    both results as "no value".
    """
    if raw is None or not raw.strip():
        return None
    return _NON_DIGIT.sub("", raw)
