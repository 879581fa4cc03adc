"""
textmix.numeric — Deciding whether a token is a number.

A token is numeric when it is an ASCII decimal literal (optional sign,
digits with an optional fraction, optional exponent, surrounding
whitespace allowed) and its value is finite.  "nan", "inf", "1_000",
"0x10", non-ASCII digits and the empty string are not numeric.
"""

import math
import re

_DECIMAL = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII)


def parse_number(token: str) -> float:
    """Parse a numeric token.  Raises ValueError for anything else."""
    if _DECIMAL.fullmatch(token) is None:
        raise ValueError(f"not a finite decimal number: {token!r}")
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"not a finite decimal number: {token!r}")
    return value


def is_numeric(token) -> bool:
    """True iff `token` is a string holding a finite decimal number."""
    if not isinstance(token, str):
        return False
    try:
        parse_number(token)
    except ValueError:
        return False
    return True
