"""
Token-level predicates used by the parser and resolver.

All functions are pure and total over their inputs.
"""

from __future__ import annotations

import calendar
import re
from collections.abc import Sequence

from paycore.codes import SUPPORTED_CURRENCIES

_WHITESPACE = re.compile(r"[ \t\n\r]+")
_ACCOUNT_ID = re.compile(r"[A-Za-z0-9.@-]+")
_ISO_DATE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def split_tokens(raw: str) -> list[str]:
    """Split on runs of space, tab, newline and carriage return. No empty tokens."""
    return [t for t in _WHITESPACE.split(raw) if t]


def is_valid_account_id(account_id: str | None) -> bool:
    """ASCII letters, digits, '-', '.' and '@' only; must be non-empty."""
    return bool(account_id) and _ACCOUNT_ID.fullmatch(account_id) is not None


def parse_amount(token: str | None) -> int | None:
    """
    Canonical positive integer or None.

    The token must round-trip exactly through int -> str, which rejects
    leading zeros, signs, decimals, separators and non-ASCII digits.
    """
    if not token:
        return None
    try:
        value = int(token)
    except ValueError:
        return None
    if value <= 0 or str(value) != token:
        return None
    return value


def keywords_match(tokens: Sequence[str], start: int, keywords: Sequence[str]) -> bool:
    """Case-insensitive match of keywords against tokens[start:start + len(keywords)]."""
    window = tokens[start:start + len(keywords)]
    if len(window) != len(keywords):
        return False
    return all(tok.upper() == kw for tok, kw in zip(window, keywords))


def is_valid_date(token: str | None) -> bool:
    """YYYY-MM-DD naming a real Gregorian calendar day."""
    if not token:
        return False
    m = _ISO_DATE.fullmatch(token)
    if m is None:
        return False
    year, month, day = (int(g) for g in m.groups())
    if not 1 <= month <= 12:
        return False
    days = [31, 29 if calendar.isleap(year) else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    return 1 <= day <= days[month - 1]


def is_future_date(execute_by: str, today_iso: str) -> bool:
    """Strictly after today. Fixed-width ISO dates order lexicographically."""
    return execute_by > today_iso


def is_supported_currency(currency: str | None) -> bool:
    return currency in SUPPORTED_CURRENCIES
