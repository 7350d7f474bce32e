"""
Status codes, statuses and instruction types shared by parser and resolver.

Values are part of the response contract and must not change.
"""

from __future__ import annotations

from enum import Enum


class InstructionType(Enum):
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class TransactionStatus(Enum):
    """Terminal status of a processed instruction."""

    SUCCESSFUL = "successful"
    PENDING = "pending"
    FAILED = "failed"


class StatusCode(Enum):
    """Machine-readable outcome codes."""

    SUCCESSFUL = "AP00"
    PENDING = "AP02"
    INVALID_AMOUNT = "AM01"
    CURRENCY_MISMATCH = "CU01"
    UNSUPPORTED_CURRENCY = "CU02"
    INSUFFICIENT_FUNDS = "AC01"
    SAME_ACCOUNTS = "AC02"
    ACCOUNT_NOT_FOUND = "AC03"
    INVALID_ACCOUNT_ID = "AC04"
    INVALID_DATE_FORMAT = "DT01"
    MISSING_KEYWORD = "SY01"
    INVALID_KEYWORD_ORDER = "SY02"
    MALFORMED_INSTRUCTION = "SY03"


SUPPORTED_CURRENCIES: tuple[str, ...] = ("NGN", "USD", "GBP", "GHS")
