"""
Human-readable reasons for status codes.

reason(code) is a pure lookup; callers never format codes themselves.
"""

from __future__ import annotations

from paycore.codes import StatusCode

TRANSACTION_SUCCESS = "Transaction executed successfully"
TRANSACTION_PENDING = "Transaction scheduled for future execution"
INVALID_AMOUNT = "Amount must be a positive integer"
CURRENCY_MISMATCH = "Account currency mismatch"
UNSUPPORTED_CURRENCY = "Unsupported currency. Only NGN, USD, GBP, and GHS are supported"
INSUFFICIENT_FUNDS = "Insufficient funds in debit account"
SAME_ACCOUNTS = "Debit and credit accounts cannot be the same"
ACCOUNT_NOT_FOUND = "Account not found"
DEBIT_ACCOUNT_NOT_FOUND = "Debit account not found"
CREDIT_ACCOUNT_NOT_FOUND = "Credit account not found"
INVALID_ACCOUNT_ID = "Invalid account ID format"
DEBIT_ACCOUNT_INVALID = "Invalid debit account ID format"
CREDIT_ACCOUNT_INVALID = "Invalid credit account ID format"
INVALID_DATE = "Invalid date format. Use YYYY-MM-DD"
MISSING_KEYWORD = "Missing required keyword"
INVALID_ORDER = "Invalid keyword order"
MALFORMED_INSTRUCTION = "Malformed instruction: unable to parse keywords"
INVALID_PAYLOAD = "Invalid request payload: expected accounts list and instruction string"
INTERNAL_ERROR = "Internal server error"

_REASONS: dict[StatusCode, str] = {
    StatusCode.SUCCESSFUL: TRANSACTION_SUCCESS,
    StatusCode.PENDING: TRANSACTION_PENDING,
    StatusCode.INVALID_AMOUNT: INVALID_AMOUNT,
    StatusCode.CURRENCY_MISMATCH: CURRENCY_MISMATCH,
    StatusCode.UNSUPPORTED_CURRENCY: UNSUPPORTED_CURRENCY,
    StatusCode.INSUFFICIENT_FUNDS: INSUFFICIENT_FUNDS,
    StatusCode.SAME_ACCOUNTS: SAME_ACCOUNTS,
    StatusCode.ACCOUNT_NOT_FOUND: ACCOUNT_NOT_FOUND,
    StatusCode.INVALID_ACCOUNT_ID: INVALID_ACCOUNT_ID,
    StatusCode.INVALID_DATE_FORMAT: INVALID_DATE,
    StatusCode.MISSING_KEYWORD: MISSING_KEYWORD,
    StatusCode.INVALID_KEYWORD_ORDER: INVALID_ORDER,
    StatusCode.MALFORMED_INSTRUCTION: MALFORMED_INSTRUCTION,
}


def reason(code: StatusCode) -> str:
    """Default reason text for a status code."""
    return _REASONS[code]


def account_not_found_reason(is_debit: bool) -> str:
    return DEBIT_ACCOUNT_NOT_FOUND if is_debit else CREDIT_ACCOUNT_NOT_FOUND


def invalid_account_reason(is_debit: bool) -> str:
    return DEBIT_ACCOUNT_INVALID if is_debit else CREDIT_ACCOUNT_INVALID


def insufficient_funds_reason(balance: int, amount: int | None, currency: str | None) -> str:
    """Shortfall message: current balance and required amount in the instruction currency."""
    return f"{INSUFFICIENT_FUNDS}: has {balance} {currency}, needs {amount} {currency}"
