"""
Transaction resolver: apply business rules to a parsed instruction.

Flow: select referenced accounts (snapshot order) → debit exists → credit exists
→ supported currency → currencies match → sufficient funds → timing.
First failing rule wins. Executed transfers produce new balance records; the
caller's accounts are never modified.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timezone
from typing import Any

from paycore import messages
from paycore.accounts import Account, AccountBalance, coerce_accounts, referenced_balances
from paycore.codes import StatusCode, TransactionStatus
from paycore.instruction import ParsedInstruction
from paycore.outcome import TransactionOutcome, failed_outcome
from paycore.rules import is_future_date, is_supported_currency

logger = logging.getLogger(__name__)


def utc_today() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def _find(accounts: list[Account], account_id: str | None) -> Account | None:
    for account in accounts:
        if account.id == account_id:
            return account
    return None


def _apply_transfer(
    balances: list[AccountBalance],
    instruction: ParsedInstruction,
) -> list[AccountBalance]:
    """Debit and credit the matching records; others pass through unchanged."""
    amount = instruction.amount
    out: list[AccountBalance] = []
    for record in balances:
        if record.id == instruction.debit_account:
            out.append(record.adjusted(-amount))
        elif record.id == instruction.credit_account:
            out.append(record.adjusted(amount))
        else:
            out.append(record)
    return out


def resolve_transaction(
    instruction: ParsedInstruction,
    accounts: Iterable[Account | Mapping[str, Any]],
    *,
    today: date | None = None,
) -> TransactionOutcome:
    """
    Decide whether a parsed instruction executes now, later, or not at all.

    Parameters
    ----------
    instruction : ParsedInstruction
        A successfully parsed instruction.
    accounts : iterable of Account or mapping
        Caller's account snapshot. Read only.
    today : date, optional
        Reference date for scheduling. Defaults to the current UTC date.

    Returns
    -------
    TransactionOutcome
        status successful (balances updated), pending (future date, balances
        unchanged) or failed (first rule violated).
    """
    snapshot = coerce_accounts(accounts)
    balances = referenced_balances(snapshot, instruction.debit_account, instruction.credit_account)

    debit = _find(snapshot, instruction.debit_account)
    if debit is None:
        logger.info("Transaction rejected: debit account %r not found", instruction.debit_account)
        return failed_outcome(
            instruction,
            StatusCode.ACCOUNT_NOT_FOUND,
            balances,
            reason=messages.account_not_found_reason(True),
        )

    credit = _find(snapshot, instruction.credit_account)
    if credit is None:
        logger.info("Transaction rejected: credit account %r not found", instruction.credit_account)
        return failed_outcome(
            instruction,
            StatusCode.ACCOUNT_NOT_FOUND,
            balances,
            reason=messages.account_not_found_reason(False),
        )

    if not is_supported_currency(instruction.currency):
        logger.info("Transaction rejected: unsupported currency %r", instruction.currency)
        return failed_outcome(instruction, StatusCode.UNSUPPORTED_CURRENCY, balances)

    if not (debit.currency == credit.currency == instruction.currency):
        logger.info(
            "Transaction rejected: currency mismatch (debit=%s credit=%s instruction=%s)",
            debit.currency,
            credit.currency,
            instruction.currency,
        )
        return failed_outcome(instruction, StatusCode.CURRENCY_MISMATCH, balances)

    if debit.balance < instruction.amount:
        logger.info(
            "Transaction rejected: insufficient funds in %r (%s < %s)",
            debit.id,
            debit.balance,
            instruction.amount,
        )
        return failed_outcome(
            instruction,
            StatusCode.INSUFFICIENT_FUNDS,
            balances,
            reason=messages.insufficient_funds_reason(
                debit.balance, instruction.amount, instruction.currency
            ),
        )

    ref = today or utc_today()
    if instruction.execute_by is not None and is_future_date(instruction.execute_by, ref.isoformat()):
        logger.debug("Transaction pending until %s", instruction.execute_by)
        return TransactionOutcome.from_instruction(
            instruction, TransactionStatus.PENDING, StatusCode.PENDING, balances
        )

    logger.debug(
        "Transaction executed: %s %s from %r to %r",
        instruction.amount,
        instruction.currency,
        debit.id,
        credit.id,
    )
    return TransactionOutcome.from_instruction(
        instruction,
        TransactionStatus.SUCCESSFUL,
        StatusCode.SUCCESSFUL,
        _apply_transfer(balances, instruction),
    )
