"""
process_instruction: parse, then resolve.

On parse failure the resolver is skipped and a failed outcome is built from
the partial parse, listing only the snapshot accounts the partial ids name.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from paycore.accounts import Account, coerce_accounts, referenced_balances
from paycore.outcome import TransactionOutcome, failed_outcome
from paycore.parser import parse_instruction
from paycore.resolver import resolve_transaction


def process_instruction(
    instruction: str,
    accounts: Iterable[Account | Mapping[str, Any]],
    *,
    today: date | None = None,
) -> TransactionOutcome:
    snapshot = coerce_accounts(accounts)
    result = parse_instruction(instruction)
    if result.error is not None:
        parsed = result.instruction
        balances = referenced_balances(snapshot, parsed.debit_account, parsed.credit_account)
        return failed_outcome(parsed, result.error.code, balances, reason=result.error.reason)
    return resolve_transaction(result.instruction, snapshot, today=today)
