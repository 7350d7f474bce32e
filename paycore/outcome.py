"""
TransactionOutcome: the single response shape of the core.

Every path (parse failure, rule failure, pending, executed) produces one of
these. to_dict() is the caller-facing body.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from paycore import messages
from paycore.accounts import AccountBalance
from paycore.codes import InstructionType, StatusCode, TransactionStatus
from paycore.instruction import ParsedInstruction


@dataclass(frozen=True)
class TransactionOutcome:
    """Result of processing one instruction. Immutable."""

    type: InstructionType | None
    amount: int | None
    currency: str | None
    debit_account: str | None
    credit_account: str | None
    execute_by: str | None
    status: TransactionStatus
    status_reason: str
    status_code: StatusCode
    accounts: tuple[AccountBalance, ...] = field(default_factory=tuple)

    @classmethod
    def from_instruction(
        cls,
        instruction: ParsedInstruction,
        status: TransactionStatus,
        code: StatusCode,
        accounts: Sequence[AccountBalance] = (),
        reason: str | None = None,
    ) -> TransactionOutcome:
        return cls(
            type=instruction.type,
            amount=instruction.amount,
            currency=instruction.currency,
            debit_account=instruction.debit_account,
            credit_account=instruction.credit_account,
            execute_by=instruction.execute_by,
            status=status,
            status_reason=reason if reason is not None else messages.reason(code),
            status_code=code,
            accounts=tuple(accounts),
        )

    @property
    def failed(self) -> bool:
        return self.status == TransactionStatus.FAILED

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value if self.type is not None else None,
            "amount": self.amount,
            "currency": self.currency,
            "debit_account": self.debit_account,
            "credit_account": self.credit_account,
            "execute_by": self.execute_by,
            "status": self.status.value,
            "status_reason": self.status_reason,
            "status_code": self.status_code.value,
            "accounts": [a.to_dict() for a in self.accounts],
        }


def failed_outcome(
    instruction: ParsedInstruction,
    code: StatusCode,
    accounts: Sequence[AccountBalance] = (),
    reason: str | None = None,
) -> TransactionOutcome:
    """Failed outcome echoing the instruction; only code and reason vary."""
    return TransactionOutcome.from_instruction(
        instruction, TransactionStatus.FAILED, code, accounts=accounts, reason=reason
    )
