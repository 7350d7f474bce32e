"""
Accounts: caller-owned balance snapshot and the per-outcome balance records.

Account is input only; the resolver never mutates it. AccountBalance is what
an outcome reports for each account the instruction references.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Account:
    """One entry of the caller's account snapshot. Balance is in whole units."""

    id: str
    balance: int
    currency: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Account:
        return cls(id=data["id"], balance=data["balance"], currency=data["currency"])


@dataclass(frozen=True)
class AccountBalance:
    """Account as reported in an outcome: balance after and before the transfer."""

    id: str
    balance: int
    balance_before: int
    currency: str

    @classmethod
    def from_account(cls, account: Account) -> AccountBalance:
        """Unchanged view of an account (balance == balance_before)."""
        return cls(
            id=account.id,
            balance=account.balance,
            balance_before=account.balance,
            currency=account.currency,
        )

    def adjusted(self, delta: int) -> AccountBalance:
        """New record with delta applied; balance_before is the pre-update balance."""
        return AccountBalance(
            id=self.id,
            balance=self.balance + delta,
            balance_before=self.balance,
            currency=self.currency,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "balance": self.balance,
            "balance_before": self.balance_before,
            "currency": self.currency,
        }


def coerce_accounts(accounts: Iterable[Account | Mapping[str, Any]]) -> list[Account]:
    """Accept Account objects or {id, balance, currency} mappings; preserve order."""
    return [a if isinstance(a, Account) else Account.from_mapping(a) for a in accounts]


def referenced_balances(
    accounts: Iterable[Account],
    debit_account: str | None,
    credit_account: str | None,
) -> list[AccountBalance]:
    """
    Accounts whose id matches either side of the instruction, in snapshot order
    (not instruction order). Ids that are None never match.
    """
    wanted = {i for i in (debit_account, credit_account) if i is not None}
    return [AccountBalance.from_account(a) for a in accounts if a.id in wanted]
