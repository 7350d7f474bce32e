"""
Outcome report: print a summary of a TransactionOutcome.
"""

from __future__ import annotations

import pandas as pd

from paycore import TransactionOutcome


def accounts_frame(outcome: TransactionOutcome) -> pd.DataFrame:
    """Accounts of an outcome as a DataFrame with a change column."""
    df = pd.DataFrame(
        [a.to_dict() for a in outcome.accounts],
        columns=["id", "balance", "balance_before", "currency"],
    )
    df["change"] = df["balance"] - df["balance_before"]
    return df[["id", "currency", "balance_before", "balance", "change"]]


def print_report(outcome: TransactionOutcome) -> pd.DataFrame:
    """
    Print a short summary of an outcome.

    Returns
    -------
    pd.DataFrame
        The accounts table (e.g. for programmatic use).
    """
    df = accounts_frame(outcome)
    kind = outcome.type.value if outcome.type is not None else "-"
    print("--- Payment Instruction ---")
    print(f"Type:            {kind}")
    print(f"Amount:          {outcome.amount} {outcome.currency or ''}".rstrip())
    print(f"Debit account:   {outcome.debit_account}")
    print(f"Credit account:  {outcome.credit_account}")
    print(f"Execute by:      {outcome.execute_by or 'immediately'}")
    print(f"Status:          {outcome.status.value} ({outcome.status_code.value})")
    print(f"Reason:          {outcome.status_reason}")
    if not df.empty:
        print(df.to_string(index=False))
    print("---------------------------")
    return df
