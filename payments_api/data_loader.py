"""
Load account snapshots from CSV or DataFrame.

Expects one row per account with id, balance and currency columns. Column
names are case-insensitive and common aliases are accepted.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from paycore import Account

ACCOUNT_COLUMNS = ("id", "balance", "currency")


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Lowercase and trim column names; map aliases to id/balance/currency."""
    out = df.copy()
    out.columns = [str(c).lower().strip() for c in out.columns]
    renames = {
        "account": "id",
        "account_id": "id",
        "bal": "balance",
        "amount": "balance",
        "ccy": "currency",
    }
    out = out.rename(columns={k: v for k, v in renames.items() if k in out.columns and v not in out.columns})
    return out


def load_dataframe(df: pd.DataFrame) -> list[Account]:
    """
    Convert a DataFrame of accounts to core Account objects.

    Parameters
    ----------
    df : pd.DataFrame
        Raw DataFrame (columns may be mixed case or aliased).

    Returns
    -------
    list[Account]
        One Account per row, in row order.

    Raises
    ------
    ValueError
        If a required column is missing or a balance is not a whole number.
    """
    out = _normalize_columns(df)
    missing = [c for c in ACCOUNT_COLUMNS if c not in out.columns]
    if missing:
        raise ValueError(f"missing account columns: {', '.join(missing)}")
    balances = pd.to_numeric(out["balance"])
    if not (balances % 1 == 0).all():
        raise ValueError("account balances must be whole numbers")
    out["balance"] = balances
    return [
        Account(id=str(row.id), balance=int(row.balance), currency=str(row.currency).strip())
        for row in out[list(ACCOUNT_COLUMNS)].itertuples(index=False)
    ]


def load_csv(path: str | Path) -> list[Account]:
    """
    Load an account snapshot from a CSV file.

    Ids and currencies are read as text so values like "007" keep their
    leading zeros.
    """
    df = pd.read_csv(path, dtype=str, skipinitialspace=True)
    df = _normalize_columns(df)
    if "balance" in df.columns:
        df["balance"] = pd.to_numeric(df["balance"])
    return load_dataframe(df)
