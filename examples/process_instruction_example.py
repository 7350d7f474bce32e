"""
Process a few instructions against a sample account snapshot.

Shows: load_csv, process_instruction, print_report. Each call is independent;
the snapshot is not updated between instructions.
"""

from __future__ import annotations

from pathlib import Path

from paycore import process_instruction
from payments_api import configure_logging, load_csv, print_report


def main() -> None:
    configure_logging("DEBUG")
    accounts = load_csv(Path(__file__).resolve().parent / "data" / "sample_accounts.csv")

    instructions = [
        "DEBIT 500 USD FROM ACCOUNT N90394 FOR CREDIT TO ACCOUNT N9122",
        "CREDIT 300 NGN TO ACCOUNT acc-002 FOR DEBIT FROM ACCOUNT acc-003 ON 2099-12-31",
        "DEBIT 5000 NGN FROM ACCOUNT acc-002 FOR CREDIT TO ACCOUNT acc-003",
        "SEND 100 USD TO ACCOUNT N9122",
    ]
    for text in instructions:
        print(f"> {text}")
        print_report(process_instruction(text, accounts))


if __name__ == "__main__":
    main()
