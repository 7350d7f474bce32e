"""
Call a running payment-instructions service over HTTP.

Start the service first: python -m payments_api.app
"""

from __future__ import annotations

import httpx


def main() -> None:
    payload = {
        "accounts": [
            {"id": "a", "balance": 230, "currency": "USD"},
            {"id": "b", "balance": 300, "currency": "USD"},
        ],
        "instruction": "DEBIT 30 USD FROM ACCOUNT a FOR CREDIT TO ACCOUNT b",
    }
    resp = httpx.post("http://localhost:8000/payment-instructions", json=payload, timeout=10.0)
    print(resp.status_code)
    print(resp.json())


if __name__ == "__main__":
    main()
