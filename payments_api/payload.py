"""
Request payload shape validation.

Checks only the top-level shape ({accounts: [...], instruction: str}); all
instruction semantics belong to paycore.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, StrictInt, StrictStr, ValidationError

from paycore import Account


class AccountPayload(BaseModel):
    id: StrictStr
    balance: StrictInt
    currency: StrictStr


class PaymentRequest(BaseModel):
    accounts: list[AccountPayload]
    instruction: StrictStr

    def snapshot(self) -> list[Account]:
        """Accounts as core value objects, in request order."""
        return [Account(id=a.id, balance=a.balance, currency=a.currency) for a in self.accounts]


class InvalidPayloadError(ValueError):
    """Body does not have the expected shape. errors holds pydantic's error list."""

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        super().__init__(f"invalid payload: {len(errors)} error(s)")
        self.errors = errors


def validate_payload(body: Any) -> PaymentRequest:
    """Normalize a decoded JSON body or raise InvalidPayloadError."""
    if not isinstance(body, dict):
        raise InvalidPayloadError([{"loc": (), "msg": "body must be a JSON object", "type": "dict_type"}])
    try:
        return PaymentRequest.model_validate(body)
    except ValidationError as e:
        raise InvalidPayloadError(e.errors()) from e
