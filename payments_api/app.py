"""
HTTP adapter: POST /payment-instructions.

Maps the core's TransactionOutcome straight to the response body; the HTTP
status depends only on outcome.status (failed → 400, otherwise 200).
"""

from __future__ import annotations

import json
import logging
from typing import Any

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from paycore import StatusCode, TransactionStatus, process_instruction
from paycore import messages
from payments_api.payload import InvalidPayloadError, validate_payload
from payments_api.settings import Settings, configure_logging

logger = logging.getLogger(__name__)

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"


def _empty_failure(reason: str, code: str) -> dict[str, Any]:
    """Failed body with no instruction fields (payload or internal errors)."""
    return {
        "type": None,
        "amount": None,
        "currency": None,
        "debit_account": None,
        "credit_account": None,
        "execute_by": None,
        "status": TransactionStatus.FAILED.value,
        "status_reason": reason,
        "status_code": code,
        "accounts": [],
    }


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title="Payment Instructions", version="0.1.0")
    app.state.settings = settings

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/payment-instructions")
    async def payment_instructions(request: Request) -> JSONResponse:
        body = await _read_json(request)
        try:
            payload = validate_payload(body)
        except InvalidPayloadError as e:
            logger.info("Payload rejected: %s", e)
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=_empty_failure(messages.INVALID_PAYLOAD, StatusCode.MALFORMED_INSTRUCTION.value),
            )

        try:
            outcome = process_instruction(payload.instruction, payload.snapshot())
        except Exception:
            logger.exception("Unexpected error processing instruction")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=_empty_failure(messages.INTERNAL_ERROR, INTERNAL_ERROR_CODE),
            )

        logger.info(
            "payment-instruction-request-completed type=%s status=%s code=%s",
            outcome.type.value if outcome.type else None,
            outcome.status.value,
            outcome.status_code.value,
        )
        http_status = status.HTTP_400_BAD_REQUEST if outcome.failed else status.HTTP_200_OK
        return JSONResponse(status_code=http_status, content=outcome.to_dict())

    return app


def run() -> None:
    """Serve the app with uvicorn using environment settings."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
