"""
Parsed instruction and parse result.

A ParsedInstruction is always returned, even on failure, populated with
whatever the parser could extract so callers can echo it back.
"""

from __future__ import annotations

from dataclasses import dataclass

from paycore.codes import InstructionType, StatusCode


@dataclass(frozen=True)
class ParsedInstruction:
    """Structured form of an instruction. Fields are None when not extracted."""

    type: InstructionType | None = None
    amount: int | None = None
    currency: str | None = None
    debit_account: str | None = None
    credit_account: str | None = None
    execute_by: str | None = None


@dataclass(frozen=True)
class ParseError:
    code: StatusCode
    reason: str


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parse_instruction. error is None on success."""

    instruction: ParsedInstruction
    error: ParseError | None = None

    @property
    def success(self) -> bool:
        return self.error is None
