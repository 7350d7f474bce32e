"""
Instruction parser: fixed-position grammar with two productions.

    DEBIT  <amount> <cur> FROM ACCOUNT <id> FOR CREDIT TO ACCOUNT <id> [ON <date>]
    CREDIT <amount> <cur> TO ACCOUNT <id> FOR DEBIT FROM ACCOUNT <id> [ON <date>]

Checks run in a fixed order and the first failure wins. Whatever was extracted
before the failure is echoed back in the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from paycore import messages
from paycore.codes import InstructionType, StatusCode
from paycore.instruction import ParsedInstruction, ParseError, ParseResult
from paycore.rules import (
    is_valid_account_id,
    is_valid_date,
    keywords_match,
    parse_amount,
    split_tokens,
)

logger = logging.getLogger(__name__)

MIN_TOKENS = 6
COMPLETE_TOKENS = 11

# Token positions shared by both productions.
AMOUNT_POS = 1
CURRENCY_POS = 2
ROLE_KEYWORDS_POS = 3
FIRST_ACCOUNT_POS = 5
LINK_KEYWORDS_POS = 6
SECOND_ACCOUNT_POS = 10
DATE_KEYWORD_POS = 11


@dataclass(frozen=True)
class Grammar:
    """One production: its leading keyword and the keyword runs around the two accounts."""

    type: InstructionType
    role_keywords: tuple[str, ...]
    link_keywords: tuple[str, ...]
    first_is_debit: bool


DEBIT_GRAMMAR = Grammar(
    type=InstructionType.DEBIT,
    role_keywords=("FROM", "ACCOUNT"),
    link_keywords=("FOR", "CREDIT", "TO", "ACCOUNT"),
    first_is_debit=True,
)

CREDIT_GRAMMAR = Grammar(
    type=InstructionType.CREDIT,
    role_keywords=("TO", "ACCOUNT"),
    link_keywords=("FOR", "DEBIT", "FROM", "ACCOUNT"),
    first_is_debit=False,
)

GRAMMARS: dict[str, Grammar] = {g.type.value: g for g in (DEBIT_GRAMMAR, CREDIT_GRAMMAR)}


@dataclass
class _Draft:
    """Fields accumulated during one parse call."""

    type: InstructionType | None = None
    amount: int | None = None
    currency: str | None = None
    debit_account: str | None = None
    credit_account: str | None = None
    execute_by: str | None = None

    def freeze(self) -> ParsedInstruction:
        return ParsedInstruction(
            type=self.type,
            amount=self.amount,
            currency=self.currency,
            debit_account=self.debit_account,
            credit_account=self.credit_account,
            execute_by=self.execute_by,
        )

    def fail(self, code: StatusCode, reason: str | None = None) -> ParseResult:
        text = reason if reason is not None else messages.reason(code)
        logger.debug("Instruction rejected: %s (%s)", code.value, text)
        return ParseResult(instruction=self.freeze(), error=ParseError(code=code, reason=text))


def _token(tokens: list[str], pos: int) -> str | None:
    return tokens[pos] if pos < len(tokens) else None


def _parse_production(tokens: list[str], grammar: Grammar) -> ParseResult:
    amount_token = _token(tokens, AMOUNT_POS)
    currency = _token(tokens, CURRENCY_POS)
    first_id = _token(tokens, FIRST_ACCOUNT_POS)
    second_id = _token(tokens, SECOND_ACCOUNT_POS)

    draft = _Draft(
        type=grammar.type,
        amount=parse_amount(amount_token),
        currency=currency.upper() if currency else None,
    )
    if grammar.first_is_debit:
        draft.debit_account, draft.credit_account = first_id, second_id
    else:
        draft.credit_account, draft.debit_account = first_id, second_id

    if len(tokens) < MIN_TOKENS:
        return draft.fail(StatusCode.MISSING_KEYWORD)
    if not amount_token or draft.amount is None:
        draft.amount = None
        return draft.fail(StatusCode.INVALID_AMOUNT)

    if not keywords_match(tokens, ROLE_KEYWORDS_POS, grammar.role_keywords):
        return draft.fail(StatusCode.INVALID_KEYWORD_ORDER)
    if first_id is not None and not is_valid_account_id(first_id):
        return draft.fail(
            StatusCode.INVALID_ACCOUNT_ID,
            messages.invalid_account_reason(grammar.first_is_debit),
        )

    if len(tokens) >= LINK_KEYWORDS_POS + len(grammar.link_keywords) and not keywords_match(
        tokens, LINK_KEYWORDS_POS, grammar.link_keywords
    ):
        return draft.fail(StatusCode.INVALID_KEYWORD_ORDER)
    if second_id is not None and not is_valid_account_id(second_id):
        return draft.fail(
            StatusCode.INVALID_ACCOUNT_ID,
            messages.invalid_account_reason(not grammar.first_is_debit),
        )

    if first_id is not None and second_id is not None and first_id == second_id:
        return draft.fail(StatusCode.SAME_ACCOUNTS)
    if len(tokens) < COMPLETE_TOKENS:
        return draft.fail(StatusCode.MISSING_KEYWORD)

    pos = DATE_KEYWORD_POS
    on = _token(tokens, pos)
    if on is not None and on.upper() == "ON":
        date_token = _token(tokens, pos + 1)
        if date_token is None:
            return draft.fail(StatusCode.INVALID_DATE_FORMAT)
        draft.execute_by = date_token
        if not is_valid_date(date_token):
            return draft.fail(StatusCode.INVALID_DATE_FORMAT)
        pos += 2

    if len(tokens) > pos:
        return draft.fail(StatusCode.INVALID_KEYWORD_ORDER)

    return ParseResult(instruction=draft.freeze())


def parse_instruction(raw: object) -> ParseResult:
    """
    Parse a raw instruction string.

    Never raises: non-string or empty input, too few tokens and an unknown
    leading keyword are all reported as MALFORMED_INSTRUCTION with no fields
    extracted. Other failures carry the partially parsed instruction.
    """
    malformed = _Draft()
    if not isinstance(raw, str) or not raw:
        return malformed.fail(StatusCode.MALFORMED_INSTRUCTION)

    tokens = split_tokens(raw)
    if len(tokens) < MIN_TOKENS:
        return malformed.fail(StatusCode.MALFORMED_INSTRUCTION)

    grammar = GRAMMARS.get(tokens[0].upper())
    if grammar is None:
        return malformed.fail(StatusCode.MALFORMED_INSTRUCTION)
    return _parse_production(tokens, grammar)
