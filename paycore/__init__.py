"""
paycore: payment instruction parser and transaction resolver.

Pure, synchronous and stateless. No persistence, transport or scheduling;
callers supply an account snapshot and receive a TransactionOutcome.
"""

__version__ = "0.1.0"

from paycore.accounts import Account, AccountBalance
from paycore.codes import SUPPORTED_CURRENCIES, InstructionType, StatusCode, TransactionStatus
from paycore.instruction import ParsedInstruction, ParseError, ParseResult
from paycore.messages import reason
from paycore.outcome import TransactionOutcome
from paycore.parser import parse_instruction
from paycore.resolver import resolve_transaction
from paycore.service import process_instruction

__all__ = [
    "Account",
    "AccountBalance",
    "InstructionType",
    "StatusCode",
    "TransactionStatus",
    "SUPPORTED_CURRENCIES",
    "ParsedInstruction",
    "ParseError",
    "ParseResult",
    "TransactionOutcome",
    "reason",
    "parse_instruction",
    "resolve_transaction",
    "process_instruction",
]
