"""
Tests for paycore resolver: rule chain, timing and balance updates.
"""

from datetime import date

from paycore import (
    Account,
    InstructionType,
    ParsedInstruction,
    StatusCode,
    TransactionStatus,
    resolve_transaction,
)

TODAY = date(2026, 3, 15)


def _instruction(**overrides) -> ParsedInstruction:
    fields = dict(
        type=InstructionType.DEBIT,
        amount=100,
        currency="USD",
        debit_account="a",
        credit_account="b",
        execute_by=None,
    )
    fields.update(overrides)
    return ParsedInstruction(**fields)


def _accounts(a_balance: int = 500, b_balance: int = 500, a_cur: str = "USD", b_cur: str = "USD") -> list[Account]:
    return [
        Account(id="a", balance=a_balance, currency=a_cur),
        Account(id="b", balance=b_balance, currency=b_cur),
    ]


# --- Execution ---


def test_immediate_debit_updates_balances():
    out = resolve_transaction(_instruction(amount=500), _accounts(), today=TODAY)
    assert out.status == TransactionStatus.SUCCESSFUL
    assert out.status_code == StatusCode.SUCCESSFUL
    assert len(out.accounts) == 2
    a, b = out.accounts
    assert (a.id, a.balance, a.balance_before) == ("a", 0, 500)
    assert (b.id, b.balance, b.balance_before) == ("b", 1000, 500)


def test_transfer_conserves_total_balance():
    out = resolve_transaction(_instruction(amount=123), _accounts(400, 77), today=TODAY)
    before = sum(x.balance_before for x in out.accounts)
    after = sum(x.balance for x in out.accounts)
    assert before == after == 477


def test_credit_type_moves_funds_from_debit_account():
    out = resolve_transaction(_instruction(type=InstructionType.CREDIT, amount=50), _accounts(), today=TODAY)
    assert out.status == TransactionStatus.SUCCESSFUL
    assert out.type == InstructionType.CREDIT
    assert [x.balance for x in out.accounts] == [450, 550]


def test_accounts_follow_snapshot_order_and_skip_unrelated():
    snapshot = [
        Account(id="x", balance=1, currency="USD"),
        Account(id="b", balance=200, currency="USD"),
        Account(id="a", balance=300, currency="USD"),
    ]
    out = resolve_transaction(_instruction(), snapshot, today=TODAY)
    assert [x.id for x in out.accounts] == ["b", "a"]
    assert [x.balance for x in out.accounts] == [300, 200]


def test_caller_accounts_untouched():
    snapshot = _accounts()
    resolve_transaction(_instruction(), snapshot, today=TODAY)
    assert snapshot == _accounts()


def test_accepts_mapping_accounts():
    snapshot = [
        {"id": "a", "balance": 200, "currency": "USD"},
        {"id": "b", "balance": 0, "currency": "USD"},
    ]
    out = resolve_transaction(_instruction(), snapshot, today=TODAY)
    assert out.status == TransactionStatus.SUCCESSFUL
    assert [x.balance for x in out.accounts] == [100, 100]


# --- Timing ---


def test_future_date_is_pending_and_balances_unchanged():
    out = resolve_transaction(_instruction(execute_by="2099-12-31"), _accounts(), today=TODAY)
    assert out.status == TransactionStatus.PENDING
    assert out.status_code == StatusCode.PENDING
    assert [x.balance for x in out.accounts] == [500, 500]
    assert [x.balance_before for x in out.accounts] == [500, 500]


def test_tomorrow_is_pending():
    out = resolve_transaction(_instruction(execute_by="2026-03-16"), _accounts(), today=TODAY)
    assert out.status == TransactionStatus.PENDING


def test_today_executes_immediately():
    out = resolve_transaction(_instruction(execute_by="2026-03-15"), _accounts(), today=TODAY)
    assert out.status == TransactionStatus.SUCCESSFUL
    assert out.execute_by == "2026-03-15"


def test_past_date_executes_immediately():
    out = resolve_transaction(_instruction(execute_by="2020-01-01"), _accounts(200, 200), today=TODAY)
    assert out.status == TransactionStatus.SUCCESSFUL
    assert [x.balance for x in out.accounts] == [100, 300]


def test_default_today_uses_utc_clock():
    out = resolve_transaction(_instruction(execute_by="2099-12-31"), _accounts())
    assert out.status == TransactionStatus.PENDING


# --- Rule chain ---


def test_debit_account_not_found():
    snapshot = [Account(id="b", balance=500, currency="USD")]
    out = resolve_transaction(_instruction(), snapshot, today=TODAY)
    assert out.status == TransactionStatus.FAILED
    assert out.status_code == StatusCode.ACCOUNT_NOT_FOUND
    assert "debit" in out.status_reason.lower()
    assert [x.id for x in out.accounts] == ["b"]


def test_credit_account_not_found():
    snapshot = [Account(id="a", balance=500, currency="USD")]
    out = resolve_transaction(_instruction(), snapshot, today=TODAY)
    assert out.status_code == StatusCode.ACCOUNT_NOT_FOUND
    assert "credit" in out.status_reason.lower()


def test_no_matching_accounts():
    out = resolve_transaction(_instruction(), [Account(id="c", balance=500, currency="USD")], today=TODAY)
    assert out.status_code == StatusCode.ACCOUNT_NOT_FOUND
    assert out.accounts == ()


def test_unsupported_currency():
    out = resolve_transaction(_instruction(currency="XYZ"), _accounts(a_cur="XYZ", b_cur="XYZ"), today=TODAY)
    assert out.status_code == StatusCode.UNSUPPORTED_CURRENCY
    assert "Unsupported currency" in out.status_reason


def test_unsupported_currency_reported_before_mismatch():
    out = resolve_transaction(_instruction(currency="EUR"), _accounts(a_cur="USD", b_cur="GBP"), today=TODAY)
    assert out.status_code == StatusCode.UNSUPPORTED_CURRENCY


def test_currency_mismatch_between_accounts():
    out = resolve_transaction(_instruction(), _accounts(b_cur="EUR"), today=TODAY)
    assert out.status == TransactionStatus.FAILED
    assert out.status_code == StatusCode.CURRENCY_MISMATCH


def test_currency_mismatch_with_instruction():
    out = resolve_transaction(_instruction(currency="GBP"), _accounts(), today=TODAY)
    assert out.status_code == StatusCode.CURRENCY_MISMATCH


def test_insufficient_funds_reason_has_shortfall():
    out = resolve_transaction(_instruction(), _accounts(a_balance=50), today=TODAY)
    assert out.status_code == StatusCode.INSUFFICIENT_FUNDS
    assert "Insufficient funds" in out.status_reason
    assert "50 USD" in out.status_reason
    assert "100 USD" in out.status_reason
    assert [x.balance for x in out.accounts] == [50, 500]


def test_exact_balance_is_sufficient():
    out = resolve_transaction(_instruction(amount=500), _accounts(a_balance=500), today=TODAY)
    assert out.status == TransactionStatus.SUCCESSFUL


def test_insufficient_funds_checked_before_timing():
    out = resolve_transaction(_instruction(execute_by="2099-12-31"), _accounts(a_balance=10), today=TODAY)
    assert out.status_code == StatusCode.INSUFFICIENT_FUNDS
