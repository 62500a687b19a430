"""Mini README: Tests covering the in-memory ledger.

Structure:
    * ordering, range filtering and idempotence of ``query``.
    * boundary validation in ``append``/``add_transaction``.
    * all-or-nothing bulk appends.
"""

from __future__ import annotations

from datetime import date

import pytest

from financemap.errors import ValidationError
from financemap.ledger import Ledger, Transaction, TransactionType


def _credit(day: date, amount: float = 10.0, description: str = "Credit") -> Transaction:
    return Transaction(day, amount, TransactionType.CREDIT, description)


def _debit(day: date, amount: float = -10.0, description: str = "Debit") -> Transaction:
    return Transaction(day, amount, TransactionType.DEBIT, description)


def test_new_ledger_is_empty() -> None:
    """A freshly constructed ledger holds no transactions."""

    ledger = Ledger()

    assert len(ledger) == 0
    assert ledger.list_transactions() == []


def test_unbounded_query_returns_everything_in_date_order() -> None:
    """An open query returns every entry sorted by date."""

    ledger = Ledger()
    ledger.append(_credit(date(2024, 4, 1), description="April"))
    ledger.append(_debit(date(2024, 3, 15), description="Mid March"))
    ledger.append(_credit(date(2024, 3, 1), description="Early March"))

    descriptions = [transaction.description for transaction in ledger.query()]

    assert descriptions == ["Early March", "Mid March", "April"]


def test_same_day_entries_keep_insertion_order() -> None:
    """Sorting is by date only, so same-day entries keep their order."""

    ledger = Ledger()
    ledger.append(_credit(date(2024, 3, 2), description="later day"))
    ledger.append(_credit(date(2024, 3, 1), description="first"))
    ledger.append(_debit(date(2024, 3, 1), description="second"))

    descriptions = [transaction.description for transaction in ledger.query()]

    assert descriptions == ["first", "second", "later day"]


def test_query_bounds_are_inclusive() -> None:
    """Both range ends should be included."""

    ledger = Ledger(
        [
            _credit(date(2024, 2, 29)),
            _credit(date(2024, 3, 1), description="start"),
            _debit(date(2024, 3, 31), description="end"),
            _debit(date(2024, 4, 1)),
        ]
    )

    matches = ledger.query(date(2024, 3, 1), date(2024, 3, 31))

    assert [transaction.description for transaction in matches] == ["start", "end"]


def test_narrower_range_is_subset_of_wider_range() -> None:
    """Widening a range never drops matches."""

    ledger = Ledger([_credit(date(2024, month, 10)) for month in range(1, 13)])

    narrow = ledger.query(date(2024, 4, 1), date(2024, 6, 30))
    wide = ledger.query(date(2024, 2, 1), date(2024, 9, 30))

    assert len(narrow) == 3
    assert all(transaction in wide for transaction in narrow)


def test_open_ended_queries() -> None:
    """A missing bound leaves that side of the range open."""

    ledger = Ledger([_credit(date(2023, 12, 31)), _credit(date(2024, 1, 1))])

    assert len(ledger.query(start=date(2024, 1, 1))) == 1
    assert len(ledger.query(end=date(2023, 12, 31))) == 1


def test_query_is_idempotent_and_does_not_mutate() -> None:
    """Repeated queries agree and callers cannot change the store through results."""

    ledger = Ledger([_debit(date(2024, 3, 5)), _credit(date(2024, 3, 1))])

    first = ledger.query(date(2024, 3, 1), date(2024, 3, 31))
    first.clear()
    second = ledger.query(date(2024, 3, 1), date(2024, 3, 31))
    third = ledger.query(date(2024, 3, 1), date(2024, 3, 31))

    assert second == third
    assert len(second) == 2
    assert len(ledger) == 2


def test_inverted_range_is_rejected() -> None:
    """A start after the end should raise ValidationError."""

    with pytest.raises(ValidationError):
        Ledger().query(date(2024, 3, 31), date(2024, 3, 1))


def test_duplicates_are_kept() -> None:
    """Appending the same transaction twice stores it twice."""

    ledger = Ledger()
    transaction = _credit(date(2024, 3, 1))

    ledger.append(transaction)
    ledger.append(transaction)

    assert len(ledger) == 2


def test_add_transaction_validates_and_returns_stored_entry() -> None:
    """Raw values are validated, normalised and stored."""

    ledger = Ledger()

    stored = ledger.add_transaction("2024-03-01", 100, "Credit", "")

    assert stored.description == "(No description)"
    assert ledger.list_transactions() == [stored]


@pytest.mark.parametrize(
    ("occurred_on", "amount"),
    [("not-a-date", 10.0), ("2024-03-01", float("nan")), ("2024-03-01", float("-inf"))],
)
def test_add_transaction_rejects_bad_values(occurred_on: str, amount: float) -> None:
    """Unparsable dates and non-finite amounts are rejected before storage."""

    ledger = Ledger()

    with pytest.raises(ValidationError):
        ledger.add_transaction(occurred_on, amount, "Credit", "Bad")
    assert len(ledger) == 0


def test_append_rejects_non_transactions() -> None:
    """Only Transaction instances can be appended."""

    with pytest.raises(ValidationError):
        Ledger().append({"date": "2024-03-01", "amount": 5})  # type: ignore[arg-type]


def test_extend_is_all_or_nothing() -> None:
    """A bulk append with one bad entry stores nothing."""

    ledger = Ledger()

    with pytest.raises(ValidationError):
        ledger.extend([_credit(date(2024, 3, 1)), "oops"])  # type: ignore[list-item]
    assert len(ledger) == 0

    appended = ledger.extend([_credit(date(2024, 3, 1)), _debit(date(2024, 3, 2))])
    assert len(appended) == 2
    assert len(ledger) == 2


def test_demo_ledger_is_deterministic() -> None:
    """Demo data should be identical across ledgers."""

    first = Ledger.with_demo_data().list_transactions()
    second = Ledger.with_demo_data().list_transactions()

    assert first == second
    assert first[0].occurred_on <= first[-1].occurred_on


def test_add_transaction_rejects_oversized_integer_amount() -> None:
    """An integer beyond float range raises ValidationError instead of OverflowError."""

    ledger = Ledger()

    with pytest.raises(ValidationError):
        ledger.add_transaction(date(2024, 3, 1), 10**400, "Credit", "Too much")
    with pytest.raises(ValidationError):
        Transaction(date(2024, 3, 1), 10**400, TransactionType.CREDIT, "Direct")  # type: ignore[arg-type]
    assert len(ledger) == 0
