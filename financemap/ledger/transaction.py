"""Mini README: Transaction value objects and form-input parsing.

Structure:
    * TransactionType - enum tagging credits versus debits.
    * Transaction - frozen dataclass for a single monetary movement.
    * parse_entry - turns raw form text into a validated transaction.

The amount's sign is the canonical polarity: credits are strictly positive,
debits strictly negative, and ``transaction_type`` must agree with it.
``Transaction.create`` is the coercing constructor used at the ledger
boundary, while ``parse_entry`` mirrors what an entry form does before it
submits (strict ISO dates, sign taken from the selected type, blank
descriptions replaced by a placeholder).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Dict

from ..errors import ParseError, ValidationError

NO_DESCRIPTION = "(No description)"
DATE_FORMAT_HINT = "Invalid date format. Please use YYYY-MM-DD."
AMOUNT_FORMAT_HINT = "Invalid amount. Please enter a valid number."


class TransactionType(str, Enum):
    """Enumerate the polarity of a transaction."""

    CREDIT = "Credit"
    DEBIT = "Debit"

    @classmethod
    def from_str(cls, value: object) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            normalised = str(value).strip().capitalize()
            return cls(normalised)
        except ValueError as error:
            raise ValidationError(f"Unsupported transaction type: {value}") from error

    @classmethod
    def for_amount(cls, amount: float) -> "TransactionType":
        """Return the type implied by the sign of ``amount``."""

        return cls.CREDIT if amount > 0 else cls.DEBIT


@dataclass(frozen=True, slots=True)
class Transaction:
    """Immutable ledger entry."""

    occurred_on: date
    amount: float
    transaction_type: TransactionType
    description: str

    def __post_init__(self) -> None:
        if not isinstance(self.occurred_on, date) or isinstance(self.occurred_on, datetime):
            raise ValidationError("Transaction dates must be calendar dates.")
        if not isinstance(self.transaction_type, TransactionType):
            raise ValidationError(f"Unsupported transaction type: {self.transaction_type}")
        if not isinstance(self.description, str):
            raise ValidationError("Description must be text.")
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise ValidationError(f"Amount must be a number, got {self.amount!r}")
        try:
            finite = math.isfinite(self.amount)
        except OverflowError as error:
            raise ValidationError("Amount is too large to represent.") from error
        if not finite:
            raise ValidationError(f"Amount must be a finite number, got {self.amount}")
        if self.amount == 0:
            raise ValidationError("Amount must be non-zero.")
        if TransactionType.for_amount(self.amount) is not self.transaction_type:
            raise ValidationError(
                f"{self.transaction_type.value} transactions cannot carry amount {self.amount:.2f}"
            )
        if not self.description.strip():
            raise ValidationError("Description must not be blank.")

    @classmethod
    def create(
        cls,
        occurred_on: object,
        amount: object,
        transaction_type: object,
        description: object = "",
    ) -> "Transaction":
        """Coerce loosely typed values into a validated transaction."""

        text = "" if description is None else str(description).strip()
        return cls(
            occurred_on=_coerce_date(occurred_on),
            amount=_coerce_amount(amount),
            transaction_type=TransactionType.from_str(transaction_type),
            description=text or NO_DESCRIPTION,
        )

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "date": self.occurred_on.isoformat(),
            "amount": self.amount,
            "type": self.transaction_type.value,
            "description": self.description,
        }

    def __str__(self) -> str:
        return (
            f"{self.occurred_on.isoformat()} | {self.transaction_type.value:<7} | "
            f"${self.amount:.2f} | {self.description}"
        )


def _coerce_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise ValidationError(f"Unparsable transaction date: {value!r}") from error
    raise ValidationError("Dates must be provided as ISO strings or date/datetime instances.")


def _coerce_amount(value: object) -> float:
    """Convert numbers (or numeric strings) to a finite float."""

    if isinstance(value, bool):
        raise ValidationError("Amount must be a number, not a boolean.")
    try:
        amount = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError) as error:
        raise ValidationError(f"Amount must be a number, got {value!r}") from error
    if not math.isfinite(amount):
        raise ValidationError(f"Amount must be a finite number, got {value!r}")
    return amount


def parse_entry(
    date_text: str,
    amount_text: str,
    type_text: str = TransactionType.CREDIT.value,
    description: str = "",
) -> Transaction:
    """Build a transaction from manual-entry form fields.

    The date must be ``YYYY-MM-DD``. The amount's sign is forced to match the
    selected type, so typing ``40`` with *Debit* selected stores ``-40.0``.
    """

    try:
        text = date_text.strip()
        occurred_on = datetime.strptime(text, "%Y-%m-%d").date()
    except (AttributeError, ValueError) as error:
        raise ParseError("date", DATE_FORMAT_HINT) from error
    # strptime accepts unpadded fields such as 2024-3-1
    if occurred_on.isoformat() != text:
        raise ParseError("date", DATE_FORMAT_HINT)

    try:
        amount = float(amount_text.strip())
    except (AttributeError, ValueError) as error:
        raise ParseError("amount", AMOUNT_FORMAT_HINT) from error

    transaction_type = TransactionType.from_str(type_text)
    amount = abs(amount) if transaction_type is TransactionType.CREDIT else -abs(amount)
    return Transaction.create(occurred_on, amount, transaction_type, description)
