"""Mini README: In-memory transaction store for income and expense entries.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * TransactionDraft - caller supplied fields for a new or edited entry.
    * Transaction - immutable stored record carrying its identifier.
    * TransactionLedger - ordered store with derived per-category spend.

The ledger only stores records. Budget and savings bookkeeping belong to the
engine that owns the ledger, which inspects the records returned by
``add``/``replace``/``remove`` to reconcile its aggregates.
"""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Dict, Iterable, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class TransactionType(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error


def parse_timestamp(value: object) -> datetime:
    """Parse ISO formatted strings, dates or datetimes into a datetime."""

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as error:
            raise ValueError(f"Invalid ISO timestamp: {value}") from error
    raise ValueError("Timestamps must be provided as ISO strings or date/datetime instances.")


@dataclass(frozen=True, slots=True)
class TransactionDraft:
    """Fields of a transaction before the ledger assigns an identifier."""

    amount: float
    category: str
    description: str
    occurred_on: datetime
    transaction_type: TransactionType

    def __post_init__(self) -> None:
        if not math.isfinite(self.amount):
            raise ValueError(f"Transaction amount must be finite, got {self.amount}")

    @classmethod
    def build(
        cls,
        *,
        amount: object,
        category: object,
        description: object,
        occurred_on: object,
        transaction_type: object,
    ) -> "TransactionDraft":
        """Coerce loosely typed inputs (API payloads, parser output) into a draft."""

        if isinstance(transaction_type, TransactionType):
            kind = transaction_type
        else:
            kind = TransactionType.from_str(str(transaction_type))
        return cls(
            amount=float(amount),
            category=str(category),
            description=str(description),
            occurred_on=parse_timestamp(occurred_on),
            transaction_type=kind,
        )

    @property
    def is_expense(self) -> bool:
        return self.transaction_type is TransactionType.EXPENSE


@dataclass(frozen=True, slots=True)
class Transaction:
    """Stored ledger entry; edits replace the record and keep the identifier."""

    transaction_id: str
    amount: float
    category: str
    description: str
    occurred_on: datetime
    transaction_type: TransactionType

    @classmethod
    def from_draft(cls, transaction_id: str, draft: TransactionDraft) -> "Transaction":
        return cls(
            transaction_id=transaction_id,
            amount=draft.amount,
            category=draft.category,
            description=draft.description,
            occurred_on=draft.occurred_on,
            transaction_type=draft.transaction_type,
        )

    @property
    def is_expense(self) -> bool:
        return self.transaction_type is TransactionType.EXPENSE

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "transaction_id": self.transaction_id,
            "amount": self.amount,
            "category": self.category,
            "description": self.description,
            "occurred_on": self.occurred_on.isoformat(),
            "transaction_type": self.transaction_type.value,
        }


class TransactionLedger:
    """Keep transactions ordered most-recent-first with unique identifiers."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        # Index 0 is the most recently added record.
        self._transactions: List[Transaction] = []
        self._sequence = 0
        for transaction in transactions or ():
            self._register(transaction)
        LOGGER.debug("Transaction ledger initialised with %s transactions", len(self._transactions))

    def _next_id(self) -> str:
        """Generate an identifier that cannot collide with stored records."""

        self._sequence += 1
        return f"txn_{self._sequence:04d}"

    def _register(self, transaction: Transaction) -> None:
        """Append a pre-built record, preserving the caller's ordering."""

        if self._index_of(transaction.transaction_id) is not None:
            raise ValueError(f"Transaction {transaction.transaction_id} already exists.")
        self._transactions.append(transaction)
        suffix = transaction.transaction_id.rsplit("_", 1)[-1]
        if suffix.isdigit():
            self._sequence = max(self._sequence, int(suffix))

    def _index_of(self, transaction_id: str) -> Optional[int]:
        for index, transaction in enumerate(self._transactions):
            if transaction.transaction_id == transaction_id:
                return index
        return None

    def __len__(self) -> int:
        return len(self._transactions)

    def add(self, draft: TransactionDraft) -> Transaction:
        """Store a new record at the front of the ledger."""

        transaction = Transaction.from_draft(self._next_id(), draft)
        self._transactions.insert(0, transaction)
        return transaction

    def get(self, transaction_id: str) -> Optional[Transaction]:
        index = self._index_of(transaction_id)
        return None if index is None else self._transactions[index]

    def replace(self, transaction_id: str, draft: TransactionDraft) -> Optional[Transaction]:
        """Swap in new fields for an existing record and return the old record."""

        index = self._index_of(transaction_id)
        if index is None:
            return None
        previous = self._transactions[index]
        self._transactions[index] = Transaction.from_draft(transaction_id, draft)
        return previous

    def remove(self, transaction_id: str) -> Optional[Transaction]:
        """Delete a record and return it, or ``None`` when it was never stored."""

        index = self._index_of(transaction_id)
        if index is None:
            return None
        return self._transactions.pop(index)

    def list_transactions(self) -> List[Transaction]:
        """Return a copy of the records, most recent first."""

        return list(self._transactions)

    def expenses_by_category(self) -> Dict[str, float]:
        """Sum expense amounts per category with a full scan."""

        totals: Dict[str, float] = defaultdict(float)
        for transaction in self._transactions:
            if transaction.is_expense:
                totals[transaction.category] += transaction.amount
        return dict(totals)

    def total_income(self) -> float:
        return sum(t.amount for t in self._transactions if not t.is_expense)

    def total_expenses(self) -> float:
        return sum(t.amount for t in self._transactions if t.is_expense)

    def available_balance(self) -> float:
        """Income minus expenses across the whole ledger."""

        return self.total_income() - self.total_expenses()
