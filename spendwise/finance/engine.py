"""Mini README: Ledger engine reconciling transactions, budgets and savings.

Structure:
    * MutationOutcome - explicit result for edits, deletes and updates.
    * LedgerEngine - single owner of the ledger, budgets, savings and advisor.

Every write goes through the engine so the budget aggregator and round-up
accumulator are patched exactly once per transaction event. Mutators and
multi-part reads run under one re-entrant lock because budget adjustments
from concurrent callers are not safe to interleave.
"""

from __future__ import annotations

import random
import threading
from datetime import date, datetime
from enum import Enum
from typing import Dict, Iterable, List, Optional

from ..logging_utils import get_logger
from .advisor import AffordabilityVerdict, RegretAssessment, SpendingAdvisor
from .budgets import Budget, BudgetAggregator
from .ledger import Transaction, TransactionDraft, TransactionLedger, TransactionType
from .savings import SavingsGoal, SavingsGoalDraft, SavingsTracker

LOGGER = get_logger(__name__)


class MutationOutcome(str, Enum):
    """Whether a targeted mutation found its record."""

    APPLIED = "applied"
    NOT_FOUND = "not_found"

    def __bool__(self) -> bool:
        return self is MutationOutcome.APPLIED


def _demo_transactions() -> List[Transaction]:
    return [
        Transaction(
            transaction_id="txn_0001",
            amount=2500.0,
            category="Food",
            description="Grocery shopping",
            occurred_on=datetime(2024, 1, 15),
            transaction_type=TransactionType.EXPENSE,
        ),
        Transaction(
            transaction_id="txn_0002",
            amount=5000.0,
            category="Salary",
            description="Monthly salary",
            occurred_on=datetime(2024, 1, 1),
            transaction_type=TransactionType.INCOME,
        ),
        Transaction(
            transaction_id="txn_0003",
            amount=800.0,
            category="Transportation",
            description="Uber rides",
            occurred_on=datetime(2024, 1, 10),
            transaction_type=TransactionType.EXPENSE,
        ),
    ]


def _demo_goals() -> List[SavingsGoal]:
    return [
        SavingsGoal("goal_0001", "Emergency Fund", 50000.0, 15000.0, date(2024, 12, 31)),
        SavingsGoal("goal_0002", "Vacation", 25000.0, 8500.0, date(2024, 6, 30)),
    ]


def _demo_budgets() -> List[Budget]:
    # Entertainment and Shopping spend predates the seeded transactions.
    return [
        Budget("Food", 5000.0, 2500.0),
        Budget("Transportation", 2000.0, 800.0),
        Budget("Entertainment", 3000.0, 1200.0),
        Budget("Shopping", 4000.0, 3500.0),
    ]


DEMO_ROUND_UP_TOTAL = 450.0


class LedgerEngine:
    """Own all finance state and expose mutators plus read-only projections."""

    def __init__(
        self,
        *,
        transactions: Optional[Iterable[Transaction]] = None,
        budgets: Optional[Iterable[Budget]] = None,
        goals: Optional[Iterable[SavingsGoal]] = None,
        round_up_total: float = 0.0,
        advisor: Optional[SpendingAdvisor] = None,
    ) -> None:
        self._lock = threading.RLock()
        self._ledger = TransactionLedger(transactions)
        self._budgets = BudgetAggregator(budgets)
        self._savings = SavingsTracker(goals, round_up_total=round_up_total)
        self._advisor = advisor or SpendingAdvisor()
        LOGGER.debug(
            "Ledger engine ready with %s transactions and %s budgets",
            len(self._ledger),
            len(self._budgets.list_budgets()),
        )

    @classmethod
    def with_demo_data(cls, *, advisor: Optional[SpendingAdvisor] = None) -> "LedgerEngine":
        """Build an engine populated with deterministic sample data."""

        return cls(
            transactions=_demo_transactions(),
            budgets=_demo_budgets(),
            goals=_demo_goals(),
            round_up_total=DEMO_ROUND_UP_TOTAL,
            advisor=advisor,
        )

    @classmethod
    def from_settings(cls, settings) -> "LedgerEngine":
        """Build an engine whose advisor and seed data follow ``SpendwiseSettings``."""

        rng = random.Random(settings.advice_random_seed)
        advisor = SpendingAdvisor(
            rng=rng,
            risk_threshold=settings.regret_risk_threshold,
            neutral_risk=settings.neutral_regret_risk,
        )
        if settings.seed_demo_data:
            return cls.with_demo_data(advisor=advisor)
        return cls(advisor=advisor)

    # Mutators -----------------------------------------------------------

    def add_transaction(self, draft: TransactionDraft) -> Transaction:
        """Record a transaction and credit its expense to budgets and round-ups."""

        with self._lock:
            spare = self._savings.record_expense(draft.amount) if draft.is_expense else 0.0
            transaction = self._ledger.add(draft)
            if transaction.is_expense:
                self._budgets.apply_expense(transaction.category, transaction.amount)
                LOGGER.debug("Round-up of %.2f collected from %s", spare, transaction.transaction_id)
        LOGGER.info(
            "Added %s %s of %.2f in %s",
            transaction.transaction_type.value,
            transaction.transaction_id,
            transaction.amount,
            transaction.category,
        )
        return transaction

    def edit_transaction(self, transaction_id: str, draft: TransactionDraft) -> MutationOutcome:
        """Replace a transaction's fields and move its budget contribution.

        The old contribution is withdrawn from the old category before the new
        one is applied to the new category. Round-ups are left alone.
        """

        with self._lock:
            previous = self._ledger.replace(transaction_id, draft)
            if previous is None:
                LOGGER.debug("Edit skipped; transaction %s not found", transaction_id)
                return MutationOutcome.NOT_FOUND
            if previous.is_expense:
                self._budgets.reverse_expense(previous.category, previous.amount)
            if draft.is_expense:
                self._budgets.apply_expense(draft.category, draft.amount)
        LOGGER.info("Edited transaction %s", transaction_id)
        return MutationOutcome.APPLIED

    def delete_transaction(self, transaction_id: str) -> MutationOutcome:
        with self._lock:
            removed = self._ledger.remove(transaction_id)
            if removed is None:
                LOGGER.debug("Delete skipped; transaction %s not found", transaction_id)
                return MutationOutcome.NOT_FOUND
            if removed.is_expense:
                self._budgets.reverse_expense(removed.category, removed.amount)
        LOGGER.info("Deleted transaction %s", transaction_id)
        return MutationOutcome.APPLIED

    def add_savings_goal(self, draft: SavingsGoalDraft) -> SavingsGoal:
        with self._lock:
            goal = self._savings.add_goal(draft)
        LOGGER.info("Added savings goal %s (%s)", goal.goal_id, goal.name)
        return goal

    def contribute_to_goal(self, goal_id: str, amount: float) -> MutationOutcome:
        with self._lock:
            goal = self._savings.contribute(goal_id, amount)
        if goal is None:
            LOGGER.debug("Contribution skipped; goal %s not found", goal_id)
            return MutationOutcome.NOT_FOUND
        LOGGER.info("Contributed %.2f to goal %s", amount, goal_id)
        return MutationOutcome.APPLIED

    def update_budget(self, category: str, limit: float) -> MutationOutcome:
        with self._lock:
            updated = self._budgets.update_limit(category, limit)
        if not updated:
            LOGGER.debug("Budget update skipped; no budget for %s", category)
            return MutationOutcome.NOT_FOUND
        LOGGER.info("Budget limit for %s set to %.2f", category, limit)
        return MutationOutcome.APPLIED

    # Readers ------------------------------------------------------------

    def list_transactions(self) -> List[Transaction]:
        with self._lock:
            return self._ledger.list_transactions()

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        with self._lock:
            return self._ledger.get(transaction_id)

    def list_budgets(self) -> List[Budget]:
        with self._lock:
            return self._budgets.list_budgets()

    def get_budget(self, category: str) -> Optional[Budget]:
        with self._lock:
            return self._budgets.get(category)

    def list_goals(self) -> List[SavingsGoal]:
        with self._lock:
            return self._savings.list_goals()

    @property
    def round_up_savings(self) -> float:
        with self._lock:
            return self._savings.round_up_total

    def get_expenses_by_category(self) -> Dict[str, float]:
        with self._lock:
            return self._ledger.expenses_by_category()

    def available_balance(self) -> float:
        with self._lock:
            return self._ledger.available_balance()

    def can_afford(self, amount: float) -> AffordabilityVerdict:
        with self._lock:
            balance = self._ledger.available_balance()
        return self._advisor.can_afford(amount, balance)

    def check_regret_risk(self, amount: float, category: str) -> RegretAssessment:
        """Score a prospective purchase against its category budget.

        "Spent so far" is the budget's maintained ``spent``, not a scan of the
        ledger's expenses in that category. The two differ whenever a budget is
        seeded with spend that predates the ledger: the demo Shopping budget
        starts at 3500 with no Shopping transactions, so a 100 purchase scores
        0.9 here where a ledger scan would give 0.025.
        """

        with self._lock:
            budget = self._budgets.get(category)
        if budget is None:
            LOGGER.debug("No budget for %s; reporting neutral regret risk", category)
        return self._advisor.check_regret_risk(amount, budget)

    def snapshot(self) -> Dict[str, object]:
        """Export every read view in one consistent, JSON-friendly payload."""

        with self._lock:
            return {
                "transactions": [t.as_dict() for t in self._ledger.list_transactions()],
                "budgets": [b.as_dict() for b in self._budgets.list_budgets()],
                "savings_goals": [g.as_dict() for g in self._savings.list_goals()],
                "round_up_savings": self._savings.round_up_total,
                "expenses_by_category": self._ledger.expenses_by_category(),
                "total_income": self._ledger.total_income(),
                "total_expenses": self._ledger.total_expenses(),
                "available_balance": self._ledger.available_balance(),
            }
