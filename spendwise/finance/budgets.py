"""Mini README: Category budgets with incrementally maintained spend.

Structure:
    * Budget - category limit plus the running spend for that category.
    * BudgetAggregator - applies and reverses expense contributions.

``spent`` is patched on every ledger write rather than recomputed, so each
add/edit/delete must call into the aggregator exactly once per contributing
record. Reversals clamp at zero so out-of-order sequences cannot drive a
budget negative. Expenses in categories without a budget are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class Budget:
    """Spending limit for a category and the amount spent against it."""

    category: str
    limit: float
    spent: float = 0.0

    @property
    def over_budget(self) -> bool:
        return self.spent > self.limit

    @property
    def remaining(self) -> float:
        return self.limit - self.spent

    @property
    def percent_used(self) -> float:
        """Share of the limit spent, as a percentage; may exceed 100."""

        if self.limit <= 0:
            return 100.0 if self.spent > 0 else 0.0
        return self.spent / self.limit * 100.0

    def as_dict(self) -> Dict[str, object]:
        return {
            "category": self.category,
            "limit": self.limit,
            "spent": self.spent,
            "remaining": self.remaining,
            "percent_used": self.percent_used,
            "over_budget": self.over_budget,
        }


class BudgetAggregator:
    """Track per-category spend against limits, keyed by category label."""

    def __init__(self, budgets: Optional[Iterable[Budget]] = None) -> None:
        self._budgets: Dict[str, Budget] = {}
        for budget in budgets or ():
            if budget.category in self._budgets:
                raise ValueError(f"Budget for {budget.category} already exists.")
            self._budgets[budget.category] = Budget(budget.category, budget.limit, budget.spent)
        LOGGER.debug("Budget aggregator initialised with %s categories", len(self._budgets))

    def get(self, category: str) -> Optional[Budget]:
        """Return a copy of the budget so callers cannot patch ``spent``."""

        budget = self._budgets.get(category)
        if budget is None:
            return None
        return Budget(budget.category, budget.limit, budget.spent)

    def list_budgets(self) -> List[Budget]:
        return [Budget(b.category, b.limit, b.spent) for b in self._budgets.values()]

    def apply_expense(self, category: str, amount: float) -> bool:
        """Add an expense to its category; returns ``False`` for untracked categories."""

        budget = self._budgets.get(category)
        if budget is None:
            LOGGER.debug("No budget for category %s; expense of %.2f untracked", category, amount)
            return False
        budget.spent += amount
        return True

    def reverse_expense(self, category: str, amount: float) -> bool:
        """Withdraw a previously applied expense, never dropping below zero."""

        budget = self._budgets.get(category)
        if budget is None:
            LOGGER.debug("No budget for category %s; reversal of %.2f untracked", category, amount)
            return False
        budget.spent = max(0.0, budget.spent - amount)
        return True

    def update_limit(self, category: str, limit: float) -> bool:
        """Set a new limit without touching spend; unknown categories are ignored."""

        budget = self._budgets.get(category)
        if budget is None:
            return False
        budget.limit = float(limit)
        return True
