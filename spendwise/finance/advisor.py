"""Mini README: Advisory heuristics consulted before committing a purchase.

Structure:
    * AffordabilityVerdict / RegretAssessment - result records.
    * SpendingAdvisor - scores prospective purchases against balances and budgets.

Advice never blocks a transaction. Message selection draws from an
injectable ``random.Random`` so tests can seed it and assert over the fixed
catalogs below.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .budgets import Budget

AFFORDABLE_MESSAGE = "You can afford this! Consider your other goals too."

UNAFFORDABLE_SUGGESTIONS: Tuple[str, ...] = (
    "Consider saving for a few more days before this purchase",
    "Try the 24-hour rule before buying non-essentials",
    "Look for alternatives or wait for a sale",
    "Focus on your savings goals first",
)

CAUTION_MESSAGES: Tuple[str, ...] = (
    "You've been spending a lot in this category lately. Sure about this?",
    "Remember your savings goals. Is this purchase aligned?",
    "You bought something similar recently. Still need it?",
    "This might push you over budget. Consider waiting?",
)

WITHIN_BUDGET_MESSAGE = "Great choice! This fits well within your budget."


@dataclass(frozen=True, slots=True)
class AffordabilityVerdict:
    can_afford: bool
    suggestion: str

    def as_dict(self) -> Dict[str, object]:
        return {"can_afford": self.can_afford, "suggestion": self.suggestion}


@dataclass(frozen=True, slots=True)
class RegretAssessment:
    risk: float
    message: str

    def as_dict(self) -> Dict[str, object]:
        return {"risk": self.risk, "message": self.message}


def _clamp_unit(value: float) -> float:
    return max(0.0, min(value, 1.0))


class SpendingAdvisor:
    """Produce affordability and regret-risk advice."""

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        risk_threshold: float = 0.8,
        neutral_risk: float = 0.5,
    ) -> None:
        self._rng = rng or random.Random()
        self.risk_threshold = risk_threshold
        self.neutral_risk = neutral_risk

    def can_afford(self, amount: float, available_balance: float) -> AffordabilityVerdict:
        """Compare a purchase against income minus expenses."""

        if available_balance >= amount:
            return AffordabilityVerdict(True, AFFORDABLE_MESSAGE)
        return AffordabilityVerdict(False, self._rng.choice(UNAFFORDABLE_SUGGESTIONS))

    def check_regret_risk(self, amount: float, budget: Optional[Budget]) -> RegretAssessment:
        """Score how far a purchase would push its category towards the limit.

        Categories without a budget get the neutral risk. A non-positive limit
        means any spend saturates the score.
        """

        if budget is None:
            risk = self.neutral_risk
        elif budget.limit <= 0:
            risk = 1.0
        else:
            risk = _clamp_unit((budget.spent + amount) / budget.limit)

        if risk > self.risk_threshold:
            return RegretAssessment(risk, self._rng.choice(CAUTION_MESSAGES))
        return RegretAssessment(risk, WITHIN_BUDGET_MESSAGE)
