"""Mini README: Finance core for Spendwise.

Groups the in-memory transaction ledger, category budgets, savings goals and
the advisory heuristics behind a single ``LedgerEngine`` that owns them all.
Interfaces receive an engine instance and never touch the parts directly.
"""

from .advisor import (
    AFFORDABLE_MESSAGE,
    CAUTION_MESSAGES,
    UNAFFORDABLE_SUGGESTIONS,
    WITHIN_BUDGET_MESSAGE,
    AffordabilityVerdict,
    RegretAssessment,
    SpendingAdvisor,
)
from .budgets import Budget, BudgetAggregator
from .engine import LedgerEngine, MutationOutcome
from .ledger import Transaction, TransactionDraft, TransactionLedger, TransactionType
from .savings import SavingsGoal, SavingsGoalDraft, SavingsTracker

__all__ = [
    "AFFORDABLE_MESSAGE",
    "CAUTION_MESSAGES",
    "UNAFFORDABLE_SUGGESTIONS",
    "WITHIN_BUDGET_MESSAGE",
    "AffordabilityVerdict",
    "Budget",
    "BudgetAggregator",
    "LedgerEngine",
    "MutationOutcome",
    "RegretAssessment",
    "SavingsGoal",
    "SavingsGoalDraft",
    "SavingsTracker",
    "SpendingAdvisor",
    "Transaction",
    "TransactionDraft",
    "TransactionLedger",
    "TransactionType",
]
