"""Mini README: Savings goals and the round-up accumulator.

Structure:
    * SavingsGoalDraft - caller supplied goal fields.
    * SavingsGoal - stored goal with manual progress.
    * SavingsTracker - owns the goals list and the round-up total.

Round-ups are collected when an expense is created and are never handed
back when that expense is later edited or deleted. Goal progress only moves
through explicit contributions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def round_up_amount(amount: float) -> float:
    """Spare change needed to lift ``amount`` to the next whole unit."""

    return math.ceil(amount) - amount


@dataclass(frozen=True, slots=True)
class SavingsGoalDraft:
    name: str
    target: float
    deadline: date
    current: float = 0.0


@dataclass(slots=True)
class SavingsGoal:
    """A named savings target with a deadline."""

    goal_id: str
    name: str
    target: float
    current: float
    deadline: date

    @property
    def progress(self) -> float:
        """Fraction of the target reached, capped at 1."""

        if self.target <= 0:
            return 1.0
        return min(self.current / self.target, 1.0)

    def days_left(self, today: Optional[date] = None) -> int:
        """Whole days until the deadline; negative once it has passed."""

        return (self.deadline - (today or date.today())).days

    def as_dict(self) -> Dict[str, object]:
        return {
            "goal_id": self.goal_id,
            "name": self.name,
            "target": self.target,
            "current": self.current,
            "deadline": self.deadline.isoformat(),
            "progress": self.progress,
            "days_left": self.days_left(),
        }


def _copy(goal: SavingsGoal) -> SavingsGoal:
    return SavingsGoal(goal.goal_id, goal.name, goal.target, goal.current, goal.deadline)


class SavingsTracker:
    """Hold savings goals and the spare-change total from expenses."""

    def __init__(
        self,
        goals: Optional[Iterable[SavingsGoal]] = None,
        *,
        round_up_total: float = 0.0,
    ) -> None:
        if round_up_total < 0:
            raise ValueError("Round-up total cannot be negative.")
        self._goals: List[SavingsGoal] = [_copy(goal) for goal in goals or ()]
        self._round_up_total = float(round_up_total)
        self._sequence = len(self._goals)

    @property
    def round_up_total(self) -> float:
        return self._round_up_total

    def record_expense(self, amount: float) -> float:
        """Collect the round-up for a newly created expense and return it."""

        spare = round_up_amount(amount)
        if spare > 0:
            self._round_up_total += spare
            return spare
        return 0.0

    def _next_id(self) -> str:
        existing = {goal.goal_id for goal in self._goals}
        while True:
            self._sequence += 1
            candidate = f"goal_{self._sequence:04d}"
            if candidate not in existing:
                return candidate

    def add_goal(self, draft: SavingsGoalDraft) -> SavingsGoal:
        goal = SavingsGoal(
            goal_id=self._next_id(),
            name=draft.name,
            target=float(draft.target),
            current=float(draft.current),
            deadline=draft.deadline,
        )
        self._goals.append(goal)
        return _copy(goal)

    def contribute(self, goal_id: str, amount: float) -> Optional[SavingsGoal]:
        """Record a manual contribution towards a goal."""

        if not math.isfinite(amount):
            raise ValueError(f"Contribution must be finite, got {amount}")
        for goal in self._goals:
            if goal.goal_id == goal_id:
                goal.current = max(0.0, goal.current + amount)
                return _copy(goal)
        return None

    def list_goals(self) -> List[SavingsGoal]:
        return [_copy(goal) for goal in self._goals]
