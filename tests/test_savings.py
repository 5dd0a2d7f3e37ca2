"""Mini README: Tests for savings goals and round-up collection."""

from __future__ import annotations

from datetime import date

import pytest

from spendwise.finance import SavingsGoal, SavingsGoalDraft, SavingsTracker
from spendwise.finance.savings import round_up_amount


def test_round_up_collects_fractional_remainder() -> None:
    tracker = SavingsTracker(round_up_total=450.0)

    collected = tracker.record_expense(99.40)

    assert collected == pytest.approx(0.60)
    assert tracker.round_up_total == pytest.approx(450.60)


def test_whole_amounts_add_nothing() -> None:
    tracker = SavingsTracker()

    assert tracker.record_expense(120.0) == 0.0
    assert tracker.round_up_total == 0.0
    assert round_up_amount(3.25) == pytest.approx(0.75)


def test_negative_starting_total_is_rejected() -> None:
    with pytest.raises(ValueError):
        SavingsTracker(round_up_total=-1.0)


def test_add_goal_appends_with_fresh_id() -> None:
    tracker = SavingsTracker(
        [SavingsGoal("goal_0001", "Emergency Fund", 50000.0, 15000.0, date(2024, 12, 31))]
    )

    goal = tracker.add_goal(SavingsGoalDraft(name="Laptop", target=80000.0, deadline=date(2025, 3, 1)))

    assert goal.goal_id == "goal_0002"
    assert [g.name for g in tracker.list_goals()] == ["Emergency Fund", "Laptop"]
    assert goal.current == 0.0


def test_contribute_updates_progress() -> None:
    tracker = SavingsTracker([SavingsGoal("goal_0001", "Vacation", 25000.0, 8500.0, date(2024, 6, 30))])

    updated = tracker.contribute("goal_0001", 4000.0)

    assert updated.current == pytest.approx(12500.0)
    assert updated.progress == pytest.approx(0.5)
    assert tracker.contribute("goal_0404", 10.0) is None


def test_days_left_counts_to_deadline() -> None:
    goal = SavingsGoal("goal_0001", "Vacation", 25000.0, 8500.0, date(2024, 6, 30))

    assert goal.days_left(today=date(2024, 6, 1)) == 29
    assert goal.days_left(today=date(2024, 7, 2)) == -2
    assert "days_left" in goal.as_dict()
