"""Mini README: Tests for the incremental budget aggregator."""

from __future__ import annotations

import pytest

from spendwise.finance import Budget, BudgetAggregator


def test_apply_and_reverse_track_spend() -> None:
    aggregator = BudgetAggregator([Budget("Food", 5000.0, 2500.0)])

    assert aggregator.apply_expense("Food", 300.0)
    assert aggregator.get("Food").spent == pytest.approx(2800.0)
    assert aggregator.reverse_expense("Food", 300.0)
    assert aggregator.get("Food").spent == pytest.approx(2500.0)


def test_reversal_clamps_at_zero() -> None:
    aggregator = BudgetAggregator([Budget("Food", 100.0, 40.0)])

    aggregator.reverse_expense("Food", 90.0)

    assert aggregator.get("Food").spent == 0.0


def test_untracked_category_is_dropped() -> None:
    aggregator = BudgetAggregator([Budget("Food", 100.0)])

    assert not aggregator.apply_expense("Hobbies", 25.0)
    assert not aggregator.reverse_expense("Hobbies", 25.0)
    assert aggregator.get("Hobbies") is None
    assert [budget.category for budget in aggregator.list_budgets()] == ["Food"]


def test_update_limit_leaves_spend_alone() -> None:
    aggregator = BudgetAggregator([Budget("Shopping", 4000.0, 3500.0)])

    assert aggregator.update_limit("Shopping", 3000.0)
    budget = aggregator.get("Shopping")
    assert budget.limit == pytest.approx(3000.0)
    assert budget.spent == pytest.approx(3500.0)
    assert budget.over_budget
    assert budget.remaining == pytest.approx(-500.0)
    assert not aggregator.update_limit("Travel", 10.0)


def test_reads_return_copies() -> None:
    """Mutating a returned budget must not leak into the aggregator."""

    aggregator = BudgetAggregator([Budget("Food", 100.0, 10.0)])
    copy = aggregator.get("Food")
    copy.spent = 99.0

    assert aggregator.get("Food").spent == pytest.approx(10.0)


def test_duplicate_categories_are_rejected() -> None:
    with pytest.raises(ValueError):
        BudgetAggregator([Budget("Food", 1.0), Budget("Food", 2.0)])


def test_percent_used_tracks_spend() -> None:
    assert Budget("Shopping", 4000.0, 3500.0).percent_used == pytest.approx(87.5)
    assert Budget("Food", 100.0, 150.0).percent_used == pytest.approx(150.0)
    assert Budget("Food", 0.0, 0.0).percent_used == 0.0
    assert Budget("Food", 0.0, 5.0).percent_used == 100.0
