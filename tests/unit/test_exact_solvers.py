"""
Tests for the exact solvers: exhaustive, tabulation and bounded search.
"""

import pytest

from pallet_knapsack.core.tie_break import FEWEST_ITEMS, LIGHTEST_LOAD
from pallet_knapsack.solvers import BoundedSearchSolver, ExhaustiveSolver, TabulationSolver
from pallet_knapsack.types import Item, Solution

EXACT_SOLVERS = [ExhaustiveSolver, TabulationSolver, BoundedSearchSolver]


@pytest.mark.parametrize("solver_class", EXACT_SOLVERS)
class TestExactSolverContract:
    """Behaviour every exact solver shares."""

    def test_scenario_a(self, solver_class, scenario_a):
        """Finds the hand-verified optimum {1, 3}."""
        solution = solver_class().solve(scenario_a["capacity"], scenario_a["items"])

        assert solution.total_profit == scenario_a["optimal_profit"]
        assert solution.total_weight == scenario_a["optimal_weight"]
        assert solution.selected_ids == scenario_a["optimal_ids"]

    def test_zero_capacity(self, solver_class):
        """Capacity 0 loads nothing."""
        solution = solver_class().solve(0, [Item(1, 5, 10)])
        assert solution == Solution.empty()

    def test_empty_items(self, solver_class):
        """No items gives the zero solution."""
        assert solver_class().solve(25, []) == Solution.empty()

    def test_single_item_filling_capacity(self, solver_class):
        """An item whose weight equals the capacity is loaded."""
        solution = solver_class().solve(10, [Item(7, 10, 3)])
        assert solution == Solution((7,), total_profit=3, total_weight=10)

    def test_oversized_item_never_loaded(self, solver_class):
        """Items heavier than the capacity are ignored."""
        items = [Item(1, 11, 100), Item(2, 4, 1)]
        solution = solver_class().solve(10, items)
        assert solution.selected_ids == (2,)

    def test_greedy_trap(self, solver_class, greedy_trap):
        """Finds the optimum where the density order fails."""
        solution = solver_class().solve(greedy_trap["capacity"], greedy_trap["items"])
        assert solution.selected_ids == greedy_trap["optimal_ids"]
        assert solution.total_profit == greedy_trap["optimal_profit"]

    def test_fewer_items_beats_earlier_discovery(self, solver_class):
        """{2, 3} is reached first but {1} has the same profit with one item."""
        items = [Item(1, 4, 10), Item(2, 2, 5), Item(3, 2, 5)]
        solution = solver_class().solve(4, items)
        assert solution.selected_ids == (1,)

    def test_zero_weight_item_is_loaded(self, solver_class):
        """A free item with positive profit is loaded even at capacity 0."""
        items = [Item(1, 0, 5), Item(2, 3, 4)]
        solution = solver_class().solve(0, items)
        assert solution == Solution((1,), total_profit=5, total_weight=0)

    def test_zero_weight_zero_profit_item_is_skipped(self, solver_class):
        """Adding an item that changes nothing would only raise the count."""
        items = [Item(1, 0, 0), Item(2, 3, 4)]
        solution = solver_class().solve(5, items)
        assert solution.selected_ids == (2,)

    def test_deterministic(self, solver_class, small_dataset):
        """Repeated calls return the same selection."""
        solver = solver_class()
        first = solver.solve(small_dataset.capacity, small_dataset.items)
        for _ in range(3):
            assert solver.solve(small_dataset.capacity, small_dataset.items) == first

    def test_input_not_mutated(self, solver_class, small_dataset):
        """Solvers only read the item list."""
        items = list(small_dataset.items)
        solver_class().solve(small_dataset.capacity, items)
        assert items == list(small_dataset.items)


class TestTieBreakPolicies:
    """Which optimum each solver reports among equal-profit selections."""

    ITEMS = [Item(1, 3, 10), Item(2, 4, 10)]

    def test_exhaustive_keeps_first_found(self):
        """Depth-first, exclude first: {2} is met before {1} and is kept."""
        solution = ExhaustiveSolver().solve(5, self.ITEMS)
        assert solution == Solution((2,), total_profit=10, total_weight=4)

    def test_bounded_search_prefers_lighter_load(self):
        """Same profit, same count: the lighter {1} wins."""
        solution = BoundedSearchSolver().solve(5, self.ITEMS)
        assert solution == Solution((1,), total_profit=10, total_weight=3)

    def test_tabulation_follows_injected_policy(self):
        """Tabulation reproduces whichever policy it is given."""
        assert TabulationSolver(FEWEST_ITEMS).solve(5, self.ITEMS).selected_ids == (2,)
        assert TabulationSolver(LIGHTEST_LOAD).solve(5, self.ITEMS).selected_ids == (1,)

    def test_exhaustive_accepts_weight_policy(self):
        """With LIGHTEST_LOAD the exhaustive solver matches bounded search."""
        assert ExhaustiveSolver(LIGHTEST_LOAD).solve(5, self.ITEMS).selected_ids == (1,)

    def test_selected_ids_in_input_order(self):
        """Tabulation collects ids in input order."""
        items = [Item(5, 1, 1), Item(3, 1, 1), Item(9, 1, 1)]
        assert TabulationSolver().solve(3, items).selected_ids == (5, 3, 9)


class TestTabulationTables:
    """Checks on the DP tables themselves."""

    def test_table_shapes_and_corner(self, scenario_a):
        """Tables are (n + 1) x (capacity + 1) and the corner holds the optimum."""
        solver = TabulationSolver()
        profit, count, load = solver._fill_tables(scenario_a["capacity"], scenario_a["items"])

        assert profit.shape == (4, 11)
        assert count.shape == load.shape == profit.shape
        assert profit[3, 10] == 20
        assert count[3, 10] == 2
        assert (profit[0] == 0).all()

    def test_rows_are_monotone_in_budget(self, small_dataset):
        """More budget never lowers the best profit."""
        profit, _, _ = TabulationSolver()._fill_tables(small_dataset.capacity, small_dataset.items)
        assert (profit[:, 1:] >= profit[:, :-1]).all()
