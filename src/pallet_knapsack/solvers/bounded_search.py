"""
Branch-and-bound style solver for the 0/1 knapsack problem.

Walks the same inclusion/exclusion tree as the exhaustive solver, discarding
only branches whose weight would exceed the capacity. No relaxation bound is
computed, so the worst case stays O(2^n). The difference with the exhaustive
solver is the three-level tie-break: profit, then item count, then total
weight.
"""

from pallet_knapsack.core.base_solver import AbstractSolver
from pallet_knapsack.core.registry import SolverRegistry
from pallet_knapsack.core.tie_break import LIGHTEST_LOAD, TieBreakPolicy
from pallet_knapsack.types import ItemSet, Solution
from pallet_knapsack.utils.logger import get_logger

logger = get_logger(__name__)


@SolverRegistry.register("bounded_search")
class BoundedSearchSolver(AbstractSolver):
    """
    Depth-first search with feasibility pruning.

    Among equal-profit selections the one with fewer items wins, and among
    those the lighter load wins. Every leaf comparison applies all three
    levels.

    Example:
        >>> solver = BoundedSearchSolver()
        >>> solver.solve(10, [Item(1, 6, 12), Item(2, 5, 10), Item(3, 4, 8)])
        Solution(selected_ids=(1, 3), total_profit=20, total_weight=10)
    """

    exponential = True

    def __init__(self, policy: TieBreakPolicy = LIGHTEST_LOAD):
        self.policy = policy

    def solve(self, capacity: int, items: ItemSet) -> Solution:
        if not items:
            return Solution.empty()

        best = self._branch(items, 0, capacity, Solution.empty())
        logger.debug(
            f"Bounded search done: profit {best.total_profit}, weight {best.total_weight}"
        )
        return best

    def _branch(self, items: ItemSet, index: int, capacity: int, current: Solution) -> Solution:
        if index >= len(items):
            return current

        best = self._branch(items, index + 1, capacity, current)

        item = items[index]
        if current.total_weight + item.weight <= capacity:
            included = self._branch(items, index + 1, capacity, current.extended(item))
            best = self.policy.pick(best, included)

        return best
