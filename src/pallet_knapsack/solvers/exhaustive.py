"""
Exhaustive (brute force) solver for the 0/1 knapsack problem.

Enumerates every inclusion/exclusion combination of the items and keeps the
best one under a tie-break policy. This is the reference baseline: exact but
O(2^n), only usable for small item counts.
"""

from pallet_knapsack.core.base_solver import AbstractSolver
from pallet_knapsack.core.registry import SolverRegistry
from pallet_knapsack.core.tie_break import FEWEST_ITEMS, TieBreakPolicy
from pallet_knapsack.types import ItemSet, Solution
from pallet_knapsack.utils.logger import get_logger

logger = get_logger(__name__)


@SolverRegistry.register("exhaustive")
class ExhaustiveSolver(AbstractSolver):
    """
    Depth-first enumeration of all 2^n subsets.

    Algorithm:
    1. At item ``index`` first explore the subtree that excludes the item
    2. Then, if the item fits the remaining capacity, the subtree that
       includes it
    3. Each subtree returns its best Solution; the include result replaces
       the exclude result only if the policy ranks it strictly higher

    The result is the first optimum met in exclude-before-include order.
    By default profit ties go to the selection with fewer items.
    """

    exponential = True

    def __init__(self, policy: TieBreakPolicy = FEWEST_ITEMS):
        self.policy = policy

    def solve(self, capacity: int, items: ItemSet) -> Solution:
        logger.debug(f"Exhaustive search over {len(items)} items, capacity {capacity}")
        best = self._search(items, 0, capacity, Solution.empty())
        logger.debug(f"Exhaustive search done: profit {best.total_profit}")
        return best

    def _search(self, items: ItemSet, index: int, remaining: int, current: Solution) -> Solution:
        if index == len(items):
            return current

        best = self._search(items, index + 1, remaining, current)

        item = items[index]
        if item.weight <= remaining:
            included = self._search(
                items, index + 1, remaining - item.weight, current.extended(item)
            )
            best = self.policy.pick(best, included)

        return best
