"""
Dynamic programming solver for the 0/1 knapsack problem.

Fills a profit table together with an item-count table (and a load table for
policies that rank by weight), then walks the tables backward to recover the
selected items. Runs in O(n * capacity) time and space.
"""

import numpy as np

from pallet_knapsack.core.base_solver import AbstractSolver
from pallet_knapsack.core.registry import SolverRegistry
from pallet_knapsack.core.tie_break import FEWEST_ITEMS, TieBreakPolicy
from pallet_knapsack.types import ItemSet, Score, Solution
from pallet_knapsack.utils.logger import get_logger

logger = get_logger(__name__)


@SolverRegistry.register("tabulation")
class TabulationSolver(AbstractSolver):
    """
    Bottom-up DP with tie-break aware reconstruction.

    Tables (shape ``[n + 1, capacity + 1]``):
    - ``profit[i][w]``: best profit using the items of rows 1..i with budget w
    - ``count[i][w]``: fewest items reaching ``profit[i][w]``
    - ``load[i][w]``: total weight of that selection

    Row i holds item ``n - i`` of the input, so the backward walk from
    ``(n, capacity)`` meets the items in input order. The walk drops an item
    whenever the row above ranks the same, which reproduces the
    exclude-first choice of the exhaustive search: both solvers report the
    same Solution under the same policy.
    """

    def __init__(self, policy: TieBreakPolicy = FEWEST_ITEMS):
        self.policy = policy

    def solve(self, capacity: int, items: ItemSet) -> Solution:
        n = len(items)
        if n == 0:
            return Solution.empty()

        profit, count, load = self._fill_tables(capacity, items)
        logger.debug(f"Filled {n + 1}x{capacity + 1} tables, best profit {profit[n, capacity]}")

        selected = []
        w = capacity
        for i in range(n, 0, -1):
            here = Score(profit[i, w], count[i, w], load[i, w])
            above = Score(profit[i - 1, w], count[i - 1, w], load[i - 1, w])
            if self.policy.improves(here, above):
                item = items[n - i]
                selected.append(item)
                w -= item.weight

        return Solution.from_items(selected)

    def _fill_tables(
        self, capacity: int, items: ItemSet
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        n = len(items)
        profit = np.zeros((n + 1, capacity + 1), dtype=np.int64)
        count = np.zeros((n + 1, capacity + 1), dtype=np.int64)
        load = np.zeros((n + 1, capacity + 1), dtype=np.int64)

        for i in range(1, n + 1):
            item = items[n - i]

            # Case 1: item does not fit, or is left out
            profit[i] = profit[i - 1]
            count[i] = count[i - 1]
            load[i] = load[i - 1]

            if item.weight > capacity:
                continue

            # Case 2: compare include/exclude for every budget w >= weight
            span = capacity + 1 - item.weight
            include = Score(
                profit[i - 1, :span] + item.profit,
                count[i - 1, :span] + 1,
                load[i - 1, :span] + item.weight,
            )
            exclude = Score(
                profit[i - 1, item.weight :],
                count[i - 1, item.weight :],
                load[i - 1, item.weight :],
            )
            take = self.policy.improves(include, exclude)

            profit[i, item.weight :] = np.where(take, include.profit, exclude.profit)
            count[i, item.weight :] = np.where(take, include.count, exclude.count)
            load[i, item.weight :] = np.where(take, include.weight, exclude.weight)

        return profit, count, load
