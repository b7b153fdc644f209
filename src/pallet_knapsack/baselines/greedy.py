"""
Greedy Solver for Knapsack Problem
Uses value-to-weight ratio heuristic
"""

import numpy as np

from pallet_knapsack.core.base_solver import AbstractSolver
from pallet_knapsack.core.registry import SolverRegistry
from pallet_knapsack.types import ItemSet, Solution
from pallet_knapsack.utils.logger import get_logger

logger = get_logger(__name__)


def value_densities(items: ItemSet) -> np.ndarray:
    """
    Compute profit / weight for each item.

    Items with weight 0 cost nothing to load and get density ``inf`` so they
    are considered first.

    Args:
        items: Items in input order

    Returns:
        Float array of densities, aligned with ``items``
    """
    profits = np.array([item.profit for item in items], dtype=np.float64)
    weights = np.array([item.weight for item in items], dtype=np.float64)

    densities = np.full(len(items), np.inf)
    np.divide(profits, weights, out=densities, where=weights > 0)
    return densities


@SolverRegistry.register("greedy")
class GreedySolver(AbstractSolver):
    """
    Greedy algorithm for 0-1 Knapsack Problem

    Algorithm:
    1. Compute value/weight ratio for each item
    2. Sort items by ratio in descending order
    3. Add each item whose weight still fits, no backtracking

    Feasible but not guaranteed optimal. Items with equal ratio keep their
    input order.
    """

    exact = False

    def solve(self, capacity: int, items: ItemSet) -> Solution:
        if not items:
            return Solution.empty()

        densities = value_densities(items)
        order = np.argsort(-densities, kind="stable")

        chosen = []
        current_weight = 0
        for idx in order:
            item = items[int(idx)]
            if current_weight + item.weight <= capacity:
                chosen.append(item)
                current_weight += item.weight

        logger.debug(f"Greedy loaded {len(chosen)}/{len(items)} items, weight {current_weight}")
        return Solution.from_items(chosen)
