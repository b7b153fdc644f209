"""Heuristic baselines for comparison."""

from pallet_knapsack.baselines.greedy import GreedySolver, value_densities

__all__ = [
    "GreedySolver",
    "value_densities",
]
