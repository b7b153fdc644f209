"""Exact solvers: exhaustive search, dynamic programming and bounded search."""

from pallet_knapsack.solvers.bounded_search import BoundedSearchSolver
from pallet_knapsack.solvers.exhaustive import ExhaustiveSolver
from pallet_knapsack.solvers.tabulation import TabulationSolver

__all__ = [
    "ExhaustiveSolver",
    "TabulationSolver",
    "BoundedSearchSolver",
]
