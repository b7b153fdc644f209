"""Core abstractions shared by the knapsack solvers."""

from pallet_knapsack.core.base_solver import AbstractSolver
from pallet_knapsack.core.registry import SolverRegistry
from pallet_knapsack.core.tie_break import (
    FEWEST_ITEMS,
    LIGHTEST_LOAD,
    TieBreakPolicy,
    get_policy,
)

__all__ = [
    "AbstractSolver",
    "SolverRegistry",
    "TieBreakPolicy",
    "FEWEST_ITEMS",
    "LIGHTEST_LOAD",
    "get_policy",
]
