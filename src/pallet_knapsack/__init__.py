"""
Pallet Knapsack - truck loading solvers
=======================================

Four strategies for the 0/1 knapsack problem of loading a truck with pallets:
exhaustive search, dynamic programming, a greedy ratio heuristic and a
feasibility-pruned depth-first search.

Main modules:
- solvers: Exact solvers (exhaustive, tabulation, bounded_search)
- baselines: Greedy heuristic
- core: Solver base class, registry and tie-break policies
- data: CSV dataset loading and random generation
- eval: Timed runs, solution checks and reporting
"""

__version__ = "1.0.0"

# Public API exports
from pallet_knapsack import baselines, core, data, eval, solvers
from pallet_knapsack.baselines import GreedySolver
from pallet_knapsack.core import FEWEST_ITEMS, LIGHTEST_LOAD, SolverRegistry, TieBreakPolicy
from pallet_knapsack.solvers import BoundedSearchSolver, ExhaustiveSolver, TabulationSolver
from pallet_knapsack.types import Item, ItemSet, Score, Solution

__all__ = [
    "core",
    "solvers",
    "baselines",
    "data",
    "eval",
    "__version__",
    # Solvers
    "ExhaustiveSolver",
    "TabulationSolver",
    "GreedySolver",
    "BoundedSearchSolver",
    "SolverRegistry",
    "TieBreakPolicy",
    "FEWEST_ITEMS",
    "LIGHTEST_LOAD",
    # Types
    "Item",
    "ItemSet",
    "Score",
    "Solution",
]
