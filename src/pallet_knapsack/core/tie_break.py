"""
Tie-break policies shared by the exact solvers.

Many subsets can reach the maximum profit. A policy fixes which one is
reported, in strictly ordered levels:

1. higher profit wins
2. on equal profit, fewer selected items wins
3. on equal profit and count, lower total weight wins (optional level)

A candidate equal to the incumbent under the policy never replaces it, so
the first optimum reached by a search is the one kept.
"""

from dataclasses import dataclass
from typing import Any

from pallet_knapsack.types import Score, Solution


@dataclass(frozen=True)
class TieBreakPolicy:
    """
    Lexicographic ranking of (profit, item count, total weight).

    ``improves`` only uses comparison and ``&``/``|`` operators, so it works
    on plain integers as well as elementwise on numpy arrays of equal shape.

    Example:
        >>> LIGHTEST_LOAD.prefers(Solution((1,), 10, 4), Solution((2,), 10, 5))
        True
        >>> FEWEST_ITEMS.prefers(Solution((1,), 10, 4), Solution((2,), 10, 5))
        False
    """

    name: str
    compare_weight: bool = False

    def improves(self, candidate: Score, incumbent: Score) -> Any:
        """Return whether ``candidate`` ranks strictly above ``incumbent``."""
        better = candidate.profit > incumbent.profit
        level = candidate.profit == incumbent.profit
        better = better | (level & (candidate.count < incumbent.count))
        if self.compare_weight:
            level = level & (candidate.count == incumbent.count)
            better = better | (level & (candidate.weight < incumbent.weight))
        return better

    def prefers(self, candidate: Solution, incumbent: Solution) -> bool:
        """Return whether solution ``candidate`` should replace ``incumbent``."""
        return bool(self.improves(candidate.score, incumbent.score))

    def pick(self, incumbent: Solution, candidate: Solution) -> Solution:
        """Keep ``incumbent`` unless ``candidate`` is strictly better."""
        return candidate if self.prefers(candidate, incumbent) else incumbent

    def key(self, score: Score) -> tuple[int, ...]:
        """Sort key where larger means better."""
        if self.compare_weight:
            return (score.profit, -score.count, -score.weight)
        return (score.profit, -score.count)


FEWEST_ITEMS = TieBreakPolicy(name="fewest_items")
LIGHTEST_LOAD = TieBreakPolicy(name="lightest_load", compare_weight=True)

POLICIES = {policy.name: policy for policy in (FEWEST_ITEMS, LIGHTEST_LOAD)}


def get_policy(name: str) -> TieBreakPolicy:
    """Look up a policy by name."""
    if name not in POLICIES:
        available = ", ".join(POLICIES)
        raise KeyError(f"Tie-break policy '{name}' not found. Available: {available}")
    return POLICIES[name]
