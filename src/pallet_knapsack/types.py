"""
Common type definitions for Pallet Knapsack.

Provides the item and solution records shared by every solver, plus
type aliases used across the package.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, TypeAlias


@dataclass(frozen=True)
class Item:
    """A pallet that can be loaded on the truck."""

    id: int
    weight: int
    profit: int


class Score(NamedTuple):
    """Ranking triple compared by a tie-break policy."""

    profit: int
    count: int
    weight: int


@dataclass(frozen=True)
class Solution:
    """
    Result of a single solver invocation.

    Attributes:
        selected_ids: Ids of the loaded items, in input order, no duplicates
        total_profit: Sum of the profits of the selected items
        total_weight: Sum of the weights of the selected items
    """

    selected_ids: tuple[int, ...] = ()
    total_profit: int = 0
    total_weight: int = 0

    @property
    def item_count(self) -> int:
        return len(self.selected_ids)

    @property
    def id_set(self) -> frozenset[int]:
        return frozenset(self.selected_ids)

    @property
    def score(self) -> Score:
        return Score(self.total_profit, self.item_count, self.total_weight)

    @classmethod
    def empty(cls) -> "Solution":
        """The zero solution: nothing loaded."""
        return cls()

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> "Solution":
        """Build a solution whose totals are summed from the given items."""
        chosen = list(items)
        return cls(
            selected_ids=tuple(item.id for item in chosen),
            total_profit=sum(item.profit for item in chosen),
            total_weight=sum(item.weight for item in chosen),
        )

    def extended(self, item: Item) -> "Solution":
        """Return a copy with ``item`` appended to the selection."""
        return Solution(
            selected_ids=self.selected_ids + (item.id,),
            total_profit=self.total_profit + item.profit,
            total_weight=self.total_weight + item.weight,
        )


# Type aliases
ItemSet: TypeAlias = Sequence[Item]
Capacity: TypeAlias = int
MetricsDict: TypeAlias = dict[str, float]

# Path types
PathLike: TypeAlias = str | Path
