"""
Abstract base class for knapsack solvers.

Defines the call contract shared by every solver: a capacity and an ordered,
read-only item sequence in, a Solution out.
"""

from abc import ABC, abstractmethod

from pallet_knapsack.types import ItemSet, Solution


class AbstractSolver(ABC):
    """
    Abstract base class for 0/1 knapsack solvers.

    Solvers are stateless between calls: every ``solve`` owns its own
    working buffers and never mutates ``items``, so one instance can be
    shared across threads.

    Attributes:
        name: Registry name, set by ``SolverRegistry.register``
        exact: Whether the solver guarantees a profit-maximizing Solution
        exponential: Whether the running time grows as 2^n

    Example:
        >>> class EmptySolver(AbstractSolver):
        ...     def solve(self, capacity, items):
        ...         return Solution.empty()
    """

    name: str = "abstract"
    exact: bool = True
    exponential: bool = False

    @abstractmethod
    def solve(self, capacity: int, items: ItemSet) -> Solution:
        """
        Choose the items to load.

        Args:
            capacity: Maximum total weight of the truck
            items: Candidate items in input order

        Returns:
            Solution with ``total_weight <= capacity``
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
