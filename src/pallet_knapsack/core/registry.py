"""
Registry system for solvers.

Provides a global registry for discovering and creating solvers by name.
"""

from collections.abc import Callable
from typing import Any


class SolverRegistry:
    """
    Global registry for knapsack solvers.

    Allows registration and creation of solvers by string name.
    Useful for configuration-driven and menu-driven solver selection.

    Example:
        >>> @SolverRegistry.register("my_solver")
        ... class MySolver(AbstractSolver):
        ...     pass
        ...
        >>> solver = SolverRegistry.create("my_solver")
    """

    _solvers: dict[str, type] = {}

    @classmethod
    def register(cls, name: str) -> Callable:
        """
        Decorator to register a solver class.

        Args:
            name: Unique name for the solver

        Returns:
            Decorator function

        Example:
            >>> @SolverRegistry.register("tabulation")
            ... class TabulationSolver(AbstractSolver):
            ...     pass
        """

        def wrapper(solver_class: type) -> type:
            if name in cls._solvers:
                raise ValueError(f"Solver '{name}' already registered as {cls._solvers[name]}")
            cls._solvers[name] = solver_class
            solver_class.name = name
            return solver_class

        return wrapper

    @classmethod
    def create(cls, name: str, **kwargs: Any) -> Any:
        """
        Create solver instance by name.

        Args:
            name: Registered solver name
            **kwargs: Arguments to pass to solver constructor

        Returns:
            Solver instance

        Raises:
            KeyError: If solver name not registered
        """
        if name not in cls._solvers:
            available = ", ".join(cls._solvers.keys())
            raise KeyError(f"Solver '{name}' not found. Available: {available}")
        return cls._solvers[name](**kwargs)

    @classmethod
    def list_solvers(cls) -> list[str]:
        """List all registered solver names."""
        return list(cls._solvers.keys())

    @classmethod
    def get_class(cls, name: str) -> type:
        """Get solver class by name without instantiating."""
        if name not in cls._solvers:
            raise KeyError(f"Solver '{name}' not registered")
        return cls._solvers[name]
