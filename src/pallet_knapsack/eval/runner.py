"""
Timed solver runs and multi-solver comparisons.
"""

import time
from dataclasses import asdict, dataclass

import numpy as np

# Solver modules register themselves on import
import pallet_knapsack.baselines  # noqa: F401
import pallet_knapsack.solvers  # noqa: F401
from pallet_knapsack.core.registry import SolverRegistry
from pallet_knapsack.core.tie_break import TieBreakPolicy
from pallet_knapsack.data.loader import Dataset
from pallet_knapsack.eval.validation import validate_solution
from pallet_knapsack.types import MetricsDict, Solution
from pallet_knapsack.utils.error_handler import SolverError
from pallet_knapsack.utils.logger import get_logger, log_metrics

logger = get_logger(__name__)


@dataclass
class RunResult:
    """Outcome of one solver on one dataset."""

    dataset: str
    algorithm: str
    profit: int
    weight: int
    capacity: int
    n_selected: int
    selected_ids: tuple[int, ...]
    time_ms: float
    exact: bool
    gap: float | None = None

    @property
    def solution(self) -> Solution:
        return Solution(self.selected_ids, self.profit, self.weight)

    def to_dict(self) -> dict:
        row = asdict(self)
        row["selected_ids"] = " ".join(str(i) for i in self.selected_ids)
        return row


def solver_class_for(name: str) -> type:
    """Look up a registered solver class, raising SolverError if unknown."""
    try:
        return SolverRegistry.get_class(name)
    except KeyError as e:
        available = ", ".join(SolverRegistry.list_solvers())
        raise SolverError(
            f"Unknown algorithm: {name}",
            suggestion=f"Choose one of: {available}",
        ) from e


def build_solver(name: str, policy: TieBreakPolicy | None = None):
    """
    Instantiate a registered solver.

    Args:
        name: Registry name
        policy: Tie-break override, only passed to exact solvers

    Raises:
        SolverError: If the name is unknown
    """
    solver_class = solver_class_for(name)
    if policy is not None and solver_class.exact:
        return solver_class(policy=policy)
    return solver_class()


def run_solver(name: str, dataset: Dataset, policy: TieBreakPolicy | None = None) -> RunResult:
    """
    Run one solver on a dataset, timing it and checking its Solution.

    Args:
        name: Solver registry name
        dataset: Dataset to solve
        policy: Optional tie-break override for exact solvers

    Returns:
        RunResult with totals and wall time in milliseconds

    Example:
        >>> result = run_solver("tabulation", load_dataset("01"))
        >>> print(result.profit, result.time_ms)
    """
    solver = build_solver(name, policy)

    start_time = time.perf_counter()
    solution = solver.solve(dataset.capacity, dataset.items)
    time_ms = (time.perf_counter() - start_time) * 1000.0

    validate_solution(solution, dataset.items, dataset.capacity)

    result = RunResult(
        dataset=dataset.name,
        algorithm=name,
        profit=solution.total_profit,
        weight=solution.total_weight,
        capacity=dataset.capacity,
        n_selected=solution.item_count,
        selected_ids=solution.selected_ids,
        time_ms=time_ms,
        exact=solver.exact,
    )
    log_metrics(
        logger,
        {"profit": result.profit, "weight": result.weight, "time_ms": result.time_ms},
        prefix=f"[{dataset.name}:{name}]",
    )
    return result


def compare_solvers(
    dataset: Dataset,
    algorithms: list[str],
    max_exhaustive_items: int = 30,
    policy: TieBreakPolicy | None = None,
) -> list[RunResult]:
    """
    Run several solvers on one dataset and fill in optimality gaps.

    Exponential solvers are skipped when the dataset has more than
    ``max_exhaustive_items`` items. Gaps are percentages relative to the best
    exact profit; they stay None when no exact solver ran.

    Returns:
        One RunResult per solver that ran, in ``algorithms`` order
    """
    results = []
    for name in algorithms:
        solver_class = solver_class_for(name)
        if solver_class.exponential and dataset.n_items > max_exhaustive_items:
            logger.warning(
                f"Skipping {name} on {dataset.name}: {dataset.n_items} items "
                f"> max_exhaustive_items={max_exhaustive_items}"
            )
            continue
        results.append(run_solver(name, dataset, policy))

    exact_profits = [r.profit for r in results if r.exact]
    if exact_profits:
        optimum = max(exact_profits)
        if len(set(exact_profits)) > 1:
            logger.error(f"Exact solvers disagree on {dataset.name}: {sorted(set(exact_profits))}")
        for r in results:
            r.gap = 100.0 * (optimum - r.profit) / optimum if optimum > 0 else 0.0

    return results


def summarize(results: list[RunResult]) -> MetricsDict:
    """
    Aggregate statistics over a list of runs.

    Returns:
        Dictionary with timing and gap statistics
    """
    if not results:
        return {"n_runs": 0}

    times = np.array([r.time_ms for r in results])
    gaps = np.array([r.gap for r in results if r.gap is not None])

    return {
        "n_runs": len(results),
        "mean_time_ms": float(np.mean(times)),
        "median_time_ms": float(np.median(times)),
        "max_time_ms": float(np.max(times)),
        "mean_gap": float(np.mean(gaps)) if gaps.size else None,
        "max_gap": float(np.max(gaps)) if gaps.size else None,
    }
