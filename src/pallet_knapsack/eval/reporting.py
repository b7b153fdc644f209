"""
Result reporting and I/O utilities.

Handles console output of solver runs and export of results to CSV and JSON.
"""

import csv
import json
from datetime import datetime
from pathlib import Path

import numpy as np

from pallet_knapsack.eval.runner import RunResult
from pallet_knapsack.types import ItemSet, PathLike, Solution
from pallet_knapsack.utils.logger import get_logger

logger = get_logger(__name__)

ALGORITHM_TITLES = {
    "exhaustive": "Brute Force",
    "tabulation": "Dynamic Programming",
    "greedy": "Greedy Approximation",
    "bounded_search": "Branch and Bound",
}


def format_selection(solution: Solution, items: ItemSet) -> str:
    """
    Render the selected pallets as ``ID | Value | Weight`` lines.

    Example:
        >>> print(format_selection(solution, dataset.items))
        Selected Pallets (ID | Value | Weight):
        1 | 12 | 6
        3 | 8 | 4
    """
    by_id = {item.id: item for item in items}
    lines = ["Selected Pallets (ID | Value | Weight):"]
    for item_id in solution.selected_ids:
        item = by_id.get(item_id)
        if item is not None:
            lines.append(f"{item.id} | {item.profit} | {item.weight}")
    return "\n".join(lines)


def print_run_summary(result: RunResult, items: ItemSet | None = None) -> None:
    """
    Print one solver run to the console.

    Args:
        result: Run to print
        items: Dataset items; when given, the selected pallets are listed
    """
    if items is not None:
        print(format_selection(result.solution, items))
    print(f"Total weight: {result.weight} / Capacity: {result.capacity}")
    print(f"Algorithm: {ALGORITHM_TITLES.get(result.algorithm, result.algorithm)}")
    print(f"Max profit: {result.profit}")
    print(f"Execution time: {result.time_ms:.3f} ms\n")


def format_comparison_table(results: list[RunResult]) -> str:
    """Render a fixed-width table, one row per run."""
    header = f"{'algorithm':<16} {'profit':>10} {'weight':>10} {'items':>6} {'gap %':>8} {'ms':>10}"
    lines = [header, "-" * len(header)]
    for r in results:
        gap = f"{r.gap:.2f}" if r.gap is not None else "-"
        lines.append(
            f"{r.algorithm:<16} {r.profit:>10} {r.weight:>10} {r.n_selected:>6} "
            f"{gap:>8} {r.time_ms:>10.3f}"
        )
    return "\n".join(lines)


def print_comparison(results: list[RunResult], title: str = "Solver Comparison") -> None:
    """Print a comparison table with a title banner."""
    print("\n" + "=" * 66)
    print(f"{title:^66}")
    print("=" * 66)
    print(format_comparison_table(results))
    print("=" * 66 + "\n")


def export_results_to_csv(
    results: list[RunResult], filepath: PathLike, include_timestamp: bool = True
) -> Path:
    """
    Export run results to CSV format.

    Args:
        results: Runs to export
        filepath: Path to save CSV file
        include_timestamp: If True, add a timestamp column

    Returns:
        Path of the written file
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    rows = [r.to_dict() for r in results]
    fieldnames = list(RunResult.__dataclass_fields__)
    if include_timestamp:
        fieldnames.append("timestamp")
        timestamp = datetime.now().isoformat()
        for row in rows:
            row["timestamp"] = timestamp

    with open(filepath, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)

    logger.info(f"Results exported to CSV: {filepath}")
    return filepath


def save_results_to_json(results: list[RunResult], filepath: PathLike, summary=None) -> Path:
    """
    Save run results (and an optional summary) to a JSON file.

    Returns:
        Path of the written file
    """

    # Convert numpy types to Python types
    def convert(obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, tuple):
            return list(obj)
        return obj

    payload = {
        "timestamp": datetime.now().isoformat(),
        "results": [{k: convert(v) for k, v in vars(r).items()} for r in results],
    }
    if summary is not None:
        payload["summary"] = {k: convert(v) for k, v in summary.items()}

    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w") as f:
        json.dump(payload, f, indent=2)

    logger.info(f"Results saved to {filepath}")
    return filepath
