"""Timed runs, solution checks and reporting."""

from pallet_knapsack.eval.reporting import (
    export_results_to_csv,
    format_comparison_table,
    format_selection,
    print_comparison,
    print_run_summary,
    save_results_to_json,
)
from pallet_knapsack.eval.runner import (
    RunResult,
    build_solver,
    compare_solvers,
    run_solver,
    summarize,
)
from pallet_knapsack.eval.validation import is_feasible, solution_problems, validate_solution

__all__ = [
    "RunResult",
    "build_solver",
    "run_solver",
    "compare_solvers",
    "summarize",
    "validate_solution",
    "solution_problems",
    "is_feasible",
    "format_selection",
    "format_comparison_table",
    "print_run_summary",
    "print_comparison",
    "export_results_to_csv",
    "save_results_to_json",
]
