"""
Tests for timed runs, comparisons and result export.
"""

import csv
import json

import pytest

from pallet_knapsack.baselines import GreedySolver
from pallet_knapsack.core.tie_break import LIGHTEST_LOAD
from pallet_knapsack.data.loader import Dataset
from pallet_knapsack.eval import (
    build_solver,
    compare_solvers,
    export_results_to_csv,
    format_comparison_table,
    format_selection,
    print_run_summary,
    run_solver,
    save_results_to_json,
    summarize,
)
from pallet_knapsack.solvers import TabulationSolver
from pallet_knapsack.types import Item, Solution
from pallet_knapsack.utils.error_handler import SolverError


@pytest.fixture
def scenario_dataset(scenario_a):
    return Dataset(name="02", capacity=scenario_a["capacity"], items=scenario_a["items"])


@pytest.fixture
def trap_dataset(greedy_trap):
    return Dataset(name="trap", capacity=greedy_trap["capacity"], items=greedy_trap["items"])


class TestRunner:
    """Test suite for run_solver and compare_solvers."""

    def test_build_solver_policy_only_for_exact(self):
        solver = build_solver("tabulation", LIGHTEST_LOAD)
        assert isinstance(solver, TabulationSolver)
        assert solver.policy is LIGHTEST_LOAD
        assert isinstance(build_solver("greedy", LIGHTEST_LOAD), GreedySolver)

    def test_unknown_algorithm(self):
        with pytest.raises(SolverError, match="Unknown algorithm: annealing"):
            build_solver("annealing")

    def test_run_solver(self, scenario_dataset):
        result = run_solver("tabulation", scenario_dataset)

        assert result.dataset == "02"
        assert result.algorithm == "tabulation"
        assert result.profit == 20
        assert result.weight == 10
        assert result.capacity == 10
        assert result.n_selected == 2
        assert result.selected_ids == (1, 3)
        assert result.exact is True
        assert result.time_ms >= 0.0
        assert result.gap is None
        assert result.solution == Solution((1, 3), total_profit=20, total_weight=10)

    def test_compare_fills_gaps(self, trap_dataset):
        results = compare_solvers(trap_dataset, ["tabulation", "greedy", "bounded_search"])
        by_name = {r.algorithm: r for r in results}

        assert [r.algorithm for r in results] == ["tabulation", "greedy", "bounded_search"]
        assert by_name["tabulation"].gap == 0.0
        assert by_name["bounded_search"].gap == 0.0
        assert by_name["greedy"].gap == pytest.approx(100.0 * 60 / 220)

    def test_compare_skips_exponential_above_limit(self, small_dataset):
        results = compare_solvers(
            small_dataset, ["exhaustive", "tabulation", "bounded_search"], max_exhaustive_items=5
        )
        assert [r.algorithm for r in results] == ["tabulation"]

    def test_compare_without_exact_leaves_gap_empty(self, trap_dataset):
        results = compare_solvers(trap_dataset, ["greedy"])
        assert results[0].gap is None

    def test_zero_optimum_gives_zero_gap(self):
        dataset = Dataset(name="empty", capacity=0, items=(Item(1, 3, 3),))
        results = compare_solvers(dataset, ["tabulation", "greedy"])
        assert [r.gap for r in results] == [0.0, 0.0]

    def test_summarize(self, trap_dataset):
        results = compare_solvers(trap_dataset, ["tabulation", "greedy"])
        summary = summarize(results)

        assert summary["n_runs"] == 2
        assert summary["max_gap"] == pytest.approx(100.0 * 60 / 220)
        assert summary["mean_gap"] == pytest.approx(50.0 * 60 / 220)
        assert summary["max_time_ms"] >= summary["mean_time_ms"] >= 0.0
        assert summarize([]) == {"n_runs": 0}


class TestReporting:
    """Test suite for console output and export."""

    def test_format_selection(self, scenario_a):
        text = format_selection(Solution((1, 3), 20, 10), scenario_a["items"])
        assert text.splitlines() == [
            "Selected Pallets (ID | Value | Weight):",
            "1 | 12 | 6",
            "3 | 8 | 4",
        ]

    def test_print_run_summary(self, scenario_dataset, capsys):
        result = run_solver("bounded_search", scenario_dataset)
        print_run_summary(result, scenario_dataset.items)
        out = capsys.readouterr().out

        assert "Total weight: 10 / Capacity: 10" in out
        assert "Algorithm: Branch and Bound" in out
        assert "Max profit: 20" in out
        assert "Execution time:" in out

    def test_comparison_table(self, trap_dataset):
        table = format_comparison_table(compare_solvers(trap_dataset, ["tabulation", "greedy"]))
        lines = table.splitlines()
        assert lines[0].split()[:3] == ["algorithm", "profit", "weight"]
        assert lines[2].split()[:2] == ["tabulation", "220"]
        assert lines[3].split()[4] == "27.27"

    def test_export_csv(self, trap_dataset, tmp_path):
        results = compare_solvers(trap_dataset, ["tabulation", "greedy"])
        path = export_results_to_csv(results, tmp_path / "out" / "compare.csv")

        with open(path, newline="") as f:
            rows = list(csv.DictReader(f))
        assert [row["algorithm"] for row in rows] == ["tabulation", "greedy"]
        assert rows[0]["selected_ids"] == "2 3"
        assert rows[1]["profit"] == "160"
        assert "timestamp" in rows[0]

    def test_save_json(self, trap_dataset, tmp_path):
        results = compare_solvers(trap_dataset, ["tabulation"])
        path = save_results_to_json(results, tmp_path / "compare.json", summary=summarize(results))

        with open(path) as f:
            payload = json.load(f)
        assert payload["results"][0]["selected_ids"] == [2, 3]
        assert payload["summary"]["n_runs"] == 1
