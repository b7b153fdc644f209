"""
Unified CLI for Pallet Knapsack.

Provides subcommands for solving datasets, comparing solvers, generating
random datasets, and an interactive menu.
"""

import sys
from pathlib import Path

import click

from pallet_knapsack import __version__
from pallet_knapsack.config import RunConfig, load_config, validate_config_file
from pallet_knapsack.core.tie_break import get_policy
from pallet_knapsack.data import generate_dataset_files, load_dataset
from pallet_knapsack.eval import (
    compare_solvers,
    export_results_to_csv,
    print_comparison,
    print_run_summary,
    run_solver,
    save_results_to_json,
    summarize,
)
from pallet_knapsack.eval.reporting import ALGORITHM_TITLES
from pallet_knapsack.utils.error_handler import PalletKnapsackError, handle_cli_errors
from pallet_knapsack.utils.logger import get_logger, log_metrics, log_run_config, setup_logger

ALGORITHMS = ["exhaustive", "tabulation", "greedy", "bounded_search"]

# Menu numbering of the interactive session
MENU_CHOICES = {1: "exhaustive", 2: "tabulation", 3: "greedy", 4: "bounded_search"}


def _load_run_config(ctx: click.Context) -> RunConfig:
    config_path = ctx.obj.get("config_path")
    config = load_config(config_path) if config_path else RunConfig()

    data_dir = ctx.obj.get("data_dir")
    if data_dir:
        config.dataset.data_dir = Path(data_dir)

    level = ctx.obj.get("log_level") or config.logging.level
    setup_logger("pallet_knapsack", log_file=config.logging.log_file, level=level)
    return config


def _resolve_policy(config: RunConfig, tie_break: str | None):
    name = tie_break or config.solver.tie_break
    return get_policy(name) if name else None


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "config_path", type=click.Path(exists=True), help="Run configuration YAML file"
)
@click.option("--data-dir", type=click.Path(), help="Dataset directory (overrides config)")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level (overrides config)",
)
@click.option("--debug", is_flag=True, help="Show full tracebacks on errors")
@click.pass_context
def main(ctx, config_path, data_dir, log_level, debug):
    """
    Pallet Knapsack - truck loading solvers.

    Compares exhaustive search, dynamic programming, a greedy heuristic and
    bounded depth-first search on the 0/1 knapsack problem.

    Examples:
        pallet-knapsack solve 01 --algorithm tabulation
        pallet-knapsack compare 01 02 --output results/compare.csv
        pallet-knapsack generate 05 --items 20 --seed 7
        pallet-knapsack menu
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["data_dir"] = data_dir
    ctx.obj["log_level"] = log_level.upper() if log_level else None
    ctx.obj["debug"] = debug


@main.command()
@click.argument("dataset")
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice(ALGORITHMS, case_sensitive=False),
    default="tabulation",
    help="Solver to run",
)
@click.option(
    "--tie-break",
    type=click.Choice(["fewest_items", "lightest_load"]),
    help="Tie-break policy for exact solvers (overrides config)",
)
@click.pass_context
@handle_cli_errors()
def solve(ctx, dataset, algorithm, tie_break):
    """Solve one dataset with one algorithm."""
    config = _load_run_config(ctx)
    loaded = load_dataset(dataset, config.dataset)
    result = run_solver(algorithm.lower(), loaded, _resolve_policy(config, tie_break))
    print_run_summary(result, loaded.items)


@main.command()
@click.argument("datasets", nargs=-1, required=True)
@click.option(
    "--algorithm",
    "-a",
    "algorithms",
    type=click.Choice(ALGORITHMS, case_sensitive=False),
    multiple=True,
    help="Solvers to compare (default: from config)",
)
@click.option(
    "--tie-break",
    type=click.Choice(["fewest_items", "lightest_load"]),
    help="Tie-break policy for exact solvers (overrides config)",
)
@click.option("--output", type=click.Path(), help="Export results (.csv or .json)")
@click.pass_context
@handle_cli_errors()
def compare(ctx, datasets, algorithms, tie_break, output):
    """Run several solvers on one or more datasets."""
    config = _load_run_config(ctx)
    logger = get_logger("pallet_knapsack.cli")
    names = [a.lower() for a in algorithms] or config.solver.algorithms
    policy = _resolve_policy(config, tie_break)

    log_run_config(
        logger,
        {
            "datasets": ", ".join(datasets),
            "algorithms": ", ".join(names),
            "max_exhaustive_items": config.solver.max_exhaustive_items,
            "tie_break": policy.name if policy else "solver default",
        },
        title="Comparison",
    )

    all_results = []
    for dataset_id in datasets:
        loaded = load_dataset(dataset_id, config.dataset)
        results = compare_solvers(
            loaded, names, config.solver.max_exhaustive_items, policy=policy
        )
        print_comparison(results, title=f"Dataset {loaded.name} (capacity {loaded.capacity})")
        all_results.extend(results)

    summary = summarize(all_results)
    log_metrics(logger, {k: v for k, v in summary.items() if v is not None}, prefix="[summary]")

    if output:
        if Path(output).suffix.lower() == ".json":
            save_results_to_json(all_results, output, summary=summary)
        else:
            export_results_to_csv(all_results, output)
        click.echo(f"Results written to {output}")


@main.command()
@click.argument("dataset_id")
@click.option("--items", "n_items", type=click.IntRange(min=0), required=True, help="Pallets")
@click.option("--seed", type=int, default=42, help="Random seed")
@click.option(
    "--capacity-ratio",
    type=click.FloatRange(0.0, 1.0),
    default=0.5,
    help="Capacity as a fraction of the total weight",
)
@click.pass_context
@handle_cli_errors()
def generate(ctx, dataset_id, n_items, seed, capacity_ratio):
    """Write a random dataset in the CSV layout."""
    config = _load_run_config(ctx)
    dataset = generate_dataset_files(
        dataset_id,
        n_items,
        data_dir=config.dataset.data_dir,
        seed=seed,
        capacity_ratio=capacity_ratio,
    )
    click.echo(
        f"Generated dataset {dataset_id}: {dataset.n_items} pallets, "
        f"capacity {dataset.capacity} in {config.dataset.data_dir}"
    )


def _show_menu() -> None:
    click.echo("===== Pallet Knapsack =====")
    click.echo("Choose an option:")
    for number, name in MENU_CHOICES.items():
        click.echo(f"  {number} - {ALGORITHM_TITLES[name]}")
    click.echo("  0 - Leave")


@main.command()
@click.pass_context
@handle_cli_errors()
def menu(ctx):
    """Interactive loop: pick an algorithm and a dataset, repeat."""
    config = _load_run_config(ctx)
    policy = _resolve_policy(config, None)

    while True:
        _show_menu()
        choice = click.prompt("Option", type=click.IntRange(0, len(MENU_CHOICES)))
        if choice == 0:
            click.echo("Leaving program...")
            break

        dataset_id = click.prompt("Choose the dataset number", type=str)
        name = MENU_CHOICES[choice]

        try:
            dataset = load_dataset(dataset_id, config.dataset)
        except PalletKnapsackError as e:
            click.secho(e.format_error(), fg="red", err=True)
            continue

        limit = config.solver.max_exhaustive_items
        if name in ("exhaustive", "bounded_search") and dataset.n_items > limit:
            prompt = f"{dataset.n_items} pallets is above {limit}; this may take very long. Run?"
            if not click.confirm(prompt, default=False):
                continue

        result = run_solver(name, dataset, policy)
        print_run_summary(result, dataset.items)


@main.command("validate-config")
@click.argument("config_file", type=click.Path())
def validate_config(config_file):
    """Check a configuration file without running anything."""
    is_valid, message = validate_config_file(config_file)
    click.secho(message, fg="green" if is_valid else "red", err=not is_valid)
    if not is_valid:
        sys.exit(1)


if __name__ == "__main__":
    main()
