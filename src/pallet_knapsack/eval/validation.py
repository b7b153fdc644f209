"""
Solution consistency checks.

Recomputes the totals of a Solution from the input items and compares them
with what the solver reported.
"""

from collections import Counter

from pallet_knapsack.types import ItemSet, Solution
from pallet_knapsack.utils.error_handler import ValidationError


def solution_problems(solution: Solution, items: ItemSet, capacity: int) -> list[str]:
    """
    List every inconsistency between a Solution and its input.

    Args:
        solution: Solution to check
        items: Items the solver was given
        capacity: Capacity the solver was given

    Returns:
        Human-readable problems, empty if the solution is consistent
    """
    problems = []
    by_id = {item.id: item for item in items}

    duplicates = sorted(i for i, n in Counter(solution.selected_ids).items() if n > 1)
    if duplicates:
        problems.append(f"duplicate ids selected: {duplicates}")

    unknown = sorted(i for i in solution.id_set if i not in by_id)
    if unknown:
        problems.append(f"unknown ids selected: {unknown}")

    chosen = [by_id[i] for i in solution.selected_ids if i in by_id]
    weight = sum(item.weight for item in chosen)
    profit = sum(item.profit for item in chosen)

    if weight != solution.total_weight:
        problems.append(f"reported weight {solution.total_weight} != recomputed {weight}")
    if profit != solution.total_profit:
        problems.append(f"reported profit {solution.total_profit} != recomputed {profit}")
    if weight > capacity:
        problems.append(f"weight {weight} exceeds capacity {capacity}")

    return problems


def validate_solution(solution: Solution, items: ItemSet, capacity: int) -> Solution:
    """
    Check a Solution against its input.

    Returns:
        The same solution, for chaining

    Raises:
        ValidationError: If any inconsistency is found

    Example:
        >>> solution = TabulationSolver().solve(dataset.capacity, dataset.items)
        >>> validate_solution(solution, dataset.items, dataset.capacity)
    """
    problems = solution_problems(solution, items, capacity)
    if problems:
        raise ValidationError(
            "Inconsistent solution: " + "; ".join(problems),
            suggestion="This is a solver bug; rerun with --debug and report the dataset.",
        )
    return solution


def is_feasible(solution: Solution, items: ItemSet, capacity: int) -> bool:
    """Check a Solution without raising."""
    return not solution_problems(solution, items, capacity)
