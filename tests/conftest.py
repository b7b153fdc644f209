"""
Pytest configuration and shared fixtures for testing.
"""

import logging

import pytest

from pallet_knapsack.config.schemas import DatasetConfig
from pallet_knapsack.data.generator import write_dataset
from pallet_knapsack.data.loader import Dataset
from pallet_knapsack.types import Item


@pytest.fixture(autouse=True)
def quiet_package_logger():
    """Drop handlers the CLI installs so later tests never write to a closed stream."""
    yield
    logger = logging.getLogger("pallet_knapsack")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())


@pytest.fixture
def scenario_a():
    """
    Three pallets, capacity 10.

    Feasible pairs are {1, 3} (weight 10, profit 20) and {2, 3}
    (weight 9, profit 18); {1, 2} weighs 11. Optimum: {1, 3}.

    Returns:
        dict with keys: capacity, items, optimal_ids, optimal_profit, optimal_weight
    """
    return {
        "capacity": 10,
        "items": (Item(1, 6, 12), Item(2, 5, 10), Item(3, 4, 8)),
        "optimal_ids": (1, 3),
        "optimal_profit": 20,
        "optimal_weight": 10,
    }


@pytest.fixture
def greedy_trap():
    """
    Classic instance where the density order is not optimal.

    Greedy loads items 1 and 2 (profit 160); the optimum is {2, 3} (profit 220).
    """
    return {
        "capacity": 50,
        "items": (Item(1, 10, 60), Item(2, 20, 100), Item(3, 30, 120)),
        "optimal_ids": (2, 3),
        "optimal_profit": 220,
    }


@pytest.fixture
def small_dataset():
    """Ten pallets, capacity 100, the same content as data/*_01.csv."""
    rows = [
        (1, 10, 18),
        (2, 15, 12),
        (3, 20, 25),
        (4, 12, 30),
        (5, 25, 22),
        (6, 8, 16),
        (7, 30, 35),
        (8, 18, 28),
        (9, 22, 19),
        (10, 14, 21),
    ]
    return Dataset(name="01", capacity=100, items=tuple(Item(*row) for row in rows))


@pytest.fixture
def data_dir(tmp_path, scenario_a, small_dataset):
    """
    Temporary data directory holding dataset 01 (ten pallets) and 02 (scenario A).

    Returns:
        Path to the directory
    """
    config = DatasetConfig(data_dir=tmp_path / "data")
    write_dataset(small_dataset, "01", config)
    write_dataset(
        Dataset(name="02", capacity=scenario_a["capacity"], items=scenario_a["items"]),
        "02",
        config,
    )
    return config.data_dir
