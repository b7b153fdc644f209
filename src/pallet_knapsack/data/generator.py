"""
Knapsack Problem Instance Generator
Generates random truck datasets and writes them in the CSV layout the loader reads
"""

import csv
from pathlib import Path

import numpy as np

from pallet_knapsack.config.schemas import DatasetConfig
from pallet_knapsack.data.loader import Dataset, dataset_paths
from pallet_knapsack.types import Item, PathLike
from pallet_knapsack.utils.logger import get_logger

logger = get_logger(__name__)


class DatasetGenerator:
    """Generates random truck loading instances"""

    def __init__(self, seed: int = 42):
        self.rng = np.random.RandomState(seed)

    def generate(
        self,
        n_items: int,
        weight_range: tuple[int, int] = (1, 100),
        profit_range: tuple[int, int] = (1, 100),
        capacity_ratio: float = 0.5,
        name: str = "random",
    ) -> Dataset:
        """
        Generate a random dataset

        Args:
            n_items: Number of pallets
            weight_range: (min_weight, max_weight) for pallets
            profit_range: (min_profit, max_profit) for pallets
            capacity_ratio: Capacity as a fraction of total weight (default: 0.5)
            name: Dataset name

        Returns:
            Dataset with pallet ids 1..n_items
        """
        weights = self.rng.randint(weight_range[0], weight_range[1] + 1, size=n_items)
        profits = self.rng.randint(profit_range[0], profit_range[1] + 1, size=n_items)

        # Set capacity as a fraction of total weight
        total_weight = int(np.sum(weights))
        capacity = int(total_weight * capacity_ratio)

        items = tuple(
            Item(id=i + 1, weight=int(w), profit=int(p))
            for i, (w, p) in enumerate(zip(weights, profits))
        )
        return Dataset(name=name, capacity=capacity, items=items)

    def generate_batch(
        self, n_instances: int, n_items_range: tuple[int, int], **kwargs
    ) -> list[Dataset]:
        """
        Generate multiple datasets with varying sizes

        Args:
            n_instances: Number of datasets to generate
            n_items_range: (min_items, max_items) range
            **kwargs: Additional arguments passed to generate

        Returns:
            List of Dataset objects
        """
        datasets = []
        for k in range(n_instances):
            n_items = self.rng.randint(n_items_range[0], n_items_range[1] + 1)
            datasets.append(self.generate(int(n_items), name=f"random_{k}", **kwargs))
        return datasets


def write_dataset(
    dataset: Dataset, dataset_id: str | int, config: DatasetConfig | None = None
) -> tuple[Path, Path]:
    """
    Write a dataset as a truck file plus a pallets file.

    Args:
        dataset: Dataset to write
        dataset_id: Id used to name the files
        config: Dataset location settings

    Returns:
        Tuple of (truck_path, pallets_path)
    """
    truck_path, pallets_path = dataset_paths(dataset_id, config)
    truck_path.parent.mkdir(parents=True, exist_ok=True)

    with open(truck_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["Capacity", "Pallets"])
        writer.writerow([dataset.capacity, dataset.n_items])

    with open(pallets_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["Pallet", "Weight", "Profit"])
        for item in dataset.items:
            writer.writerow([item.id, item.weight, item.profit])

    logger.info(f"Dataset written to {truck_path} and {pallets_path}")
    return truck_path, pallets_path


def generate_dataset_files(
    dataset_id: str | int,
    n_items: int,
    data_dir: PathLike = "data",
    seed: int = 42,
    capacity_ratio: float = 0.5,
) -> Dataset:
    """
    Generate a random dataset and write it under ``data_dir``.

    Returns:
        The generated Dataset
    """
    generator = DatasetGenerator(seed=seed)
    dataset = generator.generate(n_items, capacity_ratio=capacity_ratio, name=str(dataset_id))
    write_dataset(dataset, dataset_id, DatasetConfig(data_dir=Path(data_dir)))
    return dataset
