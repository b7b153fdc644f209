"""Dataset loading and generation for truck loading problems."""

from pallet_knapsack.data.generator import (
    DatasetGenerator,
    generate_dataset_files,
    write_dataset,
)
from pallet_knapsack.data.loader import (
    Dataset,
    dataset_key,
    dataset_paths,
    load_dataset,
    load_pallets,
    load_truck,
)

__all__ = [
    # Classes
    "Dataset",
    "DatasetGenerator",
    # Functions
    "dataset_key",
    "dataset_paths",
    "load_dataset",
    "load_pallets",
    "load_truck",
    "write_dataset",
    "generate_dataset_files",
]
