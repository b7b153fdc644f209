"""
Dataset loading from the two-file CSV layout.

A dataset ``XX`` is made of:
- ``TruckAndPallets_XX.csv``: header line, then ``capacity,pallet_count``
- ``Pallets_XX.csv``: header line, then one ``id,weight,profit`` row per pallet
"""

import csv
from dataclasses import dataclass
from pathlib import Path

from pallet_knapsack.config.schemas import DatasetConfig
from pallet_knapsack.types import Item, PathLike
from pallet_knapsack.utils.error_handler import DataError, ValidationError, require_unique_ids
from pallet_knapsack.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Dataset:
    """A truck capacity plus the pallets offered for loading."""

    name: str
    capacity: int
    items: tuple[Item, ...]

    @property
    def n_items(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"Dataset(name={self.name!r}, n_items={self.n_items}, capacity={self.capacity})"


def _parse_int(token: str, what: str, path: Path, line_no: int) -> int:
    try:
        value = int(token.strip())
    except ValueError as e:
        raise DataError(
            f"{path}:{line_no}: {what} is not an integer: {token!r}",
            suggestion="Fix the CSV row so every field is a whole number.",
        ) from e
    if value < 0:
        raise DataError(
            f"{path}:{line_no}: {what} must be >= 0, got {value}",
            suggestion="Negative capacities, weights and profits are not supported.",
        )
    return value


def _read_rows(path: Path) -> list[list[str]]:
    if not path.exists():
        raise DataError(
            f"Dataset file not found: {path}",
            suggestion="Check the dataset id and the configured data directory.",
        )
    with open(path, newline="") as f:
        rows = [row for row in csv.reader(f) if any(cell.strip() for cell in row)]
    if not rows:
        raise DataError(
            f"Empty dataset file: {path}", suggestion="Add a header line and data rows."
        )
    # First row is the header
    return rows[1:]


def load_truck(path: PathLike) -> tuple[int, int]:
    """
    Read the truck file.

    Args:
        path: Path to ``TruckAndPallets_XX.csv``

    Returns:
        Tuple of (capacity, declared pallet count)

    Raises:
        DataError: If the file is missing or malformed
    """
    path = Path(path)
    rows = _read_rows(path)
    if not rows or len(rows[0]) < 2:
        raise DataError(
            f"Truck file has no 'capacity,pallets' data line: {path}",
            suggestion="The second line must look like '400,10'.",
        )

    capacity = _parse_int(rows[0][0], "capacity", path, 2)
    declared = _parse_int(rows[0][1], "pallet count", path, 2)
    return capacity, declared


def load_pallets(path: PathLike) -> tuple[Item, ...]:
    """
    Read the pallets file.

    Args:
        path: Path to ``Pallets_XX.csv``

    Returns:
        Items in file order

    Raises:
        DataError: If the file is missing or a row is malformed
    """
    path = Path(path)
    items = []
    for offset, row in enumerate(_read_rows(path)):
        line_no = offset + 2
        if len(row) < 3:
            raise DataError(
                f"{path}:{line_no}: expected 'id,weight,profit', got {row}",
                suggestion="Every pallet row needs three comma-separated fields.",
            )
        items.append(
            Item(
                id=_parse_int(row[0], "id", path, line_no),
                weight=_parse_int(row[1], "weight", path, line_no),
                profit=_parse_int(row[2], "profit", path, line_no),
            )
        )
    return tuple(items)


def dataset_key(dataset_id: str | int, config: DatasetConfig | None = None) -> str:
    """Normalize a dataset id, zero-padding numeric ids."""
    config = config or DatasetConfig()
    key = str(dataset_id).strip()
    if key.isdigit():
        key = key.zfill(config.id_width)
    return key


def dataset_paths(dataset_id: str | int, config: DatasetConfig | None = None) -> tuple[Path, Path]:
    """
    Resolve the truck and pallets files of a dataset.

    Numeric ids are zero-padded, so ``"1"`` and ``1`` both map to ``01``.
    """
    config = config or DatasetConfig()
    key = dataset_key(dataset_id, config)

    truck = config.data_dir / config.truck_pattern.format(id=key)
    pallets = config.data_dir / config.pallets_pattern.format(id=key)
    return truck, pallets


def load_dataset(dataset_id: str | int, config: DatasetConfig | None = None) -> Dataset:
    """
    Load and check one dataset.

    Args:
        dataset_id: Dataset number or name (e.g. "01" or 1)
        config: Dataset location settings

    Returns:
        Dataset with capacity and items

    Raises:
        DataError: If files are missing, malformed, or inconsistent

    Example:
        >>> dataset = load_dataset("01")
        >>> print(dataset.capacity, dataset.n_items)
    """
    truck_path, pallets_path = dataset_paths(dataset_id, config)
    capacity, declared = load_truck(truck_path)
    items = load_pallets(pallets_path)

    if declared != len(items):
        raise DataError(
            f"Truck file declares {declared} pallets but {pallets_path} lists {len(items)}",
            suggestion="Update the pallet count in the truck file.",
        )

    try:
        require_unique_ids(items)
    except ValidationError as e:
        raise DataError(f"{pallets_path}: {e.message}", suggestion=e.suggestion) from e

    name = dataset_key(dataset_id, config)
    logger.info(f"Loaded dataset {name}: {len(items)} pallets, capacity {capacity}")
    return Dataset(name=name, capacity=capacity, items=items)
