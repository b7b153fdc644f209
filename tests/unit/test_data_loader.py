"""
Tests for dataset loading and random dataset generation.
"""

import pytest

from pallet_knapsack.config.schemas import DatasetConfig
from pallet_knapsack.data import (
    DatasetGenerator,
    dataset_key,
    dataset_paths,
    generate_dataset_files,
    load_dataset,
    load_pallets,
    load_truck,
)
from pallet_knapsack.types import Item
from pallet_knapsack.utils.error_handler import DataError


def write_files(directory, truck: str, pallets: str, dataset_id: str = "07"):
    directory.mkdir(parents=True, exist_ok=True)
    (directory / f"TruckAndPallets_{dataset_id}.csv").write_text(truck)
    (directory / f"Pallets_{dataset_id}.csv").write_text(pallets)
    return DatasetConfig(data_dir=directory)


class TestLoadDataset:
    """Test suite for the CSV loader."""

    def test_load_scenario(self, data_dir, scenario_a):
        dataset = load_dataset("02", DatasetConfig(data_dir=data_dir))

        assert dataset.name == "02"
        assert dataset.capacity == scenario_a["capacity"]
        assert dataset.items == scenario_a["items"]
        assert dataset.n_items == 3

    def test_numeric_id_is_zero_padded(self, data_dir):
        config = DatasetConfig(data_dir=data_dir)
        assert load_dataset(1, config).name == "01"
        assert load_dataset("1", config).n_items == 10

    def test_dataset_key_and_paths(self, tmp_path):
        config = DatasetConfig(data_dir=tmp_path, id_width=3)
        assert dataset_key(5, config) == "005"
        assert dataset_key("large", config) == "large"

        truck, pallets = dataset_paths("5", config)
        assert truck == tmp_path / "TruckAndPallets_005.csv"
        assert pallets == tmp_path / "Pallets_005.csv"

    def test_missing_files(self, tmp_path):
        with pytest.raises(DataError, match="not found"):
            load_dataset("99", DatasetConfig(data_dir=tmp_path))

    def test_header_only_truck_file(self, tmp_path):
        config = write_files(tmp_path, "Capacity,Pallets\n", "Pallet,Weight,Profit\n")
        with pytest.raises(DataError, match="no 'capacity,pallets' data line"):
            load_dataset("07", config)

    def test_count_mismatch(self, tmp_path):
        config = write_files(
            tmp_path, "Capacity,Pallets\n10,3\n", "Pallet,Weight,Profit\n1,2,3\n2,3,4\n"
        )
        with pytest.raises(DataError, match="declares 3 pallets"):
            load_dataset("07", config)

    def test_non_integer_field(self, tmp_path):
        config = write_files(
            tmp_path, "Capacity,Pallets\n10,1\n", "Pallet,Weight,Profit\n1,heavy,3\n"
        )
        with pytest.raises(DataError, match="weight is not an integer"):
            load_dataset("07", config)

    def test_negative_field(self, tmp_path):
        config = write_files(tmp_path, "Capacity,Pallets\n-1,0\n", "Pallet,Weight,Profit\n")
        with pytest.raises(DataError, match="capacity must be >= 0"):
            load_dataset("07", config)

    def test_short_row(self, tmp_path):
        config = write_files(tmp_path, "Capacity,Pallets\n10,1\n", "Pallet,Weight,Profit\n1,2\n")
        with pytest.raises(DataError, match="expected 'id,weight,profit'"):
            load_dataset("07", config)

    def test_duplicate_ids(self, tmp_path):
        config = write_files(
            tmp_path, "Capacity,Pallets\n10,2\n", "Pallet,Weight,Profit\n4,1,1\n4,2,2\n"
        )
        with pytest.raises(DataError, match="Duplicate item ids: 4"):
            load_dataset("07", config)

    def test_blank_lines_and_spaces_tolerated(self, tmp_path):
        write_files(
            tmp_path,
            "Capacity,Pallets\n 12 , 2 \n\n",
            "Pallet,Weight,Profit\n1, 5, 7\n\n2,4 ,6\n",
        )
        assert load_truck(tmp_path / "TruckAndPallets_07.csv") == (12, 2)
        assert load_pallets(tmp_path / "Pallets_07.csv") == (Item(1, 5, 7), Item(2, 4, 6))


class TestDatasetGenerator:
    """Test suite for DatasetGenerator."""

    def test_reproducible(self):
        first = DatasetGenerator(seed=7).generate(15)
        second = DatasetGenerator(seed=7).generate(15)
        assert first == second

    def test_ranges_and_capacity(self):
        dataset = DatasetGenerator(seed=1).generate(
            50, weight_range=(5, 10), profit_range=(1, 3), capacity_ratio=0.25
        )

        assert [item.id for item in dataset.items] == list(range(1, 51))
        assert all(5 <= item.weight <= 10 for item in dataset.items)
        assert all(1 <= item.profit <= 3 for item in dataset.items)
        total = sum(item.weight for item in dataset.items)
        assert dataset.capacity == int(total * 0.25)

    def test_generate_batch(self):
        batch = DatasetGenerator(seed=3).generate_batch(4, (2, 6))
        assert len(batch) == 4
        assert all(2 <= d.n_items <= 6 for d in batch)
        assert [d.name for d in batch] == ["random_0", "random_1", "random_2", "random_3"]

    def test_files_round_trip_through_loader(self, tmp_path):
        generated = generate_dataset_files("5", 12, data_dir=tmp_path, seed=11)
        loaded = load_dataset("05", DatasetConfig(data_dir=tmp_path))

        assert loaded.capacity == generated.capacity
        assert loaded.items == generated.items
