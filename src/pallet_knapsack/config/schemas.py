"""
Pydantic schemas for configuration validation.

Defines the structure and validation rules for run configuration files.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ALGORITHMS = ["exhaustive", "tabulation", "greedy", "bounded_search"]


class DatasetConfig(BaseModel):
    """Where datasets live and how their files are named."""

    data_dir: Path = Field(default=Path("data"), description="Directory holding dataset CSVs")
    truck_pattern: str = Field(
        default="TruckAndPallets_{id}.csv", description="Truck file name, {id} is the dataset id"
    )
    pallets_pattern: str = Field(
        default="Pallets_{id}.csv", description="Pallets file name, {id} is the dataset id"
    )
    id_width: int = Field(default=2, description="Zero-padding applied to numeric ids", ge=1)

    @field_validator("truck_pattern", "pallets_pattern")
    @classmethod
    def check_placeholder(cls, v: str) -> str:
        """Ensure file patterns contain the {id} placeholder."""
        if "{id}" not in v:
            raise ValueError(f"Pattern must contain '{{id}}', got '{v}'")
        return v


class SolverConfig(BaseModel):
    """Which solvers to run and their limits."""

    algorithms: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALGORITHMS), description="Solver registry names"
    )
    max_exhaustive_items: int = Field(
        default=30,
        description="Skip exponential solvers on datasets with more items than this",
        ge=1,
    )
    tie_break: Literal["fewest_items", "lightest_load"] | None = Field(
        default=None, description="Override the tie-break policy of the exact solvers"
    )

    @field_validator("algorithms")
    @classmethod
    def check_algorithms(cls, v: list[str]) -> list[str]:
        """Ensure at least one known solver is listed."""
        if not v:
            raise ValueError("Must list at least one algorithm")
        unknown = [name for name in v if name not in DEFAULT_ALGORITHMS]
        if unknown:
            raise ValueError(
                f"Unknown algorithms: {unknown}. Available: {', '.join(DEFAULT_ALGORITHMS)}"
            )
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level"
    )
    log_file: Path | None = Field(default=None, description="Optional log file")

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class RunConfig(BaseModel):
    """Complete run configuration."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    dataset: DatasetConfig = Field(
        default_factory=DatasetConfig, description="Dataset configuration"
    )
    solver: SolverConfig = Field(default_factory=SolverConfig, description="Solver configuration")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
