"""
Configuration management and validation.

Provides Pydantic schemas and utilities for loading and validating
run configurations.
"""

from pallet_knapsack.config.loader import (
    config_to_dict,
    load_config,
    save_config,
    validate_config_file,
)
from pallet_knapsack.config.schemas import (
    DatasetConfig,
    LoggingConfig,
    RunConfig,
    SolverConfig,
)

__all__ = [
    "RunConfig",
    "DatasetConfig",
    "SolverConfig",
    "LoggingConfig",
    "load_config",
    "validate_config_file",
    "config_to_dict",
    "save_config",
]
