"""
Configuration loading and validation utilities.

Provides functions to load YAML configs and validate them against Pydantic schemas.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pallet_knapsack.config.schemas import RunConfig
from pallet_knapsack.utils.error_handler import ConfigurationError


def load_config(config_path: str | Path) -> RunConfig:
    """
    Load and validate run configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated RunConfig object

    Raises:
        ConfigurationError: If file not found, invalid YAML, or validation fails

    Example:
        >>> config = load_config("configs/default.yaml")
        >>> print(config.solver.algorithms)
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            suggestion="Check the path or start from configs/default.yaml.",
        )

    try:
        with open(config_file) as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file: {config_path}",
            suggestion=f"Fix YAML syntax error: {e}",
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read config file: {config_path}",
            suggestion=f"Error: {e}",
        ) from e

    if config_dict is None:
        raise ConfigurationError(
            f"Empty configuration file: {config_path}",
            suggestion="Add configuration parameters to the YAML file.",
        )

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Configuration root must be a mapping: {config_path}",
            suggestion="Use top-level keys such as 'dataset', 'solver' and 'logging'.",
        )

    try:
        config = RunConfig(**config_dict)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            msg = error["msg"]
            errors.append(f"  - {loc}: {msg}")

        error_msg = "\n".join(errors)
        raise ConfigurationError(
            f"Configuration validation failed for {config_path}:\n{error_msg}",
            suggestion="Fix the configuration errors listed above. "
            "See configs/default.yaml for a valid example.",
        ) from e

    return config


def validate_config_file(config_path: str | Path) -> tuple[bool, str]:
    """
    Validate config file without raising exceptions.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Tuple of (is_valid, message)
    """
    try:
        load_config(config_path)
        return True, f"✓ Configuration is valid: {config_path}"
    except ConfigurationError as e:
        return False, f"✗ {e.message}"


def config_to_dict(config: RunConfig) -> dict[str, Any]:
    """
    Convert RunConfig to a YAML-friendly dictionary.

    Args:
        config: RunConfig instance

    Returns:
        Dictionary representation of config
    """
    return config.model_dump(mode="json")


def save_config(config: RunConfig, output_path: str | Path) -> None:
    """
    Save RunConfig to YAML file.

    Args:
        config: RunConfig instance
        output_path: Path to save YAML file

    Example:
        >>> save_config(RunConfig(), "runs/compare_01/config.yaml")
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config_to_dict(config)

    with open(output_file, "w") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False, indent=2)
