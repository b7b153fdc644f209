"""
Structured logging configuration for solver runs.

Provides centralized logging setup with file handlers, console output,
and a shared format for benchmark and interactive sessions.
"""

import logging
import sys
from collections.abc import Mapping
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "pallet_knapsack",
    log_file: Path | None = None,
    level: int | str = logging.INFO,
    console_output: bool = True,
) -> logging.Logger:
    """
    Configure and return a logger with file and/or console handlers.

    Args:
        name: Logger name (typically "pallet_knapsack")
        log_file: Path to log file (if None, only console logging)
        level: Logging level, as an int or a name such as "DEBUG"
        console_output: If True, also log to console (stdout)

    Returns:
        Configured logger instance

    Example:
        >>> from pathlib import Path
        >>> logger = setup_logger(log_file=Path("runs/compare.log"), level="DEBUG")
        >>> logger.info("Comparison started")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.propagate = False

    return logger


def get_logger(name: str = "pallet_knapsack") -> logging.Logger:
    """
    Get a logger inside the package hierarchy.

    Child loggers such as ``pallet_knapsack.solvers.exhaustive`` carry no
    handlers of their own and propagate to the ``pallet_knapsack`` logger,
    which is set up on first use.

    Args:
        name: Logger name

    Returns:
        Logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Filling table row")
    """
    root_name = name.split(".")[0]
    root = logging.getLogger(root_name)
    if not root.handlers:
        setup_logger(root_name, log_file=None, level=logging.WARNING, console_output=True)

    return logging.getLogger(name)


def log_run_config(
    logger: logging.Logger, config: Mapping, title: str = "Run Configuration"
) -> None:
    """
    Log a run configuration in a structured block.

    Args:
        logger: Logger instance
        config: Configuration mapping
        title: Title for the config block

    Example:
        >>> logger = get_logger()
        >>> log_run_config(logger, {"dataset": "01", "algorithm": "tabulation"})
    """
    logger.info("=" * 60)
    logger.info(f"{title:^60}")
    logger.info("=" * 60)

    for key, value in sorted(config.items()):
        logger.info(f"  {key:.<30} {value}")

    logger.info("=" * 60)


def log_metrics(
    logger: logging.Logger, metrics: Mapping, prefix: str = "", precision: int = 3
) -> None:
    """
    Log metrics on a single line.

    Args:
        logger: Logger instance
        metrics: Mapping of metric name -> value
        prefix: Prefix string (e.g., "[tabulation]")
        precision: Number of decimal places for float formatting

    Example:
        >>> log_metrics(get_logger(), {"profit": 20, "time_ms": 0.41}, prefix="[greedy]")
    """
    metric_strs = []
    for name, value in metrics.items():
        if isinstance(value, float):
            metric_strs.append(f"{name}: {value:.{precision}f}")
        else:
            metric_strs.append(f"{name}: {value}")

    message = " | ".join(metric_strs)
    if prefix:
        message = f"{prefix} {message}"

    logger.info(message)
