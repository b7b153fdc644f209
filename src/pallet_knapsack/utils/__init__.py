"""Utility functions for logging and error handling."""

from pallet_knapsack.utils.logger import (
    get_logger,
    log_metrics,
    log_run_config,
    setup_logger,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "log_run_config",
    "log_metrics",
]
