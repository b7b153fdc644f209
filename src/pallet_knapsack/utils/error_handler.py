"""
Error handling utilities for the Pallet Knapsack CLI.

Provides custom exception classes and decorators for handling errors
with informative messages and actionable suggestions.
"""

import functools
import sys
import traceback
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import click

from pallet_knapsack.types import Item

# Type variable for decorators
F = TypeVar("F", bound=Callable[..., Any])


# ============================================================================
# Custom Exception Hierarchy
# ============================================================================


class PalletKnapsackError(Exception):
    """Base exception for Pallet Knapsack errors."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        """
        Initialize error with message and optional suggestion.

        Args:
            message: Error description
            suggestion: Actionable suggestion for fixing the error
        """
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def format_error(self) -> str:
        """Format error message with suggestion."""
        parts = [f"Error: {self.message}"]
        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")
        return "\n".join(parts)


class ConfigurationError(PalletKnapsackError):
    """Error related to configuration files or parameters."""

    pass


class DataError(PalletKnapsackError):
    """Error related to dataset loading or writing."""

    pass


class ValidationError(PalletKnapsackError):
    """Error related to input or solution validation."""

    pass


class SolverError(PalletKnapsackError):
    """Error related to solver selection or execution."""

    pass


# ============================================================================
# Error Handlers
# ============================================================================


def format_exception_info(exc: Exception, show_traceback: bool = False) -> str:
    """
    Format exception information for display.

    Args:
        exc: The exception to format
        show_traceback: Whether to include full traceback

    Returns:
        Formatted error string
    """
    if isinstance(exc, PalletKnapsackError):
        return exc.format_error()
    elif show_traceback:
        return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    else:
        error_type = type(exc).__name__
        return f"Error ({error_type}): {str(exc)}"


def handle_cli_errors(
    debug_flag_name: str = "debug",
) -> Callable[[F], F]:
    """
    Decorator for CLI commands to handle errors gracefully.

    Args:
        debug_flag_name: Name of the debug flag in the command signature

    Returns:
        Decorator function

    Example:
        >>> @click.command()
        >>> @click.option("--debug", is_flag=True)
        >>> @handle_cli_errors()
        >>> def solve(debug):
        ...     pass
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            debug_mode = kwargs.get(debug_flag_name, False)
            if not debug_mode:
                ctx = click.get_current_context(silent=True)
                if ctx is not None and isinstance(ctx.obj, dict):
                    debug_mode = ctx.obj.get(debug_flag_name, False)

            try:
                return func(*args, **kwargs)

            except PalletKnapsackError as e:
                click.secho(e.format_error(), fg="red", err=True)
                if debug_mode:
                    click.secho("\nFull traceback:", fg="yellow", err=True)
                    traceback.print_exc()
                sys.exit(1)

            except FileNotFoundError as e:
                msg = f"File not found: {e.filename}"
                suggestion = "Check that the path exists and is spelled correctly."
                click.secho(f"Error: {msg}", fg="red", err=True)
                click.secho(f"Suggestion: {suggestion}", fg="yellow", err=True)
                if debug_mode:
                    traceback.print_exc()
                sys.exit(1)

            except PermissionError as e:
                msg = f"Permission denied: {e.filename}"
                suggestion = "Check file permissions or run with appropriate privileges."
                click.secho(f"Error: {msg}", fg="red", err=True)
                click.secho(f"Suggestion: {suggestion}", fg="yellow", err=True)
                if debug_mode:
                    traceback.print_exc()
                sys.exit(1)

            except KeyboardInterrupt:
                click.secho("\n\nOperation cancelled by user.", fg="yellow", err=True)
                sys.exit(130)  # Standard exit code for SIGINT

            except Exception as e:
                if debug_mode:
                    click.secho("Unexpected error occurred:", fg="red", err=True)
                    traceback.print_exc()
                else:
                    error_type = type(e).__name__
                    click.secho(f"Unexpected error ({error_type}): {str(e)}", fg="red", err=True)
                    click.secho(
                        "\nTip: Run with --debug flag to see full traceback", fg="yellow", err=True
                    )
                sys.exit(1)

        return wrapper  # type: ignore

    return decorator


# ============================================================================
# Validation Utilities
# ============================================================================


def require_non_negative_int(value: Any, name: str) -> int:
    """
    Validate that value is an integer >= 0.

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Returns:
        Validated value

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(
            f"{name} must be a non-negative integer, got: {value!r}",
            suggestion=f"Provide an integer >= 0 for {name}.",
        )
    return value


def require_unique_ids(items: Iterable[Item]) -> None:
    """
    Validate that no two items share an id.

    Raises:
        ValidationError: Listing the duplicated ids
    """
    seen: set[int] = set()
    duplicates: list[int] = []
    for item in items:
        if item.id in seen and item.id not in duplicates:
            duplicates.append(item.id)
        seen.add(item.id)

    if duplicates:
        raise ValidationError(
            f"Duplicate item ids: {', '.join(str(d) for d in duplicates)}",
            suggestion="Item ids must be unique within one dataset.",
        )
