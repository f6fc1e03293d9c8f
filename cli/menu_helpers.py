# cli/menu_helpers.py

"""
Helper functions for displaying results and error feedback in the demo driver.
"""

from enum import Enum
from typing import Any, Callable, Iterable

from core.response import Response

# === display methods ===


def display_results(
    results: Iterable[Any],
    formatter: Callable[[Any], str] = str,
    empty_message: str = "... (none)",
) -> None:
    """
    Prints each result on its own line using the given formatter.

    Args:
        results (Iterable[Any]): The items to display.
        formatter (Callable[[Any], str]): Converts an item to its display string. Defaults to `str`.
        empty_message (str): Printed instead when `results` is empty.
    """
    printed = False

    for result in results:
        print(formatter(result))
        printed = True

    if not printed:
        print(empty_message)


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")
