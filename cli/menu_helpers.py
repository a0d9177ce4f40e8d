# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Student Records application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for user input and converting it to roll numbers and marks
- Handling confirmation flows
- Displaying standard system messages and error feedback
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from core.response import ErrorCode, Response


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option:")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return options[index][1]

        except (ValueError, IndexError):
            print(f"Invalid selection. Enter a number between 0 and {len(options)}.")


def display_results(
    results: Iterable[Any],
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints each result on its own indented line.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for result in results:
        print(f"  {formatter(result)}")


# === prompt user input methods ===


# Prompt Helpers
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
#     - `prompt_user_input_or_none()` returns `None`.
# - The numeric prompts raise `ValueError` on text that does not convert; callers report it.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n):").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


def prompt_roll_or_cancel(prompt: str) -> int | MenuSignal:
    response = prompt_user_input_or_cancel(prompt)
    return response if response is MenuSignal.CANCEL else int(response)


def prompt_marks(prompt: str) -> float:
    return float(prompt_user_input(prompt))


def prompt_marks_or_none(prompt: str) -> float | None:
    response = prompt_user_input_or_none(prompt)
    return None if response is None else float(response)


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def display_invalid_number(field_label: str) -> None:
    display_response_failure(
        Response.fail(
            detail=f"Invalid input. {field_label} must be numeric.",
            error=ErrorCode.INVALID_INPUT,
        )
    )


def display_banner(title: str) -> None:
    print(f"\n{formatters.format_banner_text(title)}")


def display_response_failure(response: Response) -> None:
    """
    Prints the error code and detail of a failed `Response`; does nothing on success.
    """
    if response.success:
        return

    print(f"\n[ERROR: {response.error_label}] {response.detail}")
