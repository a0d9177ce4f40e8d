# cli/main.py

"""
Main Menu for the Student Records CLI.

Provides the interactive loop and one action per menu option:
- Adding, searching, updating, and deleting students by roll number
- Displaying all records in insertion order, or sorted by roll or marks

All reads and writes are routed through the `RecordStore` API; this module only collects input,
converts it to roll numbers and marks, and prints the results.
"""

import argparse
import logging
from typing import cast

import cli.formatters as formatters
import cli.menu_helpers as helpers
from cli.menu_helpers import MenuSignal
from core.formatters import format_marks
from models.record_store import RecordStore
from models.student_record import StudentRecord

logger = logging.getLogger(__name__)


def run_cli(store: RecordStore) -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Args:
        store (RecordStore): The active `RecordStore`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
        SystemExit: When the user exits or input reaches end-of-file.
    """
    title = "Student Record Management System"
    options = [
        ("Add Student", add_student),
        ("Search Student by Roll", search_student),
        ("Update Student by Roll", update_student),
        ("Delete Student by Roll", delete_student),
        ("Display All Records", display_all_records),
        ("Display Sorted Records", display_sorted_records),
    ]
    zero_option = "Exit Program"

    helpers.display_banner(title)

    while True:
        try:
            menu_response = helpers.display_menu("Choose an option:", options, zero_option)

            if menu_response is MenuSignal.EXIT:
                exit_program()

            elif callable(menu_response):
                menu_response(store)

            else:
                raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

        except EOFError:
            logger.info("EOF received; exiting.")
            exit_program()


# === add student ===


def add_student(store: RecordStore) -> None:
    """
    Prompts for a new student's details and inserts the record.

    Notes:
        - The roll number is checked for uniqueness before the remaining fields are requested.
        - Blank roll input cancels without changes.
    """
    try:
        roll = helpers.prompt_roll_or_cancel("Enter roll (integer, leave blank to cancel):")

        if roll is MenuSignal.CANCEL:
            helpers.returning_without_changes()
            return
        roll = cast(int, roll)

        if store.contains(roll):
            print("\nError: a student with this roll already exists.")
            return

        name = helpers.prompt_user_input("Enter name:")
        branch = helpers.prompt_user_input("Enter branch:")
        marks = helpers.prompt_marks("Enter marks (0-100):")
        new_record = StudentRecord(roll, name, branch, marks)

    except ValueError:
        helpers.display_invalid_number("Roll and marks")
        return

    store_response = store.insert(new_record)

    if not store_response.success:
        helpers.display_response_failure(store_response)
        return

    print(f"\n{store_response.detail}")


# === search student ===


def search_student(store: RecordStore) -> None:
    try:
        roll = helpers.prompt_roll_or_cancel("Enter roll to search (leave blank to cancel):")

    except ValueError:
        helpers.display_invalid_number("Roll")
        return

    if roll is MenuSignal.CANCEL:
        return
    roll = cast(int, roll)

    store_response = store.search(roll)

    if not store_response.success:
        print(f"\n{store_response.detail}")
        return

    print(f"\nFound: {formatters.format_record_oneline(store_response.data['record'])}")


# === update student ===


def update_student(store: RecordStore) -> None:
    """
    Prompts for a roll number, shows the current values, and applies any new ones.

    Notes:
        - Leaving a field blank keeps its current value.
    """
    try:
        roll = helpers.prompt_roll_or_cancel("Enter roll to update (leave blank to cancel):")

        if roll is MenuSignal.CANCEL:
            helpers.returning_without_changes()
            return
        roll = cast(int, roll)

        search_response = store.search(roll)

        if not search_response.success:
            print(f"\n{search_response.detail}")
            return

        existing = search_response.data["record"]

        print(f"\n{formatters.format_record_multiline(existing)}")
        print("\nLeave a field blank to keep it unchanged.")

        name = helpers.prompt_user_input_or_none(f"New name (current: {existing.name}):")
        branch = helpers.prompt_user_input_or_none(
            f"New branch (current: {existing.branch}):"
        )
        marks = helpers.prompt_marks_or_none(
            f"New marks (current: {format_marks(existing.marks)}):"
        )

    except ValueError:
        helpers.display_invalid_number("Roll and marks")
        return

    store_response = store.update(roll, name=name, branch=branch, marks=marks)

    if not store_response.success:
        helpers.display_response_failure(store_response)
        return

    print(f"\n{store_response.detail}")


# === delete student ===


def delete_student(store: RecordStore) -> None:
    try:
        roll = helpers.prompt_roll_or_cancel("Enter roll to delete (leave blank to cancel):")

    except ValueError:
        helpers.display_invalid_number("Roll")
        return

    if roll is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    roll = cast(int, roll)

    search_response = store.search(roll)

    if not search_response.success:
        print(f"\n{search_response.detail}")
        return

    print(f"\n{formatters.format_record_oneline(search_response.data['record'])}")

    if not helpers.confirm_action("Delete this student?"):
        helpers.returning_without_changes()
        return

    store_response = store.delete(roll)

    if not store_response.success:
        helpers.display_response_failure(store_response)
        return

    print(f"\n{store_response.detail}")


# === display records ===


def display_all_records(store: RecordStore) -> None:
    records = store.list_all().data["records"]

    if not records:
        print("\nNo records to display.")
        return

    print("\nStudent Records (in insertion order):")
    helpers.display_results(records, formatter=formatters.format_record_oneline)


def display_sorted_records(store: RecordStore) -> None:
    sort_by = helpers.prompt_user_input("Sort by ('roll' or 'marks'):")

    store_response = store.list_sorted(sort_by)

    if not store_response.success:
        helpers.display_response_failure(store_response)
        return

    records = store_response.data["records"]

    if not records:
        print("\nNo records to display.")
        return

    print(f"\n{formatters.format_sort_heading(store_response.data['sort_key'])}")
    helpers.display_results(records, formatter=formatters.format_record_oneline)


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    helpers.display_banner("Exiting. Goodbye!")
    print()

    raise SystemExit


# === entry point ===


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="student-records",
        description="Interactive in-memory student record manager.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log store operations to stderr",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    run_cli(RecordStore())


if __name__ == "__main__":
    main()
