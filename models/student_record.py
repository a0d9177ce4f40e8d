# models/student_record.py

"""
Represents a single student record held by the `RecordStore`.

A record carries four scalar fields: a unique integer roll number, a name, a branch,
and a numeric marks value. Records are immutable values; every property is read-only.
Changes are expressed by building a new record with `with_updates()`, which keeps the
roll number and applies only the fields that were provided.

Includes functionality for:
- Validating roll and marks input types
- Deriving an updated copy of a record
- Comparing records by value
"""

from __future__ import annotations

from core.formatters import format_marks, is_blank


class StudentRecord:

    def __init__(
        self,
        roll: int,
        name: str,
        branch: str,
        marks: float,
    ):
        self._roll: int = StudentRecord.validate_roll_input(roll)
        self._name: str = StudentRecord.validate_text_input(name, "name")
        self._branch: str = StudentRecord.validate_text_input(branch, "branch")
        self._marks: float = StudentRecord.validate_marks_input(marks)

    # === properties ===

    @property
    def roll(self) -> int:
        return self._roll

    @property
    def name(self) -> str:
        return self._name

    @property
    def branch(self) -> str:
        return self._branch

    @property
    def marks(self) -> float:
        return self._marks

    # === derived records ===

    def with_updates(
        self,
        name: str | None = None,
        branch: str | None = None,
        marks: float | None = None,
    ) -> StudentRecord:
        """
        Returns a copy of this record with the provided fields replaced.

        Args:
            name (str | None): The new name, or None to keep the current one.
            branch (str | None): The new branch, or None to keep the current one.
            marks (float | None): The new marks, or None to keep the current value.

        Returns:
            A new `StudentRecord` with the same roll number.

        Notes:
            - Blank or whitespace-only names and branches are treated as "no change", so a text field can never be cleared.
            - A marks value of 0.0 is a real value, only None means "no change".
        """
        return StudentRecord(
            roll=self._roll,
            name=self._name if is_blank(name) else name,
            branch=self._branch if is_blank(branch) else branch,
            marks=self._marks if marks is None else marks,
        )

    # === dunder methods ===

    def _fields(self) -> tuple[int, str, str, float]:
        return (self._roll, self._name, self._branch, self._marks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StudentRecord):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())

    def __repr__(self) -> str:
        return f"StudentRecord({self._roll}, {self._name!r}, {self._branch!r}, {self._marks})"

    def __str__(self) -> str:
        return (
            f"Roll: {self._roll} | Name: {self._name} | Branch: {self._branch}"
            f" | Marks: {format_marks(self._marks)}"
        )

    # === data validators ===

    @staticmethod
    def is_roll(roll: object) -> bool:
        # bool is an int subclass and hashes like 0/1; reject it
        return isinstance(roll, int) and not isinstance(roll, bool)

    @staticmethod
    def validate_roll_input(roll: int) -> int:
        """
        Validates a roll number.

        Args:
            roll: The candidate roll number.

        Returns:
            The roll number, unchanged.

        Raises:
            TypeError: If the roll is not an integer (booleans are rejected).
        """
        if not StudentRecord.is_roll(roll):
            raise TypeError(f"Roll must be an integer, got {type(roll).__name__}.")
        return roll

    @staticmethod
    def validate_marks_input(marks: float) -> float:
        """
        Validates a marks value and normalizes it to a float.

        Raises:
            TypeError: If marks is not an int or float (booleans are rejected).
            ValueError: If marks is NaN.
        """
        if isinstance(marks, bool) or not isinstance(marks, (int, float)):
            raise TypeError(f"Marks must be numeric, got {type(marks).__name__}.")
        marks = float(marks)
        if marks != marks:
            raise ValueError("Marks must be a number, got NaN.")
        return marks

    @staticmethod
    def validate_text_input(text: str, field_name: str) -> str:
        if not isinstance(text, str):
            raise TypeError(
                f"{field_name.capitalize()} must be text, got {type(text).__name__}."
            )
        return text
