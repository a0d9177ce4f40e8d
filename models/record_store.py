# models/record_store.py

"""
The RecordStore is the single source of truth for student records during a session.

Records are held in a dictionary keyed by roll number. Dictionaries preserve insertion order,
so the same structure provides constant-time lookup by roll and the canonical listing order.
Replacing the value for an existing key keeps its position, which lets `update()` swap in a
new immutable `StudentRecord` without moving it. Deleting a key closes the gap.

Provides methods for inserting, searching, updating, deleting, and listing records, plus two
sorted views (by roll ascending, by marks descending) computed on copies of the records.
Every public method returns a structured `Response`; expected failures never raise.

State lives in memory only and is discarded when the process exits.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

from core.response import ErrorCode, Response
from models.student_record import StudentRecord

logger = logging.getLogger(__name__)


class SortKey(str, Enum):
    ROLL = "roll"
    MARKS = "marks"


class RecordStore:
    # sort key -> (key function, descending)
    _sort_orders: dict[SortKey, tuple[Callable[[StudentRecord], Any], bool]] = {
        SortKey.ROLL: (lambda record: record.roll, False),
        SortKey.MARKS: (lambda record: record.marks, True),
    }

    def __init__(self):
        self._records: dict[int, StudentRecord] = {}

    # === properties ===

    @property
    def records(self) -> list[StudentRecord]:
        return list(self._records.values())

    def contains(self, roll: int) -> bool:
        return self._lookup(roll) is not None

    # === data accessors ===

    def search(self, roll: int) -> Response:
        """
        Finds a `StudentRecord` by roll number.

        Args:
            roll (int): The roll number to look up. Keys that are not plain ints (bools, floats, strings) are never found.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if a record with this roll exists.
                    - False if no match is found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (StudentRecord): The matched record.
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
            - The returned record is immutable; all changes must go through `update()`.
        """
        record = self._lookup(roll)

        if record is None:
            return self._not_found(roll)

        return Response.succeed(
            data={
                "record": record,
            },
        )

    def list_all(self) -> Response:
        """
        Returns a snapshot of all records in insertion order.

        Returns:
            Response: Always successful; `data["records"]` is a new list, empty if the store has no records.
        """
        return Response.succeed(
            data={
                "records": self.records,
            },
        )

    def list_sorted(self, key: SortKey | str) -> Response:
        """
        Returns a sorted snapshot of all records.

        Args:
            key (SortKey | str): `SortKey.ROLL`/"roll" for ascending roll order, `SortKey.MARKS`/"marks" for descending marks order.
                String keys are matched case-insensitively and surrounding whitespace is ignored.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the key is recognized.
                    - False otherwise.
                - error (ErrorCode | None):
                    - `ErrorCode.INVALID_SORT_KEY` if the key is not recognized.
                - data (dict): Payload with the following keys:
                    - On success:
                        - "records" (list[StudentRecord]): The sorted records.
                        - "sort_key" (SortKey): The resolved sort key.

        Notes:
            - Sorting is stable; records with equal keys keep their insertion order.
            - The store's own order is never altered.
        """
        try:
            sort_key = self._resolve_sort_key(key)

        except ValueError as e:
            logger.info("Rejected sort key %r", key)
            return Response.fail(
                detail=f"{e} Use 'roll' or 'marks'.",
                error=ErrorCode.INVALID_SORT_KEY,
            )

        key_fn, descending = self._sort_orders[sort_key]

        return Response.succeed(
            data={
                "records": sorted(self._records.values(), key=key_fn, reverse=descending),
                "sort_key": sort_key,
            },
        )

    # === data manipulators ===

    def insert(self, record: StudentRecord) -> Response:
        """
        Appends a `StudentRecord` to the end of the store.

        Args:
            record (StudentRecord): The record to be added.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was added.
                    - False if its roll is already present or the argument is not a record.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | None):
                    - `ErrorCode.DUPLICATE_KEY` if the roll is not unique.
                    - `ErrorCode.INVALID_FIELD_VALUE` if `record` is not a `StudentRecord`.
                - status_code (int | None):
                    - 200 on success
                    - 409 on duplicate roll
                    - 400 on other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (StudentRecord): The added record.

        Notes:
            - On failure the store is left unchanged.
        """
        if not isinstance(record, StudentRecord):
            return Response.fail(
                detail=f"Expected a StudentRecord, got {type(record).__name__}.",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        try:
            self.require_unique_roll(record.roll)

        except ValueError as e:
            logger.info("Rejected duplicate roll %s", record.roll)
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.DUPLICATE_KEY,
                status_code=409,
            )

        self._records[record.roll] = record
        logger.debug("Inserted %r", record)

        return Response.succeed(
            detail="Student successfully added.",
            data={
                "record": record,
            },
        )

    def update(
        self,
        roll: int,
        name: str | None = None,
        branch: str | None = None,
        marks: float | None = None,
    ) -> Response:
        """
        Updates the provided fields of the record with the given roll number.

        Args:
            roll (int): The roll number of the record to update.
            name (str | None): The new name. None or blank means no change.
            branch (str | None): The new branch. None or blank means no change.
            marks (float | None): The new marks. None means no change.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record exists and the update was applied (or was a no-op).
                    - False if the record cannot be found or a field value is invalid.
                - detail (str | None):
                    - On success, whether any field changed.
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | None):
                    - `ErrorCode.NOT_FOUND` if no record has this roll.
                    - `ErrorCode.INVALID_FIELD_VALUE` if a field has the wrong type.
                - status_code (int | None):
                    - 200 on success
                    - 404 if not found
                    - 400 for invalid field values
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (StudentRecord): The record as stored after the update.

        Notes:
            - The roll number never changes and the record keeps its position in insertion order.
        """
        current = self._lookup(roll)

        if current is None:
            return self._not_found(roll)

        try:
            updated = current.with_updates(name=name, branch=branch, marks=marks)

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        if updated == current:
            return Response.succeed(
                detail="The values provided match the current ones. No changes made.",
                data={
                    "record": current,
                },
            )

        self._records[roll] = updated
        logger.debug("Updated %r -> %r", current, updated)

        return Response.succeed(
            detail="Student successfully updated.",
            data={
                "record": updated,
            },
        )

    def delete(self, roll: int) -> Response:
        """
        Removes the record with the given roll number.

        Returns:
            Response: Successful with `data["record"]` holding the removed record,
                or a failure with `ErrorCode.NOT_FOUND` (status 404) if no record has this roll.

        Notes:
            - The remaining records keep their relative order.
        """
        record = self._lookup(roll)

        if record is None:
            return self._not_found(roll)

        del self._records[roll]
        logger.debug("Deleted %r", record)

        return Response.succeed(
            detail="Student successfully deleted.",
            data={
                "record": record,
            },
        )

    # === data validators ===

    def require_unique_roll(self, roll: int) -> None:
        """
        Raises:
            ValueError: If a record with this roll is already stored.
        """
        if roll in self._records:
            raise ValueError(f"A student with roll {roll} already exists.")

    # === helper methods ===

    def _lookup(self, roll: object) -> StudentRecord | None:
        # True/1.0 hash like 1, so non-int keys must not reach the dict
        if not StudentRecord.is_roll(roll):
            return None
        return self._records.get(roll)

    def _not_found(self, roll: int) -> Response:
        return Response.fail(
            detail=f"Student with roll {roll} not found.",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    @staticmethod
    def _resolve_sort_key(key: SortKey | str) -> SortKey:
        if isinstance(key, SortKey):
            return key

        if isinstance(key, str):
            try:
                return SortKey(key.strip().lower())
            except ValueError:
                pass

        raise ValueError(f"Unknown sort option: {key!r}.")

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, roll: object) -> bool:
        return self._lookup(roll) is not None

    def __repr__(self) -> str:
        return f"RecordStore({len(self._records)} records)"
