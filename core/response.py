# core/response.py

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    # === Not Found ===
    NOT_FOUND = "NOT_FOUND"

    # === Constraint Violations ===
    # a record with the same roll number is already stored
    DUPLICATE_KEY = "DUPLICATE_KEY"

    # === Validation Failures ===
    # input text could not be converted (e.g. non-numeric roll)
    INVALID_INPUT = "INVALID_INPUT"

    # field value is of the wrong type or incorrectly formatted
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"

    # sorted listing requested with an unrecognized key
    INVALID_SORT_KEY = "INVALID_SORT_KEY"


class Response:
    """
    Result of a `RecordStore` operation.

    Store methods never raise for expected failures (missing roll, duplicate roll, unknown
    sort key, bad field value). They return a `Response` instead, and the CLI decides what
    to print from it.

    Attributes:
        success (bool): True if the store operation took effect (or was a confirmed no-op).
        detail (str | None): Message suitable for printing, e.g. "Student successfully added."
        error (ErrorCode | None): Set on failure only.
        status_code (int | None): 200 on success; 404 for a missing roll, 409 for a duplicate roll, 400 otherwise.
        data (dict): Payload. Single-record operations use "record"; listings use "records"
            (and "sort_key" for sorted listings). Empty on failure.
    """

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | None = None,
        status_code: int | None = None,
        data: dict | None = None,
    ):
        self._success = success
        self._detail = detail
        self._error = error
        self._status_code = status_code
        self._data = data or {}

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def error(self) -> ErrorCode | None:
        return self._error

    @property
    def error_label(self) -> str:
        return self._error.name if self._error is not None else ""

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def data(self) -> dict:
        return self._data

    # === public classmethods ===

    @classmethod
    def succeed(
        cls,
        detail: str | None = None,
        data: dict | None = None,
    ) -> Response:
        return cls(success=True, detail=detail, status_code=200, data=data)

    @classmethod
    def fail(
        cls,
        detail: str,
        error: ErrorCode,
        status_code: int = 400,
    ) -> Response:
        """
        Builds a failed response; failures never carry a payload.
        """
        return cls(success=False, detail=detail, error=error, status_code=status_code)

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Response({self._success}, {self._error}, {self._detail!r})"

    def __str__(self) -> str:
        if self.success:
            return f"Success: {self.detail or ''}"
        return f"Error: {self.error_label}"
