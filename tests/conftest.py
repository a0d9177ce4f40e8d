# tests/conftest.py

import pytest

from models.record_store import RecordStore
from models.student_record import StudentRecord


@pytest.fixture
def empty_store():
    return RecordStore()


@pytest.fixture
def sample_record():
    return StudentRecord(101, "Asha", "CS", 88.5)


@pytest.fixture
def populated_store():
    store = RecordStore()
    store.insert(StudentRecord(101, "Asha", "CS", 88.5))
    store.insert(StudentRecord(102, "Ravi", "EE", 72.0))
    store.insert(StudentRecord(103, "Mia", "CS", 95.0))
    return store


@pytest.fixture
def feed_input(monkeypatch):
    """
    Replaces `input()` with a scripted sequence of answers.

    Raises EOFError once the answers run out, as a closed stdin would.
    """

    def _feed(*answers: str) -> None:
        responses = iter(answers)

        def fake_input(_prompt: str = "") -> str:
            try:
                return next(responses)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed
