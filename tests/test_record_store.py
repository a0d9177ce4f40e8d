# tests/test_record_store.py

import pytest

from core.response import ErrorCode
from models.record_store import RecordStore, SortKey
from models.student_record import StudentRecord


def rolls_of(records):
    return [record.roll for record in records]


# === insert ===


def test_insert_record(empty_store, sample_record):
    response = empty_store.insert(sample_record)

    assert response.success
    assert response.data["record"] == sample_record
    assert 101 in empty_store
    assert len(empty_store) == 1


def test_insert_preserves_insertion_order(empty_store):
    for roll in [30, 10, 20, 5]:
        assert empty_store.insert(StudentRecord(roll, f"S{roll}", "CS", 50.0)).success

    assert rolls_of(empty_store.list_all().data["records"]) == [30, 10, 20, 5]


def test_insert_duplicate_roll_leaves_store_unchanged(populated_store):
    before = populated_store.list_all().data["records"]

    response = populated_store.insert(StudentRecord(102, "Other", "ME", 10.0))

    assert not response.success
    assert response.error is ErrorCode.DUPLICATE_KEY
    assert response.status_code == 409
    assert populated_store.list_all().data["records"] == before
    assert populated_store.search(102).data["record"].name == "Ravi"


def test_insert_rejects_non_record(empty_store):
    response = empty_store.insert({"roll": 1})

    assert not response.success
    assert response.error is ErrorCode.INVALID_FIELD_VALUE
    assert len(empty_store) == 0


def test_require_unique_roll(populated_store):
    populated_store.require_unique_roll(999)

    with pytest.raises(ValueError):
        populated_store.require_unique_roll(101)


# === search ===


def test_search_found(populated_store):
    response = populated_store.search(103)

    assert response.success
    assert response.data["record"] == StudentRecord(103, "Mia", "CS", 95.0)


def test_search_not_found(populated_store):
    response = populated_store.search(999)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert response.status_code == 404
    assert "record" not in response.data


def test_search_result_cannot_mutate_store(populated_store):
    record = populated_store.search(101).data["record"]

    with pytest.raises(AttributeError):
        record.name = "Hacked"

    assert populated_store.search(101).data["record"].name == "Asha"


# === update ===


def test_update_provided_fields(populated_store):
    response = populated_store.update(102, name="Ravi K", marks=80.0)

    assert response.success
    updated = populated_store.search(102).data["record"]
    assert updated == StudentRecord(102, "Ravi K", "EE", 80.0)
    assert response.data["record"] == updated


def test_update_keeps_position(populated_store):
    populated_store.update(101, branch="ME")

    assert rolls_of(populated_store.list_all().data["records"]) == [101, 102, 103]


def test_update_with_no_changes_is_noop(populated_store):
    before = populated_store.list_all().data["records"]

    response = populated_store.update(101)

    assert response.success
    assert "No changes made" in response.detail
    assert populated_store.list_all().data["records"] == before


def test_update_blank_text_is_never_written(populated_store):
    response = populated_store.update(101, name="", branch="  ")

    assert response.success
    record = populated_store.search(101).data["record"]
    assert record.name == "Asha"
    assert record.branch == "CS"


def test_update_marks_to_zero(populated_store):
    assert populated_store.update(103, marks=0.0).success
    assert populated_store.search(103).data["record"].marks == 0.0


def test_update_not_found(populated_store):
    response = populated_store.update(999, name="Ghost")

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert 999 not in populated_store


def test_update_invalid_marks(populated_store):
    response = populated_store.update(101, marks="high")

    assert not response.success
    assert response.error is ErrorCode.INVALID_FIELD_VALUE
    assert populated_store.search(101).data["record"].marks == 88.5


# === delete ===


def test_delete_record(populated_store):
    response = populated_store.delete(102)

    assert response.success
    assert response.data["record"].roll == 102
    assert not populated_store.search(102).success
    assert rolls_of(populated_store.list_all().data["records"]) == [101, 103]


def test_delete_first_and_last(populated_store):
    assert populated_store.delete(101).success
    assert populated_store.delete(103).success
    assert rolls_of(populated_store.list_all().data["records"]) == [102]


def test_delete_not_found(populated_store):
    response = populated_store.delete(999)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert len(populated_store) == 3


def test_reinsert_after_delete_goes_to_end(populated_store):
    populated_store.delete(101)
    populated_store.insert(StudentRecord(101, "Asha", "CS", 88.5))

    assert rolls_of(populated_store.list_all().data["records"]) == [102, 103, 101]


# === list_all ===


def test_list_all_empty(empty_store):
    response = empty_store.list_all()

    assert response.success
    assert response.data["records"] == []


def test_list_all_returns_snapshot(populated_store):
    records = populated_store.list_all().data["records"]
    records.clear()

    assert len(populated_store) == 3


# === list_sorted ===


def test_list_sorted_by_roll(empty_store):
    for roll in [3, 1, 2]:
        empty_store.insert(StudentRecord(roll, "S", "CS", 50.0))

    response = empty_store.list_sorted("roll")

    assert response.success
    assert response.data["sort_key"] is SortKey.ROLL
    assert rolls_of(response.data["records"]) == [1, 2, 3]


def test_list_sorted_by_marks_descending(populated_store):
    response = populated_store.list_sorted(SortKey.MARKS)

    assert response.success
    assert [r.marks for r in response.data["records"]] == [95.0, 88.5, 72.0]


def test_list_sorted_marks_ties_keep_insertion_order(empty_store):
    empty_store.insert(StudentRecord(5, "A", "CS", 70.0))
    empty_store.insert(StudentRecord(2, "B", "CS", 90.0))
    empty_store.insert(StudentRecord(9, "C", "CS", 70.0))
    empty_store.insert(StudentRecord(1, "D", "CS", 70.0))

    records = empty_store.list_sorted("marks").data["records"]

    assert rolls_of(records) == [2, 5, 9, 1]


@pytest.mark.parametrize("key", ["ROLL", " Marks "])
def test_list_sorted_key_is_case_insensitive(populated_store, key):
    assert populated_store.list_sorted(key).success


@pytest.mark.parametrize("key", ["other", "", "name", None, 1])
def test_list_sorted_invalid_key(populated_store, key):
    before = populated_store.list_all().data["records"]

    response = populated_store.list_sorted(key)

    assert not response.success
    assert response.error is ErrorCode.INVALID_SORT_KEY
    assert populated_store.list_all().data["records"] == before


def test_list_sorted_does_not_reorder_store(empty_store):
    for roll in [3, 1, 2]:
        empty_store.insert(StudentRecord(roll, "S", "CS", float(roll)))

    empty_store.list_sorted("roll")
    empty_store.list_sorted("marks")

    assert rolls_of(empty_store.list_all().data["records"]) == [3, 1, 2]


def test_list_sorted_empty(empty_store):
    response = empty_store.list_sorted("marks")

    assert response.success
    assert response.data["records"] == []


# === scenario ===


def test_scenario_sort_and_delete():
    store = RecordStore()
    store.insert(StudentRecord(101, "Asha", "CS", 88.5))
    store.insert(StudentRecord(102, "Ravi", "EE", 72.0))
    store.insert(StudentRecord(103, "Mia", "CS", 95.0))

    by_marks = store.list_sorted("marks").data["records"]
    assert [(r.roll, r.marks) for r in by_marks] == [
        (103, 95.0),
        (101, 88.5),
        (102, 72.0),
    ]

    assert rolls_of(store.list_sorted("roll").data["records"]) == [101, 102, 103]

    assert store.delete(102).success
    assert rolls_of(store.list_all().data["records"]) == [101, 103]


def test_stores_are_independent():
    first = RecordStore()
    second = RecordStore()

    first.insert(StudentRecord(1, "A", "CS", 1.0))

    assert 1 in first
    assert 1 not in second


def test_update_invalid_name_type(populated_store):
    response = populated_store.update(101, name=42)

    assert not response.success
    assert response.error is ErrorCode.INVALID_FIELD_VALUE
    assert populated_store.search(101).data["record"].name == "Asha"


# === roll keys ===


@pytest.mark.parametrize("key", [True, 1.0, "1"])
def test_lookups_ignore_non_integer_keys(empty_store, key):
    empty_store.insert(StudentRecord(1, "Asha", "CS", 88.5))

    assert not empty_store.search(key).success
    assert empty_store.search(key).error is ErrorCode.NOT_FOUND
    assert empty_store.update(key, name="Other").error is ErrorCode.NOT_FOUND
    assert empty_store.delete(key).error is ErrorCode.NOT_FOUND
    assert not empty_store.contains(key)
    assert key not in empty_store
    assert empty_store.search(1).data["record"].name == "Asha"
