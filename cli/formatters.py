# cli/formatters.py

from textwrap import dedent

from core.formatters import format_marks
from models.record_store import SortKey
from models.student_record import StudentRecord

SORT_HEADINGS = {
    SortKey.ROLL: "Student Records (sorted by roll):",
    SortKey.MARKS: "Student Records (sorted by marks, high->low):",
}


# === StudentRecord formatters ===


def format_record_oneline(record: StudentRecord) -> str:
    return str(record)


def format_record_multiline(record: StudentRecord) -> str:
    return dedent(
        f"""\
        Student {record.roll}:
        ... Name: {record.name}
        ... Branch: {record.branch}
        ... Marks: {format_marks(record.marks)}"""
    )


def format_sort_heading(sort_key: SortKey) -> str:
    return SORT_HEADINGS[sort_key]
