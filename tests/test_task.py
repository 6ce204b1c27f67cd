from datetime import date

import pytest

from tasklist.domain.enums import EditableField, Priority, Urgency
from tasklist.domain.errors import InvalidDateError, InvalidFieldNameError, InvalidPriorityTokenError
from tasklist.domain.task import (
    DateEdit,
    DescriptionEdit,
    PriorityEdit,
    Task,
    TaskId,
    TimeEdit,
    parse_date,
)
from tasklist.domain.time_of_day import TimeOfDay


def make_task(due: date = date(2024, 3, 15), lines: list[str] | None = None) -> Task:
    return Task(
        task_id=TaskId(1),
        priority=Priority.NORMAL,
        due_date=due,
        time=TimeOfDay("10", "00"),
        lines=lines if lines is not None else ["Buy milk"],
    )


@pytest.mark.parametrize(
    "due, expected",
    [
        (date(2024, 3, 15), Urgency.DUE),
        (date(2024, 3, 20), Urgency.IN_TIME),
        (date(2024, 3, 1), Urgency.OVERDUE),
    ],
)
def test_urgency_relative_to_today(due, expected):
    today = date(2024, 3, 15)
    assert make_task(due).urgency(today) == expected


def test_urgency_is_recomputed_for_each_today():
    task = make_task(date(2024, 3, 16))
    assert task.urgency(date(2024, 3, 15)) == Urgency.IN_TIME
    assert task.urgency(date(2024, 3, 16)) == Urgency.DUE
    assert task.urgency(date(2024, 3, 17)) == Urgency.OVERDUE


def test_parse_date_valid():
    assert parse_date("2024-2-29") == date(2024, 2, 29)
    assert parse_date(" 2030-01-05 ") == date(2030, 1, 5)


@pytest.mark.parametrize(
    "raw",
    ["2024-13-01", "2023-02-29", "2024-02-30", "2024/03/15", "2024-03", "abc", "",
     "2024-0_3-1_5", "2024- 3 -15", "2024-+3-15", "２０２４-03-15"],
)
def test_parse_date_invalid(raw):
    with pytest.raises(InvalidDateError):
        parse_date(raw)


def test_priority_parse_is_case_insensitive():
    assert Priority.parse("c") is Priority.CRITICAL
    assert Priority.parse("L") is Priority.LOW
    with pytest.raises(InvalidPriorityTokenError):
        Priority.parse("X")


def test_editable_field_parse():
    assert EditableField.parse("task") is EditableField.DESCRIPTION
    with pytest.raises(InvalidFieldNameError) as exc:
        EditableField.parse("color")
    assert str(exc.value) == "Invalid field"


def test_apply_each_edit_variant():
    # Arrange
    task = make_task(lines=["old 1", "old 2"])

    # Act
    task.apply(PriorityEdit(Priority.LOW))
    task.apply(DateEdit(date(2025, 1, 1)))
    task.apply(TimeEdit(TimeOfDay("7", "5")))
    task.apply(DescriptionEdit(("new",)))

    # Assert
    assert task.priority is Priority.LOW
    assert task.due_date == date(2025, 1, 1)
    assert str(task.time) == "07:05"
    assert task.lines == ["new"]


def test_apply_rejects_unknown_edit():
    task = make_task()
    with pytest.raises(TypeError):
        task.apply("priority")
