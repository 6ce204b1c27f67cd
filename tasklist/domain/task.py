from typing import NewType
from dataclasses import dataclass, field
from datetime import date

from tasklist.domain.enums import Priority, Urgency
from tasklist.domain.errors import InvalidDateError
from tasklist.domain.time_of_day import TimeOfDay

TaskId = NewType("TaskId", int)


def parse_date(raw: str) -> date:
    """Parsuje wpis `yyyy-mm-dd` (liczby rozdzielone myślnikami) na poprawną datę kalendarzową."""
    parts = raw.strip().split("-")
    if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
        raise InvalidDateError(raw)
    try:
        year, month, day = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError:
        raise InvalidDateError(raw)


@dataclass(frozen=True)
class PriorityEdit:
    priority: Priority


@dataclass(frozen=True)
class DateEdit:
    due_date: date


@dataclass(frozen=True)
class TimeEdit:
    time: TimeOfDay


@dataclass(frozen=True)
class DescriptionEdit:
    lines: tuple[str, ...]


FieldEdit = PriorityEdit | DateEdit | TimeEdit | DescriptionEdit


@dataclass
class Task:
    """
    Model domenowy pojedynczego zadania.

    W odróżnieniu od reszty modeli jest mutowalny: edycja zmienia pole w miejscu.
    `task_id` nie jest unikalny i nie służy do wyszukiwania (wyszukiwanie jest po pozycji).
    """
    task_id: TaskId
    priority: Priority
    due_date: date
    time: TimeOfDay
    lines: list[str] = field(default_factory=list)

    def urgency(self, today: date) -> Urgency:
        """Klasyfikuje termin względem `today`: T (dziś), I (w przyszłości), O (po terminie)."""
        days = (self.due_date - today).days
        if days == 0:
            return Urgency.DUE
        if days > 0:
            return Urgency.IN_TIME
        return Urgency.OVERDUE

    def apply(self, edit: FieldEdit) -> None:
        match edit:
            case PriorityEdit(priority=priority):
                self.priority = priority
            case DateEdit(due_date=due_date):
                self.due_date = due_date
            case TimeEdit(time=time):
                self.time = time
            case DescriptionEdit(lines=lines):
                self.lines = list(lines)
            case _:
                raise TypeError(f"Unsupported edit: {edit!r}")



### COMMENTS
# ======================================
# Edycja pól jako zamknięty wariant
# ======================================
# Zamiast porównywać nazwę pola jako string w środku modelu, każda edycja to osobna
# klasa (PriorityEdit, DateEdit, TimeEdit, DescriptionEdit) niosąca nową wartość.
# FieldEdit to unia tych klas, a `Task.apply` rozpoznaje wariant przez `match`.
#
# Tekst od użytkownika ("priority", "date", "time", "task") zamieniany jest na
# EditableField dopiero na granicy (serwis), tam też powstaje "Invalid field".
#
# ======================================
# Urgency nie jest polem
# ======================================
# Urgency liczona jest przy każdym wywołaniu z przekazanej daty "dzisiaj".
# Data pochodzi z portu Clock (UTC), więc testy mogą ją przypiąć.
