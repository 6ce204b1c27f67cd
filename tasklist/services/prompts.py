import logging
from datetime import date

from tasklist.domain.enums import Priority
from tasklist.domain.errors import (
    InvalidDateError,
    InvalidPriorityTokenError,
    InvalidTaskNumberError,
    InvalidTimeError,
)
from tasklist.domain.task import parse_date
from tasklist.domain.time_of_day import TimeOfDay
from tasklist.ports.terminal import Terminal

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# Prompty walidujące (services/prompts.py).
# ==========================================================
# - Każdy prompt pyta w pętli, aż dostanie poprawną wartość; brak limitu prób.
# - Błędy walidacji z domeny są łapane tutaj i kończą się ponownym pytaniem.
# - Jedyny wyjątek, który wychodzi na zewnątrz, to EOFError z terminala (koniec wejścia).


def read_priority(terminal: Terminal) -> Priority:
    while True:
        terminal.print_line("Input the task priority (C, H, N, L):")
        try:
            return Priority.parse(terminal.read_line())
        except InvalidPriorityTokenError as e:
            logger.debug("Rejected priority: %s", e)


def read_date(terminal: Terminal) -> date:
    while True:
        terminal.print_line("Input the date (yyyy-mm-dd):")
        try:
            return parse_date(terminal.read_line())
        except InvalidDateError as e:
            logger.debug("Rejected date: %s", e)
            terminal.print_line("The input date is invalid")


def read_time(terminal: Terminal) -> TimeOfDay:
    while True:
        terminal.print_line("Input the time (hh:mm):")
        try:
            return TimeOfDay.parse(terminal.read_line())
        except InvalidTimeError as e:
            logger.debug("Rejected time: %s", e)
            terminal.print_line("The input time is invalid")


def read_description(terminal: Terminal) -> list[str]:
    """Zbiera linie opisu do pierwszej pustej linii; pusty opis jest dozwolony (z ostrzeżeniem)."""
    terminal.print_line("Input a new task (enter a blank line to end):")
    lines: list[str] = []
    raw = terminal.read_line()
    while raw.strip():
        lines.append(raw.strip())
        raw = terminal.read_line()
    if not lines:
        terminal.print_line("The task is blank")
    return lines


def parse_task_number(raw: str, size: int) -> int:
    """Zwraca numer zadania (1-based) albo rzuca `InvalidTaskNumberError`."""
    try:
        number = int(raw.strip())
    except ValueError:
        raise InvalidTaskNumberError(raw, size)
    if not 1 <= number <= size:
        raise InvalidTaskNumberError(number, size)
    return number


def read_task_number(terminal: Terminal, size: int) -> int:
    while True:
        terminal.print_line(f"Input the task number (1-{size}):")
        try:
            return parse_task_number(terminal.read_line(), size)
        except InvalidTaskNumberError as e:
            logger.debug("Rejected task number: %s", e)
            terminal.print_line("Invalid task number")
