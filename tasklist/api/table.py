from datetime import date
from typing import Sequence

from rich.text import Text

from tasklist.api.colors import PRIORITY_COLORS, URGENCY_COLORS
from tasklist.domain.task import Task
from tasklist.ports.terminal import Terminal


### COMMENTS
# ==========================================================
# Tabela zadań o stałej szerokości (api/table.py).
# ==========================================================
# Kolumny: N (4) | Date (12) | Time (7) | P (3) | D (3) | Task (44)
# - Ramki z "+" i "-", separatory kolumn "|".
# - P i D to pojedyncza spacja na kolorowym tle (rich.Style -> kody ANSI).
# - Każda linia opisu jest cięta na kawałki po 44 znaki; każdy wiersz poza pierwszym
#   zadania dostaje pusty prefiks zamiast powtórzonych komórek N/Date/Time/P/D.
# - Funkcje render_* nic nie wypisują; wypisuje tylko print_table przez port Terminal.

NUMBER_WIDTH = 4
DATE_WIDTH = 12
TIME_WIDTH = 7
PRIORITY_WIDTH = 3
URGENCY_WIDTH = 3
DESCRIPTION_WIDTH = 44

PREFIX_WIDTHS = (NUMBER_WIDTH, DATE_WIDTH, TIME_WIDTH, PRIORITY_WIDTH, URGENCY_WIDTH)
COLUMN_WIDTHS = PREFIX_WIDTHS + (DESCRIPTION_WIDTH,)
COLUMN_DELIMITER = "|"

EMPTY_NOTICE = "No tasks have been input"


def render_border() -> Text:
    return Text("+" + "+".join("-" * w for w in COLUMN_WIDTHS) + "+")


def render_header() -> Text:
    indent = (DESCRIPTION_WIDTH - len("Task")) // 2
    return Text(
        "| N  |    Date    | Time  | P | D |"
        + " " * (indent - 1) + "Task" + " " * (indent + 1)
        + COLUMN_DELIMITER
    )


def render_blank_prefix() -> Text:
    return Text("".join(COLUMN_DELIMITER + " " * w for w in PREFIX_WIDTHS))


def render_leading_cells(number: int, task: Task, today: date) -> Text:
    """Komórki N, Date, Time, P, D dla pierwszego wiersza zadania."""
    cells = Text(f"| {number:<3}| {task.due_date.isoformat()} | {task.time} | ")
    cells.append(" ", style=PRIORITY_COLORS[task.priority].value)
    cells.append(" | ")
    cells.append(" ", style=URGENCY_COLORS[task.urgency(today)].value)
    cells.append(" ")
    return cells


def chunk_line(line: str, width: int = DESCRIPTION_WIDTH) -> list[str]:
    """Twarde cięcie linii na kawałki o długości `width` (ostatni może być krótszy)."""
    return [line[i:i + width] for i in range(0, len(line), width)] or [""]


def render_task(number: int, task: Task, today: date) -> list[Text]:
    rows: list[Text] = []
    for line in task.lines or [""]:
        for chunk in chunk_line(line):
            prefix = render_leading_cells(number, task, today) if not rows else render_blank_prefix()
            rows.append(prefix + Text(COLUMN_DELIMITER + chunk.ljust(DESCRIPTION_WIDTH) + COLUMN_DELIMITER))
    rows.append(render_border())
    return rows


def render_table(tasks: Sequence[Task], today: date) -> list[Text]:
    """Zwraca wszystkie wiersze tabeli (ramki, nagłówek, zadania) jako `rich.text.Text`.

    :param tasks: Zadania w kolejności wyświetlania; numeracja od 1.
    :param today: Data, względem której liczona jest kolumna D (urgency).
    :return: Lista wierszy; pusta, gdy `tasks` jest puste.
    """
    if not tasks:
        return []
    rows = [render_border(), render_header(), render_border()]
    for number, task in enumerate(tasks, start=1):
        rows.extend(render_task(number, task, today))
    return rows


def print_table(terminal: Terminal, tasks: Sequence[Task], today: date) -> None:
    if not tasks:
        terminal.print_line(EMPTY_NOTICE)
        return
    for row in render_table(tasks, today):
        terminal.print_line(row)
