from datetime import date
from io import StringIO

from rich.console import Console

from tasklist.adapters.system.terminal_rich import RichTerminal
from tasklist.api.table import (
    EMPTY_NOTICE,
    chunk_line,
    print_table,
    render_blank_prefix,
    render_border,
    render_header,
    render_table,
)
from tasklist.domain.enums import Priority
from tasklist.domain.task import Task, TaskId
from tasklist.domain.time_of_day import TimeOfDay

from fakes import FakeTerminal

TODAY = date(2024, 3, 15)
BORDER = "+----+------------+-------+---+---+--------------------------------------------+"


def make_task(lines, priority=Priority.CRITICAL, due=date(2024, 3, 20)) -> Task:
    return Task(task_id=TaskId(42), priority=priority, due_date=due, time=TimeOfDay("9", "5"), lines=lines)


def test_border_and_header_have_fixed_widths():
    assert render_border().plain == BORDER
    header = render_header().plain
    assert header.startswith("| N  |    Date    | Time  | P | D |")
    assert header.endswith("|")
    assert len(header) == len(BORDER)
    assert header[34:].strip("|").strip() == "Task"


def test_empty_collection_prints_single_notice():
    terminal = FakeTerminal()

    print_table(terminal, [], TODAY)

    assert terminal.lines == [EMPTY_NOTICE]
    assert render_table([], TODAY) == []


def test_single_task_layout():
    # Act
    rows = [r.plain for r in render_table([make_task(["Buy milk"])], TODAY)]

    # Assert
    assert rows[0] == BORDER
    assert rows[2] == BORDER
    assert rows[3] == "| 1  | 2024-03-20 | 09:05 |   |   |" + "Buy milk".ljust(44) + "|"
    assert rows[4] == BORDER
    assert len(rows) == 5


def test_long_line_wraps_with_blank_prefix():
    # Arrange
    text = "x" * 44 + "y" * 10
    task = make_task([text, "second line"])

    # Act
    rows = [r.plain for r in render_table([task], TODAY)][3:]

    # Assert
    blank = render_blank_prefix().plain
    assert rows[0].endswith("|" + "x" * 44 + "|")
    assert rows[0].startswith("| 1  |")
    assert rows[1] == blank + "|" + ("y" * 10).ljust(44) + "|"
    assert rows[2] == blank + "|" + "second line".ljust(44) + "|"
    assert rows[3] == BORDER
    assert "42" not in rows[1] and "2024" not in rows[1]
    assert all(len(r) == len(BORDER) for r in rows)


def test_order_numbers_are_one_based_and_padded():
    tasks = [make_task([f"task {i}"]) for i in range(10)]

    rows = [r.plain for r in render_table(tasks, TODAY)]

    numbered = [r[:5] for r in rows if r.startswith("| ") and "Date" not in r]
    assert numbered[0] == "| 1  "
    assert numbered[9] == "| 10 "


def test_task_without_description_still_gets_a_row():
    rows = [r.plain for r in render_table([make_task([])], TODAY)]

    assert rows[3].startswith("| 1  | 2024-03-20 |")
    assert rows[3].endswith("|" + " " * 44 + "|")
    assert rows[4] == BORDER


def test_priority_and_urgency_cells_are_colored():
    # Arrange
    task = make_task(["Pay bills"], priority=Priority.LOW, due=date(2024, 3, 1))

    # Act
    row = render_table([task], TODAY)[3]

    # Assert
    styles = [str(span.style) for span in row.spans]
    assert styles == ["on bright_blue", "on bright_red"]


def test_print_table_emits_ansi_background_codes():
    # Arrange
    out = StringIO()
    console = Console(file=out, force_terminal=True, color_system="standard", width=200)
    task = make_task(["Call mom"], priority=Priority.HIGH, due=TODAY)

    # Act
    print_table(RichTerminal(console), [task], TODAY)

    # Assert
    text = out.getvalue()
    assert "\x1b[103m" in text
    assert "Call mom" in text


def test_chunk_line():
    assert chunk_line("abcdef", 4) == ["abcd", "ef"]
    assert chunk_line("", 4) == [""]
