from enum import Enum

from rich.style import Style

from tasklist.domain.enums import Priority, Urgency


class CellColor(Enum):
    """Tła komórek P i D. W trybie 16 kolorów rich wypisuje je jako ESC[101m..ESC[104m."""
    RED = Style(bgcolor="bright_red")
    YELLOW = Style(bgcolor="bright_yellow")
    GREEN = Style(bgcolor="bright_green")
    BLUE = Style(bgcolor="bright_blue")

    def __str__(self):
        return str(self.value)


PRIORITY_COLORS: dict[Priority, CellColor] = {
    Priority.CRITICAL: CellColor.RED,
    Priority.HIGH: CellColor.YELLOW,
    Priority.NORMAL: CellColor.GREEN,
    Priority.LOW: CellColor.BLUE,
}

URGENCY_COLORS: dict[Urgency, CellColor] = {
    Urgency.IN_TIME: CellColor.GREEN,
    Urgency.DUE: CellColor.YELLOW,
    Urgency.OVERDUE: CellColor.RED,
}
