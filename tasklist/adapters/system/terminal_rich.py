from rich.console import Console
from rich.text import Text

from tasklist.ports.terminal import Terminal


class RichTerminal(Terminal):
    """Terminal oparty o `rich.console.Console`.

    Tekst wypisywany jest bez interpretacji markupu i bez łamania linii,
    bo tabela ma stałą szerokość. Domyślna konsola zawsze emituje kody ANSI
    w trybie 16 kolorów, także poza TTY.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(force_terminal=True, color_system="standard")

    def read_line(self) -> str:
        return self.console.input()

    def print_line(self, text: str | Text = "") -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)
