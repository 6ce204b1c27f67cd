from typing import Protocol

from rich.text import Text


class Terminal(Protocol):
    """Port wejścia/wyjścia linia po linii.

    Wszystkie prompty czytają przez `read_line`, a tabela i komunikaty idą przez `print_line`.
    """

    def read_line(self) -> str:
        """Blokująco czyta jedną linię (bez znaku nowej linii).

        Wyjątki:
            EOFError: Gdy wejście się skończyło.
        """

    def print_line(self, text: str | Text = "") -> None:
        """Wypisuje jedną linię tekstu (zwykły napis albo `rich.text.Text` ze stylami)."""
