from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    Czytelna konsola interaktywna:
    - logi tasklist przechodzą na skonfigurowanym poziomie
    - szum z bibliotek (sqlalchemy, py.warnings) dopiero od ERROR
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("tasklist."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    console_level: int | str = logging.WARNING,
    log_file: str | Path | None = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Konfiguruje logowanie:
    - handler konsolowy na stderr, filtrowany, żeby prompty na stdout były czytelne
    - opcjonalny handler plikowy z pełnymi logami (DEBUG)

    Wołać RAZ, przed pierwszą komendą.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # usuń wcześniejsze handlery, żeby nie dublować wpisów
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level if isinstance(console_level, int) else console_level.upper())
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # warnings.warn(...) trafia do logów jako 'py.warnings'
    logging.captureWarnings(True)
