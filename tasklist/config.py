"""Ustawienia aplikacji: jeden obiekt Settings budowany z opcji CLI (z fallbackiem na zmienne środowiskowe)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from tasklist.adapters.jsonl.task_store import JsonlTaskStore
from tasklist.adapters.memory.task_store import InMemoryTaskStore
from tasklist.adapters.sql.task_store import SqlTaskStore
from tasklist.ports.task_store import TaskStore

ENV_PREFIX = "TASKLIST"
DEFAULT_FILE = Path("tasklist.jsonl")


def env_name(suffix: str) -> str:
    """Nazwa zmiennej środowiskowej z prefiksem projektu."""
    return f"{ENV_PREFIX}_{suffix}"


class StoreKind(str, Enum):
    JSONL = "jsonl"
    SQL = "sql"
    MEMORY = "memory"

    def __str__(self):
        return self.value


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def __str__(self):
        return self.value


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Persistence ----
    file: Path = DEFAULT_FILE
    store: StoreKind = StoreKind.JSONL
    db_url: str | None = None

    # ---- Logging ----
    log_level: LogLevel = LogLevel.WARNING
    log_file: Path | None = None


def build_store(settings: Settings) -> TaskStore:
    """Tworzy magazyn na bazie ustawień.
    - memory -> InMemory (bez trwałości)
    - sql    -> SqlTaskStore (db_url albo plik SQLite obok `file`)
    - jsonl  -> JsonlTaskStore(file)
    """
    if settings.store is StoreKind.MEMORY:
        return InMemoryTaskStore()
    if settings.store is StoreKind.SQL:
        return SqlTaskStore(settings.db_url or settings.file.with_suffix(".db"))
    return JsonlTaskStore(settings.file)
