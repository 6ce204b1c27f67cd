import logging
from pathlib import Path

from tasklist.adapters.jsonl.task_store import JsonlTaskStore
from tasklist.adapters.memory.task_store import InMemoryTaskStore
from tasklist.adapters.sql.task_store import SqlTaskStore
from tasklist.config import Settings, StoreKind, build_store
from tasklist.logging_setup import setup_logging


def test_build_store_defaults_to_jsonl(tmp_path):
    store = build_store(Settings(file=tmp_path / "tasks.jsonl"))

    assert isinstance(store, JsonlTaskStore)
    assert store.path == tmp_path / "tasks.jsonl"


def test_build_store_sql_uses_sqlite_file_next_to_tasks_file(tmp_path):
    store = build_store(Settings(file=tmp_path / "tasks.jsonl", store=StoreKind.SQL))

    assert isinstance(store, SqlTaskStore)
    assert store.url == f"sqlite:///{tmp_path / 'tasks.db'}"


def test_build_store_memory():
    assert isinstance(build_store(Settings(store=StoreKind.MEMORY)), InMemoryTaskStore)


def test_setup_logging_writes_debug_to_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    log_file = tmp_path / "logs" / "tasklist.log"
    try:
        setup_logging(console_level="error", log_file=log_file)
        logging.getLogger("tasklist.test").debug("hello from test")
        for h in root.handlers:
            h.flush()
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)

    assert "hello from test" in Path(log_file).read_text(encoding="utf-8")
