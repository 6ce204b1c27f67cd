from tasklist.ports.task_store import TaskStore
from tasklist.domain.task import Task, TaskId
from tasklist.domain.errors import PersistenceUnavailableError, DomainError
from tasklist.domain.enums import Priority
from tasklist.domain.time_of_day import TimeOfDay
from pathlib import Path
from typing import Sequence
from tasklist.adapters.encoding import encode_date, decode_date, decode_lines
import os, json, logging

logger = logging.getLogger(__name__)


def _encode_task(task: Task) -> dict:
    return {
        "id": int(task.task_id),
        "priority": task.priority.value,  # enum -> str
        "date": encode_date(task.due_date),
        "time": {"hours": task.time.hours, "minutes": task.time.minutes},
        "task": list(task.lines),
    }


def _decode_task(row: dict) -> Task:
    if not isinstance(row, dict):
        raise ValueError("record must be a JSON object")
    return Task(
        task_id=TaskId(int(row["id"])),
        priority=Priority(row["priority"]),  # str -> enum
        due_date=decode_date(row["date"]),
        time=TimeOfDay(row["time"]["hours"], row["time"]["minutes"]),
        lines=decode_lines(row.get("task", [])),
    )


class JsonlTaskStore(TaskStore):
    def __init__(self, path: Path) -> None:
        """Inicjalizuje magazyn JSONL (jedno zadanie na linię).
        Tworzy katalog nadrzędny dla pliku, jeśli nie istnieje."""
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> list[Task]:
        """Zwraca zadania w kolejności z pliku.
        Brak pliku -> pusta lista; uszkodzony wpis -> PersistenceUnavailableError."""
        tasks: list[Task] = []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                for lineno, line in enumerate(f, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        record = json.loads(line)
                    except json.JSONDecodeError as e:
                        raise PersistenceUnavailableError(str(self.path), f"line {lineno}: invalid JSON: {e}")

                    try:
                        tasks.append(_decode_task(record))
                    except (KeyError, TypeError, ValueError, AttributeError, DomainError) as e:
                        raise PersistenceUnavailableError(str(self.path), f"line {lineno}: {e}")
        except FileNotFoundError:
            logger.debug("No task file at %s", self.path)
            return []
        except OSError as e:
            raise PersistenceUnavailableError(str(self.path), str(e))
        logger.debug("Read %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        """Zapisuje całą listę atomowo (plik tymczasowy + os.replace)."""
        tmp = self.path.with_suffix(self.path.suffix + ".swap")
        try:
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                for t in tasks:
                    f.write(json.dumps(_encode_task(t), ensure_ascii=False))
                    f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            try:
                if tmp.exists():
                    tmp.unlink()
            except OSError:
                logger.debug("Could not remove %s", tmp)
            raise PersistenceUnavailableError(str(self.path), str(e))
        logger.info("Saved %d task(s) to %s", len(tasks), self.path)
