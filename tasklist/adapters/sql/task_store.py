from __future__ import annotations
from typing import Sequence
import json
import logging
import sqlalchemy as db
from sqlalchemy.exc import SQLAlchemyError
from pathlib import Path
from tasklist.ports.task_store import TaskStore
from tasklist.domain.task import Task, TaskId
from tasklist.domain.enums import Priority
from tasklist.domain.time_of_day import TimeOfDay
from tasklist.domain.errors import PersistenceUnavailableError, DomainError
from tasklist.adapters.encoding import encode_date, decode_date, decode_lines

logger = logging.getLogger(__name__)


class SqlTaskStore(TaskStore):
    def __init__(self, url: str | Path) -> None:
        """
        url: np. 'sqlite:///data/tasks.db' lub Path do pliku (zostanie zrobiony URL)
        """
        if isinstance(url, Path):
            url.parent.mkdir(parents=True, exist_ok=True)
            self.url = f"sqlite:///{url}"
        else:
            self.url = url

        self.engine = db.create_engine(self.url, future=True)
        self.meta = db.MetaData()

        # kolejność zadań trzymana jawnie w kolumnie position
        self.tasks = db.Table(
            "tasks",
            self.meta,
            db.Column("position", db.Integer, primary_key=True, autoincrement=False),
            db.Column("task_id", db.Integer, nullable=False),
            db.Column("priority", db.String(1), nullable=False),   # 'C'/'H'/'N'/'L'
            db.Column("date", db.String, nullable=False),          # '2024,3,15'
            db.Column("hours", db.String(2), nullable=False),
            db.Column("minutes", db.String(2), nullable=False),
            db.Column("description", db.Text, nullable=False),     # JSON list linii
        )

    def _ensure_schema(self) -> None:
        # utwórz tabelę jeśli nie istnieje
        self.meta.create_all(self.engine)

    def _to_row(self, position: int, task: Task) -> dict:
        return {
            "position": position,
            "task_id": int(task.task_id),
            "priority": task.priority.value,
            "date": encode_date(task.due_date),
            "hours": task.time.hours,
            "minutes": task.time.minutes,
            "description": json.dumps(list(task.lines), ensure_ascii=False),
        }

    def _from_row(self, row) -> Task:
        return Task(
            task_id=TaskId(row["task_id"]),
            priority=Priority(row["priority"]),
            due_date=decode_date(row["date"]),
            time=TimeOfDay(row["hours"], row["minutes"]),
            lines=decode_lines(json.loads(row["description"])),
        )

    def load(self) -> list[Task]:
        stmt = db.select(self.tasks).order_by(self.tasks.c.position.asc())
        try:
            self._ensure_schema()
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
                tasks = [self._from_row(r) for r in rows]
        except (SQLAlchemyError, KeyError, TypeError, ValueError, AttributeError, DomainError) as e:
            raise PersistenceUnavailableError(self.url, str(e))
        logger.debug("Read %d task(s) from %s", len(tasks), self.url)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        rows = [self._to_row(i, t) for i, t in enumerate(tasks)]
        try:
            self._ensure_schema()
            with self.engine.begin() as conn:
                conn.execute(db.delete(self.tasks))
                if rows:
                    conn.execute(db.insert(self.tasks), rows)
        except SQLAlchemyError as e:
            raise PersistenceUnavailableError(self.url, str(e))
        logger.info("Saved %d task(s) to %s", len(rows), self.url)
