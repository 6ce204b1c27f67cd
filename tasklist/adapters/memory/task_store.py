from copy import deepcopy
from typing import Iterable, Sequence

from tasklist.domain.task import Task

### COMMENTS
# ==========================================================
# Adapter pamięciowy magazynu zadań (adapters/memory/task_store.py).
# ==========================================================
# - Służy do testów i trybu `--store memory` (brak trwałości między uruchomieniami).
# - Trzyma głęboką kopię listy, więc późniejsze zmiany w sesji nie przeciekają do "zapisu".


class InMemoryTaskStore:
    """
        Magazyn w pamięci z opcjonalną listą startową.
        :param initial: Iterable z obiektami Task do wstępnego załadowania.
    """
    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self._data: list[Task] = deepcopy(list(initial or []))
        self.save_count = 0

    def load(self) -> list[Task]:
        return deepcopy(self._data)

    def save(self, tasks: Sequence[Task]) -> None:
        self._data = deepcopy(list(tasks))
        self.save_count += 1
