from typing import Protocol, Sequence
from tasklist.domain.task import Task


### COMMENTS
# ==========================================================
# Kontrakt magazynu zadań (ports/task_store.py).
# ==========================================================
# - Lista zadań żyje w pamięci przez całą sesję; magazyn tylko ją wczytuje na starcie
#   i zapisuje raz, przy wyjściu.
# - Kolejność zadań jest częścią danych (numery w tabeli są pozycjami).
# - Adaptery mapują błędy technologiczne na PersistenceUnavailableError.


class TaskStore(Protocol):
    """Interfejs trwałości całej kolekcji `Task`."""

    def load(self) -> list[Task]:
        """Wczytuje wszystkie zadania w zapisanej kolejności.

        Zwraca:
            list[Task]: Zadania; pusta lista, gdy źródło jeszcze nie istnieje.

        Wyjątki domenowe:
            PersistenceUnavailableError: Gdy źródło istnieje, ale jest uszkodzone lub nieczytelne.
        """

    def save(self, tasks: Sequence[Task]) -> None:
        """Zastępuje zapisaną kolekcję podaną listą.

        Wyjątki domenowe:
            PersistenceUnavailableError: Gdy zapis się nie powiódł.

        Uwagi:
            Operacja powinna być atomowa (po błędzie zostaje poprzednia zawartość).
        """
