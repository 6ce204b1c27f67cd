import logging

from tasklist.api.table import print_table
from tasklist.domain.enums import EditableField
from tasklist.domain.errors import (
    EmptyCollectionError,
    InvalidFieldNameError,
    InvalidTaskNumberError,
    PersistenceUnavailableError,
)
from tasklist.domain.result import EditResult
from tasklist.domain.task import (
    DateEdit,
    DescriptionEdit,
    FieldEdit,
    PriorityEdit,
    Task,
    TaskId,
    TimeEdit,
)
from tasklist.ports.clock import Clock, today_utc
from tasklist.ports.id_provider import IdProvider
from tasklist.ports.task_store import TaskStore
from tasklist.ports.terminal import Terminal
from tasklist.services import prompts

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# Warstwa serwisowa (services/task_service.py) - przypadki użycia.
# ==========================================================
# Rola:
# - Orkiestracja add/print/edit/delete nad listą zadań trzymaną w pamięci.
# - Interakcja wyłącznie przez port Terminal; "dzisiaj" z portu Clock; id z IdProvider.
#
# Zasady:
# - Serwis nie zna adapterów; wczytanie/zapis przez port TaskStore robi CLI na starcie i przy wyjściu.
# - Błędy domenowe:
#     * Pusta lista przy print/edit/delete -> EmptyCollectionError (CLI pokazuje komunikat).
#     * Zła nazwa pola -> EditResult.fail("Invalid field"), bez zmiany zadania.
#     * Numer spoza 1..n w delete_at -> InvalidTaskNumberError, lista bez zmian.
# - Lista jest modyfikowana w miejscu, jednym wątkiem.


def load_tasks(store: TaskStore) -> list[Task]:
    """Wczytuje zadania; uszkodzony lub nieczytelny magazyn traktuje jak pustą listę."""
    try:
        tasks = store.load()
    except PersistenceUnavailableError as e:
        logger.warning("Starting with an empty task list: %s", e)
        return []
    logger.info("Loaded %d task(s)", len(tasks))
    return tasks


class TaskService:
    """
    Serwis przypadków użycia dla listy zadań.

    :param tasks: Lista zadań (modyfikowana w miejscu).
    :param terminal: Port wejścia/wyjścia dla promptów i tabeli.
    :param clock: Źródło czasu UTC (do kolumny urgency).
    :param id_provider: Generator identyfikatorów nowych zadań.
    """
    def __init__(self, tasks: list[Task], terminal: Terminal, clock: Clock, id_provider: IdProvider) -> None:
        self.tasks = tasks
        self.terminal = terminal
        self.clock = clock
        self.id_provider = id_provider

    def create_task(self) -> Task:
        """
            Tworzy nowe zadanie interaktywnie i dopisuje je na koniec listy.

            - Kolejno: priorytet, data, godzina, opis (każdy prompt pyta do skutku).
            - Pusty opis jest akceptowany (prompt wypisuje ostrzeżenie).

            :return: Utworzony obiekt `Task`.
        """
        priority = prompts.read_priority(self.terminal)
        due_date = prompts.read_date(self.terminal)
        time = prompts.read_time(self.terminal)
        lines = prompts.read_description(self.terminal)
        task = Task(
            task_id=TaskId(self.id_provider.new_id()),
            priority=priority,
            due_date=due_date,
            time=time,
            lines=lines,
        )
        self.tasks.append(task)
        logger.debug("Added task %s due %s %s", task.task_id, task.due_date, task.time)
        return task

    def print_tasks(self) -> None:
        """
            Wypisuje tabelę zadań.

            :raises EmptyCollectionError: Gdy lista jest pusta.
        """
        self._require_tasks()
        print_table(self.terminal, self.tasks, today_utc(self.clock))

    def read_field_edit(self, field: EditableField) -> FieldEdit:
        """Uruchamia prompt odpowiadający polu i zwraca gotowy wariant edycji."""
        match field:
            case EditableField.PRIORITY:
                return PriorityEdit(prompts.read_priority(self.terminal))
            case EditableField.DATE:
                return DateEdit(prompts.read_date(self.terminal))
            case EditableField.TIME:
                return TimeEdit(prompts.read_time(self.terminal))
            case EditableField.DESCRIPTION:
                return DescriptionEdit(tuple(prompts.read_description(self.terminal)))

    def try_edit_field(self, task: Task, field_name: str) -> EditResult:
        """
            Edytuje jedno pole zadania wskazane nazwą tekstową.

            - Dozwolone nazwy: "priority", "date", "time", "task".
            - Inna nazwa: zwraca `EditResult.fail("Invalid field")`, zadanie bez zmian.
            - Poprawna nazwa: prompt pyta do skutku, nowa wartość zastępuje starą.

            :param task: Zadanie do edycji (zmieniane w miejscu).
            :param field_name: Nazwa pola wpisana przez użytkownika.
            :return: Wynik edycji.
        """
        try:
            field = EditableField.parse(field_name)
        except InvalidFieldNameError as e:
            return EditResult.fail(str(e))
        task.apply(self.read_field_edit(field))
        return EditResult.ok()

    def edit_task(self) -> Task:
        """
            Workflow edycji: tabela, wybór numeru, pytanie o pole aż do udanej edycji.

            :raises EmptyCollectionError: Gdy lista jest pusta.
            :return: Zmienione zadanie.
        """
        self.print_tasks()
        number = prompts.read_task_number(self.terminal, len(self.tasks))
        task = self.tasks[number - 1]
        while True:
            self.terminal.print_line("Input a field to edit (priority, date, time, task):")
            result = self.try_edit_field(task, self.terminal.read_line())
            if result.success:
                break
            self.terminal.print_line(result.reason)
        self.terminal.print_line("The task is changed")
        return task

    def delete_at(self, number: int) -> Task:
        """
            Usuwa zadanie o numerze `number` (1-based), zachowując kolejność pozostałych.

            :raises InvalidTaskNumberError: Gdy numer jest spoza 1..n (lista bez zmian).
            :return: Usunięte zadanie.
        """
        if not 1 <= number <= len(self.tasks):
            raise InvalidTaskNumberError(number, len(self.tasks))
        return self.tasks.pop(number - 1)

    def delete_task(self) -> Task:
        """
            Workflow usuwania: tabela, wybór numeru, usunięcie.

            :raises EmptyCollectionError: Gdy lista jest pusta.
            :return: Usunięte zadanie.
        """
        self.print_tasks()
        number = prompts.read_task_number(self.terminal, len(self.tasks))
        task = self.delete_at(number)
        self.terminal.print_line("The task is deleted")
        return task

    def _require_tasks(self) -> None:
        if not self.tasks:
            raise EmptyCollectionError()
