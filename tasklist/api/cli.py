from tasklist.domain.errors import DomainError, EmptyCollectionError, PersistenceUnavailableError
from tasklist.domain.enums import Command
from tasklist.services.task_service import TaskService, load_tasks
from tasklist.adapters.system.clock_system import SystemClock
from tasklist.adapters.system.id_provider_random import RandomIdProvider
from tasklist.adapters.system.terminal_rich import RichTerminal
from tasklist.api.table import print_table
from tasklist.ports.clock import today_utc
from tasklist.ports.task_store import TaskStore
from tasklist.config import LogLevel, Settings, StoreKind, DEFAULT_FILE, build_store, env_name
from tasklist.logging_setup import setup_logging
from typer import Context, Exit, Option, Typer
from rich.console import Console
from rich.panel import Panel
from pathlib import Path
from typing import Optional
import logging


### COMMENTS
# ==========================================================
# CLI (Typer + Rich) - interfejs użytkownika dla listy zadań.
# ==========================================================
# Rola:
# - `run` (domyślnie): pętla "Input an action (...)" mapująca słowa add/print/edit/delete/end
#   na metody TaskService.
# - `show`: jednorazowe wypisanie tabeli bez trybu interaktywnego.
# - Wczytanie listy na starcie i jeden zapis przy wyjściu (end albo koniec wejścia).
# - Łapie DomainError i drukuje przyjazne komunikaty.
#
# Zasady:
# - Zero logiki biznesowej - deleguj do TaskService.
# - Jednorazowy bootstrap ustawień i logowania w callbacku.

logger = logging.getLogger(__name__)

app = Typer(help="Tasklist CLI", no_args_is_help=False)
# tabela ma zawsze kolorowe komórki P/D (ESC[10Xm), także gdy wyjście idzie do pliku lub potoku
console = Console(force_terminal=True, color_system="standard")

settings: Settings = Settings()  # ustawimy w callbacku


@app.callback(invoke_without_command=True)
def main(
    ctx: Context,
    file: Path = Option(
        DEFAULT_FILE,
        "--file",
        "-f",
        envvar=env_name("FILE"),
        help="Ścieżka do pliku z zadaniami (JSONL; dla --store sql domyślna baza SQLite obok)",
    ),
    store: StoreKind = Option(
        StoreKind.JSONL,
        "--store",
        "-s",
        envvar=env_name("STORE"),
        help="Rodzaj magazynu: jsonl, sql albo memory",
    ),
    db_url: Optional[str] = Option(
        None,
        "--db-url",
        envvar=env_name("DB_URL"),
        help="URL bazy SQLAlchemy dla --store sql",
    ),
    log_level: LogLevel = Option(
        LogLevel.WARNING,
        "--log-level",
        case_sensitive=False,
        envvar=env_name("LOG_LEVEL"),
        help="Poziom logów na stderr",
    ),
    log_file: Optional[Path] = Option(None, "--log-file", envvar=env_name("LOG_FILE")),
) -> None:
    """Bootstrap ustawień i logowania na starcie procesu CLI."""
    global settings
    settings = Settings(file=file, store=store, db_url=db_url, log_level=log_level, log_file=log_file)
    setup_logging(console_level=log_level.value, log_file=log_file)
    logger.debug("Settings: %s", settings)
    if ctx.invoked_subcommand is None:
        run()


def error_panel(e: DomainError, title: str = "Błąd domenowy") -> Panel:
    return Panel.fit(f"❌ {e}", title=title, border_style="red")


def save_tasks(store: TaskStore, service: TaskService) -> None:
    """Jedyny zapis w sesji; błąd zapisu kończy proces kodem 1."""
    try:
        store.save(service.tasks)
    except PersistenceUnavailableError as e:
        console.print(error_panel(e, title="Błąd zapisu"))
        raise Exit(code=1)


def dispatch(service: TaskService, command: Command) -> None:
    match command:
        case Command.ADD:
            service.create_task()
        case Command.PRINT:
            service.print_tasks()
        case Command.EDIT:
            service.edit_task()
        case Command.DELETE:
            service.delete_task()


@app.command("run")
def run() -> None:
    """
    Interaktywna pętla listy zadań.

    Flow:
    - Wczytaj zadania (uszkodzony plik -> pusta lista + ostrzeżenie w logu).
    - Pytaj o akcję, aż użytkownik wpisze `end` albo skończy się wejście.
    - Zapisz listę raz, przy wyjściu.
    """
    store = build_store(settings)
    terminal = RichTerminal(console)
    service = TaskService(load_tasks(store), terminal, SystemClock(), RandomIdProvider())
    allowed = Command.names()

    try:
        while True:
            terminal.print_line(f"Input an action ({', '.join(allowed)}):")
            raw = terminal.read_line().strip()
            if raw not in allowed:
                terminal.print_line("The input action is invalid")
                continue
            command = Command(raw)
            if command is Command.END:
                terminal.print_line("Tasklist exiting!")
                break
            try:
                dispatch(service, command)
            except EmptyCollectionError as e:
                terminal.print_line(str(e))
            except DomainError as e:
                console.print(error_panel(e))
    except EOFError:
        logger.info("End of input, leaving the task loop")
        terminal.print_line("Tasklist exiting!")

    save_tasks(store, service)


@app.command("show")
def show() -> None:
    """
    Wypisuje tabelę zadań z magazynu i kończy działanie.

    - Pusta lista: komunikat "No tasks have been input".
    - Nieczytelny magazyn: czerwony Panel i kod wyjścia 1.
    """
    store = build_store(settings)
    try:
        tasks = store.load()
    except PersistenceUnavailableError as e:
        console.print(error_panel(e, title="Błąd odczytu"))
        raise Exit(code=1)
    print_table(RichTerminal(console), tasks, today_utc(SystemClock()))


if __name__ == "__main__":
    app()
