

### COMMENTS
# ============================================
# Konwencja użycia błędów domenowych w projekcie
# ============================================
# - Domena (TimeOfDay, parsery pól):
#     * rzuca konkretne błędy walidacji (InvalidDateError, InvalidTimeError, ...)
#
# - Prompty (services/prompts.py):
#     * łapią błędy walidacji i pytają ponownie; nic nie wychodzi wyżej
#
# - Serwis:
#     * InvalidFieldNameError zamienia na EditResult.fail("Invalid field")
#     * pusta lista -> EmptyCollectionError
#
# - Adaptery (store):
#     * mapują błędy techniczne (OSError, JSONDecodeError, SQLAlchemyError) na PersistenceUnavailableError
#
# - UI (CLI):
#     * łapie DomainError i wyświetla przyjazny komunikat


class DomainError(Exception):
    """Bazowa klasa dla błędów domenowych.
    Umożliwia odróżnienie błędów domeny (logika aplikacji) od błędów technicznych.
    Nie powinna być rzucana bezpośrednio - używaj klas pochodnych.
    """


class InvalidTimeComponentError(DomainError):
    """Rzucany, gdy godzina lub minuta nie jest liczbą albo jest poza zakresem
    (godziny 0-23, minuty 0-59). Zgłaszany przez `TimeOfDay`.
    """
    def __init__(self, component: str, value: str):
        self.component = component
        self.value = value
        super().__init__(self.__str__())
    def __str__(self):
        return f"Invalid {self.component} value: {self.value!r}"


class InvalidDateError(DomainError):
    """Rzucany, gdy wpis nie tworzy poprawnej daty kalendarzowej (np. miesiąc 13, 30 lutego)."""
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(self.__str__())
    def __str__(self):
        return f"The input date is invalid: {self.raw!r}"


class InvalidTimeError(DomainError):
    """Rzucany, gdy wpis `hh:mm` nie ma dokładnie dwóch części albo któraś jest poza zakresem."""
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(self.__str__())
    def __str__(self):
        return f"The input time is invalid: {self.raw!r}"


class InvalidPriorityTokenError(DomainError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(self.__str__())
    def __str__(self):
        return f"Unknown priority: {self.token!r}"


class InvalidFieldNameError(DomainError):
    """Rzucany, gdy edycja wskazuje pole spoza zestawu priority/date/time/task.
    Serwis zamienia go na nieudany `EditResult` z powodem "Invalid field".
    """
    def __init__(self, field: str):
        self.field = field
        super().__init__(self.__str__())
    def __str__(self):
        return "Invalid field"


class InvalidTaskNumberError(DomainError):
    """Rzucany, gdy numer zadania (1-based) nie jest liczbą lub wykracza poza listę."""
    def __init__(self, number: object, size: int):
        self.number = number
        self.size = size
        super().__init__(self.__str__())
    def __str__(self):
        return f"Invalid task number: {self.number!r} (expected 1-{self.size})"


class EmptyCollectionError(DomainError):
    def __str__(self):
        return "No tasks have been input"


class PersistenceUnavailableError(DomainError):
    """Rzucany przez adaptery `TaskStore`, gdy nie da się odczytać lub zapisać listy zadań.
    Przy odczycie serwis traktuje go jak pustą listę; przy zapisie CLI kończy się kodem 1.
    """
    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(self.__str__())
    def __str__(self):
        return f"Task store {self.source} unavailable: {self.reason}"
