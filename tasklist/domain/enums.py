from enum import Enum

from tasklist.domain.errors import InvalidFieldNameError, InvalidPriorityTokenError


class Command(str, Enum):
    ADD = "add"
    PRINT = "print"
    EDIT = "edit"
    DELETE = "delete"
    END = "end"

    def __str__(self):
        return self.value

    @classmethod
    def names(cls) -> list[str]:
        return [c.value for c in cls]


class Priority(str, Enum):
    CRITICAL = "C"
    HIGH = "H"
    NORMAL = "N"
    LOW = "L"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, token: str) -> "Priority":
        """Zamienia symbol wpisany przez użytkownika (bez względu na wielkość liter) na Priority."""
        try:
            return cls(token.strip().upper())
        except ValueError:
            raise InvalidPriorityTokenError(token)


class Urgency(str, Enum):
    IN_TIME = "I"
    DUE = "T"
    OVERDUE = "O"

    def __str__(self):
        return self.value


class EditableField(str, Enum):
    PRIORITY = "priority"
    DATE = "date"
    TIME = "time"
    DESCRIPTION = "task"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, name: str) -> "EditableField":
        try:
            return cls(name)
        except ValueError:
            raise InvalidFieldNameError(name)
