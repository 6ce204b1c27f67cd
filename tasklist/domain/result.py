from dataclasses import dataclass


@dataclass(frozen=True)
class EditResult:
    """Wynik próby edycji pola zadania: sukces albo porażka z czytelnym powodem."""
    success: bool
    reason: str | None = None

    @classmethod
    def ok(cls) -> "EditResult":
        return cls(True)

    @classmethod
    def fail(cls, reason: str) -> "EditResult":
        return cls(False, reason)
