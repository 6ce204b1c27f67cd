from typing import Protocol

class IdProvider(Protocol):
    """Port generujący identyfikatory zadań. Unikalność nie jest gwarantowana."""
    def new_id(self) -> int:
        pass
