from typing import Protocol
from datetime import date, datetime, timezone

class Clock(Protocol):
    """Abstrakcja źródła czasu. Zwraca czas w strefie UTC (aware)."""
    def now(self) -> datetime:
        pass


def today_utc(clock: Clock) -> date:
    """Data kalendarzowa "dzisiaj" w UTC+0 według podanego zegara."""
    return clock.now().astimezone(timezone.utc).date()
