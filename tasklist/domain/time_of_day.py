from tasklist.domain.errors import InvalidTimeComponentError, InvalidTimeError


def _normalize(component: str, value: str, upper: int) -> str:
    text = str(value).strip()
    if not text.isascii() or not text.isdigit():
        raise InvalidTimeComponentError(component, value)
    number = int(text)
    if number > upper:
        raise InvalidTimeComponentError(component, value)
    return f"{number:02d}"


class TimeOfDay:
    """
    Godzina i minuta zadania, przechowywane jako dwucyfrowe napisy ("09", "05").

    Każde przypisanie waliduje wartość; przy błędzie rzuca `InvalidTimeComponentError`
    i zostawia poprzednią wartość. Konstrukcja z niepoprawnym składnikiem nie tworzy obiektu.
    """

    def __init__(self, hours: str, minutes: str) -> None:
        self.hours = hours
        self.minutes = minutes

    @property
    def hours(self) -> str:
        return self._hours

    @hours.setter
    def hours(self, value: str) -> None:
        self._hours = _normalize("hours", value, 23)

    @property
    def minutes(self) -> str:
        return self._minutes

    @minutes.setter
    def minutes(self, value: str) -> None:
        self._minutes = _normalize("minutes", value, 59)

    @classmethod
    def parse(cls, raw: str) -> "TimeOfDay":
        """Parsuje wpis `hh:mm`; rzuca `InvalidTimeError` przy złej liczbie części lub zakresie."""
        parts = raw.split(":")
        if len(parts) != 2:
            raise InvalidTimeError(raw)
        try:
            return cls(parts[0], parts[1])
        except InvalidTimeComponentError:
            raise InvalidTimeError(raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return (self.hours, self.minutes) == (other.hours, other.minutes)

    def __hash__(self) -> int:
        return hash((self.hours, self.minutes))

    def __repr__(self) -> str:
        return f"TimeOfDay(hours={self.hours!r}, minutes={self.minutes!r})"

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes}"
