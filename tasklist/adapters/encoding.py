from datetime import date


def encode_date(value: date) -> str:
    """Data jako trzy liczby rozdzielone przecinkami, np. "2024,3,15"."""
    return f"{value.year},{value.month},{value.day}"


def decode_date(raw: str) -> date:
    year, month, day = (int(p) for p in raw.split(","))
    return date(year, month, day)


def decode_lines(value: object) -> list[str]:
    """Opis zadania musi być listą napisów; inaczej ValueError."""
    if not isinstance(value, list) or not all(isinstance(line, str) for line in value):
        raise ValueError("description must be a list of strings")
    return list(value)
