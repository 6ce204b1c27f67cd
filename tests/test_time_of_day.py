import pytest

from tasklist.domain.errors import InvalidTimeComponentError, InvalidTimeError
from tasklist.domain.time_of_day import TimeOfDay


@pytest.mark.parametrize(
    "hours, minutes, expected",
    [("9", "5", "09:05"), ("23", "59", "23:59"), ("0", "0", "00:00"), ("07", "30", "07:30")],
)
def test_renders_two_digit_components(hours, minutes, expected):
    assert str(TimeOfDay(hours, minutes)) == expected


@pytest.mark.parametrize(
    "hours, minutes",
    [("24", "00"), ("12", "60"), ("-1", "10"), ("ab", "10"), ("10", ""), ("1.5", "10")],
)
def test_out_of_range_or_non_numeric_fails(hours, minutes):
    with pytest.raises(InvalidTimeComponentError):
        TimeOfDay(hours, minutes)


def test_failed_assignment_keeps_previous_value():
    # Arrange
    t = TimeOfDay("8", "15")

    # Act
    with pytest.raises(InvalidTimeComponentError):
        t.hours = "25"
    with pytest.raises(InvalidTimeComponentError):
        t.minutes = "x"

    # Assert
    assert t.hours == "08"
    assert t.minutes == "15"


def test_parse_accepts_hh_mm():
    assert TimeOfDay.parse("9:5") == TimeOfDay("09", "05")


@pytest.mark.parametrize("raw", ["930", "9:30:00", "", "25:00", "12:61", "ab:cd"])
def test_parse_rejects_bad_input(raw):
    with pytest.raises(InvalidTimeError):
        TimeOfDay.parse(raw)


def test_equal_values_hash_alike():
    assert hash(TimeOfDay("9", "5")) == hash(TimeOfDay("09", "05"))
    assert len({TimeOfDay("9", "5"), TimeOfDay("09", "05"), TimeOfDay("10", "00")}) == 2
