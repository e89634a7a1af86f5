import pytest

from dental_clinic.application.scheduling.time_arithmetic import (
    MINUTES_PER_DAY,
    DateTime,
    time_to_minutes,
    date_time_to_absolute_minutes,
    format_absolute_minutes_to_time,
)
from dental_clinic.application.scheduling.overlap import appointments_overlap


def test_time_to_minutes():
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("09:30") == 570
    assert time_to_minutes("23:59") == 23 * 60 + 59


def test_time_to_minutes_rejects_garbage():
    with pytest.raises(ValueError):
        time_to_minutes("nine:thirty")


def test_epoch_is_day_zero():
    assert date_time_to_absolute_minutes("1970-01-01", "00:00") == 0
    assert date_time_to_absolute_minutes("1970-01-02", "00:30") == MINUTES_PER_DAY + 30


def test_absolute_minutes_order_across_midnight():
    late = date_time_to_absolute_minutes("2024-01-01", "23:45")
    early_next_day = date_time_to_absolute_minutes("2024-01-02", "00:15")
    assert late < early_next_day
    assert early_next_day - late == 30


@pytest.mark.parametrize("date, time", [
    ("2024-01-01", "09:00"),
    ("2024-02-29", "23:59"),
    ("2023-12-31", "00:00"),
    ("1999-07-04", "12:05"),
])
def test_format_is_inverse(date, time):
    assert format_absolute_minutes_to_time(date_time_to_absolute_minutes(date, time)) == DateTime(date=date, time=time)


def test_end_time_rolls_into_next_day_and_leap_day():
    end = date_time_to_absolute_minutes("2024-02-28", "23:30") + 60
    assert format_absolute_minutes_to_time(end) == ("2024-02-29", "00:30")
    end = date_time_to_absolute_minutes("2023-02-28", "23:30") + 60
    assert format_absolute_minutes_to_time(end) == ("2023-03-01", "00:30")


def test_overlap_is_half_open():
    # back-to-back
    assert appointments_overlap("2024-01-01", "09:00", 30, "2024-01-01", "09:30", 30) is False
    assert appointments_overlap("2024-01-01", "09:00", 30, "2024-01-01", "09:29", 30) is True


def test_overlap_is_symmetric():
    pairs = [
        (("2024-01-01", "09:00", 30), ("2024-01-01", "09:15", 30)),
        (("2024-01-01", "09:00", 30), ("2024-01-01", "09:30", 30)),
        (("2024-01-01", "23:45", 60), ("2024-01-02", "00:15", 30)),
        (("2024-01-01", "10:00", 0), ("2024-01-01", "09:30", 60)),
        (("2024-01-01", "10:00", 15), ("2024-01-03", "10:00", 15)),
    ]
    for a, b in pairs:
        assert appointments_overlap(*a, *b) == appointments_overlap(*b, *a)


def test_zero_duration_only_overlaps_from_inside():
    assert appointments_overlap("2024-01-01", "10:00", 0, "2024-01-01", "09:30", 60) is True
    assert appointments_overlap("2024-01-01", "10:00", 0, "2024-01-01", "10:00", 30) is False
    assert appointments_overlap("2024-01-01", "10:30", 0, "2024-01-01", "10:00", 30) is False


def test_overlap_across_midnight():
    assert appointments_overlap("2024-01-01", "23:45", 60, "2024-01-02", "00:15", 30) is True
    assert appointments_overlap("2024-01-01", "23:45", 15, "2024-01-02", "00:00", 30) is False
