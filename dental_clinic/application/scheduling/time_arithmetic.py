from datetime import date, timedelta
from typing import NamedTuple

MINUTES_PER_DAY = 24 * 60

# Day 0 of the absolute-minute timeline
_EPOCH = date(1970, 1, 1)
_EPOCH_ORDINAL = _EPOCH.toordinal()


class DateTime(NamedTuple):
    date: str  # YYYY-MM-DD
    time: str  # HH:MM


def time_to_minutes(time: str) -> int:
    """Convert an HH:MM wall-clock time to minutes since midnight."""
    hours, minutes = (int(part) for part in time.split(":"))
    return hours * 60 + minutes


def date_time_to_absolute_minutes(date_str: str, time: str) -> int:
    """Place a (YYYY-MM-DD, HH:MM) pair on a single minute timeline.

    Days are counted with the proleptic Gregorian ordinal rather than epoch
    milliseconds, so the result does not depend on the local timezone or DST.
    Two pairs compare chronologically exactly as their absolute minutes compare.
    """
    year, month, day = (int(part) for part in date_str.split("-"))
    days_since_epoch = date(year, month, day).toordinal() - _EPOCH_ORDINAL
    return days_since_epoch * MINUTES_PER_DAY + time_to_minutes(time)


def format_absolute_minutes_to_time(absolute_minutes: int) -> DateTime:
    """Inverse of date_time_to_absolute_minutes, used for conflict messages."""
    day_offset, minutes_in_day = divmod(absolute_minutes, MINUTES_PER_DAY)
    hours, minutes = divmod(minutes_in_day, 60)
    result_date = _EPOCH + timedelta(days=day_offset)
    return DateTime(
        date=result_date.isoformat(),
        time=f"{hours:02d}:{minutes:02d}",
    )
