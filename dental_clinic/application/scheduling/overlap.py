from .time_arithmetic import date_time_to_absolute_minutes


def appointments_overlap(
    date_a: str,
    start_a: str,
    duration_a: int,
    date_b: str,
    start_b: str,
    duration_b: int,
) -> bool:
    """Return True if two appointments intersect as half-open [start, end) ranges.

    Back-to-back appointments (one ends exactly when the other starts) do not
    overlap. Dates are part of the comparison, so ranges crossing midnight are
    handled.
    """
    start_a_abs = date_time_to_absolute_minutes(date_a, start_a)
    end_a_abs = start_a_abs + duration_a
    start_b_abs = date_time_to_absolute_minutes(date_b, start_b)
    end_b_abs = start_b_abs + duration_b

    return start_a_abs < end_b_abs and start_b_abs < end_a_abs
