from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator, List

from core.exceptions import InvalidRangeError, ValidationError
from core.models import DateRange


def coerce_date(value: object, *, field_name: str = "date") -> date:
    """Accept a date, a datetime (date part) or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise ValidationError(f"{field_name} must be a calendar date, got {value!r}.", code="INVALID_DATE")


def _check_order(start: date, end: date) -> None:
    if end < start:
        raise InvalidRangeError(
            f"End date {end.isoformat()} precedes start date {start.isoformat()}.",
            code="INVALID_DATE_RANGE",
        )


def iter_date_range(start: date, end: date) -> Iterator[date]:
    _check_order(start, end)
    return _walk(start, end)


def _walk(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def expand_date_range(start: date, end: date) -> List[date]:
    """Every calendar date from start to end inclusive, ascending."""
    return list(iter_date_range(start, end))


def ranges_overlap(a: DateRange, b: DateRange) -> bool:
    # closed intervals: sharing a single boundary day counts
    return a.start <= b.end and b.start <= a.end


def make_range(start: object, end: object) -> DateRange:
    return DateRange(coerce_date(start, field_name="start_date"), coerce_date(end, field_name="end_date"))


__all__ = [
    "coerce_date",
    "iter_date_range",
    "expand_date_range",
    "ranges_overlap",
    "make_range",
]
