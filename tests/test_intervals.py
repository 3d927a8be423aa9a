from datetime import date, datetime, timedelta

import pytest

from core.exceptions import InvalidRangeError, ValidationError
from core.models import DateRange
from core.services.calendar import coerce_date, expand_date_range, iter_date_range, make_range, ranges_overlap


def test_expand_date_range_is_inclusive_and_ascending():
    start, end = date(2025, 1, 28), date(2025, 2, 3)
    days = expand_date_range(start, end)

    assert len(days) == (end - start).days + 1
    assert days[0] == start and days[-1] == end
    assert all(b - a == timedelta(days=1) for a, b in zip(days, days[1:]))
    assert expand_date_range(start, end) == days


def test_single_day_range_yields_one_date():
    assert expand_date_range(date(2025, 1, 5), date(2025, 1, 5)) == [date(2025, 1, 5)]


def test_reversed_range_is_rejected_eagerly():
    with pytest.raises(InvalidRangeError) as exc:
        iter_date_range(date(2025, 1, 10), date(2025, 1, 9))
    assert exc.value.code == "INVALID_DATE_RANGE"

    with pytest.raises(InvalidRangeError):
        expand_date_range(date(2025, 1, 10), date(2025, 1, 9))


def test_leap_day_is_included():
    days = expand_date_range(date(2024, 2, 27), date(2024, 3, 1))
    assert date(2024, 2, 29) in days
    assert len(days) == 4


def test_ranges_overlap_is_symmetric_and_closed():
    a = DateRange(date(2025, 1, 10), date(2025, 1, 20))
    touching = DateRange(date(2025, 1, 20), date(2025, 1, 25))
    disjoint = DateRange(date(2025, 2, 1), date(2025, 2, 5))

    assert ranges_overlap(a, touching) and ranges_overlap(touching, a)
    assert not ranges_overlap(a, disjoint) and not ranges_overlap(disjoint, a)

    single = DateRange(date(2025, 1, 15), date(2025, 1, 15))
    assert ranges_overlap(a, single)


def test_date_range_intersection_and_contains():
    a = DateRange(date(2025, 1, 10), date(2025, 1, 20))
    b = DateRange(date(2025, 1, 15), date(2025, 1, 25))

    assert a.intersection(b) == DateRange(date(2025, 1, 15), date(2025, 1, 20))
    assert a.intersection(DateRange(date(2025, 2, 1), date(2025, 2, 2))) is None
    assert a.contains(date(2025, 1, 10)) and not a.contains(date(2025, 1, 21))
    assert a.days == 11


def test_coerce_date_accepts_common_inputs():
    assert coerce_date("2025-03-04") == date(2025, 3, 4)
    assert coerce_date(datetime(2025, 3, 4, 15, 30)) == date(2025, 3, 4)
    assert make_range("2025-03-01", date(2025, 3, 2)).days == 2

    with pytest.raises(ValidationError) as exc:
        coerce_date("04/03/2025")
    assert exc.value.code == "INVALID_DATE"
    with pytest.raises(ValidationError):
        coerce_date(None)
