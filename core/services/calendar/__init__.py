from .intervals import coerce_date, expand_date_range, iter_date_range, make_range, ranges_overlap
from .policy import UniformDayPolicy, WorkingCalendarPolicy, WorkingDayPolicy

__all__ = [
    "coerce_date",
    "expand_date_range",
    "iter_date_range",
    "make_range",
    "ranges_overlap",
    "WorkingDayPolicy",
    "UniformDayPolicy",
    "WorkingCalendarPolicy",
]
