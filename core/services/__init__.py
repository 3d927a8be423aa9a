from .assignment import AssignmentService
from .availability import AvailabilityService
from .calendar import UniformDayPolicy, WorkingCalendarPolicy, WorkingDayPolicy
from .resource import ResourceService
from .utilization import UtilizationService

__all__ = [
    "ResourceService",
    "AssignmentService",
    "AvailabilityService",
    "UtilizationService",
    "WorkingDayPolicy",
    "UniformDayPolicy",
    "WorkingCalendarPolicy",
]
