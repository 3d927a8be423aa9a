from .models import AssignmentBooking, OverAllocationCheck, ScheduleConflict
from .service import AssignmentService, as_assignment_status

__all__ = ["AssignmentService", "AssignmentBooking", "OverAllocationCheck", "ScheduleConflict", "as_assignment_status"]
