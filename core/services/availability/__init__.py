from .conflicts import find_conflicts
from .models import ConflictRecord, DayAvailability, UnavailabilityResult
from .service import AvailabilityService, as_unavailability_type

__all__ = [
    "AvailabilityService",
    "ConflictRecord",
    "DayAvailability",
    "UnavailabilityResult",
    "as_unavailability_type",
    "find_conflicts",
]
