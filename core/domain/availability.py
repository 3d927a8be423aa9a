from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

from core.domain.enums import UnavailabilityType


@dataclass
class UnavailabilityRecord:
    """One non-available day of a resource. Keyed by (resource_id, date)."""

    resource_id: str
    date: date
    unavailability_type: UnavailabilityType = UnavailabilityType.OTHER
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @staticmethod
    def create(
        resource_id: str,
        day: date,
        unavailability_type: UnavailabilityType,
        notes: Optional[str] = None,
    ) -> "UnavailabilityRecord":
        return UnavailabilityRecord(
            resource_id=resource_id,
            date=day,
            unavailability_type=unavailability_type,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )


__all__ = ["UnavailabilityRecord"]
