from __future__ import annotations

from datetime import datetime, timezone

from core.models import UnavailabilityRecord, UnavailabilityType
from infra.db.models import UnavailabilityORM


def unavailability_to_orm(record: UnavailabilityRecord) -> UnavailabilityORM:
    return UnavailabilityORM(
        resource_id=record.resource_id,
        day=record.date,
        unavailability_type=record.unavailability_type,
        notes=record.notes,
        created_at=(record.created_at or datetime.now(timezone.utc)).replace(tzinfo=None),
    )


def unavailability_from_orm(obj: UnavailabilityORM) -> UnavailabilityRecord:
    return UnavailabilityRecord(
        resource_id=obj.resource_id,
        date=obj.day,
        unavailability_type=(
            UnavailabilityType(obj.unavailability_type)
            if obj.unavailability_type
            else UnavailabilityType.OTHER
        ),
        notes=obj.notes,
        created_at=obj.created_at,
    )


__all__ = ["unavailability_to_orm", "unavailability_from_orm"]
