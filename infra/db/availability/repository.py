from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import UnavailabilityRepository
from core.models import UnavailabilityRecord
from infra.db.availability.mapper import unavailability_from_orm, unavailability_to_orm
from infra.db.models import UnavailabilityORM


class SqlAlchemyUnavailabilityRepository(UnavailabilityRepository):
    def __init__(self, session: Session):
        self.session = session

    def upsert(self, record: UnavailabilityRecord) -> None:
        # last write wins for the (resource, day) key
        existing = self.session.get(UnavailabilityORM, (record.resource_id, record.date))
        if existing:
            fresh = unavailability_to_orm(record)
            existing.unavailability_type = fresh.unavailability_type
            existing.notes = fresh.notes
            existing.created_at = fresh.created_at
        else:
            self.session.add(unavailability_to_orm(record))

    def get(self, resource_id: str, day: date) -> Optional[UnavailabilityRecord]:
        obj = self.session.get(UnavailabilityORM, (resource_id, day))
        return unavailability_from_orm(obj) if obj else None

    def list_for_resource(self, resource_id: str, start_date: date, end_date: date) -> List[UnavailabilityRecord]:
        return self.list_for_resources([resource_id], start_date, end_date)

    def list_for_resources(
        self, resource_ids: Iterable[str], start_date: date, end_date: date
    ) -> List[UnavailabilityRecord]:
        ids = list(resource_ids)
        if not ids:
            return []
        stmt = (
            select(UnavailabilityORM)
            .where(
                UnavailabilityORM.resource_id.in_(ids),
                UnavailabilityORM.day >= start_date,
                UnavailabilityORM.day <= end_date,
            )
            .order_by(UnavailabilityORM.resource_id, UnavailabilityORM.day)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [unavailability_from_orm(row) for row in rows]

    def delete_range(self, resource_id: str, start_date: date, end_date: date) -> int:
        return (
            self.session.query(UnavailabilityORM)
            .filter(
                UnavailabilityORM.resource_id == resource_id,
                UnavailabilityORM.day >= start_date,
                UnavailabilityORM.day <= end_date,
            )
            .delete(synchronize_session="fetch")
        )


__all__ = ["SqlAlchemyUnavailabilityRepository"]
