from infra.db.availability.mapper import unavailability_from_orm, unavailability_to_orm
from infra.db.availability.repository import SqlAlchemyUnavailabilityRepository

__all__ = [
    "unavailability_to_orm",
    "unavailability_from_orm",
    "SqlAlchemyUnavailabilityRepository",
]
