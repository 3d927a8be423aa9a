from infra.db.assignment.mapper import assignment_from_orm, assignment_to_orm
from infra.db.assignment.repository import SqlAlchemyAssignmentRepository

__all__ = [
    "assignment_to_orm",
    "assignment_from_orm",
    "SqlAlchemyAssignmentRepository",
]
