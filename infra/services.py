from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from core.services.assignment import AssignmentService
from core.services.availability import AvailabilityService
from core.services.calendar import UniformDayPolicy, WorkingCalendarPolicy, WorkingDayPolicy
from core.services.resource import ResourceService
from core.services.utilization import UtilizationService
from infra.db.base import SessionLocal, build_engine
from infra.db.repositories import (
    SqlAlchemyAssignmentRepository,
    SqlAlchemyResourceRepository,
    SqlAlchemySkillRepository,
    SqlAlchemyUnavailabilityRepository,
    SqlAlchemyWorkingCalendarRepository,
)
from infra.logging_config import setup_logging
from infra.migrate import run_migrations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    policy: WorkingDayPolicy
    resource_service: ResourceService
    assignment_service: AssignmentService
    availability_service: AvailabilityService
    utilization_service: UtilizationService
    working_calendar_repo: SqlAlchemyWorkingCalendarRepository

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "policy": self.policy,
            "resource_service": self.resource_service,
            "assignment_service": self.assignment_service,
            "availability_service": self.availability_service,
            "utilization_service": self.utilization_service,
            "working_calendar_repo": self.working_calendar_repo,
        }


def calendar_policy(session: Session, calendar_id: str = "default") -> WorkingCalendarPolicy:
    """Working-day policy backed by the stored calendar and its holidays."""
    return WorkingCalendarPolicy.from_repository(SqlAlchemyWorkingCalendarRepository(session), calendar_id)


def build_service_graph(session: Session, policy: WorkingDayPolicy | None = None) -> ServiceGraph:
    policy = policy or UniformDayPolicy()

    resource_repo = SqlAlchemyResourceRepository(session)
    skill_repo = SqlAlchemySkillRepository(session)
    assignment_repo = SqlAlchemyAssignmentRepository(session)
    unavailability_repo = SqlAlchemyUnavailabilityRepository(session)
    working_calendar_repo = SqlAlchemyWorkingCalendarRepository(session)

    resource_service = ResourceService(session, resource_repo, skill_repo)
    assignment_service = AssignmentService(
        session,
        assignment_repo,
        resource_repo,
        unavailability_repo,
        policy=policy,
    )
    availability_service = AvailabilityService(
        session,
        resource_repo,
        assignment_repo,
        unavailability_repo,
        policy=policy,
    )
    utilization_service = UtilizationService(
        resource_repo,
        assignment_repo,
        unavailability_repo,
        policy=policy,
    )

    return ServiceGraph(
        session=session,
        policy=policy,
        resource_service=resource_service,
        assignment_service=assignment_service,
        availability_service=availability_service,
        utilization_service=utilization_service,
        working_calendar_repo=working_calendar_repo,
    )


def build_service_dict(session: Session, policy: WorkingDayPolicy | None = None) -> dict[str, Any]:
    return build_service_graph(session, policy=policy).as_dict()


def bootstrap(
    db_url: str | None = None,
    *,
    log_dir: Path | None = None,
    use_stored_calendar: bool = False,
) -> ServiceGraph:
    """
    Application start-up: migrate the schema to head, then route logging to the rotating
    file, then open a session and wire the services on it.
    """
    # alembic's fileConfig replaces root handlers, so logging is set up after it runs
    run_migrations(db_url)
    setup_logging(log_dir)
    if db_url:
        session = sessionmaker(bind=build_engine(db_url), autoflush=False, autocommit=False, future=True)()
    else:
        session = SessionLocal()
    policy = calendar_policy(session) if use_stored_calendar else None
    graph = build_service_graph(session, policy=policy)
    logger.info(f"Services ready ({type(graph.policy).__name__})")
    return graph
