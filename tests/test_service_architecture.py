from datetime import date

from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import sessionmaker

from core.services.calendar import UniformDayPolicy, WorkingCalendarPolicy
from core.models import WorkingCalendar
from infra.db import base as db_base
from infra.migrate import run_migrations
from infra.services import build_service_graph


def test_service_graph_shares_one_policy(session):
    policy = WorkingCalendarPolicy(WorkingCalendar(id="x", working_days={0, 1, 2, 3, 4}))
    graph = build_service_graph(session, policy=policy)

    assert graph.policy is policy
    assert graph.as_dict()["utilization_service"] is graph.utilization_service
    assert isinstance(build_service_graph(session).policy, UniformDayPolicy)


def test_default_db_url_honours_env(monkeypatch):
    monkeypatch.setenv("RSE_DB_URL", "sqlite:///:memory:")
    assert db_base.default_db_url() == "sqlite:///:memory:"


def test_migrations_create_schema(tmp_path):
    db_url = f"sqlite:///{(tmp_path / 'rse.db').as_posix()}"
    run_migrations(db_url)

    engine = create_engine(db_url, future=True)
    tables = set(inspect(engine).get_table_names())
    assert {
        "resources",
        "resource_skills",
        "resource_assignments",
        "resource_availability",
        "working_calendars",
        "holidays",
    } <= tables
    pk = inspect(engine).get_pk_constraint("resource_availability")["constrained_columns"]
    assert pk == ["resource_id", "date"]
    engine.dispose()


def test_migrated_schema_round_trips_through_services(tmp_path):
    db_url = f"sqlite:///{(tmp_path / 'rse.db').as_posix()}"
    run_migrations(db_url)
    engine = db_base.build_engine(db_url)
    session = sessionmaker(bind=engine, autoflush=False, future=True)()
    try:
        graph = build_service_graph(session)
        r = graph.resource_service.create_resource("Migrated", "field")
        result = graph.availability_service.set_unavailability(r.id, date(2025, 1, 1), date(2025, 1, 2), "leave")
        assert result.created == 2
    finally:
        session.close()
        engine.dispose()
