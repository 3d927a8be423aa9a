from datetime import date

from core.models import Holiday, Resource, ResourceType, WorkingCalendar
from core.services.calendar import UniformDayPolicy, WorkingCalendarPolicy
from infra.services import build_service_graph, calendar_policy


def _resource(hours: float = 8.0) -> Resource:
    return Resource.create(code="ENG-2025-0001", name="Shift planner", resource_type=ResourceType.ENGINEERING,
                           standard_hours_per_day=hours)


def test_uniform_policy_counts_every_day():
    policy = UniformDayPolicy()
    r = _resource(7.5)
    saturday = date(2025, 1, 4)

    assert policy.is_working_day(r, saturday)
    assert policy.hours_for(r, saturday) == 7.5


def test_calendar_policy_skips_weekends_and_holidays():
    cal = WorkingCalendar(id="office", name="Office", working_days={0, 1, 2, 3, 4})
    policy = WorkingCalendarPolicy(cal, holidays=[date(2025, 1, 1)])
    r = _resource()

    assert not policy.is_working_day(r, date(2025, 1, 1))  # holiday, Wednesday
    assert policy.is_working_day(r, date(2025, 1, 2))
    assert not policy.is_working_day(r, date(2025, 1, 4))  # Saturday


def test_calendar_policy_from_empty_repository_is_uniform(session):
    policy = calendar_policy(session)
    assert all(policy.is_working_day(_resource(), date(2025, 1, d)) for d in range(1, 8))


def test_utilization_with_stored_calendar(session):
    graph = build_service_graph(session)
    graph.working_calendar_repo.upsert(WorkingCalendar(id="default", name="Office", working_days={0, 1, 2, 3, 4}))
    graph.working_calendar_repo.add_holiday(Holiday.create("default", date(2025, 1, 8), "Founders day"))
    session.commit()

    r = graph.resource_service.create_resource("Week worker", "engineering")
    office = build_service_graph(session, policy=calendar_policy(session))

    # Mon 6 Jan to Sun 12 Jan 2025: five weekdays minus one holiday
    report = office.utilization_service.compute_utilization(None, date(2025, 1, 6), date(2025, 1, 12))[0]
    assert report.resource_id == r.id
    assert report.available_hours == 32.0

    uniform = graph.utilization_service.compute_utilization(None, date(2025, 1, 6), date(2025, 1, 12))[0]
    assert uniform.available_hours == 56.0

    holidays = graph.working_calendar_repo.list_holidays("default")
    assert [h.name for h in holidays] == ["Founders day"]
    assert graph.working_calendar_repo.get("default").working_days == {0, 1, 2, 3, 4}


def test_calendar_day_length_caps_standard_hours():
    short_week = WorkingCalendar(id="site", name="Site", working_days={0, 1, 2, 3}, hours_per_day=6.0)
    policy = WorkingCalendarPolicy(short_week)
    monday = date(2025, 1, 6)

    assert policy.hours_for(_resource(8.0), monday) == 6.0
    assert policy.hours_for(_resource(4.0), monday) == 4.0


def test_stored_day_length_drives_available_hours(session):
    graph = build_service_graph(session)
    graph.working_calendar_repo.upsert(
        WorkingCalendar(id="default", name="Office", working_days={0, 1, 2, 3, 4}, hours_per_day=7.0)
    )
    session.commit()
    r = graph.resource_service.create_resource("Long day", "engineering", standard_hours_per_day=10.0)

    office = build_service_graph(session, policy=calendar_policy(session))
    report = office.utilization_service.compute_utilization(None, date(2025, 1, 6), date(2025, 1, 12))[0]
    cells = office.availability_service.get_availability_calendar(r.id, date(2025, 1, 6), date(2025, 1, 6))

    assert report.available_hours == 35.0
    assert cells[0].available_hours == 7.0
    assert graph.working_calendar_repo.get("default").hours_per_day == 7.0
