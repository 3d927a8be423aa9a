from datetime import date

import pytest

from core.exceptions import BusinessRuleError, InvalidRangeError, InvalidTypeError, NotFoundError, ValidationError
from core.models import AssignmentStatus


def test_booking_returns_advisory_conflicts(services, engineer):
    asg = services["assignment_service"]
    services["availability_service"].set_unavailability(engineer.id, date(2025, 1, 6), date(2025, 1, 6), "leave")
    first = asg.create_assignment(engineer.id, "Datasheets", date(2025, 1, 2), date(2025, 1, 4), planned_hours=24)
    assert not first.has_conflict

    second = asg.create_assignment(engineer.id, "Vendor docs", date(2025, 1, 4), date(2025, 1, 6), planned_hours=12)

    assert second.has_conflict
    assert [(c.kind, c.date) for c in second.conflicts] == [
        ("assignment", date(2025, 1, 4)),
        ("unavailability", date(2025, 1, 6)),
    ]
    assert second.conflicts[0].assignment_id == first.assignment.id
    # conflicts never block the booking
    assert asg.get_assignment(second.assignment.id).task_description == "Vendor docs"


def test_check_schedule_conflicts_can_exclude_self(services, engineer):
    asg = services["assignment_service"]
    booking = asg.create_assignment(engineer.id, "Model review", date(2025, 3, 3), date(2025, 3, 5))

    assert len(asg.check_schedule_conflicts(engineer.id, date(2025, 3, 1), date(2025, 3, 31))) == 3
    assert asg.check_schedule_conflicts(
        engineer.id, date(2025, 3, 1), date(2025, 3, 31), exclude_assignment_id=booking.assignment.id
    ) == []


def test_update_assignment_moves_dates_and_rechecks_without_self(services, engineer):
    asg = services["assignment_service"]
    other = asg.create_assignment(engineer.id, "Line list", date(2025, 3, 10), date(2025, 3, 11), planned_hours=16)
    booking = asg.create_assignment(engineer.id, "Model review", date(2025, 3, 3), date(2025, 3, 5), planned_hours=24)

    moved = asg.update_assignment(
        booking.assignment.id, end_date=date(2025, 3, 10), planned_hours=48, notes=" extended "
    )

    assert [(c.kind, c.date, c.assignment_id) for c in moved.conflicts] == [
        ("assignment", date(2025, 3, 10), other.assignment.id)
    ]
    stored = asg.get_assignment(booking.assignment.id)
    assert (stored.start_date, stored.end_date) == (date(2025, 3, 3), date(2025, 3, 10))
    assert stored.planned_hours == 48.0
    assert stored.notes == "extended"
    assert stored.version == 2

    with pytest.raises(InvalidRangeError):
        asg.update_assignment(booking.assignment.id, start_date=date(2025, 3, 12))
    asg.cancel_assignment(booking.assignment.id)
    with pytest.raises(BusinessRuleError) as exc:
        asg.update_assignment(booking.assignment.id, planned_hours=8)
    assert exc.value.code == "ASSIGNMENT_CANCELLED"


def test_detect_over_allocation_for_one_day(services, engineer):
    asg = services["assignment_service"]
    asg.create_assignment(engineer.id, "Piping ISOs", date(2025, 4, 1), date(2025, 4, 4), planned_hours=24)

    fits = asg.detect_over_allocation(engineer.id, date(2025, 4, 2), 2)
    assert (fits.available_hours, fits.assigned_hours, fits.excess_hours) == (8.0, 6.0, 0.0)
    assert not fits.is_over_allocated

    over = asg.detect_over_allocation(engineer.id, "2025-04-02", 5)
    assert over.is_over_allocated
    assert over.excess_hours == pytest.approx(3.0)

    services["availability_service"].set_unavailability(engineer.id, date(2025, 4, 3), date(2025, 4, 3), "training")
    off = asg.detect_over_allocation(engineer.id, date(2025, 4, 3), 1)
    assert (off.available_hours, off.assigned_hours, off.excess_hours) == (0.0, 0.0, 1.0)

    with pytest.raises(ValidationError):
        asg.detect_over_allocation(engineer.id, date(2025, 4, 2), -1)
    with pytest.raises(NotFoundError):
        asg.detect_over_allocation("ghost", date(2025, 4, 2), 1)


def test_booking_validation(services, engineer):
    asg = services["assignment_service"]

    with pytest.raises(InvalidRangeError):
        asg.create_assignment(engineer.id, "Backwards", date(2025, 1, 5), date(2025, 1, 4))
    with pytest.raises(ValidationError) as exc:
        asg.create_assignment(engineer.id, " ", date(2025, 1, 1), date(2025, 1, 2))
    assert exc.value.code == "ASSIGNMENT_TASK_EMPTY"
    with pytest.raises(ValidationError) as exc:
        asg.create_assignment(engineer.id, "Neg", date(2025, 1, 1), date(2025, 1, 2), planned_hours=-1)
    assert exc.value.code == "ASSIGNMENT_HOURS_NEGATIVE"
    with pytest.raises(NotFoundError):
        asg.create_assignment("ghost", "Task", date(2025, 1, 1), date(2025, 1, 2))

    services["resource_service"].deactivate_resource(engineer.id)
    with pytest.raises(BusinessRuleError) as exc:
        asg.create_assignment(engineer.id, "Task", date(2025, 1, 1), date(2025, 1, 2))
    assert exc.value.code == "RESOURCE_INACTIVE"


def test_status_lifecycle_and_hours(services, engineer):
    asg = services["assignment_service"]
    a = asg.create_assignment(engineer.id, "Cable schedule", date(2025, 2, 3), date(2025, 2, 7), 40).assignment
    assert a.status == AssignmentStatus.PLANNED
    assert a.actual_hours is None

    logged = asg.record_actual_hours(a.id, 12.5)
    assert logged.actual_hours == 12.5
    assert logged.status == AssignmentStatus.IN_PROGRESS

    done = asg.update_status(a.id, "completed")
    assert done.status == AssignmentStatus.COMPLETED

    with pytest.raises(ValidationError):
        asg.record_actual_hours(a.id, -2)
    with pytest.raises(InvalidTypeError):
        asg.update_status(a.id, "paused")

    asg.cancel_assignment(a.id)
    with pytest.raises(BusinessRuleError) as exc:
        asg.update_status(a.id, "planned")
    assert exc.value.code == "ASSIGNMENT_CANCELLED"
    with pytest.raises(BusinessRuleError):
        asg.record_actual_hours(a.id, 1)


def test_list_assignments_by_window(services, engineer):
    asg = services["assignment_service"]
    jan = asg.create_assignment(engineer.id, "Jan", date(2025, 1, 1), date(2025, 1, 31)).assignment
    feb = asg.create_assignment(engineer.id, "Feb", date(2025, 2, 1), date(2025, 2, 28)).assignment
    gone = asg.create_assignment(engineer.id, "Gone", date(2025, 1, 15), date(2025, 2, 15)).assignment
    asg.cancel_assignment(gone.id)

    assert [a.id for a in asg.list_assignments(engineer.id)] == [jan.id, feb.id]
    assert [a.id for a in asg.list_assignments(engineer.id, start_date="2025-01-31", end_date="2025-01-31")] == [jan.id]
    assert [a.id for a in asg.list_assignments(engineer.id, start_date=date(2025, 2, 10))] == [feb.id]
    assert len(asg.list_assignments(engineer.id, include_cancelled=True)) == 3

    with pytest.raises(NotFoundError) as exc:
        asg.get_assignment("missing")
    assert exc.value.code == "ASSIGNMENT_NOT_FOUND"
