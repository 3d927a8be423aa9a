from datetime import date

import pytest

from core.exceptions import BusinessRuleError, InvalidTypeError, NotFoundError, ValidationError
from core.models import ResourceType, SkillCategory
from core.services.resource import format_resource_code
from core.services.resource.service import next_code_sequence


def test_create_resource_generates_sequential_codes(services):
    rs = services["resource_service"]
    year = date.today().year

    first = rs.create_resource("Alice Mensah", "engineering")
    second = rs.create_resource("Kofi Boateng", ResourceType.ENGINEERING)
    rig = rs.create_resource("Drill rig 2", "equipment", standard_hours_per_day=12)

    assert first.code == f"ENG-{year}-0001"
    assert second.code == f"ENG-{year}-0002"
    assert rig.code == f"EQP-{year}-0001"
    assert rig.standard_hours_per_day == 12.0
    assert first.is_active and first.version == 1


def test_code_sequence_ignores_foreign_codes():
    codes = ["ENG-2025-0007", "ENG-2024-0099", "DSG-2025-0003", "ENG-2025-X1"]
    assert next_code_sequence(codes, ResourceType.ENGINEERING, 2025) == 8
    assert next_code_sequence(codes, ResourceType.FIELD, 2025) == 1
    assert format_resource_code(ResourceType.FIELD, 2025, 12) == "FLD-2025-0012"


def test_explicit_code_must_be_unique(services):
    rs = services["resource_service"]
    rs.create_resource("Alice", "engineering", code="eng-a")

    with pytest.raises(ValidationError) as exc:
        rs.create_resource("Bob", "engineering", code="ENG-A")
    assert exc.value.code == "RESOURCE_CODE_DUPLICATE"


@pytest.mark.parametrize(
    "kwargs, code",
    [
        ({"name": "  "}, "RESOURCE_NAME_EMPTY"),
        ({"name": "X", "standard_hours_per_day": 0}, "RESOURCE_HOURS_INVALID"),
        ({"name": "X", "standard_hours_per_day": 25}, "RESOURCE_HOURS_INVALID"),
        ({"name": "X", "hourly_rate": -1}, "RESOURCE_RATE_NEGATIVE"),
        ({"name": "X", "skills": ["welding"]}, "SKILL_NOT_FOUND"),
    ],
)
def test_create_resource_validation(services, kwargs, code):
    with pytest.raises(ValidationError) as exc:
        services["resource_service"].create_resource(**kwargs)
    assert exc.value.code == code


def test_unknown_resource_type_is_rejected(services):
    with pytest.raises(InvalidTypeError) as exc:
        services["resource_service"].create_resource("Crane", "vehicle")
    assert exc.value.code == "INVALID_RESOURCE_TYPE"


def test_skills_filter_and_search(services):
    rs = services["resource_service"]
    rs.create_skill("piping", "Piping design", "design")
    rs.create_skill("stress", "Stress analysis", SkillCategory.ENGINEERING)

    both = rs.create_resource("Alice Mensah", "engineering", skills=["piping", "stress"])
    rs.create_resource("Kofi Boateng", "design", skills=["piping"], description="Plant layouts")

    assert [r.id for r in rs.filter_resources(skills=["piping", "stress"])] == [both.id]
    assert len(rs.filter_resources(skills=["piping"])) == 2
    assert [r.name for r in rs.filter_resources(search="LAYOUT")] == ["Kofi Boateng"]
    assert [r.name for r in rs.filter_resources(resource_type="design")] == ["Kofi Boateng"]
    assert rs.get_resource(both.id).skills == {"piping", "stress"}


def test_skill_catalog(services):
    rs = services["resource_service"]
    rs.create_skill("hse", "HSE supervision", "field")

    with pytest.raises(ValidationError) as exc:
        rs.create_skill("hse", "Duplicate", "field")
    assert exc.value.code == "SKILL_CODE_DUPLICATE"
    with pytest.raises(InvalidTypeError):
        rs.create_skill("x", "X", "magic")

    skills = rs.list_skills()
    assert [s.code for s in skills] == ["hse"]
    assert skills[0].category == SkillCategory.FIELD


def test_deactivate_and_activate(services):
    rs = services["resource_service"]
    r = rs.create_resource("Welder", "field")

    rs.deactivate_resource(r.id)
    assert rs.list_resources() == []
    assert [x.id for x in rs.list_resources(active_only=False)] == [r.id]

    with pytest.raises(BusinessRuleError) as exc:
        rs.deactivate_resource(r.id)
    assert exc.value.code == "RESOURCE_STATE_UNCHANGED"

    assert rs.activate_resource(r.id).is_active


def test_update_resource_fields(services):
    rs = services["resource_service"]
    r = rs.create_resource("Surveyor", "field")

    updated = rs.update_resource(r.id, name="Senior surveyor", standard_hours_per_day=9, hourly_rate=45.0)

    assert updated.name == "Senior surveyor"
    fresh = rs.get_resource(r.id)
    assert fresh.standard_hours_per_day == 9.0
    assert fresh.hourly_rate == 45.0

    with pytest.raises(NotFoundError) as exc:
        rs.get_resource("nope")
    assert exc.value.code == "RESOURCE_NOT_FOUND"
