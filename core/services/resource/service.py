# core/services/resource/service.py
from __future__ import annotations
from datetime import date
from typing import Iterable, List
from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.models import RESOURCE_CODE_PREFIXES, Resource, ResourceType, Skill, SkillCategory
from core.interfaces import ResourceRepository, SkillRepository
from core.exceptions import BusinessRuleError, InvalidTypeError, NotFoundError, ValidationError
import logging

logger = logging.getLogger(__name__)


def as_resource_type(value: ResourceType | str) -> ResourceType:
    if isinstance(value, ResourceType):
        return value
    try:
        return ResourceType(str(value or "").strip().lower())
    except ValueError:
        raise InvalidTypeError(f"Invalid resource type: {value!r}.", code="INVALID_RESOURCE_TYPE") from None


def as_skill_category(value: SkillCategory | str) -> SkillCategory:
    if isinstance(value, SkillCategory):
        return value
    try:
        return SkillCategory(str(value or "").strip().lower())
    except ValueError:
        raise InvalidTypeError(f"Invalid skill category: {value!r}.", code="INVALID_SKILL_CATEGORY") from None


def next_code_sequence(existing_codes: Iterable[str], resource_type: ResourceType, year: int) -> int:
    pattern = f"{RESOURCE_CODE_PREFIXES[resource_type]}-{year}-"
    sequences = []
    for code in existing_codes:
        if not code.startswith(pattern):
            continue
        tail = code[len(pattern):]
        if tail.isdigit():
            sequences.append(int(tail))
    return max(sequences) + 1 if sequences else 1


def format_resource_code(resource_type: ResourceType, year: int, sequence: int) -> str:
    """e.g. ENG-2026-0001"""
    return f"{RESOURCE_CODE_PREFIXES[resource_type]}-{year}-{sequence:04d}"


class ResourceService:
    def __init__(self, session: Session,
                 resource_repo: ResourceRepository,
                 skill_repo: SkillRepository,
        ):
        self._session = session
        self._resource_repo = resource_repo
        self._skill_repo = skill_repo

    # ---------------- resources ----------------

    def create_resource(
        self,
        name: str,
        resource_type: ResourceType | str = ResourceType.ENGINEERING,
        code: str | None = None,
        skills: Iterable[str] = (),
        standard_hours_per_day: float = 8.0,
        hourly_rate: float = 0.0,
        description: str = "",
    ) -> Resource:
        if not name or not name.strip():
            raise ValidationError("Resource name cannot be empty.", code="RESOURCE_NAME_EMPTY")
        rtype = as_resource_type(resource_type)
        self._validate_hours(standard_hours_per_day)
        if hourly_rate < 0:
            raise ValidationError("Hourly rate cannot be negative.", code="RESOURCE_RATE_NEGATIVE")
        skill_codes = self._validate_skills(skills)

        existing_codes = self._resource_repo.list_codes()
        if code and code.strip():
            code = code.strip().upper()
            if code in existing_codes:
                raise ValidationError(f"Resource code {code} is already in use.", code="RESOURCE_CODE_DUPLICATE")
        else:
            year = date.today().year
            code = format_resource_code(rtype, year, next_code_sequence(existing_codes, rtype, year))

        resource = Resource.create(
            code=code,
            name=name.strip(),
            resource_type=rtype,
            skills=skill_codes,
            standard_hours_per_day=float(standard_hours_per_day),
            hourly_rate=hourly_rate,
            description=description.strip(),
        )
        try:
            self._resource_repo.add(resource)
            self._session.commit()
            logger.info(f"Created resource {resource.id} - {resource.code} {resource.name}")
        except Exception as e:
            self._session.rollback()
            logger.error(f"Error creating resource: {e}")
            raise
        domain_events.resources_changed.emit(resource.id)
        return resource

    def update_resource(
        self,
        resource_id: str,
        name: str | None = None,
        resource_type: ResourceType | str | None = None,
        skills: Iterable[str] | None = None,
        standard_hours_per_day: float | None = None,
        hourly_rate: float | None = None,
        description: str | None = None,
        expected_version: int | None = None,
    ) -> Resource:
        resource = self.get_resource(resource_id)
        if expected_version is not None:
            resource.version = expected_version

        if name is not None:
            if not name.strip():
                raise ValidationError("Resource name cannot be empty.", code="RESOURCE_NAME_EMPTY")
            resource.name = name.strip()
        if resource_type is not None:
            resource.resource_type = as_resource_type(resource_type)
        if skills is not None:
            resource.skills = self._validate_skills(skills)
        if standard_hours_per_day is not None:
            self._validate_hours(standard_hours_per_day)
            resource.standard_hours_per_day = float(standard_hours_per_day)
        if hourly_rate is not None:
            if hourly_rate < 0:
                raise ValidationError("Hourly rate cannot be negative.", code="RESOURCE_RATE_NEGATIVE")
            resource.hourly_rate = hourly_rate
        if description is not None:
            resource.description = description.strip()

        self._save(resource)
        return resource

    def deactivate_resource(self, resource_id: str) -> Resource:
        return self._set_active(resource_id, False)

    def activate_resource(self, resource_id: str) -> Resource:
        return self._set_active(resource_id, True)

    def get_resource(self, resource_id: str) -> Resource:
        resource = self._resource_repo.get(resource_id)
        if not resource:
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")
        return resource

    def list_resources(
        self,
        resource_type: ResourceType | str | None = None,
        active_only: bool = True,
    ) -> List[Resource]:
        rtype = as_resource_type(resource_type) if resource_type is not None else None
        return self._resource_repo.list_by_filter(resource_type=rtype, active_only=active_only)

    def filter_resources(
        self,
        resource_type: ResourceType | str | None = None,
        skills: Iterable[str] | None = None,
        search: str | None = None,
        active_only: bool = True,
    ) -> List[Resource]:
        required = {s.strip() for s in (skills or ()) if s and s.strip()}
        needle = (search or "").strip().lower()
        result = []
        for r in self.list_resources(resource_type, active_only=active_only):
            # resource must carry every requested skill
            if required and not required.issubset(r.skills):
                continue
            if needle and not (
                needle in r.name.lower()
                or needle in r.code.lower()
                or needle in (r.description or "").lower()
            ):
                continue
            result.append(r)
        return result

    # ---------------- skills ----------------

    def create_skill(self, code: str, name: str, category: SkillCategory | str = SkillCategory.OTHER) -> Skill:
        if not code or not code.strip():
            raise ValidationError("Skill code cannot be empty.", code="SKILL_CODE_EMPTY")
        if not name or not name.strip():
            raise ValidationError("Skill name cannot be empty.", code="SKILL_NAME_EMPTY")
        code = code.strip()
        if self._skill_repo.get_by_code(code) is not None:
            raise ValidationError(f"Skill {code} already exists.", code="SKILL_CODE_DUPLICATE")
        skill = Skill.create(code=code, name=name.strip(), category=as_skill_category(category))
        try:
            self._skill_repo.add(skill)
            self._session.commit()
            logger.info(f"Created skill {skill.code}")
        except Exception:
            self._session.rollback()
            raise
        return skill

    def list_skills(self, active_only: bool = True) -> List[Skill]:
        return self._skill_repo.list_all(active_only=active_only)

    # ---------------- helpers ----------------

    def _validate_hours(self, hours: float) -> None:
        if hours is None or float(hours) <= 0 or float(hours) > 24:
            raise ValidationError(
                "Standard hours per day must be > 0 and <= 24.",
                code="RESOURCE_HOURS_INVALID",
            )

    def _validate_skills(self, skills: Iterable[str]) -> set[str]:
        codes = {s.strip() for s in skills if s and s.strip()}
        unknown = sorted(c for c in codes if self._skill_repo.get_by_code(c) is None)
        if unknown:
            raise ValidationError(f"Unknown skill codes: {', '.join(unknown)}.", code="SKILL_NOT_FOUND")
        return codes

    def _set_active(self, resource_id: str, active: bool) -> Resource:
        resource = self.get_resource(resource_id)
        if resource.is_active == active:
            state = "active" if active else "inactive"
            raise BusinessRuleError(f"Resource is already {state}.", code="RESOURCE_STATE_UNCHANGED")
        resource.is_active = active
        self._save(resource)
        return resource

    def _save(self, resource: Resource) -> None:
        try:
            self._resource_repo.update(resource)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            raise e
        domain_events.resources_changed.emit(resource.id)
