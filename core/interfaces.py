# core/interfaces.py
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable, List, Optional

from core.models import (
    Assignment,
    Holiday,
    Resource,
    ResourceType,
    Skill,
    UnavailabilityRecord,
    WorkingCalendar,
)


class ResourceRepository(ABC):
    @abstractmethod
    def add(self, resource: Resource) -> None: ...

    @abstractmethod
    def update(self, resource: Resource) -> None: ...

    @abstractmethod
    def get(self, resource_id: str) -> Optional[Resource]: ...

    @abstractmethod
    def list_all(self) -> List[Resource]: ...

    @abstractmethod
    def list_by_filter(
        self,
        resource_type: Optional[ResourceType] = None,
        resource_ids: Optional[Iterable[str]] = None,
        active_only: bool = True,
    ) -> List[Resource]: ...

    @abstractmethod
    def list_codes(self) -> List[str]: ...


class SkillRepository(ABC):
    @abstractmethod
    def add(self, skill: Skill) -> None: ...

    @abstractmethod
    def get_by_code(self, code: str) -> Optional[Skill]: ...

    @abstractmethod
    def list_all(self, active_only: bool = True) -> List[Skill]: ...


class AssignmentRepository(ABC):
    @abstractmethod
    def add(self, assignment: Assignment) -> None: ...

    @abstractmethod
    def update(self, assignment: Assignment) -> None: ...

    @abstractmethod
    def get(self, assignment_id: str) -> Optional[Assignment]: ...

    @abstractmethod
    def list_by_resource(self, resource_id: str, include_cancelled: bool = False) -> List[Assignment]: ...

    @abstractmethod
    def list_active_for_resources(
        self,
        resource_ids: Iterable[str],
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Assignment]:
        """Non-cancelled assignments; when a window is given, only those touching it."""


class UnavailabilityRepository(ABC):
    @abstractmethod
    def upsert(self, record: UnavailabilityRecord) -> None: ...

    @abstractmethod
    def get(self, resource_id: str, day: date) -> Optional[UnavailabilityRecord]: ...

    @abstractmethod
    def list_for_resource(self, resource_id: str, start_date: date, end_date: date) -> List[UnavailabilityRecord]: ...

    @abstractmethod
    def list_for_resources(
        self, resource_ids: Iterable[str], start_date: date, end_date: date
    ) -> List[UnavailabilityRecord]: ...

    @abstractmethod
    def delete_range(self, resource_id: str, start_date: date, end_date: date) -> int: ...


class WorkingCalendarRepository(ABC):
    @abstractmethod
    def get(self, calendar_id: str) -> Optional[WorkingCalendar]: ...

    @abstractmethod
    def upsert(self, calendar: WorkingCalendar) -> None: ...

    @abstractmethod
    def list_holidays(self, calendar_id: str) -> List[Holiday]: ...

    @abstractmethod
    def add_holiday(self, holiday: Holiday) -> None: ...


__all__ = [
    "ResourceRepository",
    "SkillRepository",
    "AssignmentRepository",
    "UnavailabilityRepository",
    "WorkingCalendarRepository",
]
