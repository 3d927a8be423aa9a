# infra/db/models.py
from __future__ import annotations
from datetime import date, datetime
from typing import Optional

from sqlalchemy import (
    String,
    Date,
    DateTime,
    Float,
    Boolean,
    ForeignKey,
    Enum as SAEnum,
    Index,
    Integer,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base
from core.models import (
    AssignmentStatus,
    ResourceType,
    SkillCategory,
    UnavailabilityType,
)


class ResourceORM(Base):
    __tablename__ = "resources"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    code: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    resource_type: Mapped[ResourceType] = mapped_column(
        SAEnum(ResourceType), default=ResourceType.ENGINEERING, nullable=False
    )
    # comma-separated skill codes
    skills: Mapped[str] = mapped_column(String, default="", nullable=False)
    standard_hours_per_day: Mapped[float] = mapped_column(Float, default=8.0, nullable=False)
    hourly_rate: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    description: Mapped[str] = mapped_column(String, default="", nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    version: Mapped[int] = mapped_column(Integer, default=1, nullable=False)


Index("idx_resources_type_active", ResourceORM.resource_type, ResourceORM.is_active)


class SkillORM(Base):
    __tablename__ = "resource_skills"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    code: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    category: Mapped[SkillCategory] = mapped_column(
        SAEnum(SkillCategory), default=SkillCategory.OTHER, nullable=False
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


class AssignmentORM(Base):
    __tablename__ = "resource_assignments"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    resource_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("resources.id"),
        nullable=False,
    )
    task_description: Mapped[str] = mapped_column(String, nullable=False)
    task_ref: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    planned_hours: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    actual_hours: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    status: Mapped[AssignmentStatus] = mapped_column(
        SAEnum(AssignmentStatus), default=AssignmentStatus.PLANNED, nullable=False
    )
    notes: Mapped[str] = mapped_column(Text, default="", nullable=False)
    version: Mapped[int] = mapped_column(Integer, default=1, nullable=False)


Index(
    "idx_assignments_resource_range",
    AssignmentORM.resource_id,
    AssignmentORM.start_date,
    AssignmentORM.end_date,
)


class UnavailabilityORM(Base):
    __tablename__ = "resource_availability"

    # composite key: at most one row per resource and day
    resource_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("resources.id"),
        primary_key=True,
    )
    day: Mapped[date] = mapped_column("date", Date, primary_key=True)
    unavailability_type: Mapped[UnavailabilityType] = mapped_column(
        SAEnum(UnavailabilityType), default=UnavailabilityType.OTHER, nullable=False
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class WorkingCalendarORM(Base):
    __tablename__ = "working_calendars"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    # comma-separated weekday numbers, 0=Monday
    working_days: Mapped[str] = mapped_column(String, nullable=False)
    hours_per_day: Mapped[float] = mapped_column(Float, default=8.0, nullable=False)


class HolidayORM(Base):
    __tablename__ = "holidays"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    calendar_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("working_calendars.id", ondelete="CASCADE"),
        nullable=False,
    )
    date: Mapped[date] = mapped_column(Date, nullable=False)
    name: Mapped[str] = mapped_column(String, default="")

Index("idx_holiday_calendar_date", HolidayORM.calendar_id, HolidayORM.date)
