"""create resource scheduling tables

Revision ID: 3a1c5e7b9d20
Revises:
Create Date: 2026-10-17
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3a1c5e7b9d20"
down_revision = None
branch_labels = None
depends_on = None


_RESOURCE_TYPE = sa.Enum("ENGINEERING", "DESIGN", "FIELD", "EQUIPMENT", "OTHER", name="resourcetype")
_SKILL_CATEGORY = sa.Enum("ENGINEERING", "DESIGN", "FIELD", "OPERATION", "OTHER", name="skillcategory")
_ASSIGNMENT_STATUS = sa.Enum("PLANNED", "IN_PROGRESS", "COMPLETED", "CANCELLED", name="assignmentstatus")
_UNAVAILABILITY_TYPE = sa.Enum(
    "LEAVE", "TRAINING", "SICK", "EQUIPMENT_DOWN", "OTHER", name="unavailabilitytype"
)


def upgrade() -> None:
    op.create_table(
        "resources",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("code", sa.String(length=32), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("resource_type", _RESOURCE_TYPE, nullable=False),
        sa.Column("skills", sa.String(), nullable=False, server_default=sa.text("''")),
        sa.Column("standard_hours_per_day", sa.Float(), nullable=False, server_default=sa.text("8.0")),
        sa.Column("hourly_rate", sa.Float(), nullable=False, server_default=sa.text("0.0")),
        sa.Column("description", sa.String(), nullable=False, server_default=sa.text("''")),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("1")),
        sa.Column("version", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
    )
    op.create_index("idx_resources_type_active", "resources", ["resource_type", "is_active"])

    op.create_table(
        "resource_skills",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("code", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("category", _SKILL_CATEGORY, nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("1")),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
    )

    op.create_table(
        "resource_assignments",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("resource_id", sa.String(), nullable=False),
        sa.Column("task_description", sa.String(), nullable=False),
        sa.Column("task_ref", sa.String(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("planned_hours", sa.Float(), nullable=False, server_default=sa.text("0.0")),
        sa.Column("actual_hours", sa.Float(), nullable=True),
        sa.Column("status", _ASSIGNMENT_STATUS, nullable=False),
        sa.Column("notes", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column("version", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.ForeignKeyConstraint(["resource_id"], ["resources.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_assignments_resource_range",
        "resource_assignments",
        ["resource_id", "start_date", "end_date"],
    )

    op.create_table(
        "resource_availability",
        sa.Column("resource_id", sa.String(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("unavailability_type", _UNAVAILABILITY_TYPE, nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["resource_id"], ["resources.id"]),
        sa.PrimaryKeyConstraint("resource_id", "date"),
    )

    op.create_table(
        "working_calendars",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("working_days", sa.String(), nullable=False),
        sa.Column("hours_per_day", sa.Float(), nullable=False, server_default=sa.text("8.0")),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "holidays",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("calendar_id", sa.String(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("name", sa.String(), nullable=True),
        sa.ForeignKeyConstraint(["calendar_id"], ["working_calendars.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_holiday_calendar_date", "holidays", ["calendar_id", "date"])


def downgrade() -> None:
    op.drop_index("idx_holiday_calendar_date", table_name="holidays")
    op.drop_table("holidays")
    op.drop_table("working_calendars")
    op.drop_table("resource_availability")
    op.drop_index("idx_assignments_resource_range", table_name="resource_assignments")
    op.drop_table("resource_assignments")
    op.drop_table("resource_skills")
    op.drop_index("idx_resources_type_active", table_name="resources")
    op.drop_table("resources")
