"""Initial schema — departments, workers, complaints, notifications.

Revision ID: 001
Revises: None
Create Date: 2026-10-18
"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Departments
    op.create_table(
        "departments",
        sa.Column("code", sa.String(20), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("sla_hours", sa.Integer, nullable=True),
    )

    # Workers (employees and managers)
    op.create_table(
        "workers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column(
            "department_code", sa.String(20), sa.ForeignKey("departments.code"), nullable=False
        ),
        sa.Column("role", sa.String(20), nullable=False, server_default="employee"),
        sa.Column("assigned_complaint_ids", JSONB, nullable=False, server_default="[]"),
        sa.Column("assignment_history", JSONB, nullable=False, server_default="[]"),
    )
    op.create_index("idx_workers_department", "workers", ["department_code", "role"])

    # Complaints
    op.create_table(
        "complaints",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("reporter_id", sa.String(100), nullable=False),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("department_code", sa.String(20), nullable=False),
        sa.Column("latitude", sa.Float, nullable=True),
        sa.Column("longitude", sa.Float, nullable=True),
        sa.Column("photo_url", sa.String(500), nullable=True),
        sa.Column("work_status", sa.String(20), nullable=False, server_default="Pending"),
        sa.Column("sla_status", sa.String(20), nullable=False, server_default="On Track"),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("deadline", sa.DateTime(timezone=True), nullable=False),
        sa.Column("sla_violated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("time_to_resolve", sa.Interval, nullable=True),
        sa.Column("resolved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "worker_id",
            sa.Integer,
            sa.ForeignKey("workers.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    op.create_index("idx_complaints_reporter", "complaints", ["reporter_id"])
    op.create_index(
        "idx_complaints_queue", "complaints", ["department_code", "work_status", "created_at"]
    )
    op.create_index("idx_complaints_sla", "complaints", ["department_code", "sla_status"])
    op.create_index("idx_complaints_worker", "complaints", ["worker_id"])

    # Notifications
    op.create_table(
        "notifications",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "worker_id",
            sa.Integer,
            sa.ForeignKey("workers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "complaint_id",
            sa.Integer,
            sa.ForeignKey("complaints.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("kind", sa.String(30), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("is_read", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("read_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("idx_notifications_worker", "notifications", ["worker_id", "is_read"])


def downgrade() -> None:
    op.drop_table("notifications")
    op.drop_table("complaints")
    op.drop_table("workers")
    op.drop_table("departments")
