"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

from datetime import datetime, timedelta
from typing import Any

from sqlalchemy import (
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    Interval,
    String,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from civicdesk.adapters.persistence.database import Base


class DepartmentModel(Base):
    __tablename__ = "departments"

    code: Mapped[str] = mapped_column(String(20), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    sla_hours: Mapped[int | None] = mapped_column(Integer, nullable=True)

    workers: Mapped[list["WorkerModel"]] = relationship(back_populates="department")


class WorkerModel(Base):
    __tablename__ = "workers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    department_code: Mapped[str] = mapped_column(
        String(20), ForeignKey("departments.code"), nullable=False
    )
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="employee")
    # Legacy rows may hold a delimited string here; the mapper normalizes on read
    assigned_complaint_ids: Mapped[Any] = mapped_column(JSONB, nullable=False, default=list)
    assignment_history: Mapped[Any] = mapped_column(JSONB, nullable=False, default=list)

    department: Mapped["DepartmentModel"] = relationship(back_populates="workers")

    __table_args__ = (Index("idx_workers_department", "department_code", "role"),)


class ComplaintModel(Base):
    __tablename__ = "complaints"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    reporter_id: Mapped[str] = mapped_column(String(100), nullable=False)
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    department_code: Mapped[str] = mapped_column(String(20), nullable=False)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    photo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    work_status: Mapped[str] = mapped_column(String(20), nullable=False, default="Pending")
    sla_status: Mapped[str] = mapped_column(String(20), nullable=False, default="On Track")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    deadline: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    sla_violated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    time_to_resolve: Mapped[timedelta | None] = mapped_column(Interval, nullable=True)
    resolved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    worker_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("workers.id", ondelete="SET NULL"), nullable=True
    )

    worker: Mapped["WorkerModel | None"] = relationship()

    __table_args__ = (
        Index("idx_complaints_reporter", "reporter_id"),
        Index("idx_complaints_queue", "department_code", "work_status", "created_at"),
        Index("idx_complaints_sla", "department_code", "sla_status"),
        Index("idx_complaints_worker", "worker_id"),
    )


class NotificationModel(Base):
    __tablename__ = "notifications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    worker_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("workers.id", ondelete="CASCADE"), nullable=False
    )
    complaint_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("complaints.id", ondelete="CASCADE"), nullable=False
    )
    kind: Mapped[str] = mapped_column(String(30), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    read_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (Index("idx_notifications_worker", "worker_id", "is_read"),)
