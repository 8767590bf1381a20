"""DeadlinePolicy — resolution deadline from a department's SLA hours."""

from __future__ import annotations

from datetime import datetime, timedelta

from civicdesk.domain.entities.department import Department


def resolve_sla_hours(department: Department | None, default_hours: int) -> int:
    """Department SLA, or *default_hours* when unknown or not configured.

    A zero or negative configured value is treated as "not configured".
    """
    if department is None or not department.sla_hours or department.sla_hours <= 0:
        return default_hours
    return department.sla_hours


def compute_deadline(created_at: datetime, sla_hours: int) -> datetime:
    """Absolute deadline = created_at + sla_hours."""
    return created_at + timedelta(hours=sla_hours)
