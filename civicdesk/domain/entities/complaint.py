"""Complaint entity — a civic issue filed by a citizen."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from civicdesk.domain.value_objects.enums import SLAStatus, WorkStatus
from civicdesk.domain.value_objects.geo_point import GeoPoint


@dataclass
class Complaint:
    id: int | None
    reporter_id: str
    department_code: str
    description: str | None
    created_at: datetime
    deadline: datetime
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    location: GeoPoint | None = None
    photo_url: str | None = None
    work_status: WorkStatus = WorkStatus.PENDING
    sla_status: SLAStatus = SLAStatus.ON_TRACK
    sla_violated_at: datetime | None = None
    time_to_resolve: timedelta | None = None
    resolved_at: datetime | None = None
    worker_id: int | None = None

    def is_assigned(self) -> bool:
        return self.worker_id is not None

    def is_active(self) -> bool:
        return self.work_status in (WorkStatus.PENDING, WorkStatus.IN_PROGRESS)

    def assign_to(self, worker_id: int) -> None:
        self.worker_id = worker_id
        self.work_status = WorkStatus.IN_PROGRESS


def format_duration(value: timedelta | None) -> str | None:
    """Render a resolution time as "<H> hours <M> minutes"."""
    if value is None:
        return None
    total_minutes = int(value.total_seconds()) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours} hours {minutes} minutes"
