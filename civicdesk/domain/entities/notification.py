"""Notification entity — a message shown on a worker's dashboard."""

from dataclasses import dataclass
from datetime import datetime

from civicdesk.domain.value_objects.enums import NotificationKind


@dataclass
class Notification:
    id: int | None
    worker_id: int
    complaint_id: int
    kind: NotificationKind
    message: str
    created_at: datetime
    is_read: bool = False
    read_at: datetime | None = None

    def mark_read(self, at: datetime) -> None:
        if not self.is_read:
            self.is_read = True
            self.read_at = at
