"""Complaint status machine for the worker-initiated toggle.

    Pending     --toggle--> In Progress   (start work)
    In Progress --toggle--> Complete      (resolve; stamps time_to_resolve)
    Complete    --toggle--> In Progress   (reopen)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from civicdesk.domain.entities.complaint import Complaint
from civicdesk.domain.value_objects.enums import SLAStatus, WorkStatus


@dataclass(frozen=True)
class Transition:
    previous: WorkStatus
    current: WorkStatus

    @property
    def completed(self) -> bool:
        return self.previous == WorkStatus.IN_PROGRESS and self.current == WorkStatus.COMPLETE

    @property
    def reopened(self) -> bool:
        return self.previous == WorkStatus.COMPLETE


def next_work_status(current: WorkStatus) -> WorkStatus:
    if current == WorkStatus.IN_PROGRESS:
        return WorkStatus.COMPLETE
    return WorkStatus.IN_PROGRESS


def apply_toggle(complaint: Complaint, now: datetime) -> Transition:
    """Mutate *complaint* to its next status and return the transition taken."""
    previous = complaint.work_status
    current = next_work_status(previous)
    complaint.work_status = current

    if current == WorkStatus.COMPLETE:
        complaint.time_to_resolve = now - complaint.created_at
        complaint.resolved_at = now
        complaint.sla_status = SLAStatus.COMPLETED
    elif previous == WorkStatus.COMPLETE:
        complaint.time_to_resolve = None
        complaint.resolved_at = None

    return Transition(previous=previous, current=current)
