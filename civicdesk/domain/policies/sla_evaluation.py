"""SlaEvaluationPolicy — where an open complaint stands against its deadline."""

from __future__ import annotations

from datetime import datetime

from civicdesk.domain.entities.complaint import Complaint
from civicdesk.domain.value_objects.enums import SLAStatus


def evaluate_sla_status(complaint: Complaint, now: datetime, warning_ratio: float) -> SLAStatus:
    """Return the SLA status *complaint* should carry at *now*.

    Rules:
      1. Closed complaints, or ones already marked Completed, are left alone.
      2. Violated is sticky: it is never downgraded.
      3. now >= deadline  →  Violated.
      4. Remaining time <= warning_ratio × full SLA window  →  Warning.
      5. Otherwise the current status is kept (On Track stays On Track).
    """
    current = complaint.sla_status
    if not complaint.is_active() or current in (SLAStatus.COMPLETED, SLAStatus.VIOLATED):
        return current

    if now >= complaint.deadline:
        return SLAStatus.VIOLATED

    window = complaint.deadline - complaint.created_at
    remaining = complaint.deadline - now
    if remaining <= window * warning_ratio:
        return SLAStatus.WARNING

    return current
