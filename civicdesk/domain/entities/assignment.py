"""Assignment history — append-only log of complaints handed to a worker."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from civicdesk.domain.value_objects.enums import AssignmentReason

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssignmentRecord:
    complaint_id: int
    assigned_at: datetime
    reason: AssignmentReason

    def to_dict(self) -> dict[str, Any]:
        return {
            "complaint_id": self.complaint_id,
            "assigned_at": self.assigned_at.isoformat(),
            "reason": self.reason.value,
        }


def _record_from_raw(raw: Any) -> AssignmentRecord | None:
    if not isinstance(raw, dict):
        return None
    cid = raw.get("complaint_id", raw.get("Cid"))
    assigned_at = raw.get("assigned_at", raw.get("assignedAt"))
    reason = raw.get("reason", raw.get("status", AssignmentReason.ASSIGNED.value))
    try:
        cid = int(cid)
        if isinstance(assigned_at, str):
            assigned_at = datetime.fromisoformat(assigned_at.replace("Z", "+00:00"))
        if not isinstance(assigned_at, datetime):
            return None
        return AssignmentRecord(
            complaint_id=cid,
            assigned_at=assigned_at,
            reason=AssignmentReason(reason),
        )
    except (TypeError, ValueError):
        return None


def parse_history(raw: Any) -> list[AssignmentRecord]:
    """Normalize a stored history column (list, JSON string or None).

    Entries that cannot be read are dropped rather than failing the load.
    """
    if raw is None or raw == "":
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            logger.warning("Discarding unreadable assignment history: %r", raw[:80])
            return []
    if not isinstance(raw, list):
        return []

    records = []
    for item in raw:
        record = _record_from_raw(item)
        if record is not None:
            records.append(record)
    return records
