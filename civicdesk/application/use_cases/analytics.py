"""AnalyticsUseCase — complaint counts per department and status."""

from __future__ import annotations

from civicdesk.application.ports.complaint_repo import ComplaintRepository
from civicdesk.domain.value_objects.enums import WorkStatus


def _empty_bucket() -> dict[str, int]:
    bucket = {"total": 0}
    bucket.update({status.value: 0 for status in WorkStatus})
    return bucket


class AnalyticsUseCase:
    def __init__(self, complaint_repo: ComplaintRepository):
        self._complaints = complaint_repo

    async def summary(self) -> dict:
        """Totals per work status, overall and for every department seen."""
        counts = await self._complaints.count_by_department_and_status()

        overall = _empty_bucket()
        by_department: dict[str, dict[str, int]] = {}
        for (department, status), n in sorted(counts.items(), key=lambda kv: kv[0][0]):
            bucket = by_department.setdefault(department, _empty_bucket())
            bucket[status.value] += n
            bucket["total"] += n
            overall[status.value] += n
            overall["total"] += n

        return {"total": overall, "by_department": by_department}
