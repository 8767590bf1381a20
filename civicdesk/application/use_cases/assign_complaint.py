"""AssignmentSelector — least-loaded assignment of a complaint to a worker."""

from __future__ import annotations

import logging
from datetime import datetime

from civicdesk.application.ports.complaint_repo import ComplaintRepository
from civicdesk.application.ports.worker_repo import WorkerRepository
from civicdesk.domain.entities.complaint import Complaint
from civicdesk.domain.entities.worker import Worker
from civicdesk.domain.policies.least_loaded import select_least_loaded
from civicdesk.domain.value_objects.enums import AssignmentReason

logger = logging.getLogger(__name__)


class AssignmentSelector:
    """Picks a worker and records the assignment on both sides.

    Runs inside the caller's transaction; the caller commits. The roster is
    read with row locks, so concurrent intakes for the same department queue
    behind each other and always see the latest assigned sets.
    """

    def __init__(
        self,
        worker_repo: WorkerRepository,
        complaint_repo: ComplaintRepository,
        capacity: int,
    ):
        self._workers = worker_repo
        self._complaints = complaint_repo
        self._capacity = capacity

    async def assign_least_loaded(self, complaint: Complaint, now: datetime) -> Worker | None:
        roster = await self._workers.list_by_department(complaint.department_code, lock=True)
        if not roster:
            logger.info("No workers in department %s, complaint %s stays pending",
                        complaint.department_code, complaint.id)
            return None

        chosen = select_least_loaded(roster, self._capacity)
        if chosen is None:
            logger.info(
                "All %d workers in %s at capacity (%d), complaint %s stays pending",
                len(roster), complaint.department_code, self._capacity, complaint.id,
            )
            return None

        await self.assign(chosen, complaint, AssignmentReason.ASSIGNED, now)
        logger.info(
            "Complaint %s → worker %s (%s), load now %d/%d",
            complaint.id, chosen.id, chosen.name, chosen.load, self._capacity,
        )
        return chosen

    async def assign(
        self,
        worker: Worker,
        complaint: Complaint,
        reason: AssignmentReason,
        now: datetime,
    ) -> None:
        """Write the worker side and the complaint side of one assignment."""
        if complaint.id is None or worker.id is None:
            raise ValueError("Both complaint and worker must be persisted before assignment")

        worker.take(complaint.id, reason, now)
        complaint.assign_to(worker.id)
        await self._workers.update(worker)
        await self._complaints.update(complaint)
