"""ReassignmentCascade — free a worker's slot on completion and backfill it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from civicdesk.application.ports.complaint_repo import ComplaintRepository
from civicdesk.application.ports.notification_repo import NotificationRepository
from civicdesk.application.ports.unit_of_work import UnitOfWork
from civicdesk.application.ports.worker_repo import WorkerRepository
from civicdesk.application.use_cases.assign_complaint import AssignmentSelector
from civicdesk.domain.entities.complaint import Complaint
from civicdesk.domain.entities.notification import Notification
from civicdesk.domain.entities.worker import Worker
from civicdesk.domain.value_objects.enums import AssignmentReason, NotificationKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutoAssignment:
    complaint_id: int
    worker_id: int

    @property
    def message(self) -> str:
        return f"Pending complaint #{self.complaint_id} automatically assigned"


class ReassignmentCascade:
    """Runs inside the completing transaction.

    Releasing the completed complaint is part of the completion itself and
    fails with it. The backfill runs in a savepoint: if it breaks, only its
    own writes are undone and the completion still commits.
    """

    def __init__(
        self,
        complaint_repo: ComplaintRepository,
        worker_repo: WorkerRepository,
        notification_repo: NotificationRepository,
        uow: UnitOfWork,
        capacity: int,
    ):
        self._complaints = complaint_repo
        self._workers = worker_repo
        self._notifications = notification_repo
        self._uow = uow
        self._capacity = capacity
        self._selector = AssignmentSelector(worker_repo, complaint_repo, capacity)

    async def run(self, completed: Complaint, now: datetime) -> AutoAssignment | None:
        if completed.worker_id is None or completed.id is None:
            return None

        worker = await self._workers.get_by_id(completed.worker_id, lock=True)
        if worker is None:
            logger.warning(
                "Complaint %s references missing worker %s, nothing to release",
                completed.id, completed.worker_id,
            )
            return None

        worker.release(completed.id)
        await self._workers.update(worker)
        logger.info("Worker %s now has %d active complaints", worker.id, worker.load)

        if not worker.has_capacity(self._capacity):
            return None

        try:
            async with self._uow.savepoint():
                return await self._backfill(worker, completed.department_code, now)
        except Exception:
            logger.exception(
                "Backfill for worker %s failed; completion of complaint %s is kept",
                worker.id, completed.id,
            )
            return None

    async def _backfill(
        self, worker: Worker, department_code: str, now: datetime
    ) -> AutoAssignment | None:
        pending = await self._complaints.get_oldest_unassigned_pending(department_code)
        if pending is None:
            logger.info("No pending complaints in %s for worker %s", department_code, worker.id)
            return None

        await self._selector.assign(worker, pending, AssignmentReason.AUTO_ASSIGNED, now)
        await self._notifications.add(
            Notification(
                id=None,
                worker_id=worker.id,
                complaint_id=pending.id,
                kind=NotificationKind.AUTO_ASSIGNED,
                message=f"Complaint #{pending.id} was automatically assigned to you",
                created_at=now,
            )
        )
        logger.info(
            "Pending complaint %s auto-assigned to worker %s (load %d/%d)",
            pending.id, worker.id, worker.load, self._capacity,
        )
        return AutoAssignment(complaint_id=pending.id, worker_id=worker.id)
