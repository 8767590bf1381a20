"""ToggleStatusUseCase — worker-initiated status change plus completion cascade."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from civicdesk.application.ports.complaint_repo import ComplaintRepository
from civicdesk.application.ports.notification_repo import NotificationRepository
from civicdesk.application.ports.unit_of_work import UnitOfWork
from civicdesk.application.ports.worker_repo import WorkerRepository
from civicdesk.application.transaction import transactional
from civicdesk.application.use_cases.reassignment_cascade import (
    AutoAssignment,
    ReassignmentCascade,
)
from civicdesk.domain.clock import utcnow
from civicdesk.domain.entities.complaint import Complaint
from civicdesk.domain.exceptions import AuthorizationError, NotFoundError, ValidationError
from civicdesk.domain.policies.status_machine import Transition, apply_toggle
from civicdesk.domain.value_objects.enums import AssignmentReason, WorkStatus

logger = logging.getLogger(__name__)


@dataclass
class ToggleResult:
    complaint: Complaint
    transition: Transition
    auto_assignment: AutoAssignment | None = None

    @property
    def message(self) -> str:
        return (
            f"Status changed from {self.transition.previous.value} "
            f"to {self.transition.current.value}"
        )


class ToggleStatusUseCase:
    def __init__(
        self,
        complaint_repo: ComplaintRepository,
        worker_repo: WorkerRepository,
        notification_repo: NotificationRepository,
        uow: UnitOfWork,
        capacity: int,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._complaints = complaint_repo
        self._workers = worker_repo
        self._uow = uow
        self._clock = clock
        self._cascade = ReassignmentCascade(
            complaint_repo, worker_repo, notification_repo, uow, capacity
        )

    async def execute(self, complaint_id: int, worker_id: int | None = None) -> ToggleResult:
        """Apply one toggle to *complaint_id*.

        *worker_id* is the acting worker; it only matters when a Pending,
        unassigned complaint is picked up directly.
        """
        if complaint_id <= 0:
            raise ValidationError("Invalid complaint ID. Must be a positive number.")

        now = self._clock()
        async with transactional(self._uow, "toggle complaint status"):
            complaint = await self._complaints.get_by_id(complaint_id, lock=True)
            if complaint is None:
                raise NotFoundError("Complaint", complaint_id)

            transition = apply_toggle(complaint, now)
            if transition.current == WorkStatus.IN_PROGRESS:
                await self._take_ownership(complaint, worker_id, now)
            await self._complaints.update(complaint)

            auto = None
            if transition.completed and complaint.worker_id is not None:
                auto = await self._cascade.run(complaint, now)

        logger.info(
            "Complaint %s: %s → %s%s",
            complaint.id, transition.previous.value, transition.current.value,
            f" (auto-assigned #{auto.complaint_id})" if auto else "",
        )
        return ToggleResult(complaint=complaint, transition=transition, auto_assignment=auto)

    async def _take_ownership(
        self, complaint: Complaint, worker_id: int | None, now: datetime
    ) -> None:
        """Keep the owning worker's assigned set in step with an In Progress complaint."""
        if complaint.worker_id is None:
            if worker_id is None:
                return
            worker = await self._workers.get_by_id(worker_id, lock=True)
            if worker is None:
                raise NotFoundError("Worker", worker_id)
            if worker.department_code != complaint.department_code:
                raise AuthorizationError(
                    "Workers can only pick up complaints from their own department"
                )
            worker.take(complaint.id, AssignmentReason.ASSIGNED, now)
            complaint.worker_id = worker.id
            await self._workers.update(worker)
            return

        # Reopen: the owner gets the complaint back in its active set
        worker = await self._workers.get_by_id(complaint.worker_id, lock=True)
        if worker is None:
            logger.warning(
                "Complaint %s references missing worker %s, clearing the reference",
                complaint.id, complaint.worker_id,
            )
            complaint.worker_id = None
            return
        if complaint.id not in worker.assigned:
            worker.assigned = worker.assigned.add(complaint.id)
            await self._workers.update(worker)
