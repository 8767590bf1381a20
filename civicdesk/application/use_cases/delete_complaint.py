"""DeleteComplaintUseCase — manager removes an open complaint of their department."""

from __future__ import annotations

import logging

from civicdesk.application.ports.complaint_repo import ComplaintRepository
from civicdesk.application.ports.notification_repo import NotificationRepository
from civicdesk.application.ports.unit_of_work import UnitOfWork
from civicdesk.application.ports.worker_repo import WorkerRepository
from civicdesk.application.transaction import transactional
from civicdesk.domain.exceptions import AuthorizationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class DeleteComplaintUseCase:
    def __init__(
        self,
        complaint_repo: ComplaintRepository,
        worker_repo: WorkerRepository,
        notification_repo: NotificationRepository,
        uow: UnitOfWork,
    ):
        self._complaints = complaint_repo
        self._workers = worker_repo
        self._notifications = notification_repo
        self._uow = uow

    async def execute(self, complaint_id: int, manager_id: int) -> None:
        """Delete *complaint_id* on behalf of *manager_id*.

        Allowed only for managers of the complaint's department and only while
        the complaint is Pending or In Progress. The owning worker loses the id
        from both its assigned set and its history.
        """
        if complaint_id <= 0:
            raise ValidationError("Invalid complaint ID")

        async with transactional(self._uow, "delete complaint"):
            manager = await self._workers.get_by_id(manager_id)
            if manager is None or not manager.is_manager():
                raise AuthorizationError("Unauthorized: Only managers can delete complaints")

            complaint = await self._complaints.get_by_id(complaint_id, lock=True)
            if complaint is None:
                raise NotFoundError("Complaint", complaint_id)
            if complaint.department_code != manager.department_code:
                raise AuthorizationError("You can only delete complaints from your department")
            if not complaint.is_active():
                raise AuthorizationError(
                    'Only complaints with status "In Progress" or "Pending" can be deleted'
                )

            if complaint.worker_id is not None:
                worker = await self._workers.get_by_id(complaint.worker_id, lock=True)
                if worker is not None:
                    worker.forget(complaint_id)
                    await self._workers.update(worker)

            await self._notifications.delete_for_complaint(complaint_id)
            await self._complaints.delete(complaint_id)

        logger.info("Complaint %s deleted by manager %s", complaint_id, manager_id)
