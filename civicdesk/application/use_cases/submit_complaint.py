"""SubmitComplaintUseCase — intake pipeline: validate → photo → deadline → assign."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from civicdesk.application.ports.complaint_repo import ComplaintRepository
from civicdesk.application.ports.department_repo import DepartmentRepository
from civicdesk.application.ports.photo_storage_port import PhotoStoragePort
from civicdesk.application.ports.unit_of_work import UnitOfWork
from civicdesk.application.ports.worker_repo import WorkerRepository
from civicdesk.application.transaction import transactional
from civicdesk.application.use_cases.assign_complaint import AssignmentSelector
from civicdesk.application.use_cases.calculate_deadline import CalculateDeadlineUseCase
from civicdesk.domain.clock import utcnow
from civicdesk.domain.entities.complaint import Complaint
from civicdesk.domain.entities.worker import Worker
from civicdesk.domain.exceptions import DependencyError, ValidationError
from civicdesk.domain.value_objects.enums import SLAStatus, WorkStatus
from civicdesk.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


@dataclass
class ComplaintSubmission:
    """Raw intake fields as received from the reporter."""

    reporter_id: str | None
    department: str | None
    description: str | None = None
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    photo_data: str | None = None


@dataclass
class SubmissionResult:
    complaint: Complaint
    assigned_worker: Worker | None

    @property
    def message(self) -> str:
        if self.assigned_worker is not None:
            return "Complaint submitted and assigned successfully"
        return "Complaint submitted successfully"


class SubmitComplaintUseCase:
    """Creates a complaint and tries to hand it to the least-loaded worker.

    The complaint insert and the assignment (worker set + complaint status)
    commit together or not at all.
    """

    def __init__(
        self,
        complaint_repo: ComplaintRepository,
        worker_repo: WorkerRepository,
        department_repo: DepartmentRepository,
        uow: UnitOfWork,
        capacity: int,
        default_sla_hours: int,
        photo_storage: PhotoStoragePort | None = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._complaints = complaint_repo
        self._uow = uow
        self._photos = photo_storage
        self._clock = clock
        self._deadline = CalculateDeadlineUseCase(department_repo, uow, default_sla_hours)
        self._selector = AssignmentSelector(worker_repo, complaint_repo, capacity)

    async def execute(self, submission: ComplaintSubmission) -> SubmissionResult:
        reporter_id, department = self._validate(submission)
        photo_url = await self._upload_photo(submission.photo_data)

        created_at = self._clock()
        async with transactional(self._uow, "submit complaint"):
            deadline = await self._deadline.execute(department, created_at)
            complaint = await self._complaints.add(
                Complaint(
                    id=None,
                    reporter_id=reporter_id,
                    department_code=department,
                    description=submission.description,
                    name=submission.name,
                    phone=submission.phone,
                    address=submission.address,
                    location=GeoPoint.from_optional(submission.latitude, submission.longitude),
                    photo_url=photo_url,
                    created_at=created_at,
                    deadline=deadline,
                    work_status=WorkStatus.PENDING,
                    sla_status=SLAStatus.ON_TRACK,
                )
            )
            worker = await self._selector.assign_least_loaded(complaint, created_at)

        logger.info(
            "Complaint %s saved (department=%s, status=%s, deadline=%s)",
            complaint.id, department, complaint.work_status.value, deadline.isoformat(),
        )
        return SubmissionResult(complaint=complaint, assigned_worker=worker)

    @staticmethod
    def _validate(submission: ComplaintSubmission) -> tuple[str, str]:
        reporter_id = (submission.reporter_id or "").strip()
        if not reporter_id:
            raise ValidationError(
                "User authentication required. Please login to submit a complaint."
            )
        department = (submission.department or "").strip()
        if not department:
            raise ValidationError("Department is required.")
        if (submission.latitude is None) != (submission.longitude is None):
            raise ValidationError("Latitude and longitude must be provided together.")
        return reporter_id, department

    async def _upload_photo(self, photo_data: str | None) -> str | None:
        if not photo_data or self._photos is None:
            return None
        try:
            url = await self._photos.upload(photo_data)
        except (DependencyError, ValidationError) as exc:
            logger.warning("Photo upload failed, continuing without photo: %s", exc.message)
            return None
        logger.info("Photo stored at %s", url)
        return url
