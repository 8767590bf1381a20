"""ComplaintQueriesUseCase — read models for reporters, workers and managers."""

from __future__ import annotations

from dataclasses import dataclass

from civicdesk.application.ports.complaint_repo import ComplaintRepository
from civicdesk.application.ports.department_repo import DepartmentRepository
from civicdesk.application.ports.worker_repo import WorkerRepository
from civicdesk.domain.entities.complaint import Complaint
from civicdesk.domain.entities.department import Department
from civicdesk.domain.entities.worker import Worker
from civicdesk.domain.exceptions import NotFoundError, ValidationError
from civicdesk.domain.value_objects.enums import WorkerRole, WorkStatus


@dataclass
class ComplaintDetail:
    complaint: Complaint
    worker: Worker | None


@dataclass
class ManagerProfile:
    manager: Worker
    department: Department | None


@dataclass(frozen=True)
class HeatPoint:
    latitude: float
    longitude: float
    weight: float
    complaint_id: int | None = None


class ComplaintQueriesUseCase:
    def __init__(
        self,
        complaint_repo: ComplaintRepository,
        worker_repo: WorkerRepository,
        department_repo: DepartmentRepository,
    ):
        self._complaints = complaint_repo
        self._workers = worker_repo
        self._departments = department_repo

    async def for_reporter(self, reporter_id: str) -> list[Complaint]:
        if not reporter_id or not reporter_id.strip():
            raise ValidationError("User ID is required")
        return await self._complaints.list_by_reporter(reporter_id.strip())

    async def detail(self, complaint_id: int) -> ComplaintDetail:
        if complaint_id <= 0:
            raise ValidationError("Invalid complaint ID. Must be a positive number.")
        complaint = await self._complaints.get_by_id(complaint_id)
        if complaint is None:
            raise NotFoundError("Complaint", complaint_id)
        worker = None
        if complaint.worker_id is not None:
            worker = await self._workers.get_by_id(complaint.worker_id)
        return ComplaintDetail(complaint=complaint, worker=worker)

    async def for_worker(self, worker_id: int) -> tuple[Worker, list[Complaint]]:
        worker = await self._workers.get_by_id(worker_id)
        if worker is None:
            raise NotFoundError("Worker", worker_id)
        return worker, await self._complaints.list_by_worker(worker_id)

    async def manager_profile(self, manager_id: int) -> ManagerProfile:
        manager = await self._manager(manager_id)
        department = await self._departments.get_by_code(manager.department_code)
        return ManagerProfile(manager=manager, department=department)

    async def department_workers(self, manager_id: int) -> list[Worker]:
        manager = await self._manager(manager_id)
        workers = await self._workers.list_by_department(
            manager.department_code, role=WorkerRole.EMPLOYEE
        )
        return sorted(workers, key=lambda w: w.name)

    async def department_complaints(self, manager_id: int) -> list[Complaint]:
        manager = await self._manager(manager_id)
        return await self._complaints.list_by_department(manager.department_code)

    async def pending_heatmap(self) -> list[HeatPoint]:
        located = await self._complaints.list_located(work_status=WorkStatus.PENDING)
        return [
            HeatPoint(c.location.latitude, c.location.longitude, 1.0, c.id)
            for c in located
            if c.location is not None and c.location.is_valid()
        ]

    async def department_heatmap(self, manager_id: int) -> list[HeatPoint]:
        manager = await self._manager(manager_id)
        located = await self._complaints.list_located(department_code=manager.department_code)
        return [
            HeatPoint(
                c.location.latitude,
                c.location.longitude,
                1.0 if c.work_status == WorkStatus.PENDING else 0.5,
                c.id,
            )
            for c in located
            if c.location is not None and c.location.is_valid()
        ]

    async def _manager(self, manager_id: int) -> Worker:
        manager = await self._workers.get_by_id(manager_id)
        if manager is None or not manager.is_manager():
            raise NotFoundError("Manager", manager_id)
        return manager
