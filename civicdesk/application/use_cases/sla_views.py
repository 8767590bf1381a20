"""SlaViewsUseCase — read-only SLA dashboards for managers and workers.

These views only read ``sla_status``; moving complaints to Warning or
Violated is the job of SweepSlaUseCase.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from civicdesk.application.ports.complaint_repo import ComplaintOrder, ComplaintRepository
from civicdesk.application.ports.worker_repo import WorkerRepository
from civicdesk.domain.entities.complaint import Complaint
from civicdesk.domain.entities.worker import Worker
from civicdesk.domain.exceptions import NotFoundError
from civicdesk.domain.value_objects.enums import (
    ACTIVE_WORK_STATUSES,
    SLAStatus,
    WorkerRole,
    WorkStatus,
)


@dataclass
class DepartmentSlaReport:
    department_code: str
    pending_violations: list[Complaint] = field(default_factory=list)
    in_progress_violations: list[Complaint] = field(default_factory=list)
    warnings: list[Complaint] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        counts = {
            "pending_violations": len(self.pending_violations),
            "in_progress_violations": len(self.in_progress_violations),
            "warnings": len(self.warnings),
        }
        counts["total"] = sum(counts.values())
        return counts


@dataclass
class WorkerSlaReport:
    worker_id: int
    violations: list[Complaint] = field(default_factory=list)
    warnings: list[Complaint] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return {
            "violations": len(self.violations),
            "warnings": len(self.warnings),
            "total": len(self.violations) + len(self.warnings),
        }


@dataclass
class DepartmentStats:
    department_code: str
    total_workers: int
    total_complaints: int
    pending: int
    in_progress: int
    completed: int
    sla_violations: int
    sla_warnings: int
    sla_on_track: int

    @property
    def compliance_rate(self) -> float:
        if self.total_complaints == 0:
            return 0.0
        return round(
            (self.completed - self.sla_violations) / self.total_complaints * 100, 1
        )


class SlaViewsUseCase:
    def __init__(self, complaint_repo: ComplaintRepository, worker_repo: WorkerRepository):
        self._complaints = complaint_repo
        self._workers = worker_repo

    async def department_report(self, manager_id: int) -> DepartmentSlaReport:
        manager = await self._member(manager_id, "Manager")
        dept = manager.department_code
        return DepartmentSlaReport(
            department_code=dept,
            pending_violations=await self._complaints.list_by_status(
                (WorkStatus.PENDING,), SLAStatus.VIOLATED,
                ComplaintOrder.VIOLATED_AT, department_code=dept,
            ),
            in_progress_violations=await self._complaints.list_by_status(
                (WorkStatus.IN_PROGRESS,), SLAStatus.VIOLATED,
                ComplaintOrder.VIOLATED_AT, department_code=dept,
            ),
            warnings=await self._complaints.list_by_status(
                ACTIVE_WORK_STATUSES, SLAStatus.WARNING,
                ComplaintOrder.DEADLINE, department_code=dept,
            ),
        )

    async def department_on_track(self, manager_id: int) -> list[Complaint]:
        manager = await self._member(manager_id, "Manager")
        return await self._complaints.list_by_status(
            ACTIVE_WORK_STATUSES, SLAStatus.ON_TRACK,
            ComplaintOrder.DEADLINE, department_code=manager.department_code,
        )

    async def worker_report(self, worker_id: int) -> WorkerSlaReport:
        await self._member(worker_id, "Worker")
        return WorkerSlaReport(
            worker_id=worker_id,
            violations=await self._complaints.list_by_status(
                (WorkStatus.IN_PROGRESS,), SLAStatus.VIOLATED,
                ComplaintOrder.VIOLATED_AT, worker_id=worker_id,
            ),
            warnings=await self._complaints.list_by_status(
                (WorkStatus.IN_PROGRESS,), SLAStatus.WARNING,
                ComplaintOrder.DEADLINE, worker_id=worker_id,
            ),
        )

    async def department_stats(self, manager_id: int) -> DepartmentStats:
        manager = await self._member(manager_id, "Manager")
        dept = manager.department_code
        workers = await self._workers.list_by_department(dept, role=WorkerRole.EMPLOYEE)
        complaints = await self._complaints.list_by_department(dept)

        def count(status: WorkStatus) -> int:
            return sum(1 for c in complaints if c.work_status == status)

        def active_with(sla: SLAStatus) -> int:
            return sum(1 for c in complaints if c.is_active() and c.sla_status == sla)

        return DepartmentStats(
            department_code=dept,
            total_workers=len(workers),
            total_complaints=len(complaints),
            pending=count(WorkStatus.PENDING),
            in_progress=count(WorkStatus.IN_PROGRESS),
            completed=count(WorkStatus.COMPLETE),
            sla_violations=active_with(SLAStatus.VIOLATED),
            sla_warnings=active_with(SLAStatus.WARNING),
            sla_on_track=active_with(SLAStatus.ON_TRACK),
        )

    async def _member(self, member_id: int, label: str) -> Worker:
        member = await self._workers.get_by_id(member_id)
        if member is None:
            raise NotFoundError(label, member_id)
        return member
