"""SQLAlchemy repository implementations."""

from __future__ import annotations

from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from civicdesk.adapters.persistence.models import (
    ComplaintModel,
    DepartmentModel,
    NotificationModel,
    WorkerModel,
)
from civicdesk.application.ports.complaint_repo import ComplaintOrder, ComplaintRepository
from civicdesk.application.ports.department_repo import DepartmentRepository
from civicdesk.application.ports.notification_repo import NotificationRepository
from civicdesk.application.ports.worker_repo import WorkerRepository
from civicdesk.domain.entities.assignment import parse_history
from civicdesk.domain.entities.complaint import Complaint
from civicdesk.domain.entities.department import Department
from civicdesk.domain.entities.notification import Notification
from civicdesk.domain.entities.worker import Worker
from civicdesk.domain.value_objects.assigned_set import AssignedSet
from civicdesk.domain.value_objects.enums import (
    NotificationKind,
    SLAStatus,
    WorkerRole,
    WorkStatus,
)
from civicdesk.domain.value_objects.geo_point import GeoPoint

# ─── Mappers ─────────────────────────────────────────────────────────


def _department_to_domain(m: DepartmentModel) -> Department:
    return Department(code=m.code, name=m.name, sla_hours=m.sla_hours)


def _worker_to_domain(m: WorkerModel) -> Worker:
    return Worker(
        id=m.id,
        name=m.name,
        department_code=m.department_code,
        role=WorkerRole(m.role),
        assigned=AssignedSet.parse(m.assigned_complaint_ids),
        history=parse_history(m.assignment_history),
    )


def _complaint_to_domain(m: ComplaintModel) -> Complaint:
    return Complaint(
        id=m.id,
        reporter_id=m.reporter_id,
        department_code=m.department_code,
        description=m.description,
        created_at=m.created_at,
        deadline=m.deadline,
        name=m.name,
        phone=m.phone,
        address=m.address,
        location=GeoPoint.from_optional(m.latitude, m.longitude),
        photo_url=m.photo_url,
        work_status=WorkStatus(m.work_status),
        sla_status=SLAStatus(m.sla_status),
        sla_violated_at=m.sla_violated_at,
        time_to_resolve=m.time_to_resolve,
        resolved_at=m.resolved_at,
        worker_id=m.worker_id,
    )


def _complaint_values(c: Complaint) -> dict:
    return {
        "reporter_id": c.reporter_id,
        "name": c.name,
        "phone": c.phone,
        "address": c.address,
        "description": c.description,
        "department_code": c.department_code,
        "latitude": c.location.latitude if c.location else None,
        "longitude": c.location.longitude if c.location else None,
        "photo_url": c.photo_url,
        "work_status": c.work_status.value,
        "sla_status": c.sla_status.value,
        "created_at": c.created_at,
        "deadline": c.deadline,
        "sla_violated_at": c.sla_violated_at,
        "time_to_resolve": c.time_to_resolve,
        "resolved_at": c.resolved_at,
        "worker_id": c.worker_id,
    }


def _notification_to_domain(m: NotificationModel) -> Notification:
    return Notification(
        id=m.id,
        worker_id=m.worker_id,
        complaint_id=m.complaint_id,
        kind=NotificationKind(m.kind),
        message=m.message,
        created_at=m.created_at,
        is_read=m.is_read,
        read_at=m.read_at,
    )


def _locked(stmt: Select, lock: bool, skip_locked: bool = False) -> Select:
    """Row-lock a SELECT and make sure the session sees the fresh row."""
    if not lock:
        return stmt
    return stmt.with_for_update(skip_locked=skip_locked).execution_options(
        populate_existing=True
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlDepartmentRepository(DepartmentRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def add(self, department: Department) -> Department:
        self._s.add(
            DepartmentModel(
                code=department.code,
                name=department.name,
                sla_hours=department.sla_hours,
            )
        )
        await self._s.flush()
        return department

    async def get_by_code(self, code: str) -> Department | None:
        m = await self._s.get(DepartmentModel, code)
        return _department_to_domain(m) if m else None

    async def get_all(self) -> list[Department]:
        result = await self._s.execute(select(DepartmentModel).order_by(DepartmentModel.code))
        return [_department_to_domain(m) for m in result.scalars()]


class SqlWorkerRepository(WorkerRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def add(self, worker: Worker) -> Worker:
        m = WorkerModel(
            name=worker.name,
            department_code=worker.department_code,
            role=worker.role.value,
            assigned_complaint_ids=worker.assigned.to_list(),
            assignment_history=[r.to_dict() for r in worker.history],
        )
        self._s.add(m)
        await self._s.flush()
        worker.id = m.id
        return worker

    async def get_by_id(self, worker_id: int, lock: bool = False) -> Worker | None:
        stmt = _locked(select(WorkerModel).where(WorkerModel.id == worker_id), lock)
        m = (await self._s.execute(stmt)).scalar_one_or_none()
        return _worker_to_domain(m) if m else None

    async def list_by_department(
        self,
        department_code: str,
        role: WorkerRole | None = WorkerRole.EMPLOYEE,
        lock: bool = False,
    ) -> list[Worker]:
        stmt = select(WorkerModel).where(WorkerModel.department_code == department_code)
        if role is not None:
            stmt = stmt.where(WorkerModel.role == role.value)
        stmt = _locked(stmt.order_by(WorkerModel.id), lock)
        result = await self._s.execute(stmt)
        return [_worker_to_domain(m) for m in result.scalars()]

    async def update(self, worker: Worker) -> Worker:
        await self._s.execute(
            update(WorkerModel)
            .where(WorkerModel.id == worker.id)
            .values(
                name=worker.name,
                department_code=worker.department_code,
                role=worker.role.value,
                assigned_complaint_ids=worker.assigned.to_list(),
                assignment_history=[r.to_dict() for r in worker.history],
            )
        )
        await self._s.flush()
        return worker


class SqlComplaintRepository(ComplaintRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def add(self, complaint: Complaint) -> Complaint:
        m = ComplaintModel(**_complaint_values(complaint))
        self._s.add(m)
        await self._s.flush()
        complaint.id = m.id
        return complaint

    async def get_by_id(self, complaint_id: int, lock: bool = False) -> Complaint | None:
        stmt = _locked(select(ComplaintModel).where(ComplaintModel.id == complaint_id), lock)
        m = (await self._s.execute(stmt)).scalar_one_or_none()
        return _complaint_to_domain(m) if m else None

    async def update(self, complaint: Complaint) -> Complaint:
        await self._s.execute(
            update(ComplaintModel)
            .where(ComplaintModel.id == complaint.id)
            .values(**_complaint_values(complaint))
        )
        await self._s.flush()
        return complaint

    async def delete(self, complaint_id: int) -> None:
        await self._s.execute(delete(ComplaintModel).where(ComplaintModel.id == complaint_id))
        await self._s.flush()

    async def list_by_reporter(self, reporter_id: str) -> list[Complaint]:
        return await self._newest_first(ComplaintModel.reporter_id == reporter_id)

    async def list_by_worker(self, worker_id: int) -> list[Complaint]:
        return await self._newest_first(ComplaintModel.worker_id == worker_id)

    async def list_by_department(self, department_code: str) -> list[Complaint]:
        return await self._newest_first(ComplaintModel.department_code == department_code)

    async def get_oldest_unassigned_pending(self, department_code: str) -> Complaint | None:
        stmt = (
            select(ComplaintModel)
            .where(
                ComplaintModel.department_code == department_code,
                ComplaintModel.work_status == WorkStatus.PENDING.value,
                ComplaintModel.worker_id.is_(None),
            )
            .order_by(ComplaintModel.created_at, ComplaintModel.id)
            .limit(1)
        )
        m = (await self._s.execute(_locked(stmt, True, skip_locked=True))).scalar_one_or_none()
        return _complaint_to_domain(m) if m else None

    async def list_by_status(
        self,
        work_statuses: tuple[WorkStatus, ...],
        sla_status: SLAStatus,
        order: ComplaintOrder,
        department_code: str | None = None,
        worker_id: int | None = None,
    ) -> list[Complaint]:
        stmt = select(ComplaintModel).where(
            ComplaintModel.work_status.in_([s.value for s in work_statuses]),
            ComplaintModel.sla_status == sla_status.value,
        )
        if department_code is not None:
            stmt = stmt.where(ComplaintModel.department_code == department_code)
        if worker_id is not None:
            stmt = stmt.where(ComplaintModel.worker_id == worker_id)

        if order == ComplaintOrder.VIOLATED_AT:
            stmt = stmt.order_by(ComplaintModel.sla_violated_at.asc().nulls_last(), ComplaintModel.id)
        elif order == ComplaintOrder.DEADLINE:
            stmt = stmt.order_by(ComplaintModel.deadline.asc(), ComplaintModel.id)
        else:
            stmt = stmt.order_by(ComplaintModel.created_at.desc(), ComplaintModel.id.desc())

        result = await self._s.execute(stmt)
        return [_complaint_to_domain(m) for m in result.scalars()]

    async def list_open_for_sla_check(self) -> list[Complaint]:
        stmt = (
            select(ComplaintModel)
            .where(
                ComplaintModel.work_status.in_(
                    [WorkStatus.PENDING.value, WorkStatus.IN_PROGRESS.value]
                ),
                ComplaintModel.sla_status.in_(
                    [SLAStatus.ON_TRACK.value, SLAStatus.WARNING.value]
                ),
            )
            .order_by(ComplaintModel.deadline, ComplaintModel.id)
        )
        # Rows a toggle is holding are picked up by the next sweep
        result = await self._s.execute(_locked(stmt, True, skip_locked=True))
        return [_complaint_to_domain(m) for m in result.scalars()]

    async def list_located(
        self,
        department_code: str | None = None,
        work_status: WorkStatus | None = None,
    ) -> list[Complaint]:
        stmt = select(ComplaintModel).where(
            ComplaintModel.latitude.is_not(None),
            ComplaintModel.longitude.is_not(None),
        )
        if department_code is not None:
            stmt = stmt.where(ComplaintModel.department_code == department_code)
        if work_status is not None:
            stmt = stmt.where(ComplaintModel.work_status == work_status.value)
        result = await self._s.execute(stmt.order_by(ComplaintModel.id))
        return [_complaint_to_domain(m) for m in result.scalars()]

    async def count_by_department_and_status(self) -> dict[tuple[str, WorkStatus], int]:
        rows = (
            await self._s.execute(
                select(
                    ComplaintModel.department_code,
                    ComplaintModel.work_status,
                    func.count(ComplaintModel.id),
                ).group_by(ComplaintModel.department_code, ComplaintModel.work_status)
            )
        ).all()
        return {(row[0], WorkStatus(row[1])): row[2] for row in rows}

    async def _newest_first(self, condition) -> list[Complaint]:
        result = await self._s.execute(
            select(ComplaintModel)
            .where(condition)
            .order_by(ComplaintModel.created_at.desc(), ComplaintModel.id.desc())
        )
        return [_complaint_to_domain(m) for m in result.scalars()]


class SqlNotificationRepository(NotificationRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def add(self, notification: Notification) -> Notification:
        m = NotificationModel(
            worker_id=notification.worker_id,
            complaint_id=notification.complaint_id,
            kind=notification.kind.value,
            message=notification.message,
            is_read=notification.is_read,
            created_at=notification.created_at,
            read_at=notification.read_at,
        )
        self._s.add(m)
        await self._s.flush()
        notification.id = m.id
        return notification

    async def get_by_id(self, notification_id: int) -> Notification | None:
        m = await self._s.get(NotificationModel, notification_id)
        return _notification_to_domain(m) if m else None

    async def update(self, notification: Notification) -> Notification:
        await self._s.execute(
            update(NotificationModel)
            .where(NotificationModel.id == notification.id)
            .values(is_read=notification.is_read, read_at=notification.read_at)
        )
        await self._s.flush()
        return notification

    async def list_for_worker(self, worker_id: int, unread_only: bool = False) -> list[Notification]:
        stmt = select(NotificationModel).where(NotificationModel.worker_id == worker_id)
        if unread_only:
            stmt = stmt.where(NotificationModel.is_read.is_(False))
        result = await self._s.execute(
            stmt.order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        return [_notification_to_domain(m) for m in result.scalars()]

    async def delete_for_complaint(self, complaint_id: int) -> None:
        await self._s.execute(
            delete(NotificationModel).where(NotificationModel.complaint_id == complaint_id)
        )
        await self._s.flush()
