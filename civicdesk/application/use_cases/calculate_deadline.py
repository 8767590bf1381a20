"""CalculateDeadlineUseCase — department SLA lookup with a safe default."""

from __future__ import annotations

import logging
from datetime import datetime

from civicdesk.application.ports.department_repo import DepartmentRepository
from civicdesk.application.ports.unit_of_work import UnitOfWork
from civicdesk.domain.entities.department import Department
from civicdesk.domain.policies.deadline import compute_deadline, resolve_sla_hours

logger = logging.getLogger(__name__)


class CalculateDeadlineUseCase:
    """Best-effort deadline: never raises back to intake."""

    def __init__(
        self,
        department_repo: DepartmentRepository,
        uow: UnitOfWork,
        default_sla_hours: int,
    ):
        self._departments = department_repo
        self._uow = uow
        self._default_hours = default_sla_hours

    async def execute(self, department_code: str, created_at: datetime) -> datetime:
        department = await self._lookup(department_code)
        sla_hours = resolve_sla_hours(department, self._default_hours)
        try:
            deadline = compute_deadline(created_at, sla_hours)
        except OverflowError:
            logger.warning(
                "Department %s SLA of %d hours is out of range, using default %d hours",
                department_code, sla_hours, self._default_hours,
            )
            sla_hours = self._default_hours
            deadline = compute_deadline(created_at, sla_hours)
        logger.info(
            "Deadline for %s: %s (%d hours from %s)",
            department_code, deadline.isoformat(), sla_hours, created_at.isoformat(),
        )
        return deadline

    async def _lookup(self, department_code: str) -> Department | None:
        # Savepoint keeps a failed lookup from aborting the intake transaction
        try:
            async with self._uow.savepoint():
                department = await self._departments.get_by_code(department_code)
        except Exception:
            logger.warning(
                "Department %s lookup failed, using default %d hours",
                department_code, self._default_hours, exc_info=True,
            )
            return None

        if department is None:
            logger.warning(
                "Department %s not found, using default %d hours",
                department_code, self._default_hours,
            )
        return department
