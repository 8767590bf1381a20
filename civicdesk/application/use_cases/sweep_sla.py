"""SweepSlaUseCase — periodic pass that marks open complaints Warning / Violated."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from civicdesk.application.ports.complaint_repo import ComplaintRepository
from civicdesk.application.ports.notification_repo import NotificationRepository
from civicdesk.application.ports.unit_of_work import UnitOfWork
from civicdesk.application.transaction import transactional
from civicdesk.domain.clock import utcnow
from civicdesk.domain.entities.complaint import Complaint
from civicdesk.domain.entities.notification import Notification
from civicdesk.domain.policies.sla_evaluation import evaluate_sla_status
from civicdesk.domain.value_objects.enums import NotificationKind, SLAStatus

logger = logging.getLogger(__name__)


@dataclass
class SweepReport:
    checked: int = 0
    warnings: int = 0
    violations: int = 0


class SweepSlaUseCase:
    def __init__(
        self,
        complaint_repo: ComplaintRepository,
        notification_repo: NotificationRepository,
        uow: UnitOfWork,
        warning_ratio: float,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._complaints = complaint_repo
        self._notifications = notification_repo
        self._uow = uow
        self._warning_ratio = warning_ratio
        self._clock = clock

    async def execute(self) -> SweepReport:
        now = self._clock()
        report = SweepReport()

        async with transactional(self._uow, "SLA sweep"):
            candidates = await self._complaints.list_open_for_sla_check()
            report.checked = len(candidates)
            for complaint in candidates:
                new_status = evaluate_sla_status(complaint, now, self._warning_ratio)
                if new_status == complaint.sla_status:
                    continue

                complaint.sla_status = new_status
                if new_status == SLAStatus.VIOLATED:
                    complaint.sla_violated_at = now
                    report.violations += 1
                else:
                    report.warnings += 1
                await self._complaints.update(complaint)
                await self._notify(complaint, now)

        logger.info(
            "SLA sweep: %d checked, %d new warnings, %d new violations",
            report.checked, report.warnings, report.violations,
        )
        return report

    async def _notify(self, complaint: Complaint, now: datetime) -> None:
        if complaint.worker_id is None:
            return
        if complaint.sla_status == SLAStatus.VIOLATED:
            kind = NotificationKind.SLA_VIOLATED
            message = f"Complaint #{complaint.id} has missed its SLA deadline"
        else:
            kind = NotificationKind.SLA_WARNING
            message = f"Complaint #{complaint.id} is close to its SLA deadline"
        await self._notifications.add(
            Notification(
                id=None,
                worker_id=complaint.worker_id,
                complaint_id=complaint.id,
                kind=kind,
                message=message,
                created_at=now,
            )
        )
