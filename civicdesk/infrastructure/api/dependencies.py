"""FastAPI dependency injection — wires adapters into use cases.

Every dependency below asks for ``get_session``; FastAPI resolves it once per
request, so the repositories and the unit of work of one request share a
single session and transaction.
"""

from __future__ import annotations

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from civicdesk.adapters.persistence.database import get_session
from civicdesk.adapters.persistence.repositories import (
    SqlComplaintRepository,
    SqlDepartmentRepository,
    SqlNotificationRepository,
    SqlWorkerRepository,
)
from civicdesk.adapters.persistence.unit_of_work import SqlUnitOfWork
from civicdesk.adapters.storage.photo_storage_adapter import HttpPhotoStorageAdapter
from civicdesk.application.use_cases.analytics import AnalyticsUseCase
from civicdesk.application.use_cases.complaint_queries import ComplaintQueriesUseCase
from civicdesk.application.use_cases.delete_complaint import DeleteComplaintUseCase
from civicdesk.application.use_cases.notifications import NotificationsUseCase
from civicdesk.application.use_cases.sla_views import SlaViewsUseCase
from civicdesk.application.use_cases.submit_complaint import SubmitComplaintUseCase
from civicdesk.application.use_cases.sweep_sla import SweepSlaUseCase
from civicdesk.application.use_cases.toggle_status import ToggleStatusUseCase
from civicdesk.config import settings

logger = logging.getLogger(__name__)

# Re-export session dependency
get_db_session = get_session

# Singleton adapter (stateless)
if settings.storage_url:
    _photo_storage: HttpPhotoStorageAdapter | None = HttpPhotoStorageAdapter()
else:
    _photo_storage = None
    logger.info("STORAGE_URL not set, photo uploads are disabled")


def get_submit_complaint_uc(
    session: AsyncSession = Depends(get_session),
) -> SubmitComplaintUseCase:
    return SubmitComplaintUseCase(
        complaint_repo=SqlComplaintRepository(session),
        worker_repo=SqlWorkerRepository(session),
        department_repo=SqlDepartmentRepository(session),
        uow=SqlUnitOfWork(session),
        capacity=settings.worker_capacity,
        default_sla_hours=settings.default_sla_hours,
        photo_storage=_photo_storage,
    )


def get_toggle_status_uc(
    session: AsyncSession = Depends(get_session),
) -> ToggleStatusUseCase:
    return ToggleStatusUseCase(
        complaint_repo=SqlComplaintRepository(session),
        worker_repo=SqlWorkerRepository(session),
        notification_repo=SqlNotificationRepository(session),
        uow=SqlUnitOfWork(session),
        capacity=settings.worker_capacity,
    )


def get_delete_complaint_uc(
    session: AsyncSession = Depends(get_session),
) -> DeleteComplaintUseCase:
    return DeleteComplaintUseCase(
        complaint_repo=SqlComplaintRepository(session),
        worker_repo=SqlWorkerRepository(session),
        notification_repo=SqlNotificationRepository(session),
        uow=SqlUnitOfWork(session),
    )


def get_complaint_queries_uc(
    session: AsyncSession = Depends(get_session),
) -> ComplaintQueriesUseCase:
    return ComplaintQueriesUseCase(
        complaint_repo=SqlComplaintRepository(session),
        worker_repo=SqlWorkerRepository(session),
        department_repo=SqlDepartmentRepository(session),
    )


def get_sla_views_uc(session: AsyncSession = Depends(get_session)) -> SlaViewsUseCase:
    return SlaViewsUseCase(
        complaint_repo=SqlComplaintRepository(session),
        worker_repo=SqlWorkerRepository(session),
    )


def get_sweep_sla_uc(session: AsyncSession = Depends(get_session)) -> SweepSlaUseCase:
    return SweepSlaUseCase(
        complaint_repo=SqlComplaintRepository(session),
        notification_repo=SqlNotificationRepository(session),
        uow=SqlUnitOfWork(session),
        warning_ratio=settings.sla_warning_ratio,
    )


def get_notifications_uc(session: AsyncSession = Depends(get_session)) -> NotificationsUseCase:
    return NotificationsUseCase(
        notification_repo=SqlNotificationRepository(session),
        uow=SqlUnitOfWork(session),
    )


def get_analytics_uc(session: AsyncSession = Depends(get_session)) -> AnalyticsUseCase:
    return AnalyticsUseCase(complaint_repo=SqlComplaintRepository(session))
