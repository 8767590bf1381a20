"""Worker dashboard endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from civicdesk.application.use_cases.complaint_queries import ComplaintQueriesUseCase
from civicdesk.application.use_cases.sla_views import SlaViewsUseCase
from civicdesk.infrastructure.api.dependencies import get_complaint_queries_uc, get_sla_views_uc
from civicdesk.infrastructure.api.serializers import serialize_complaint, serialize_worker

router = APIRouter(prefix="/workers", tags=["workers"])


@router.get("/{worker_id}/complaints")
async def worker_complaints(
    worker_id: int,
    uc: ComplaintQueriesUseCase = Depends(get_complaint_queries_uc),
):
    worker, complaints = await uc.for_worker(worker_id)
    return {
        "worker": serialize_worker(worker),
        "total": len(complaints),
        "complaints": [serialize_complaint(c) for c in complaints],
    }


@router.get("/{worker_id}/sla-violations")
async def worker_sla_violations(
    worker_id: int,
    uc: SlaViewsUseCase = Depends(get_sla_views_uc),
):
    report = await uc.worker_report(worker_id)
    return {
        "violations": [serialize_complaint(c) for c in report.violations],
        "warnings": [serialize_complaint(c) for c in report.warnings],
        "counts": report.counts(),
    }
