"""Manager dashboard endpoints — profile, roster, department queue, SLA, delete."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from civicdesk.application.use_cases.complaint_queries import ComplaintQueriesUseCase
from civicdesk.application.use_cases.delete_complaint import DeleteComplaintUseCase
from civicdesk.application.use_cases.sla_views import SlaViewsUseCase
from civicdesk.infrastructure.api.dependencies import (
    get_complaint_queries_uc,
    get_delete_complaint_uc,
    get_sla_views_uc,
)
from civicdesk.infrastructure.api.serializers import (
    serialize_complaint,
    serialize_department,
    serialize_heat_point,
    serialize_worker,
)

router = APIRouter(prefix="/managers", tags=["managers"])


@router.get("/{manager_id}/profile")
async def manager_profile(
    manager_id: int,
    uc: ComplaintQueriesUseCase = Depends(get_complaint_queries_uc),
):
    profile = await uc.manager_profile(manager_id)
    return {
        "id": profile.manager.id,
        "name": profile.manager.name,
        "role": profile.manager.role.value,
        "department": serialize_department(profile.department)
        or {"code": profile.manager.department_code, "name": None, "sla_hours": None},
    }


@router.get("/{manager_id}/workers")
async def department_workers(
    manager_id: int,
    uc: ComplaintQueriesUseCase = Depends(get_complaint_queries_uc),
):
    workers = await uc.department_workers(manager_id)
    return {"total": len(workers), "workers": [serialize_worker(w) for w in workers]}


@router.get("/{manager_id}/complaints")
async def department_complaints(
    manager_id: int,
    uc: ComplaintQueriesUseCase = Depends(get_complaint_queries_uc),
):
    complaints = await uc.department_complaints(manager_id)
    return {
        "total": len(complaints),
        "complaints": [serialize_complaint(c) for c in complaints],
    }


@router.get("/{manager_id}/stats")
async def department_stats(
    manager_id: int,
    uc: SlaViewsUseCase = Depends(get_sla_views_uc),
):
    stats = await uc.department_stats(manager_id)
    return {
        "department": stats.department_code,
        "total_workers": stats.total_workers,
        "total_complaints": stats.total_complaints,
        "pending": stats.pending,
        "in_progress": stats.in_progress,
        "completed": stats.completed,
        "sla_violations": stats.sla_violations,
        "sla_warnings": stats.sla_warnings,
        "sla_on_track": stats.sla_on_track,
        "compliance_rate": stats.compliance_rate,
    }


@router.get("/{manager_id}/heatmap")
async def department_heatmap(
    manager_id: int,
    uc: ComplaintQueriesUseCase = Depends(get_complaint_queries_uc),
):
    points = await uc.department_heatmap(manager_id)
    return {"total": len(points), "points": [serialize_heat_point(p) for p in points]}


@router.get("/{manager_id}/sla-violations")
async def department_sla_violations(
    manager_id: int,
    uc: SlaViewsUseCase = Depends(get_sla_views_uc),
):
    report = await uc.department_report(manager_id)
    return {
        "department": report.department_code,
        "pending_violations": [serialize_complaint(c) for c in report.pending_violations],
        "in_progress_violations": [serialize_complaint(c) for c in report.in_progress_violations],
        "warnings": [serialize_complaint(c) for c in report.warnings],
        "counts": report.counts(),
    }


@router.delete("/{manager_id}/complaints/{complaint_id}")
async def delete_complaint(
    manager_id: int,
    complaint_id: int,
    uc: DeleteComplaintUseCase = Depends(get_delete_complaint_uc),
):
    await uc.execute(complaint_id, manager_id)
    return {"success": True, "message": "Complaint deleted successfully"}


@router.get("/{manager_id}/sla-on-track")
async def department_on_track(
    manager_id: int,
    uc: SlaViewsUseCase = Depends(get_sla_views_uc),
):
    """Open complaints still inside their SLA, nearest deadline first."""
    complaints = await uc.department_on_track(manager_id)
    return {"total": len(complaints), "complaints": [serialize_complaint(c) for c in complaints]}
