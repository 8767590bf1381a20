"""Complaint endpoints — intake, reporter history, detail view, status toggle."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from civicdesk.application.use_cases.complaint_queries import ComplaintQueriesUseCase
from civicdesk.application.use_cases.submit_complaint import (
    ComplaintSubmission,
    SubmitComplaintUseCase,
)
from civicdesk.application.use_cases.toggle_status import ToggleStatusUseCase
from civicdesk.infrastructure.api.dependencies import (
    get_complaint_queries_uc,
    get_submit_complaint_uc,
    get_toggle_status_uc,
)
from civicdesk.infrastructure.api.schemas import ComplaintCreate
from civicdesk.infrastructure.api.serializers import (
    serialize_complaint,
    serialize_heat_point,
    serialize_worker,
)

router = APIRouter(prefix="/complaints", tags=["complaints"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_complaint(
    body: ComplaintCreate,
    uc: SubmitComplaintUseCase = Depends(get_submit_complaint_uc),
):
    """File a complaint; it is assigned right away when a worker has capacity."""
    result = await uc.execute(ComplaintSubmission(**body.model_dump()))
    return {
        "success": True,
        "message": result.message,
        "complaint": serialize_complaint(result.complaint),
        "assigned_worker": serialize_worker(result.assigned_worker) if result.assigned_worker else None,
    }


@router.get("/reporter/{reporter_id}")
async def list_reporter_complaints(
    reporter_id: str,
    uc: ComplaintQueriesUseCase = Depends(get_complaint_queries_uc),
):
    complaints = await uc.for_reporter(reporter_id)
    return {
        "total": len(complaints),
        "complaints": [serialize_complaint(c) for c in complaints],
    }


# Declared before /{complaint_id} so "heatmap" is not parsed as an id
@router.get("/heatmap")
async def pending_heatmap(uc: ComplaintQueriesUseCase = Depends(get_complaint_queries_uc)):
    """Coordinates of all Pending complaints."""
    points = await uc.pending_heatmap()
    return {"total": len(points), "points": [serialize_heat_point(p) for p in points]}


@router.get("/{complaint_id}")
async def get_complaint(
    complaint_id: int,
    uc: ComplaintQueriesUseCase = Depends(get_complaint_queries_uc),
):
    detail = await uc.detail(complaint_id)
    data = serialize_complaint(detail.complaint)
    data["worker"] = (
        {
            "id": detail.worker.id,
            "name": detail.worker.name,
            "department_code": detail.worker.department_code,
        }
        if detail.worker
        else None
    )
    return data


@router.patch("/{complaint_id}/toggle")
async def toggle_status(
    complaint_id: int,
    worker_id: int | None = Query(default=None, description="Acting worker"),
    uc: ToggleStatusUseCase = Depends(get_toggle_status_uc),
):
    result = await uc.execute(complaint_id, worker_id=worker_id)
    return {
        "success": True,
        "message": result.message,
        "previous_status": result.transition.previous.value,
        "new_status": result.transition.current.value,
        "complaint": serialize_complaint(result.complaint),
        "auto_assigned": (
            {
                "complaint_id": result.auto_assignment.complaint_id,
                "worker_id": result.auto_assignment.worker_id,
                "message": result.auto_assignment.message,
            }
            if result.auto_assignment
            else None
        ),
    }
