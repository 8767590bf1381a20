"""Analytics endpoints — dashboard summary."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from civicdesk.application.use_cases.analytics import AnalyticsUseCase
from civicdesk.infrastructure.api.dependencies import get_analytics_uc

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/summary")
async def analytics_summary(uc: AnalyticsUseCase = Depends(get_analytics_uc)):
    """Complaint totals per work status, overall and per department."""
    return await uc.summary()
