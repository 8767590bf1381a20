"""SLA sweep trigger (also available as ``python -m civicdesk.tools.sla_sweep``)."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from civicdesk.application.use_cases.sweep_sla import SweepSlaUseCase
from civicdesk.infrastructure.api.dependencies import get_sweep_sla_uc

router = APIRouter(prefix="/sla", tags=["sla"])


@router.post("/check")
async def run_sla_check(uc: SweepSlaUseCase = Depends(get_sweep_sla_uc)):
    report = await uc.execute()
    return {
        "checked": report.checked,
        "new_warnings": report.warnings,
        "new_violations": report.violations,
    }
