"""Tests for SlaViewsUseCase — department and worker dashboards."""

from __future__ import annotations

from datetime import timedelta

import pytest

from civicdesk.application.use_cases.sla_views import DepartmentStats, SlaViewsUseCase
from civicdesk.domain.exceptions import NotFoundError
from civicdesk.domain.value_objects.enums import SLAStatus, WorkerRole, WorkStatus


def _uc(store):
    s = store.session()
    return SlaViewsUseCase(s.complaints, s.workers)


@pytest.fixture
def board(store, t0):
    manager = store.seed_worker("Maria", "ROADS", role=WorkerRole.MANAGER)
    ivan = store.seed_worker("Ivan", "ROADS")
    store.seed_worker("Petr", "ROADS")

    late_2 = store.seed_complaint(
        "ROADS", work_status=WorkStatus.PENDING, sla_status=SLAStatus.VIOLATED,
        sla_violated_at=t0 + timedelta(hours=2),
    )
    late_1 = store.seed_complaint(
        "ROADS", work_status=WorkStatus.PENDING, sla_status=SLAStatus.VIOLATED,
        sla_violated_at=t0 + timedelta(hours=1),
    )
    ip_late = store.seed_complaint(
        "ROADS", work_status=WorkStatus.IN_PROGRESS, sla_status=SLAStatus.VIOLATED,
        sla_violated_at=t0, worker_id=ivan.id,
    )
    warn_far = store.seed_complaint(
        "ROADS", sla_hours=40, work_status=WorkStatus.IN_PROGRESS,
        sla_status=SLAStatus.WARNING, worker_id=ivan.id,
    )
    warn_near = store.seed_complaint(
        "ROADS", sla_hours=10, work_status=WorkStatus.PENDING, sla_status=SLAStatus.WARNING,
    )
    on_track = store.seed_complaint("ROADS")
    done = store.seed_complaint(
        "ROADS", work_status=WorkStatus.COMPLETE, sla_status=SLAStatus.COMPLETED,
    )
    store.seed_complaint("PARKS", sla_status=SLAStatus.VIOLATED, sla_violated_at=t0)
    return {
        "manager": manager, "ivan": ivan, "late_1": late_1, "late_2": late_2,
        "ip_late": ip_late, "warn_far": warn_far, "warn_near": warn_near,
        "on_track": on_track, "done": done,
    }


@pytest.mark.asyncio
async def test_department_report_orders_and_counts(store, board):
    report = await _uc(store).department_report(board["manager"].id)

    assert [c.id for c in report.pending_violations] == [board["late_1"].id, board["late_2"].id]
    assert [c.id for c in report.in_progress_violations] == [board["ip_late"].id]
    assert [c.id for c in report.warnings] == [board["warn_near"].id, board["warn_far"].id]
    assert report.counts() == {
        "pending_violations": 2,
        "in_progress_violations": 1,
        "warnings": 2,
        "total": 5,
    }


@pytest.mark.asyncio
async def test_department_on_track(store, board):
    on_track = await _uc(store).department_on_track(board["manager"].id)
    assert [c.id for c in on_track] == [board["on_track"].id]


@pytest.mark.asyncio
async def test_worker_report_only_in_progress(store, board):
    report = await _uc(store).worker_report(board["ivan"].id)
    assert [c.id for c in report.violations] == [board["ip_late"].id]
    assert [c.id for c in report.warnings] == [board["warn_far"].id]
    assert report.counts()["total"] == 2


@pytest.mark.asyncio
async def test_department_stats(store, board):
    stats = await _uc(store).department_stats(board["manager"].id)

    assert stats.total_workers == 2
    assert stats.total_complaints == 7
    assert (stats.pending, stats.in_progress, stats.completed) == (4, 2, 1)
    assert stats.sla_violations == 3
    assert stats.sla_warnings == 2
    assert stats.sla_on_track == 1
    assert stats.compliance_rate == round((1 - 3) / 7 * 100, 1)


def test_compliance_rate_without_complaints():
    stats = DepartmentStats("X", 0, 0, 0, 0, 0, 0, 0, 0)
    assert stats.compliance_rate == 0.0


@pytest.mark.asyncio
async def test_unknown_members(store):
    with pytest.raises(NotFoundError, match="Manager"):
        await _uc(store).department_report(5)
    with pytest.raises(NotFoundError, match="Worker"):
        await _uc(store).worker_report(5)
