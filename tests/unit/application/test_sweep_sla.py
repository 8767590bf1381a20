"""Tests for SweepSlaUseCase — periodic Warning / Violated marking."""

from __future__ import annotations

from datetime import timedelta

import pytest

from civicdesk.application.use_cases.sweep_sla import SweepSlaUseCase
from civicdesk.domain.exceptions import DependencyError
from civicdesk.domain.value_objects.enums import NotificationKind, SLAStatus, WorkStatus


def _uc(store, clock, ratio=0.25, session=None):
    s = session or store.session()
    return SweepSlaUseCase(s.complaints, s.notifications, s.uow, ratio, clock=clock)


@pytest.mark.asyncio
async def test_marks_overdue_and_nearly_due(store, clock, t0):
    overdue = store.seed_complaint("ROADS", created_at=t0 - timedelta(hours=50), worker_id=3,
                                   work_status=WorkStatus.IN_PROGRESS)
    nearly = store.seed_complaint("ROADS", created_at=t0 - timedelta(hours=40))
    fresh = store.seed_complaint("ROADS", created_at=t0 - timedelta(hours=1))

    report = await _uc(store, clock).execute()

    assert (report.checked, report.warnings, report.violations) == (3, 1, 1)
    assert store.complaints[overdue.id].sla_status == SLAStatus.VIOLATED
    assert store.complaints[overdue.id].sla_violated_at == t0
    assert store.complaints[nearly.id].sla_status == SLAStatus.WARNING
    assert store.complaints[fresh.id].sla_status == SLAStatus.ON_TRACK

    [note] = store.notifications.values()
    assert note.worker_id == 3
    assert note.kind == NotificationKind.SLA_VIOLATED


@pytest.mark.asyncio
async def test_second_sweep_changes_nothing(store, clock, t0):
    store.seed_complaint("ROADS", created_at=t0 - timedelta(hours=40), worker_id=1)
    await _uc(store, clock).execute()

    report = await _uc(store, clock).execute()
    assert (report.warnings, report.violations) == (0, 0)
    assert len(store.notifications) == 1


@pytest.mark.asyncio
async def test_warning_escalates_then_sticks(store, clock, t0):
    c = store.seed_complaint("ROADS", created_at=t0 - timedelta(hours=40))
    await _uc(store, clock).execute()
    clock.advance(hours=9)
    await _uc(store, clock).execute()
    assert store.complaints[c.id].sla_status == SLAStatus.VIOLATED

    violated_at = store.complaints[c.id].sla_violated_at
    clock.advance(hours=30)
    report = await _uc(store, clock).execute()
    assert report.checked == 0
    assert store.complaints[c.id].sla_violated_at == violated_at


@pytest.mark.asyncio
async def test_completed_complaints_ignored(store, clock, t0):
    store.seed_complaint(
        "ROADS", created_at=t0 - timedelta(hours=100),
        work_status=WorkStatus.COMPLETE, sla_status=SLAStatus.COMPLETED,
    )
    report = await _uc(store, clock).execute()
    assert report.checked == 0


@pytest.mark.asyncio
async def test_notification_failure_rolls_back_whole_sweep(store, clock, t0):
    first = store.seed_complaint("ROADS", created_at=t0 - timedelta(hours=60))
    second = store.seed_complaint("ROADS", created_at=t0 - timedelta(hours=55), worker_id=2)
    store.fail("notifications.add")

    with pytest.raises(DependencyError):
        await _uc(store, clock).execute()

    assert store.complaints[first.id].sla_status == SLAStatus.ON_TRACK
    assert store.complaints[second.id].sla_status == SLAStatus.ON_TRACK
    assert store.complaints[first.id].sla_violated_at is None


@pytest.mark.asyncio
async def test_store_failure_rolls_back(store, clock, t0):
    c = store.seed_complaint("ROADS", created_at=t0 - timedelta(hours=60))
    store.fail("complaints.update")
    session = store.session()

    with pytest.raises(DependencyError):
        await _uc(store, clock, session=session).execute()

    assert store.complaints[c.id].sla_status == SLAStatus.ON_TRACK
    assert session.uow.rollbacks == 1
