"""Tests for the read-side use cases: complaint queries, notifications, analytics."""

from __future__ import annotations

from datetime import timedelta

import pytest

from civicdesk.application.use_cases.analytics import AnalyticsUseCase
from civicdesk.application.use_cases.complaint_queries import ComplaintQueriesUseCase
from civicdesk.application.use_cases.notifications import NotificationsUseCase
from civicdesk.domain.entities.notification import Notification
from civicdesk.domain.exceptions import NotFoundError, ValidationError
from civicdesk.domain.value_objects.enums import NotificationKind, WorkerRole, WorkStatus
from civicdesk.domain.value_objects.geo_point import GeoPoint


def _queries(store):
    s = store.session()
    return ComplaintQueriesUseCase(s.complaints, s.workers, s.departments)


# ─── Complaint queries ──────────────────────────────────────────────


@pytest.mark.asyncio
async def test_reporter_history_newest_first(store, t0):
    old = store.seed_complaint("ROADS", created_at=t0 - timedelta(days=2), reporter_id="u1")
    new = store.seed_complaint("PARKS", created_at=t0, reporter_id="u1")
    store.seed_complaint("ROADS", reporter_id="u2")

    complaints = await _queries(store).for_reporter("u1")
    assert [c.id for c in complaints] == [new.id, old.id]


@pytest.mark.asyncio
async def test_reporter_id_required(store):
    with pytest.raises(ValidationError):
        await _queries(store).for_reporter("  ")


@pytest.mark.asyncio
async def test_detail_includes_worker(store):
    w = store.seed_worker("Ivan", "ROADS")
    c = store.seed_complaint("ROADS", work_status=WorkStatus.IN_PROGRESS, worker_id=w.id)

    detail = await _queries(store).detail(c.id)
    assert detail.complaint.id == c.id
    assert detail.worker.name == "Ivan"


@pytest.mark.asyncio
async def test_detail_not_found(store):
    with pytest.raises(NotFoundError):
        await _queries(store).detail(42)


@pytest.mark.asyncio
async def test_worker_complaints(store):
    w = store.seed_worker("Ivan", "ROADS")
    mine = store.seed_complaint("ROADS", worker_id=w.id, work_status=WorkStatus.IN_PROGRESS)
    store.seed_complaint("ROADS")

    worker, complaints = await _queries(store).for_worker(w.id)
    assert worker.id == w.id
    assert [c.id for c in complaints] == [mine.id]

    with pytest.raises(NotFoundError, match="Worker"):
        await _queries(store).for_worker(999)


@pytest.mark.asyncio
async def test_manager_profile_and_roster(store):
    store.seed_department("ROADS", sla_hours=24, name="Roads & Bridges")
    m = store.seed_worker("Maria", "ROADS", role=WorkerRole.MANAGER)
    store.seed_worker("Zed", "ROADS")
    store.seed_worker("Anna", "ROADS")

    uc = _queries(store)
    profile = await uc.manager_profile(m.id)
    assert profile.department.name == "Roads & Bridges"

    roster = await uc.department_workers(m.id)
    assert [w.name for w in roster] == ["Anna", "Zed"]


@pytest.mark.asyncio
async def test_non_manager_has_no_dashboard(store):
    w = store.seed_worker("Ivan", "ROADS")
    with pytest.raises(NotFoundError, match="Manager"):
        await _queries(store).department_complaints(w.id)


@pytest.mark.asyncio
async def test_heatmaps_skip_invalid_coordinates(store):
    m = store.seed_worker("Maria", "ROADS", role=WorkerRole.MANAGER)
    p = store.seed_complaint("ROADS", location=GeoPoint(40.7, -74.0))
    ip = store.seed_complaint(
        "ROADS", location=GeoPoint(40.8, -73.9), work_status=WorkStatus.IN_PROGRESS,
    )
    store.seed_complaint("ROADS", location=GeoPoint(123.0, 10.0))
    store.seed_complaint("ROADS")

    uc = _queries(store)
    pending = await uc.pending_heatmap()
    assert [(pt.complaint_id, pt.weight) for pt in pending] == [(p.id, 1.0)]

    dept = await uc.department_heatmap(m.id)
    assert [(pt.complaint_id, pt.weight) for pt in dept] == [(p.id, 1.0), (ip.id, 0.5)]


# ─── Notifications ──────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_notifications_list_and_mark_read(store, clock, t0):
    for i, minutes in enumerate((0, 10, 20), start=1):
        store.notifications[i] = Notification(
            id=i, worker_id=7, complaint_id=i, kind=NotificationKind.AUTO_ASSIGNED,
            message=f"n{i}", created_at=t0 + timedelta(minutes=minutes),
        )
    s = store.session()
    uc = NotificationsUseCase(s.notifications, s.uow, clock=clock)

    listed = await uc.list_for_worker(7)
    assert [n.id for n in listed] == [3, 2, 1]

    clock.advance(hours=1)
    read = await uc.mark_read(2)
    assert read.is_read and read.read_at == clock.now
    assert store.notifications[2].is_read

    unread = await uc.list_for_worker(7, unread_only=True)
    assert [n.id for n in unread] == [3, 1]

    with pytest.raises(NotFoundError):
        await uc.mark_read(99)


# ─── Analytics ──────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_analytics_summary(store):
    store.seed_complaint("ROADS")
    store.seed_complaint("ROADS", work_status=WorkStatus.IN_PROGRESS)
    store.seed_complaint("PARKS", work_status=WorkStatus.COMPLETE)

    summary = await AnalyticsUseCase(store.session().complaints).summary()

    assert summary["total"] == {"total": 3, "Pending": 1, "In Progress": 1, "Complete": 1}
    assert summary["by_department"]["ROADS"]["total"] == 2
    assert summary["by_department"]["PARKS"]["Complete"] == 1
    assert list(summary["by_department"]) == ["PARKS", "ROADS"]
