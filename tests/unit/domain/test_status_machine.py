"""Tests for the complaint status machine, deadline and SLA evaluation policies."""

from datetime import datetime, timedelta, timezone

import pytest

from civicdesk.domain.entities.complaint import Complaint
from civicdesk.domain.entities.department import Department
from civicdesk.domain.policies.deadline import compute_deadline, resolve_sla_hours
from civicdesk.domain.policies.sla_evaluation import evaluate_sla_status
from civicdesk.domain.policies.status_machine import apply_toggle, next_work_status
from civicdesk.domain.value_objects.enums import SLAStatus, WorkStatus

T0 = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


def _complaint(status=WorkStatus.PENDING, sla=SLAStatus.ON_TRACK, hours=48) -> Complaint:
    return Complaint(
        id=1, reporter_id="u", department_code="D", description=None,
        created_at=T0, deadline=T0 + timedelta(hours=hours),
        work_status=status, sla_status=sla,
    )


# ─── Status machine ─────────────────────────────────────────────────


@pytest.mark.parametrize(
    "current, expected",
    [
        (WorkStatus.PENDING, WorkStatus.IN_PROGRESS),
        (WorkStatus.IN_PROGRESS, WorkStatus.COMPLETE),
        (WorkStatus.COMPLETE, WorkStatus.IN_PROGRESS),
    ],
)
def test_next_work_status(current, expected):
    assert next_work_status(current) == expected


@pytest.mark.parametrize("sla", [SLAStatus.ON_TRACK, SLAStatus.WARNING, SLAStatus.VIOLATED])
def test_completion_overrides_sla_and_stamps_duration(sla):
    c = _complaint(WorkStatus.IN_PROGRESS, sla)
    t = apply_toggle(c, T0 + timedelta(hours=3, minutes=15))

    assert t.completed and not t.reopened
    assert c.sla_status == SLAStatus.COMPLETED
    assert c.time_to_resolve == timedelta(hours=3, minutes=15)
    assert c.resolved_at == T0 + timedelta(hours=3, minutes=15)


def test_start_leaves_sla_untouched():
    c = _complaint(WorkStatus.PENDING, SLAStatus.WARNING)
    t = apply_toggle(c, T0)
    assert not t.completed
    assert c.sla_status == SLAStatus.WARNING
    assert c.time_to_resolve is None


def test_reopen_clears_resolution_until_completed_again():
    c = _complaint(WorkStatus.IN_PROGRESS)
    apply_toggle(c, T0 + timedelta(hours=1))
    t = apply_toggle(c, T0 + timedelta(hours=2))

    assert t.reopened
    assert c.work_status == WorkStatus.IN_PROGRESS
    assert c.time_to_resolve is None

    apply_toggle(c, T0 + timedelta(hours=6))
    assert c.time_to_resolve == timedelta(hours=6)


# ─── Deadline ───────────────────────────────────────────────────────


def test_deadline_arithmetic():
    assert compute_deadline(T0, 48) == T0 + timedelta(hours=48)


@pytest.mark.parametrize(
    "department, expected",
    [
        (None, 48),
        (Department("D", "D", None), 48),
        (Department("D", "D", 0), 48),
        (Department("D", "D", 24), 24),
    ],
)
def test_resolve_sla_hours(department, expected):
    assert resolve_sla_hours(department, 48) == expected


# ─── SLA evaluation ─────────────────────────────────────────────────


@pytest.mark.parametrize(
    "elapsed_hours, expected",
    [
        (0, SLAStatus.ON_TRACK),
        (35.9, SLAStatus.ON_TRACK),
        (36, SLAStatus.WARNING),
        (47.9, SLAStatus.WARNING),
        (48, SLAStatus.VIOLATED),
        (100, SLAStatus.VIOLATED),
    ],
)
def test_evaluate_thresholds(elapsed_hours, expected):
    c = _complaint()
    assert evaluate_sla_status(c, T0 + timedelta(hours=elapsed_hours), 0.25) == expected


def test_violated_is_never_downgraded():
    c = _complaint(sla=SLAStatus.VIOLATED)
    assert evaluate_sla_status(c, T0, 0.25) == SLAStatus.VIOLATED


def test_completed_complaints_are_left_alone():
    c = _complaint(WorkStatus.COMPLETE, SLAStatus.COMPLETED)
    assert evaluate_sla_status(c, T0 + timedelta(days=30), 0.25) == SLAStatus.COMPLETED
