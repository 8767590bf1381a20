"""Tests for CalculateDeadlineUseCase."""

from __future__ import annotations

from datetime import timedelta

import pytest

from civicdesk.application.use_cases.calculate_deadline import CalculateDeadlineUseCase
from civicdesk.application.use_cases.submit_complaint import ComplaintSubmission
from fakes import DEFAULT_SLA_HOURS, submit_uc


def _deadline_uc(store):
    s = store.session()
    return CalculateDeadlineUseCase(s.departments, s.uow, DEFAULT_SLA_HOURS), s


@pytest.mark.asyncio
@pytest.mark.parametrize("hours", [1, 24, 48, 168])
async def test_deadline_from_department_hours(store, t0, hours):
    store.seed_department("D", sla_hours=hours)
    uc, _ = _deadline_uc(store)
    assert await uc.execute("D", t0) == t0 + timedelta(hours=hours)


@pytest.mark.asyncio
@pytest.mark.parametrize("hours", [None, 0, -5])
async def test_unconfigured_hours_fall_back(store, t0, hours):
    store.seed_department("D", sla_hours=hours)
    uc, _ = _deadline_uc(store)
    assert await uc.execute("D", t0) == t0 + timedelta(hours=48)


@pytest.mark.asyncio
async def test_lookup_error_never_raises(store, t0):
    store.fail("departments.get_by_code", TimeoutError("statement timeout"))
    uc, session = _deadline_uc(store)

    assert await uc.execute("D", t0) == t0 + timedelta(hours=48)
    assert session.uow.rollbacks == 0


@pytest.mark.asyncio
async def test_out_of_range_hours_fall_back(store, t0):
    store.seed_department("D", sla_hours=2_000_000_000)
    uc, session = _deadline_uc(store)

    assert await uc.execute("D", t0) == t0 + timedelta(hours=DEFAULT_SLA_HOURS)
    assert session.uow.rollbacks == 0


@pytest.mark.asyncio
async def test_intake_survives_out_of_range_hours(store, clock, t0):
    store.seed_department("D", sla_hours=2_000_000_000)

    result = await submit_uc(store, clock).execute(
        ComplaintSubmission(reporter_id="user-1", department="D", description="Broken bench")
    )

    assert result.complaint.deadline == t0 + timedelta(hours=DEFAULT_SLA_HOURS)
    assert result.complaint.id in store.complaints
