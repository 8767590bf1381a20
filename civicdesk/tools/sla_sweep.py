"""Run one SLA sweep (mark open complaints Warning / Violated).

Meant for cron:
    */15 * * * * python -m civicdesk.tools.sla_sweep
    python -m civicdesk.tools.sla_sweep --warning-ratio 0.2
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from civicdesk.adapters.persistence.database import async_session_factory, engine
from civicdesk.adapters.persistence.repositories import (
    SqlComplaintRepository,
    SqlNotificationRepository,
)
from civicdesk.adapters.persistence.unit_of_work import SqlUnitOfWork
from civicdesk.application.use_cases.sweep_sla import SweepReport, SweepSlaUseCase
from civicdesk.config import settings
from civicdesk.domain.exceptions import DomainError

logger = logging.getLogger(__name__)


async def run_sweep(warning_ratio: float) -> SweepReport:
    try:
        async with async_session_factory() as session:
            uc = SweepSlaUseCase(
                complaint_repo=SqlComplaintRepository(session),
                notification_repo=SqlNotificationRepository(session),
                uow=SqlUnitOfWork(session),
                warning_ratio=warning_ratio,
            )
            return await uc.execute()
    finally:
        await engine.dispose()


def main():
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s | %(message)s")

    parser = argparse.ArgumentParser(description="Mark overdue CivicDesk complaints")
    parser.add_argument(
        "--warning-ratio", type=float, default=settings.sla_warning_ratio,
        help="Fraction of the SLA window left at which a complaint turns Warning "
             "(default: SLA_WARNING_RATIO or 0.25)",
    )
    args = parser.parse_args()
    if not 0.0 <= args.warning_ratio <= 1.0:
        parser.error("--warning-ratio must be between 0 and 1")

    try:
        report = asyncio.run(run_sweep(args.warning_ratio))
    except DomainError as e:
        logger.error("SLA sweep failed: %s", e.message)
        sys.exit(1)

    print(
        f"checked={report.checked} new_warnings={report.warnings} "
        f"new_violations={report.violations}"
    )


if __name__ == "__main__":
    main()
