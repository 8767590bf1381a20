"""Seed database from CSV files.

Usage:
    python -m civicdesk.tools.seed_db
    python -m civicdesk.tools.seed_db --data-dir data
    python -m civicdesk.tools.seed_db --drop  # drop existing data first
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from civicdesk.adapters.csv_loader.loader import load_departments, load_workers
from civicdesk.adapters.persistence.database import async_session_factory
from civicdesk.adapters.persistence.models import (
    ComplaintModel,
    DepartmentModel,
    NotificationModel,
    WorkerModel,
)
from civicdesk.adapters.persistence.repositories import (
    SqlDepartmentRepository,
    SqlWorkerRepository,
)
from civicdesk.config import settings
from civicdesk.domain.entities.department import Department
from civicdesk.domain.entities.worker import Worker

logger = logging.getLogger(__name__)


async def _drop_data(session: AsyncSession) -> None:
    """Delete all data in correct order (respecting FK constraints)."""
    for model in [NotificationModel, ComplaintModel, WorkerModel, DepartmentModel]:
        await session.execute(delete(model))
    await session.commit()
    logger.info("Dropped all existing data")


async def seed(data_dir: Path, drop: bool = False) -> dict[str, int]:
    """Main seed function. Returns counts of seeded records."""
    counts = {"departments": 0, "workers": 0}

    department_csv = _find_csv(data_dir, ["departments", "department", "depts"])
    worker_csv = _find_csv(data_dir, ["workers", "staff", "employees"])
    if not department_csv:
        raise FileNotFoundError(f"No departments CSV found in {data_dir}. Expected departments.csv")

    async with async_session_factory() as session:
        if drop:
            await _drop_data(session)

        departments = SqlDepartmentRepository(session)
        known_codes = {d.code for d in await departments.get_all()}
        for row in load_departments(department_csv):
            if row["code"] in known_codes:
                logger.debug("Department '%s' already exists, skipping", row["code"])
                continue
            await departments.add(Department(**row))
            known_codes.add(row["code"])
            counts["departments"] += 1
        await session.commit()

        if worker_csv:
            workers = SqlWorkerRepository(session)
            for row in load_workers(worker_csv):
                if row["department_code"] not in known_codes:
                    logger.warning(
                        "Worker '%s': department '%s' not found, skipping",
                        row["name"], row["department_code"],
                    )
                    continue

                existing = await session.execute(
                    select(WorkerModel.id).where(
                        WorkerModel.name == row["name"],
                        WorkerModel.department_code == row["department_code"],
                    )
                )
                if existing.scalar_one_or_none():
                    logger.debug("Worker '%s' already exists, skipping", row["name"])
                    continue

                await workers.add(Worker(id=None, **row))
                counts["workers"] += 1
            await session.commit()
        else:
            logger.info("No workers CSV found — skipping worker import")

    logger.info(
        "Seed complete: %d departments, %d workers",
        counts["departments"], counts["workers"],
    )
    return counts


def _find_csv(data_dir: Path, name_hints: list[str]) -> Path | None:
    """Find a CSV file matching any of the name hints."""
    for f in sorted(data_dir.glob("*.csv")):
        fname_lower = f.stem.lower()
        for hint in name_hints:
            if hint in fname_lower:
                logger.info("Found CSV: %s (matched hint '%s')", f.name, hint)
                return f
    return None


async def _verify_data() -> None:
    """Print sanity checks after seeding."""
    async with async_session_factory() as session:
        departments = (await session.execute(select(DepartmentModel))).scalars().all()
        roster = (
            await session.execute(
                select(WorkerModel.department_code, WorkerModel.role, func.count(WorkerModel.id))
                .group_by(WorkerModel.department_code, WorkerModel.role)
            )
        ).all()

        print(f"\n{'='*50}")
        print("SEED VERIFICATION")
        print(f"{'='*50}")
        print(f"Departments: {len(departments)}")
        for d in departments:
            sla = f"{d.sla_hours}h" if d.sla_hours else f"default ({settings.default_sla_hours}h)"
            print(f"  {d.code:<12} {d.name:<30} SLA {sla}")
        print("Roster:")
        for code, role, n in roster:
            print(f"  {code:<12} {role:<10} {n}")
        without_employees = {d.code for d in departments} - {
            code for code, role, _ in roster if role == "employee"
        }
        if without_employees:
            print(f"Departments without employees (complaints stay Pending): {sorted(without_employees)}")
        print(f"{'='*50}\n")


def main():
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s | %(message)s")

    parser = argparse.ArgumentParser(description="Seed CivicDesk database from CSV files")
    parser.add_argument(
        "--data-dir", type=str, default=settings.csv_data_path,
        help="Directory containing CSV files (default: CSV_DATA_PATH or data)",
    )
    parser.add_argument(
        "--drop", action="store_true",
        help="Drop existing data before seeding",
    )
    parser.add_argument(
        "--verify-only", action="store_true",
        help="Only run verification, don't seed",
    )
    args = parser.parse_args()

    data_dir = Path(args.data_dir)
    if not args.verify_only and not data_dir.exists():
        logger.error("Data directory not found: %s", data_dir)
        sys.exit(1)

    if args.verify_only:
        asyncio.run(_verify_data())
    else:
        async def run_all():
            await seed(data_dir, drop=args.drop)
            await _verify_data()
        asyncio.run(run_all())


if __name__ == "__main__":
    main()
