"""Liveness / readiness probe for the complaint service."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from civicdesk.adapters.persistence.database import get_session
from civicdesk.adapters.persistence.models import DepartmentModel
from civicdesk.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_session)):
    """Database reachability plus the routing settings the service runs with."""
    departments = None
    try:
        departments = await session.scalar(select(func.count()).select_from(DepartmentModel))
        db_status = "connected"
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Health check could not reach the database: %s", e)
        db_status = f"error: {e}"

    return {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
        "departments": departments,
        "photo_storage": "enabled" if settings.storage_url else "disabled",
        "worker_capacity": settings.worker_capacity,
        "default_sla_hours": settings.default_sla_hours,
        "service": "CivicDesk",
    }
