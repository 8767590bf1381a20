"""Commit-or-rollback scope shared by the mutating use cases."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from civicdesk.application.ports.unit_of_work import UnitOfWork
from civicdesk.domain.exceptions import DependencyError, DomainError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def transactional(uow: UnitOfWork, operation: str) -> AsyncIterator[None]:
    """Run the block in one transaction.

    Domain errors roll back and propagate unchanged; anything else is a
    store failure, rolled back and surfaced as DependencyError.
    """
    try:
        yield
        await uow.commit()
    except DomainError:
        await uow.rollback()
        raise
    except Exception as exc:
        logger.exception("%s failed, rolling back", operation)
        await uow.rollback()
        raise DependencyError("database", f"{operation} failed") from exc
