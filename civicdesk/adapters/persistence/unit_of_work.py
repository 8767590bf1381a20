"""SQLAlchemy-backed UnitOfWork — wraps the request's AsyncSession."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from civicdesk.application.ports.unit_of_work import UnitOfWork


class SqlUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def commit(self) -> None:
        await self._s.commit()

    async def rollback(self) -> None:
        await self._s.rollback()

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        # begin_nested() rolls back to the SAVEPOINT and re-raises on error
        async with self._s.begin_nested():
            yield
