"""Port interface for the transaction that spans one request."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    @abstractmethod
    async def commit(self) -> None:
        """Make every write since the last commit durable and release row locks."""
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...

    @abstractmethod
    def savepoint(self) -> AbstractAsyncContextManager[None]:
        """Nested scope: an exception inside undoes only the writes made in it.

        The exception still propagates; the outer transaction stays usable.
        """
        ...
