"""Port interface for worker persistence."""

from abc import ABC, abstractmethod

from civicdesk.domain.entities.worker import Worker
from civicdesk.domain.value_objects.enums import WorkerRole


class WorkerRepository(ABC):
    @abstractmethod
    async def add(self, worker: Worker) -> Worker:
        ...

    @abstractmethod
    async def get_by_id(self, worker_id: int, lock: bool = False) -> Worker | None:
        """Fetch one worker; ``lock=True`` serializes changes to its assigned set."""
        ...

    @abstractmethod
    async def list_by_department(
        self,
        department_code: str,
        role: WorkerRole | None = WorkerRole.EMPLOYEE,
        lock: bool = False,
    ) -> list[Worker]:
        """Department roster ordered by id. ``role=None`` returns every member.

        With ``lock=True`` rows are locked in id order.
        """
        ...

    @abstractmethod
    async def update(self, worker: Worker) -> Worker:
        ...
