"""Port interface for complaint persistence."""

from abc import ABC, abstractmethod
from enum import Enum

from civicdesk.domain.entities.complaint import Complaint
from civicdesk.domain.value_objects.enums import SLAStatus, WorkStatus


class ComplaintOrder(str, Enum):
    NEWEST_FIRST = "newest_first"
    DEADLINE = "deadline"
    VIOLATED_AT = "sla_violated_at"


class ComplaintRepository(ABC):
    @abstractmethod
    async def add(self, complaint: Complaint) -> Complaint:
        """Insert and populate ``complaint.id`` from the store."""
        ...

    @abstractmethod
    async def get_by_id(self, complaint_id: int, lock: bool = False) -> Complaint | None:
        """Fetch one complaint; ``lock=True`` holds a row lock until commit."""
        ...

    @abstractmethod
    async def update(self, complaint: Complaint) -> Complaint:
        ...

    @abstractmethod
    async def delete(self, complaint_id: int) -> None:
        ...

    @abstractmethod
    async def list_by_reporter(self, reporter_id: str) -> list[Complaint]:
        """Newest first."""
        ...

    @abstractmethod
    async def list_by_worker(self, worker_id: int) -> list[Complaint]:
        """Newest first."""
        ...

    @abstractmethod
    async def list_by_department(self, department_code: str) -> list[Complaint]:
        """Newest first."""
        ...

    @abstractmethod
    async def get_oldest_unassigned_pending(self, department_code: str) -> Complaint | None:
        """Oldest Pending complaint with no worker, locked for the caller.

        Rows already locked by another transaction are skipped.
        """
        ...

    @abstractmethod
    async def list_by_status(
        self,
        work_statuses: tuple[WorkStatus, ...],
        sla_status: SLAStatus,
        order: ComplaintOrder,
        department_code: str | None = None,
        worker_id: int | None = None,
    ) -> list[Complaint]:
        ...

    @abstractmethod
    async def list_open_for_sla_check(self) -> list[Complaint]:
        """Pending / In Progress complaints still On Track or Warning, locked."""
        ...

    @abstractmethod
    async def list_located(
        self,
        department_code: str | None = None,
        work_status: WorkStatus | None = None,
    ) -> list[Complaint]:
        """Complaints that carry coordinates."""
        ...

    @abstractmethod
    async def count_by_department_and_status(self) -> dict[tuple[str, WorkStatus], int]:
        ...
