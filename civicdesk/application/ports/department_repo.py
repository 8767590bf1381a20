"""Port interface for department persistence."""

from abc import ABC, abstractmethod

from civicdesk.domain.entities.department import Department


class DepartmentRepository(ABC):
    @abstractmethod
    async def add(self, department: Department) -> Department:
        ...

    @abstractmethod
    async def get_by_code(self, code: str) -> Department | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Department]:
        ...
