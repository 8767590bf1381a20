"""Port interface for worker notifications."""

from abc import ABC, abstractmethod

from civicdesk.domain.entities.notification import Notification


class NotificationRepository(ABC):
    @abstractmethod
    async def add(self, notification: Notification) -> Notification:
        ...

    @abstractmethod
    async def get_by_id(self, notification_id: int) -> Notification | None:
        ...

    @abstractmethod
    async def update(self, notification: Notification) -> Notification:
        ...

    @abstractmethod
    async def list_for_worker(self, worker_id: int, unread_only: bool = False) -> list[Notification]:
        """Newest first."""
        ...

    @abstractmethod
    async def delete_for_complaint(self, complaint_id: int) -> None:
        ...
