"""NotificationsUseCase — worker inbox."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from civicdesk.application.ports.notification_repo import NotificationRepository
from civicdesk.application.ports.unit_of_work import UnitOfWork
from civicdesk.application.transaction import transactional
from civicdesk.domain.clock import utcnow
from civicdesk.domain.entities.notification import Notification
from civicdesk.domain.exceptions import NotFoundError


class NotificationsUseCase:
    def __init__(
        self,
        notification_repo: NotificationRepository,
        uow: UnitOfWork,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._notifications = notification_repo
        self._uow = uow
        self._clock = clock

    async def list_for_worker(self, worker_id: int, unread_only: bool = False) -> list[Notification]:
        return await self._notifications.list_for_worker(worker_id, unread_only=unread_only)

    async def mark_read(self, notification_id: int) -> Notification:
        async with transactional(self._uow, "mark notification read"):
            notification = await self._notifications.get_by_id(notification_id)
            if notification is None:
                raise NotFoundError("Notification", notification_id)
            notification.mark_read(self._clock())
            await self._notifications.update(notification)
        return notification
