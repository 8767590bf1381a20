"""Worker notification inbox."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from civicdesk.application.use_cases.notifications import NotificationsUseCase
from civicdesk.infrastructure.api.dependencies import get_notifications_uc
from civicdesk.infrastructure.api.serializers import serialize_notification

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/{worker_id}")
async def list_notifications(
    worker_id: int,
    unread_only: bool = False,
    uc: NotificationsUseCase = Depends(get_notifications_uc),
):
    notifications = await uc.list_for_worker(worker_id, unread_only=unread_only)
    return {
        "total": len(notifications),
        "unread": sum(1 for n in notifications if not n.is_read),
        "notifications": [serialize_notification(n) for n in notifications],
    }


@router.patch("/{notification_id}/read")
async def mark_notification_read(
    notification_id: int,
    uc: NotificationsUseCase = Depends(get_notifications_uc),
):
    notification = await uc.mark_read(notification_id)
    return serialize_notification(notification)
