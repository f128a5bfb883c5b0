"""Notifications addressed to the signed-in customer."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from zencafe.api.auth import get_current_user
from zencafe.api.schemas import NotificationResponse, UnreadCountResponse
from zencafe.identity.user.user import User
from zencafe.notifications.notification.notification import Notification
from zencafe.notifications.notification.reading import MarkNotificationRead

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationResponse])
async def my_notifications(user: User = Depends(get_current_user)) -> list[NotificationResponse]:
    notifications = current_domain.repository_for(Notification).list_for(user.id)
    return [NotificationResponse.model_validate(n) for n in notifications]


@router.get("/unread-count", response_model=UnreadCountResponse)
async def my_unread_count(user: User = Depends(get_current_user)) -> UnreadCountResponse:
    return UnreadCountResponse(count=current_domain.repository_for(Notification).unread_count(user.id))


@router.patch("/{notification_id}/read", response_model=NotificationResponse)
async def mark_read(notification_id: str, user: User = Depends(get_current_user)) -> NotificationResponse:
    command = MarkNotificationRead(notification_id=notification_id, user_id=user.id)
    current_domain.process(command, asynchronous=False)
    return NotificationResponse.model_validate(current_domain.repository_for(Notification).get(notification_id))
