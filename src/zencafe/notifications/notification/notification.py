"""Notification aggregate: in-app alerts for administrators and customers.

A notification without a `user_id` is a broadcast: every admin sees it and
its email goes to the configured admin address.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.fields import Boolean, DateTime, Identifier, String, Text

from zencafe.domain import zencafe
from zencafe.notifications.notification.events import NotificationCreated, NotificationRead


class RecipientType(Enum):
    ADMINS = "Admins"
    USER = "User"


class NotificationType(Enum):
    ORDER_PLACED = "order_placed"
    CONTACT_MESSAGE = "contact_message"
    ORDER_STATUS_CHANGED = "order_status_changed"


@zencafe.aggregate
class Notification:
    user_id: Identifier()
    recipient_type: String(choices=RecipientType, default=RecipientType.ADMINS.value)
    notification_type: String(choices=NotificationType, required=True)
    title: String(required=True, max_length=255)
    message: Text(required=True)
    is_read: Boolean(default=False)
    entity_id: Identifier()
    context_data: Text()  # JSON used to render the email
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(
        cls,
        notification_type,
        title,
        message,
        user_id=None,
        entity_id=None,
        context=None,
    ):
        now = datetime.now(UTC)
        recipient_type = RecipientType.USER.value if user_id else RecipientType.ADMINS.value
        context_json = json.dumps(context or {})

        notification = cls(
            user_id=user_id,
            recipient_type=recipient_type,
            notification_type=notification_type,
            title=title,
            message=message,
            is_read=False,
            entity_id=entity_id,
            context_data=context_json,
            created_at=now,
            updated_at=now,
        )
        notification.raise_(
            NotificationCreated(
                notification_id=str(notification.id),
                user_id=str(user_id) if user_id else None,
                recipient_type=recipient_type,
                notification_type=notification_type,
                entity_id=str(entity_id) if entity_id else None,
                context_data=context_json,
                created_at=now,
            )
        )
        return notification

    @property
    def is_broadcast(self) -> bool:
        return self.user_id is None

    @property
    def context(self) -> dict:
        return json.loads(self.context_data) if self.context_data else {}

    def mark_read(self):
        if self.is_read:
            return

        now = datetime.now(UTC)
        self.is_read = True
        self.updated_at = now
        self.raise_(NotificationRead(notification_id=str(self.id), read_at=now))


@zencafe.repository(part_of=Notification)
class NotificationRepository:
    def _for_audience(self, user_id=None) -> list[Notification]:
        if user_id is None:
            # Broadcasts carry no user_id
            notifications = [n for n in self._dao.query.all().items if n.user_id is None]
        else:
            notifications = self._dao.query.filter(user_id=str(user_id)).all().items
        return notifications

    def list_for(self, user_id=None) -> list[Notification]:
        """Notifications for a user, or the admin broadcasts when `user_id` is None. Newest first."""
        return sorted(self._for_audience(user_id), key=lambda n: n.created_at, reverse=True)

    def unread_count(self, user_id=None) -> int:
        return sum(1 for n in self._for_audience(user_id) if not n.is_read)
