"""Marking notifications as read."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, Identifier
from protean.utils.globals import current_domain

from zencafe.domain import zencafe
from zencafe.notifications.notification.notification import Notification


@zencafe.command(part_of="Notification")
class MarkNotificationRead:
    notification_id: Identifier(required=True)
    user_id: Identifier()  # None when an admin marks a broadcast
    as_admin: Boolean(default=False)


@zencafe.command_handler(part_of=Notification)
class MarkNotificationReadHandler:
    @handle(MarkNotificationRead)
    def mark_read(self, command):
        repo = current_domain.repository_for(Notification)
        notification = repo.get(command.notification_id)

        # Customers may only touch their own notifications; admins see broadcasts too
        visible = str(notification.user_id) == str(command.user_id) if notification.user_id else command.as_admin
        if not visible:
            raise ObjectNotFoundError(f"Notification with id `{command.notification_id}` does not exist")

        notification.mark_read()
        repo.add(notification)
        return str(notification.id)
