"""Email dispatch: sends the email for each recorded notification.

Runs after the originating unit of work commits. Broadcasts go to the admin
address; customer notifications go to the order's email. Delivery problems
are logged and never reach the request that caused them.
"""

import json

import structlog
from protean.utils.mixins import handle

from zencafe.config import get_settings
from zencafe.domain import zencafe
from zencafe.notifications.channel import get_email_channel
from zencafe.notifications.notification.events import NotificationCreated
from zencafe.notifications.notification.notification import Notification
from zencafe.notifications.templates import get_template

logger = structlog.get_logger(__name__)


@zencafe.event_handler(part_of=Notification)
class NotificationDispatcher:
    @handle(NotificationCreated)
    def on_notification_created(self, event: NotificationCreated) -> None:
        context = json.loads(event.context_data) if event.context_data else {}
        recipient = _recipient_for(event, context)
        if not recipient:
            logger.warning(
                "No email recipient for notification, skipping",
                notification_id=str(event.notification_id),
                notification_type=event.notification_type,
            )
            return

        try:
            content = get_template(event.notification_type).render(context)
            result = get_email_channel().send(
                to=recipient,
                subject=content["subject"],
                body=content["body"],
                html_body=content.get("html_body"),
            )
        except Exception as exc:
            logger.error(
                "Notification email failed",
                notification_id=str(event.notification_id),
                recipient=recipient,
                error=str(exc),
                exc_info=True,
            )
            return

        if result.get("status") != "sent":
            logger.error(
                "Notification email rejected",
                notification_id=str(event.notification_id),
                recipient=recipient,
                error=result.get("error", "Unknown dispatch error"),
            )
            return

        logger.info(
            "Notification email sent",
            notification_id=str(event.notification_id),
            recipient=recipient,
            message_id=result.get("message_id"),
        )


def _recipient_for(event: NotificationCreated, context: dict) -> str | None:
    if event.user_id is None:
        return get_settings().admin_notification_email
    return context.get("customer_email")
