"""Domain events for the Notification aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from zencafe.domain import zencafe


@zencafe.event(part_of="Notification")
class NotificationCreated:
    """A notification was recorded and is ready to be emailed."""

    __version__ = 1

    notification_id: Identifier(required=True)
    user_id: Identifier()
    recipient_type: String(required=True)
    notification_type: String(required=True)
    entity_id: Identifier()
    context_data: Text()
    created_at: DateTime(required=True)


@zencafe.event(part_of="Notification")
class NotificationRead:
    __version__ = 1

    notification_id: Identifier(required=True)
    read_at: DateTime(required=True)
