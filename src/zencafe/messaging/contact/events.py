"""Domain events for the ContactMessage aggregate."""

from protean.fields import DateTime, Identifier, String

from zencafe.domain import zencafe


@zencafe.event(part_of="ContactMessage")
class ContactMessageReceived:
    __version__ = 1

    message_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    received_at: DateTime(required=True)
