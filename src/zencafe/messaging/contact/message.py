"""ContactMessage aggregate: a submission from the public contact form."""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text

from zencafe.domain import zencafe
from zencafe.messaging.contact.events import ContactMessageReceived
from zencafe.shared.email import is_valid_email


class MessageStatus(Enum):
    NEW = "new"
    READ = "read"
    REPLIED = "replied"


@zencafe.aggregate
class ContactMessage:
    name: String(required=True, max_length=200)
    email: String(required=True, max_length=254)
    phone: String(max_length=50)
    message: Text(required=True)
    status: String(choices=MessageStatus, default=MessageStatus.NEW.value)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def email_must_be_valid(self):
        if self.email and not is_valid_email(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @classmethod
    def submit(cls, name, email, message, phone=None):
        if not is_valid_email(email):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})
        if not (message or "").strip():
            raise ValidationError({"message": ["Message cannot be blank"]})

        now = datetime.now(UTC)
        contact_message = cls(
            name=name,
            email=email,
            phone=phone,
            message=message,
            status=MessageStatus.NEW.value,
            created_at=now,
            updated_at=now,
        )
        contact_message.raise_(
            ContactMessageReceived(
                message_id=str(contact_message.id),
                name=name,
                email=email,
                received_at=now,
            )
        )
        return contact_message

    def change_status(self, status: str):
        self.status = MessageStatus(status).value
        self.updated_at = datetime.now(UTC)


@zencafe.repository(part_of=ContactMessage)
class ContactMessageRepository:
    def list_messages(self) -> list[ContactMessage]:
        messages = self._dao.query.all().items
        return sorted(messages, key=lambda m: m.created_at, reverse=True)

    def count_with_status(self, status: str) -> int:
        return len(self._dao.query.filter(status=status).all().items)
