"""Contact form: submission and admin triage commands."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from zencafe.domain import zencafe
from zencafe.messaging.contact.message import ContactMessage, MessageStatus
from zencafe.notifications.notification.alerts import record_contact_message
from zencafe.utils.logging import get_logger

logger = get_logger(__name__)


@zencafe.command(part_of="ContactMessage")
class SubmitContactMessage:
    name: String(required=True, max_length=200)
    email: String(required=True, max_length=254)
    phone: String(max_length=50)
    message: Text(required=True)


@zencafe.command(part_of="ContactMessage")
class UpdateMessageStatus:
    message_id: Identifier(required=True)
    status: String(required=True, choices=MessageStatus)


@zencafe.command_handler(part_of=ContactMessage)
class ContactMessageHandler:
    @handle(SubmitContactMessage)
    def submit(self, command):
        message = ContactMessage.submit(
            name=command.name,
            email=command.email,
            phone=command.phone,
            message=command.message,
        )
        current_domain.repository_for(ContactMessage).add(message)
        record_contact_message(message)

        logger.info("Contact message received", message_id=str(message.id))
        return str(message.id)

    @handle(UpdateMessageStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(ContactMessage)
        message = repo.get(command.message_id)
        message.change_status(command.status)
        repo.add(message)
        return str(message.id)
