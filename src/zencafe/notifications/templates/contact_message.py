"""Contact message template: forwards a contact form submission to the admin address."""

from html import escape

from zencafe.notifications.notification.notification import NotificationType


class ContactMessageTemplate:
    notification_type = NotificationType.CONTACT_MESSAGE.value

    @staticmethod
    def render(context: dict) -> dict:
        name = context.get("name", "Unknown")
        email = context.get("email", "")
        phone = context.get("phone") or "-"
        message = context.get("message", "")
        return {
            "subject": f"New Contact Message from {name}",
            "body": f"New Contact Message\n\nFrom: {name} ({email})\nPhone: {phone}\n\n{message}",
            "html_body": (
                "<h1>New Contact Message</h1>"
                f"<p>From: {escape(name)} ({escape(email)})</p>"
                f"<p>Phone: {escape(phone)}</p>"
                f"<p>Message: {escape(message)}</p>"
            ),
        }
