"""In-memory email adapter for development and tests."""

from uuid import uuid4

from zencafe.notifications.channel.email_port import EmailPort


class MemoryEmailAdapter(EmailPort):
    """Keeps every outgoing message in `sent_emails` instead of delivering it."""

    def __init__(self):
        self.sent_emails: list[dict] = []
        self.should_succeed = True
        self.raise_on_send = False
        self.failure_reason = "Email delivery failed"

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "Email delivery failed",
        raise_on_send: bool = False,
    ):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.raise_on_send = raise_on_send

    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
    ) -> dict:
        if self.raise_on_send:
            raise ConnectionError(self.failure_reason)

        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message_id = f"email-{uuid4().hex[:12]}"
        self.sent_emails.append(
            {
                "message_id": message_id,
                "to": to,
                "subject": subject,
                "body": body,
                "html_body": html_body,
            }
        )
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        self.sent_emails.clear()
        self.should_succeed = True
        self.raise_on_send = False
        self.failure_reason = "Email delivery failed"
