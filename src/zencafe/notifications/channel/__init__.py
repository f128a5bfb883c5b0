"""Email channel registry.

`get_email_channel()` returns a process-wide adapter chosen by the
`email_backend` setting: "memory" keeps messages in a list, "smtp" delivers
them through the configured SMTP server.
"""

from zencafe.config import get_settings
from zencafe.notifications.channel.email_port import EmailPort

_email_channel: EmailPort | None = None


def get_email_channel() -> EmailPort:
    global _email_channel
    if _email_channel is None:
        settings = get_settings()
        if settings.email_backend == "smtp":
            from zencafe.notifications.channel.smtp_email import SMTPEmailAdapter

            _email_channel = SMTPEmailAdapter(
                host=settings.smtp_host,
                port=settings.smtp_port,
                sender=settings.mail_from,
                username=settings.smtp_username,
                password=settings.smtp_password,
                use_tls=settings.smtp_use_tls,
            )
        elif settings.email_backend == "memory":
            from zencafe.notifications.channel.fake_email import MemoryEmailAdapter

            _email_channel = MemoryEmailAdapter()
        else:
            raise ValueError(f"Unknown email backend: {settings.email_backend}")

    return _email_channel


def set_email_channel(channel: EmailPort) -> None:
    """Override the active adapter (useful for tests)."""
    global _email_channel
    _email_channel = channel


def reset_channels():
    """Reset the channel singleton (useful for testing)."""
    global _email_channel
    _email_channel = None
