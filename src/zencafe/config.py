"""Application settings, read from `ZENCAFE_*` environment variables."""

import os
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ZENCAFE_", env_file=".env", extra="ignore")

    env: str = os.getenv("PROTEAN_ENV", "development")
    secret_key: str = "change-me-in-production"
    access_token_ttl_minutes: int = 60
    refresh_token_ttl_days: int = 7

    # Comma separated; these accounts are promoted to admin on every login
    bootstrap_admin_emails: str = ""
    admin_notification_email: str = "admin@zencafe.lk"
    currency: str = "LKR"

    email_backend: str = "memory"
    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_username: str | None = None
    smtp_password: str | None = None
    smtp_use_tls: bool = True
    mail_from: str = "Zen Cafe <no-reply@zencafe.lk>"

    @property
    def admin_emails(self) -> set[str]:
        return {email.strip().lower() for email in self.bootstrap_admin_emails.split(",") if email.strip()}

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
