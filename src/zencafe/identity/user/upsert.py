"""User upsert: run on every login with the provider's claims."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, String
from protean.utils.globals import current_domain

from zencafe.config import get_settings
from zencafe.domain import zencafe
from zencafe.identity.user.user import User
from zencafe.utils.logging import get_logger

logger = get_logger(__name__)


@zencafe.command(part_of="User")
class UpsertUser:
    external_id: String(required=True, max_length=255)
    email: String(max_length=254)
    first_name: String(max_length=100)
    last_name: String(max_length=100)
    profile_image_url: String(max_length=500)
    is_admin: Boolean(default=False)


@zencafe.command_handler(part_of=User)
class UpsertUserHandler:
    @handle(UpsertUser)
    def upsert(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_external_id(command.external_id)

        if command.email:
            holder = repo.find_by_email(command.email)
            if holder is not None and holder.external_id != command.external_id:
                raise ValidationError({"email": [f"Email {command.email} belongs to another account"]})

        if user is None:
            user = User.register(
                external_id=command.external_id,
                email=command.email,
                first_name=command.first_name,
                last_name=command.last_name,
                profile_image_url=command.profile_image_url,
            )
            logger.info("User registered", external_id=command.external_id)
        else:
            user.refresh_profile(
                email=command.email,
                first_name=command.first_name,
                last_name=command.last_name,
                profile_image_url=command.profile_image_url,
            )

        bootstrap_admin = bool(command.email) and command.email.lower() in get_settings().admin_emails
        if command.is_admin or bootstrap_admin:
            user.promote()

        repo.add(user)
        return str(user.id)
