"""User aggregate: a person known through the identity provider."""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, String

from zencafe.domain import zencafe


@zencafe.aggregate
class User:
    """A storefront customer or an administrator.

    `external_id` is the identity provider's subject claim. Admin rights are
    stored on the user and checked on every admin request.
    """

    external_id: String(required=True, max_length=255, unique=True)
    email: String(max_length=254)
    first_name: String(max_length=100)
    last_name: String(max_length=100)
    profile_image_url: String(max_length=500)
    is_admin: Boolean(default=False)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def register(cls, external_id, email=None, first_name=None, last_name=None, profile_image_url=None, is_admin=False):
        now = datetime.now(UTC)
        return cls(
            external_id=external_id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            profile_image_url=profile_image_url,
            is_admin=is_admin,
            created_at=now,
            updated_at=now,
        )

    def refresh_profile(self, email=None, first_name=None, last_name=None, profile_image_url=None):
        self.email = email
        self.first_name = first_name
        self.last_name = last_name
        self.profile_image_url = profile_image_url
        self.updated_at = datetime.now(UTC)

    def promote(self):
        if not self.is_admin:
            self.is_admin = True
            self.updated_at = datetime.now(UTC)

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


@zencafe.repository(part_of=User)
class UserRepository:
    def find_by_external_id(self, external_id: str) -> User | None:
        return self._dao.query.filter(external_id=external_id).all().first

    def find_by_email(self, email: str) -> User | None:
        return self._dao.query.filter(email=email).all().first

    def list_all(self) -> list[User]:
        users = self._dao.query.all().items
        return sorted(users, key=lambda u: u.created_at, reverse=True)
