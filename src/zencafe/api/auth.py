"""Request authentication and admin authorization dependencies."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from zencafe.identity.session.tokens import InvalidTokenError, decode_token
from zencafe.identity.user.user import User

_bearer = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_optional_user(credentials: HTTPAuthorizationCredentials | None = Depends(_bearer)) -> User | None:
    if credentials is None:
        return None

    try:
        user_id = decode_token(credentials.credentials)
    except InvalidTokenError as exc:
        raise _unauthorized(str(exc)) from exc

    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError as exc:
        raise _unauthorized("Unknown user") from exc


async def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    if user is None:
        raise _unauthorized("Unauthorized")
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return user
