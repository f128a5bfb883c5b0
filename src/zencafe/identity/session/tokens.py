"""Bearer session tokens.

Access tokens are short lived; a refresh token buys a new pair without
going back to the identity provider.
"""

from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt

from zencafe.config import get_settings

ALGORITHM = "HS256"
ACCESS = "access"
REFRESH = "refresh"


class InvalidTokenError(Exception):
    """The token is malformed, expired, or of the wrong type."""


def _encode(user_id: str, token_type: str, ttl: timedelta) -> str:
    now = datetime.now(UTC)
    claims = {"sub": str(user_id), "type": token_type, "iat": now, "exp": now + ttl}
    return jwt.encode(claims, get_settings().secret_key, algorithm=ALGORITHM)


def issue_tokens(user_id: str) -> dict:
    settings = get_settings()
    return {
        "access_token": _encode(user_id, ACCESS, timedelta(minutes=settings.access_token_ttl_minutes)),
        "refresh_token": _encode(user_id, REFRESH, timedelta(days=settings.refresh_token_ttl_days)),
        "token_type": "bearer",
        "expires_in": settings.access_token_ttl_minutes * 60,
    }


def decode_token(token: str, expected_type: str = ACCESS) -> str:
    """Return the user id carried by `token`."""
    try:
        claims = jwt.decode(token, get_settings().secret_key, algorithms=[ALGORITHM])
    except ExpiredSignatureError as exc:
        raise InvalidTokenError("Token has expired") from exc
    except JWTError as exc:
        raise InvalidTokenError("Invalid token") from exc

    if claims.get("type") != expected_type or not claims.get("sub"):
        raise InvalidTokenError("Invalid token")
    return claims["sub"]


def refresh(refresh_token: str) -> dict:
    return issue_tokens(decode_token(refresh_token, expected_type=REFRESH))
