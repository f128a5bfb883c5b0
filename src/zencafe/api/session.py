"""Session endpoints: who am I, token refresh, and development logins.

`/api/login` and `/api/login-admin` stand in for the identity provider's
callback outside production; they upsert a local user and hand out tokens.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from protean.utils.globals import current_domain

from zencafe.api.auth import get_optional_user
from zencafe.api.schemas import MeResponse, RefreshRequest, TokenResponse, UserResponse
from zencafe.identity.session.tokens import InvalidTokenError, issue_tokens, refresh
from zencafe.identity.user.upsert import UpsertUser
from zencafe.identity.user.user import User

router = APIRouter(prefix="/api", tags=["session"])
dev_router = APIRouter(prefix="/api", tags=["session"])

DEV_CUSTOMER = {
    "external_id": "dev-customer",
    "email": "customer@zencafe.lk",
    "first_name": "Dev",
    "last_name": "Customer",
}
DEV_ADMIN = {
    "external_id": "dev-admin",
    "email": "admin@zencafe.lk",
    "first_name": "Dev",
    "last_name": "Admin",
}


@router.get("/me", response_model=MeResponse)
async def me(user: User | None = Depends(get_optional_user)) -> MeResponse:
    if user is None:
        return MeResponse(is_authenticated=False, is_admin=False, user=None)
    return MeResponse(is_authenticated=True, is_admin=bool(user.is_admin), user=UserResponse.model_validate(user))


@router.post("/auth/refresh", response_model=TokenResponse)
async def refresh_tokens(body: RefreshRequest) -> TokenResponse:
    try:
        return TokenResponse(**refresh(body.refresh_token))
    except InvalidTokenError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc


def _login(profile: dict, is_admin: bool) -> TokenResponse:
    user_id = current_domain.process(UpsertUser(**profile, is_admin=is_admin), asynchronous=False)
    return TokenResponse(**issue_tokens(user_id))


@dev_router.get("/login", response_model=TokenResponse)
async def dev_login() -> TokenResponse:
    return _login(DEV_CUSTOMER, is_admin=False)


@dev_router.get("/login-admin", response_model=TokenResponse)
async def dev_login_admin() -> TokenResponse:
    return _login(DEV_ADMIN, is_admin=True)
