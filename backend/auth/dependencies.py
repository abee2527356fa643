"""
Auth dependencies for route guards.

authenticate_jwt never fails: it resolves to the token's user, or None when
there is no token or the token does not verify. The ensure_* guards build on
it and raise UnauthorizedError (401) when the caller lacks access.

Usage in route:
    @router.post("", dependencies=[Depends(ensure_admin)])
    async def create_company(...): ...
"""
import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from auth.utils import decode_access_token
from utils.errors import UnauthorizedError

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


async def authenticate_jwt(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[dict]:
    """
    Resolve the current user from the Authorization header, if any.

    Returns:
        {"username": str, "is_admin": bool}, or None for anonymous callers
        and invalid/expired tokens
    """
    if credentials is None:
        return None

    try:
        payload = decode_access_token(credentials.credentials)
    except UnauthorizedError:
        # Invalid tokens are treated as anonymous, not as errors
        logger.debug("Ignoring invalid bearer token")
        return None

    username = payload.get("username")
    if username is None:
        return None

    return {
        "username": username,
        "is_admin": bool(payload.get("isAdmin", False)),
    }


async def ensure_logged_in(
    current_user: Optional[dict] = Depends(authenticate_jwt)
) -> dict:
    """Require any valid token."""
    if not current_user:
        raise UnauthorizedError()
    return current_user


async def ensure_admin(
    current_user: Optional[dict] = Depends(authenticate_jwt)
) -> dict:
    """Require a token belonging to an admin."""
    if not current_user or not current_user["is_admin"]:
        raise UnauthorizedError()
    return current_user


async def ensure_correct_user_or_admin(
    username: str,
    current_user: Optional[dict] = Depends(authenticate_jwt)
) -> dict:
    """
    Require a token for the user named in the route path, or an admin.

    `username` is resolved by FastAPI from the route's {username} path parameter.
    """
    if not current_user:
        raise UnauthorizedError()
    if not current_user["is_admin"] and current_user["username"] != username:
        raise UnauthorizedError()
    return current_user
