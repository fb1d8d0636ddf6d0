"""
Bearer token extraction and JWT validation
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Mapping, Optional

from fastapi import Request
from jose import JWTError, jwt

from tubely.api.errors import UserNotAuthenticatedError
from tubely.core.config import settings

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL = timedelta(hours=1)


def get_bearer_token(headers: Mapping[str, str]) -> str:
    """
    Extract the token from an ``Authorization: Bearer <token>`` header.

    Raises:
        UserNotAuthenticatedError: if the header is absent or malformed
    """
    auth_header = headers.get("Authorization") or headers.get("authorization")
    if not auth_header:
        raise UserNotAuthenticatedError("Authorization header is missing")

    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        raise UserNotAuthenticatedError("Malformed authorization header")

    return parts[1]


def make_jwt(user_id: str, secret: str, expires_in: Optional[timedelta] = None) -> str:
    """Issue a signed access token for a user"""
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (expires_in if expires_in is not None else DEFAULT_TOKEN_TTL)

    payload = {
        "iss": settings.jwt_issuer,
        "sub": user_id,
        "iat": int(issued_at.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=settings.jwt_algorithm)


def validate_jwt(token: str, secret: str) -> str:
    """
    Verify a signed token and return the user id it was issued for.

    Signature, expiry and issuer are all checked.

    Raises:
        UserNotAuthenticatedError: if the token is invalid for any reason
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
        )
    except JWTError as e:
        logger.warning(f"Rejected token: {e}")
        raise UserNotAuthenticatedError("Invalid token")

    user_id = payload.get("sub")
    if not user_id:
        raise UserNotAuthenticatedError("Token missing user identifier")

    return user_id


async def get_current_user_id(request: Request) -> str:
    """Dependency resolving the authenticated user id from the request"""
    token = get_bearer_token(request.headers)
    return validate_jwt(token, settings.jwt_secret)
