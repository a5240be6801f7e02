"""JWT token utilities.

Tokens are minted by the external auth service with the shared secret.
``create_token`` mirrors its format for tests and local development.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import BaseModel, ValidationError

from eco.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims this API relies on."""

    user_id: str
    username: Optional[str] = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str, username: str, settings: AuthSettings, now: datetime | None = None
) -> str:
    """Encode a token in the auth service's format.

    Args:
        user_id: User ID
        username: Username
        settings: Authentication settings
        now: Issue time (defaults to the current UTC time)

    Returns:
        Encoded JWT token
    """
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "user_id": user_id,
        "username": username,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify the signature and expiry of a token and parse its claims.

    Raises:
        JWTError: If the token is expired, invalid or lacks a user_id claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError:
        raise JWTError("Token is missing the user_id claim")
