"""Request authentication helpers."""

from fastapi import HTTPException, status

from eco.domain.service import JWTService

BEARER_PREFIX = "bearer "


def require_user_id(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None = None,
) -> str:
    """Resolve the authenticated user ID.

    The ``auth_token`` cookie wins over an ``Authorization: Bearer`` header.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        authorization: Authorization header value

    Returns:
        User ID from the token's ``user_id`` claim

    Raises:
        HTTPException: 401 if no valid token was supplied
    """
    token = auth_token
    if not token and authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()

    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id
