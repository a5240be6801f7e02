"""JWT token domain service."""

import logfire

from eco.config import AuthSettings
from eco.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Verifies tokens issued by the external auth service.

    Only the ``user_id`` claim of a valid token is trusted.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token is malformed, forged or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("JWT token verification failed", error=str(e))
            raise

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Extract the user ID, or None if the token is missing or invalid."""
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except JWTError:
            return None
