"""User lookups shared by the read-side use cases."""

import logfire

from eco.domain.error import NotFoundError
from eco.domain.model import User
from eco.domain.repository import UserRepository
from eco.domain.value import UserId

from .base import Service


class UserService(Service):
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def require(self, user_id: UserId) -> User:
        """Load a user's counters or fail.

        Raises:
            NotFoundError: If no user has this ID
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logfire.warn("User not found", user_id=str(user_id))
            raise NotFoundError("User", str(user_id))
        return user
