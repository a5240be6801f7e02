"""Badge use cases."""

from .get_user_badges import GetUserBadgesResponse, GetUserBadgesUseCase
from .list_badges import ListBadgesResponse, ListBadgesUseCase

__all__ = [
    "GetUserBadgesResponse",
    "GetUserBadgesUseCase",
    "ListBadgesResponse",
    "ListBadgesUseCase",
]
