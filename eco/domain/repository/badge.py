"""Badge repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from eco.domain.model.badge import Badge
from eco.domain.value import BadgeId


class BadgeRepository(ABC):
    """Repository for seeded badge definitions."""

    @abstractmethod
    async def find_by_id(self, badge_id: BadgeId) -> Optional[Badge]:
        """Find a badge by ID.

        Args:
            badge_id: Stable badge identifier

        Returns:
            Badge if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Badge]:
        """Find all badges.

        Returns:
            Badges ordered by kind, then requirement
        """
        pass

    @abstractmethod
    async def save(self, badge: Badge) -> Badge:
        """Insert a badge definition.

        Args:
            badge: Badge to save

        Returns:
            Saved badge
        """
        pass
