"""In-memory badge repository for testing."""

from typing import Optional

from eco.domain.model.badge import Badge
from eco.domain.repository.badge import BadgeRepository
from eco.domain.value import BadgeId


class InMemoryBadgeRepository(BadgeRepository):
    """In-memory implementation of BadgeRepository for testing."""

    def __init__(self) -> None:
        self._badges: dict[BadgeId, Badge] = {}

    async def find_by_id(self, badge_id: BadgeId) -> Optional[Badge]:
        """Find a badge by ID."""
        return self._badges.get(badge_id)

    async def find_all(self) -> list[Badge]:
        """Find all badges ordered by kind, then requirement."""
        return sorted(
            self._badges.values(), key=lambda b: (b.kind.value, b.requirement)
        )

    async def save(self, badge: Badge) -> Badge:
        """Save a badge."""
        self._badges[badge.id] = badge
        return badge
