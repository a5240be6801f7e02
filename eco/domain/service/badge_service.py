"""Badge domain service."""

from dataclasses import dataclass

import logfire

from eco.domain.catalog import BadgeCatalog
from eco.domain.error import DomainError
from eco.domain.model import Badge, User
from eco.domain.repository import ActionRepository, BadgeRepository, UserRepository
from eco.domain.value import ActionType, BadgeKind

from .base import Service


@dataclass
class BadgeProgress:
    """A badge with the user's standing against it.

    ``progress`` is the user's current value of the measured counter; for
    unlocked badges it is None.
    """

    badge: Badge
    is_unlocked: bool
    progress: int | float | None
    target: int


class BadgeService(Service):
    """Domain service for seeding and awarding badges."""

    def __init__(
        self,
        badge_repository: BadgeRepository,
        user_repository: UserRepository,
        action_repository: ActionRepository,
        badge_catalog: BadgeCatalog,
    ) -> None:
        """Initialize badge service.

        Args:
            badge_repository: Badge repository
            user_repository: User repository
            action_repository: Action repository (live category counts)
            badge_catalog: Badge definitions to seed and evaluate
        """
        self.badge_repository = badge_repository
        self.user_repository = user_repository
        self.action_repository = action_repository
        self.badge_catalog = badge_catalog

    async def seed_badges(self) -> int:
        """Store catalog badges that are missing from the store.

        Existing definitions are left untouched.

        Returns:
            Number of badges created
        """
        with logfire.span("badge_service.seed_badges"):
            created = 0
            for badge in self.badge_catalog:
                if await self.badge_repository.find_by_id(badge.id):
                    continue
                await self.badge_repository.save(badge)
                logfire.info("Badge created", badge_id=badge.id, name=badge.name)
                created += 1
            logfire.info("Badges initialized", created=created, total=len(self.badge_catalog))
            return created

    async def get_all_badges(self) -> list[Badge]:
        """Get all seeded badges, ordered by kind then requirement."""
        with logfire.span("badge_service.get_all_badges"):
            return await self.badge_repository.find_all()

    async def evaluate_badges(self, user: User) -> list[Badge]:
        """Award every badge the user newly qualifies for.

        Thresholds are checked against the counters on ``user``; category
        badges use a live count of the user's records. All new badges are
        appended in one write. Badges are never removed.

        Args:
            user: User with up-to-date counters

        Returns:
            Newly unlocked badges (possibly several at once)
        """
        with logfire.span("badge_service.evaluate_badges", user_id=str(user.id)):
            new_badges = []
            for badge in self.badge_catalog:
                if user.has_badge(badge.id):
                    continue
                if await self._qualifies(user, badge):
                    new_badges.append(badge)

            if new_badges:
                await self.user_repository.add_badges(
                    user.id, [badge.id for badge in new_badges]
                )
                logfire.info(
                    "Badges unlocked",
                    user_id=str(user.id),
                    badge_ids=[badge.id for badge in new_badges],
                )

            return new_badges

    async def get_badge_progress(self, user: User) -> list[BadgeProgress]:
        """Describe the user's standing against every badge.

        Args:
            user: User

        Returns:
            One entry per catalog badge, in catalog order
        """
        with logfire.span("badge_service.get_badge_progress", user_id=str(user.id)):
            counts = await self.action_repository.count_by_type_for_user(user.id)
            result = []
            for badge in self.badge_catalog:
                unlocked = user.has_badge(badge.id)
                result.append(
                    BadgeProgress(
                        badge=badge,
                        is_unlocked=unlocked,
                        progress=None if unlocked else self._progress(user, badge, counts),
                        target=badge.requirement,
                    )
                )
            return result

    async def _qualifies(self, user: User, badge: Badge) -> bool:
        if badge.kind == BadgeKind.STREAK:
            return user.current_streak >= badge.requirement
        if badge.kind == BadgeKind.MILESTONE:
            return user.total_points >= badge.requirement
        count = await self.action_repository.count_by_user_and_type(
            user.id, _counted_type(badge)
        )
        return count >= badge.requirement

    @staticmethod
    def _progress(
        user: User, badge: Badge, counts: dict[ActionType, int]
    ) -> int | float:
        if badge.kind == BadgeKind.STREAK:
            return user.current_streak
        if badge.kind == BadgeKind.MILESTONE:
            return float(user.total_points)
        return counts.get(_counted_type(badge), 0)


def _counted_type(badge: Badge) -> ActionType:
    if badge.category is None:
        raise DomainError(f"Category badge {badge.id} has no action type")
    return badge.category
