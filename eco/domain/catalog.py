"""Action and badge catalogs.

Both catalogs are immutable configuration built once at startup and handed to
the services that need them.
"""

from collections.abc import Iterator, Mapping
from decimal import Decimal
from types import MappingProxyType

from eco.domain.model.badge import Badge
from eco.domain.value import (
    ActionType,
    ActionValue,
    BadgeId,
    BadgeKind,
    ImpactCategory,
)


class ActionCatalog:
    """Fixed reward per action type."""

    def __init__(
        self,
        values: Mapping[ActionType, ActionValue],
        custom: ActionValue,
        categories: Mapping[ActionType, ImpactCategory] | None = None,
    ) -> None:
        if ActionType.CUSTOM in values or ActionType.REFLECTION in values:
            raise ValueError("Custom and Reflection are not catalog entries")
        self._values = MappingProxyType(dict(values))
        self._custom = custom
        self._categories = MappingProxyType(dict(categories or {}))

    def value_of(self, action_type: ActionType) -> ActionValue:
        """Reward for an action type.

        Raises:
            KeyError: If the type cannot be logged
        """
        if action_type == ActionType.CUSTOM:
            return self._custom
        return self._values[action_type]

    def category_of(self, action_type: ActionType) -> ImpactCategory:
        """Impact area an action type counts towards; OTHER when unmapped."""
        return self._categories.get(action_type, ImpactCategory.OTHER)

    def parse(self, name: str) -> ActionType | None:
        """Map a submitted type name to a loggable ActionType, if any."""
        try:
            action_type = ActionType(name)
        except ValueError:
            return None
        if action_type not in self:
            return None
        return action_type

    @property
    def standard_types(self) -> frozenset[ActionType]:
        """Non-custom types subject to the once-per-day rule."""
        return frozenset(self._values)

    def __contains__(self, action_type: object) -> bool:
        return action_type == ActionType.CUSTOM or action_type in self._values

    def __iter__(self) -> Iterator[ActionType]:
        yield from self._values
        yield ActionType.CUSTOM


def default_action_catalog() -> ActionCatalog:
    """Standard eco-actions and the custom fallback."""
    return ActionCatalog(
        values={
            ActionType.CARPOOLING: ActionValue(
                points=Decimal("2"), carbon_saved=Decimal("2.5")
            ),
            ActionType.REUSED_CONTAINER: ActionValue(
                points=Decimal("1"), carbon_saved=Decimal("0.5")
            ),
            ActionType.SKIPPED_MEAT: ActionValue(
                points=Decimal("2"), carbon_saved=Decimal("3.0")
            ),
            ActionType.USED_PUBLIC_TRANSPORT: ActionValue(
                points=Decimal("1.5"), carbon_saved=Decimal("1.8")
            ),
            ActionType.NO_PLASTIC_DAY: ActionValue(
                points=Decimal("1.5"), carbon_saved=Decimal("1.0")
            ),
        },
        custom=ActionValue(points=Decimal("1"), carbon_saved=Decimal("0.5")),
        categories={
            ActionType.CARPOOLING: ImpactCategory.TRANSPORTATION,
            ActionType.USED_PUBLIC_TRANSPORT: ImpactCategory.TRANSPORTATION,
            ActionType.REUSED_CONTAINER: ImpactCategory.WASTE,
            ActionType.NO_PLASTIC_DAY: ImpactCategory.WASTE,
            ActionType.SKIPPED_MEAT: ImpactCategory.FOOD,
        },
    )


class BadgeCatalog:
    """Fixed set of badge definitions, in evaluation order."""

    def __init__(self, badges: list[Badge]) -> None:
        ids = [badge.id for badge in badges]
        if len(ids) != len(set(ids)):
            raise ValueError("Badge ids must be unique")
        self._badges = tuple(badges)

    def of_kind(self, kind: BadgeKind) -> list[Badge]:
        """Badges of one kind."""
        return [badge for badge in self._badges if badge.kind == kind]

    def __iter__(self) -> Iterator[Badge]:
        return iter(self._badges)

    def __len__(self) -> int:
        return len(self._badges)


def default_badge_catalog() -> BadgeCatalog:
    """Streak, points milestone and category badges."""
    return BadgeCatalog(
        [
            # Streaks
            Badge(
                id=BadgeId("streak-3"),
                name="3-Day Warrior",
                description="Logged actions for 3 days in a row",
                icon="🌱",
                kind=BadgeKind.STREAK,
                requirement=3,
            ),
            Badge(
                id=BadgeId("streak-7"),
                name="Week Champion",
                description="Maintained a 7-day streak",
                icon="🌿",
                kind=BadgeKind.STREAK,
                requirement=7,
            ),
            Badge(
                id=BadgeId("streak-30"),
                name="Earth Guardian",
                description="Incredible 30-day streak",
                icon="🌳",
                kind=BadgeKind.STREAK,
                requirement=30,
            ),
            # Points milestones
            Badge(
                id=BadgeId("points-100"),
                name="Century Club",
                description="Earned 100 eco-points",
                icon="🎯",
                kind=BadgeKind.MILESTONE,
                requirement=100,
            ),
            Badge(
                id=BadgeId("points-500"),
                name="Impact Master",
                description="Earned 500 eco-points",
                icon="🏆",
                kind=BadgeKind.MILESTONE,
                requirement=500,
            ),
            Badge(
                id=BadgeId("points-1000"),
                name="Planet Protector",
                description="Earned 1000 eco-points",
                icon="🌍",
                kind=BadgeKind.MILESTONE,
                requirement=1000,
            ),
            # Categories
            Badge(
                id=BadgeId("transport-10"),
                name="Transit Pro",
                description="Used eco-friendly transport 10 times",
                icon="🚌",
                kind=BadgeKind.CATEGORY,
                category=ActionType.USED_PUBLIC_TRANSPORT,
                requirement=10,
            ),
            Badge(
                id=BadgeId("waste-15"),
                name="Zero Waste Hero",
                description="Completed 15 no-plastic days",
                icon="♻️",
                kind=BadgeKind.CATEGORY,
                category=ActionType.NO_PLASTIC_DAY,
                requirement=15,
            ),
            Badge(
                id=BadgeId("food-20"),
                name="Sustainable Foodie",
                description="Logged 20 meat-free days",
                icon="🥗",
                kind=BadgeKind.CATEGORY,
                category=ActionType.SKIPPED_MEAT,
                requirement=20,
            ),
        ]
    )
