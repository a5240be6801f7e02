"""Domain value objects for Eco Habits."""

from eco.domain.value.identifiers import ActionId, BadgeId, UserId
from eco.domain.value.types import (
    ActionType,
    ActionValue,
    Amount,
    BadgeKind,
    ImpactCategory,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "ActionId",
    "BadgeId",
    # Types
    "ActionType",
    "ActionValue",
    "Amount",
    "BadgeKind",
    "ImpactCategory",
    "Username",
]
