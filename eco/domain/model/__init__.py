"""Domain model entities for Eco Habits."""

from eco.domain.model.action import ActionRecord
from eco.domain.model.badge import Badge
from eco.domain.model.community import (
    ActionTypeTotals,
    CommunitySnapshot,
    CommunityStats,
    LeaderboardEntry,
    WeeklyStats,
)
from eco.domain.model.progress import TypeTotals
from eco.domain.model.user import User

__all__ = [
    "ActionRecord",
    "ActionTypeTotals",
    "Badge",
    "CommunitySnapshot",
    "CommunityStats",
    "LeaderboardEntry",
    "TypeTotals",
    "User",
    "WeeklyStats",
]
