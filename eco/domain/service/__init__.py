"""Domain services."""

from .action_service import (
    AccrualStats,
    ActionService,
    ActionSubmission,
    LogActionsResult,
)
from .badge_service import BadgeProgress, BadgeService
from .base import Service
from .community_service import CommunityService
from .journal_service import JournalDay, JournalOverview, JournalService
from .jwt_service import JWTService
from .progress_service import ActionStats, ImpactTotals, ProgressService
from .streak_service import StreakState, compute_streak
from .user_service import UserService

__all__ = [
    "AccrualStats",
    "ActionStats",
    "ActionService",
    "ActionSubmission",
    "BadgeProgress",
    "BadgeService",
    "CommunityService",
    "ImpactTotals",
    "JournalDay",
    "JournalOverview",
    "JournalService",
    "JWTService",
    "LogActionsResult",
    "ProgressService",
    "Service",
    "StreakState",
    "UserService",
    "compute_streak",
]
