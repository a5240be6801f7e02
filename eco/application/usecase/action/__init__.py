"""Action use cases."""

from .common import (
    ActionItem,
    BadgeItem,
    Pagination,
    StreakItem,
    TypeTotalsItem,
)
from .get_action_stats import GetActionStatsResponse, GetActionStatsUseCase
from .get_actions import GetActionsRequest, GetActionsResponse, GetActionsUseCase
from .get_today_actions import GetTodayActionsResponse, GetTodayActionsUseCase
from .log_actions import (
    LogActionsRequest,
    LogActionsResponse,
    LogActionsUseCase,
    SubmittedAction,
)

__all__ = [
    "ActionItem",
    "BadgeItem",
    "GetActionStatsResponse",
    "GetActionStatsUseCase",
    "GetActionsRequest",
    "GetActionsResponse",
    "GetActionsUseCase",
    "GetTodayActionsResponse",
    "GetTodayActionsUseCase",
    "LogActionsRequest",
    "LogActionsResponse",
    "LogActionsUseCase",
    "Pagination",
    "StreakItem",
    "SubmittedAction",
    "TypeTotalsItem",
]
