"""Community aggregates.

Derived on demand from the action and user collections; never persisted.
Field aliases give the camelCase shape the realtime clients consume.
"""

from pydantic import ConfigDict, Field

from eco.domain.model.common import DomainModel
from eco.domain.value import Amount

MOST_POPULAR_SENTINEL = "N/A"


class CommunityModel(DomainModel):
    """Base for aggregate models serialized with camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )


class ActionTypeTotals(CommunityModel):
    """Count and carbon saved for one action type."""

    name: str
    count: int
    carbon_saved: Amount = Field(serialization_alias="carbonSaved")


class WeeklyStats(CommunityModel):
    """Trailing-window activity."""

    actions_this_week: int = Field(serialization_alias="actionsThisWeek")
    most_popular_habit: str = Field(serialization_alias="mostPopularHabit")


class CommunityStats(CommunityModel):
    """Community-wide totals."""

    total_users: int = Field(serialization_alias="totalUsers")
    total_actions: int = Field(serialization_alias="totalActions")
    total_carbon_saved: Amount = Field(serialization_alias="totalCarbonSaved")
    actions_by_type: list[ActionTypeTotals] = Field(
        serialization_alias="actionsByType"
    )
    weekly: WeeklyStats


class LeaderboardEntry(CommunityModel):
    """One ranked user."""

    username: str
    points: Amount
    streak: int
    rank: int


class CommunitySnapshot(CommunityModel):
    """Stats and leaderboard broadcast after every logging transaction."""

    stats: CommunityStats
    leaderboard: list[LeaderboardEntry]
