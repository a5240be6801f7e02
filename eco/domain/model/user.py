"""User aggregate root.

Only the accrual state matters here; identity and credentials belong to the
external auth service.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator, model_validator

from eco.domain.model.common import DomainModel
from eco.domain.value import Amount, BadgeId, UserId
from eco.domain.value.types import Username


class User(DomainModel):
    """User with points, streak counters and unlocked badges."""

    id: UserId
    username: Username
    total_points: Amount = Field(default=Decimal("0"), ge=0)
    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)
    last_action_date: Optional[datetime] = None
    badges: list[BadgeId] = Field(default_factory=list)  # Unlock order, unique
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("badges")
    @classmethod
    def validate_unique_badges(cls, v: list[BadgeId]) -> list[BadgeId]:
        """Badge membership is a set; keep first occurrence only."""
        return list(dict.fromkeys(v))

    @model_validator(mode="after")
    def validate_streaks(self) -> "User":
        """Longest streak can never be shorter than the current one."""
        if self.longest_streak < self.current_streak:
            raise ValueError("longest_streak must be >= current_streak")
        return self

    def has_badge(self, badge_id: BadgeId) -> bool:
        """Whether the badge is already unlocked."""
        return badge_id in self.badges
