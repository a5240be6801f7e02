"""Badge definition entity."""

from typing import Optional

from pydantic import Field, model_validator

from eco.domain.model.common import DomainModel
from eco.domain.value import ActionType, BadgeId, BadgeKind


class Badge(DomainModel):
    """Achievement unlocked when a user's counter reaches a threshold.

    Badge definitions are seeded from the badge catalog and are read-only.
    """

    id: BadgeId
    name: str
    description: str
    icon: str
    kind: BadgeKind
    requirement: int = Field(gt=0)
    category: Optional[ActionType] = None  # Counted action type (CATEGORY only)

    @model_validator(mode="after")
    def validate_category(self) -> "Badge":
        """Category badges must name the action type they count."""
        if self.kind == BadgeKind.CATEGORY and self.category is None:
            raise ValueError("Category badges require a category")
        if self.kind != BadgeKind.CATEGORY and self.category is not None:
            raise ValueError(f"{self.kind.value} badges cannot have a category")
        return self
