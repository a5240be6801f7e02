"""Domain value objects for Eco Habits.

Value objects are immutable and defined by their values, not identity.
"""

import re
from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import PlainSerializer, field_validator

from eco.domain.value.common import RootValueObject, ValueObject

# Decimal amount (points, kg CO2) that serializes as a JSON number
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ActionType(str, Enum):
    """Kinds of action record.

    CUSTOM is free text with a fallback value. REFLECTION is a journal
    pseudo-type that cannot be submitted as an action.
    """

    CARPOOLING = "Carpooling"
    REUSED_CONTAINER = "Reused Container"
    SKIPPED_MEAT = "Skipped Meat"
    USED_PUBLIC_TRANSPORT = "Used Public Transport"
    NO_PLASTIC_DAY = "No-Plastic Day"
    CUSTOM = "Custom"
    REFLECTION = "Reflection"


class ImpactCategory(str, Enum):
    """Area of life an action type reduces impact in."""

    TRANSPORTATION = "Transportation"
    WASTE = "Waste"
    FOOD = "Food"
    OTHER = "Other"


class BadgeKind(str, Enum):
    """What a badge threshold is measured against."""

    STREAK = "streak"  # current streak in days
    MILESTONE = "milestone"  # total points
    CATEGORY = "category"  # number of records of one action type


class ActionValue(ValueObject):
    """Fixed reward for one action of a given type."""

    points: Amount
    carbon_saved: Amount


class Username(RootValueObject[str]):
    """Public username shown on the leaderboard."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is 1-50 printable characters."""
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Username must be 1-50 characters")
        if not re.match(r"^\S(.*\S)?$", v):
            raise ValueError("Username must not start or end with whitespace")
        return v
