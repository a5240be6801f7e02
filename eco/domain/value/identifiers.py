"""Strongly typed identifiers for Eco Habits domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ActionId = NewType("ActionId", UUID)

# Badge ids are stable, human-readable slugs such as "streak-7"
BadgeId = NewType("BadgeId", str)
