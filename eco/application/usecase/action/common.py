"""Response models shared by the action use cases."""

from datetime import datetime

from pydantic import BaseModel

from eco.domain.model import ActionRecord, Badge, TypeTotals
from eco.domain.value import ActionType, BadgeKind


class ActionItem(BaseModel):
    """Action record in responses."""

    id: str
    type: ActionType
    points: float
    carbon_saved: float
    notes: str
    date: datetime

    @classmethod
    def from_record(cls, record: ActionRecord) -> "ActionItem":
        return cls(
            id=str(record.id),
            type=record.type,
            points=float(record.points),
            carbon_saved=float(record.carbon_saved),
            notes=record.notes,
            date=record.date,
        )


class BadgeItem(BaseModel):
    """Badge definition in responses."""

    id: str
    name: str
    description: str
    icon: str
    kind: BadgeKind
    requirement: int
    category: ActionType | None = None

    @classmethod
    def from_badge(cls, badge: Badge) -> "BadgeItem":
        return cls(
            id=badge.id,
            name=badge.name,
            description=badge.description,
            icon=badge.icon,
            kind=badge.kind,
            requirement=badge.requirement,
            category=badge.category,
        )


class Pagination(BaseModel):
    """Page metadata."""

    total: int
    page: int
    limit: int
    pages: int


class StreakItem(BaseModel):
    """Current and best run of consecutive active days."""

    current: int
    longest: int


class TypeTotalsItem(BaseModel):
    """A user's records of one action type, summed."""

    type: ActionType
    count: int
    points: float
    carbon_saved: float

    @classmethod
    def from_totals(cls, totals: TypeTotals) -> "TypeTotalsItem":
        return cls(
            type=totals.type,
            count=totals.count,
            points=float(totals.points),
            carbon_saved=float(totals.carbon_saved),
        )
