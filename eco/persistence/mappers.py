"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from eco.domain.model import ActionRecord, Badge, User
from eco.domain.value import ActionId, ActionType, BadgeId, BadgeKind, UserId
from eco.domain.value.types import Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        total_points=row["total_points"],
        current_streak=row["current_streak"],
        longest_streak=row["longest_streak"],
        last_action_date=row.get("last_action_date"),
        badges=[BadgeId(b) for b in row.get("badges") or []],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "total_points": user.total_points,
        "current_streak": user.current_streak,
        "longest_streak": user.longest_streak,
        "last_action_date": user.last_action_date,
        "badges": list(user.badges),
        "created_at": user.created_at,
    }


def row_to_action(row: Dict[str, Any]) -> ActionRecord:
    """Convert database row to ActionRecord domain model.

    Args:
        row: Database row as dict

    Returns:
        ActionRecord domain model
    """
    return ActionRecord(
        id=ActionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        type=ActionType(row["type"]),
        points=row["points"],
        carbon_saved=row["carbon_saved"],
        notes=row.get("notes") or "",
        date=row["date"],
    )


def action_to_dict(action: ActionRecord) -> Dict[str, Any]:
    """Convert ActionRecord domain model to database dict.

    Args:
        action: ActionRecord domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": action.id,
        "user_id": action.user_id,
        "type": action.type.value,
        "points": action.points,
        "carbon_saved": action.carbon_saved,
        "notes": action.notes,
        "date": action.date,
    }


def row_to_badge(row: Dict[str, Any]) -> Badge:
    """Convert database row to Badge domain model.

    Args:
        row: Database row as dict

    Returns:
        Badge domain model
    """
    return Badge(
        id=BadgeId(row["id"]),
        name=row["name"],
        description=row["description"],
        icon=row["icon"],
        kind=BadgeKind(row["kind"]),
        requirement=row["requirement"],
        category=ActionType(row["category"]) if row.get("category") else None,
    )


def badge_to_dict(badge: Badge) -> Dict[str, Any]:
    """Convert Badge domain model to database dict.

    Args:
        badge: Badge domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": badge.id,
        "name": badge.name,
        "description": badge.description,
        "icon": badge.icon,
        "kind": badge.kind.value,
        "requirement": badge.requirement,
        "category": badge.category.value if badge.category else None,
    }
