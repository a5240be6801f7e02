"""SQLAlchemy table definitions for Eco Habits.

Rows are mapped to the immutable domain models by hand in ``mappers``.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("total_points", Numeric(12, 2), nullable=False, server_default="0"),
    Column("current_streak", Integer, nullable=False, server_default="0"),
    Column("longest_streak", Integer, nullable=False, server_default="0"),
    Column("last_action_date", TIMESTAMP(timezone=True), nullable=True),
    Column("badges", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("total_points >= 0", name="total_points_non_negative"),
    CheckConstraint("longest_streak >= current_streak", name="longest_streak_gte_current"),
)

Index("idx_users_total_points", users_table.c.total_points.desc())

# ============================================================================
# ACTIONS TABLE
# ============================================================================
actions_table = Table(
    "actions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("type", String(50), nullable=False),
    Column("points", Numeric(8, 2), nullable=False),
    Column("carbon_saved", Numeric(8, 2), nullable=False),
    Column("notes", Text, nullable=False, server_default=""),
    Column("date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
)

Index("idx_actions_user_id_date", actions_table.c.user_id, actions_table.c.date.desc())
Index("idx_actions_date", actions_table.c.date)

# ============================================================================
# BADGES TABLE
# ============================================================================
badges_table = Table(
    "badges",
    metadata,
    Column("id", String(50), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=False),
    Column("icon", String(20), nullable=False),
    Column("kind", String(20), nullable=False),
    Column("requirement", Integer, nullable=False),
    Column("category", String(50), nullable=True),
)
