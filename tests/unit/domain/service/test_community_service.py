"""Unit tests for CommunityService."""

from datetime import timedelta
from decimal import Decimal

import pytest

from eco.domain.repository import ActionRepository, UserRepository
from eco.domain.service import CommunityService
from eco.domain.value import ActionType
from tests.di import FROZEN_NOW
from tests.factories import make_action, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCommunityStats:
    """Tests for community totals."""

    @pytest.mark.asyncio
    async def test_empty_store(self, unit_env):
        """No records yields zero totals and the N/A sentinel."""
        community_service = await unit_env.get(CommunityService)

        stats = await community_service.get_stats()

        assert stats.total_users == 0
        assert stats.total_actions == 0
        assert stats.total_carbon_saved == Decimal("0")
        assert stats.actions_by_type == []
        assert stats.weekly.actions_this_week == 0
        assert stats.weekly.most_popular_habit == "N/A"

    @pytest.mark.asyncio
    async def test_totals_and_per_type_breakdown(self, unit_env):
        """Per-type totals are sorted by count, most popular first."""
        # Arrange
        community_service = await unit_env.get(CommunityService)
        user_repo = await unit_env.get(UserRepository)
        action_repo = await unit_env.get(ActionRepository)
        alice = await user_repo.save(make_user("alice"))
        bob = await user_repo.save(make_user("bob"))
        for user in (alice, bob):
            await action_repo.save(
                make_action(user.id, ActionType.CARPOOLING, FROZEN_NOW, carbon_saved="2.5")
            )
        await action_repo.save(
            make_action(alice.id, ActionType.SKIPPED_MEAT, FROZEN_NOW, carbon_saved="3.0")
        )

        # Act
        stats = await community_service.get_stats()

        # Assert
        assert stats.total_users == 2
        assert stats.total_actions == 3
        assert stats.total_carbon_saved == Decimal("8.0")
        assert [(t.name, t.count) for t in stats.actions_by_type] == [
            ("Carpooling", 2),
            ("Skipped Meat", 1),
        ]
        assert stats.actions_by_type[0].carbon_saved == Decimal("5.0")
        assert stats.weekly.most_popular_habit == "Carpooling"

    @pytest.mark.asyncio
    async def test_weekly_window_is_trailing_seven_days(self, unit_env):
        """Only records from the last seven days count as this week."""
        community_service = await unit_env.get(CommunityService)
        action_repo = await unit_env.get(ActionRepository)
        user = await (await unit_env.get(UserRepository)).save(make_user())
        for days_ago in (0, 1, 6, 8, 30):
            await action_repo.save(
                make_action(user.id, ActionType.CUSTOM, FROZEN_NOW - timedelta(days=days_ago))
            )

        stats = await community_service.get_stats()

        assert stats.total_actions == 5
        assert stats.weekly.actions_this_week == 3

    @pytest.mark.asyncio
    async def test_serializes_with_camel_case_keys(self, unit_env):
        """The broadcast payload uses the realtime clients' field names."""
        community_service = await unit_env.get(CommunityService)

        snapshot = await community_service.get_snapshot()
        payload = snapshot.model_dump(mode="json", by_alias=True)

        assert set(payload) == {"stats", "leaderboard"}
        assert set(payload["stats"]) == {
            "totalUsers",
            "totalActions",
            "totalCarbonSaved",
            "actionsByType",
            "weekly",
        }
        assert set(payload["stats"]["weekly"]) == {"actionsThisWeek", "mostPopularHabit"}


class TestLeaderboard:
    """Tests for the points leaderboard."""

    @pytest.mark.asyncio
    async def test_ranked_by_points_ties_by_username(self, unit_env):
        """Higher points rank first; equal points fall back to username order."""
        # Arrange
        community_service = await unit_env.get(CommunityService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("carol", total_points=Decimal("10")))
        await user_repo.save(make_user("alice", total_points=Decimal("10")))
        await user_repo.save(
            make_user("bob", total_points=Decimal("25"), current_streak=2, longest_streak=2)
        )

        # Act
        leaderboard = await community_service.get_leaderboard()

        # Assert
        assert [(e.username, e.rank) for e in leaderboard] == [
            ("bob", 1),
            ("alice", 2),
            ("carol", 3),
        ]
        assert leaderboard[0].points == Decimal("25")
        assert leaderboard[0].streak == 2

    @pytest.mark.asyncio
    async def test_limit(self, unit_env):
        """Only the requested number of entries is returned."""
        community_service = await unit_env.get(CommunityService)
        user_repo = await unit_env.get(UserRepository)
        for index in range(5):
            await user_repo.save(make_user(f"user{index}", total_points=Decimal(index)))

        leaderboard = await community_service.get_leaderboard(limit=2)

        assert [e.username for e in leaderboard] == ["user4", "user3"]

    @pytest.mark.asyncio
    async def test_default_size(self, unit_env):
        """Without a limit the configured size applies."""
        community_service = await unit_env.get(CommunityService)
        user_repo = await unit_env.get(UserRepository)
        for index in range(12):
            await user_repo.save(make_user(f"user{index:02d}"))

        assert len(await community_service.get_leaderboard()) == 10
