"""Unit tests for the community use cases."""

from decimal import Decimal

import pytest

from eco.application.usecase.community import (
    GetCommunityStatsUseCase,
    GetLeaderboardRequest,
    GetLeaderboardUseCase,
)
from eco.domain.repository import UserRepository
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetLeaderboardUseCase:
    """Tests for GetLeaderboardUseCase."""

    @pytest.mark.asyncio
    async def test_limit_is_capped(self, unit_env):
        """Requests above the maximum size are capped."""
        use_case = await unit_env.get(GetLeaderboardUseCase)
        user_repo = await unit_env.get(UserRepository)
        for index in range(105):
            await user_repo.save(make_user(f"user{index:03d}", total_points=Decimal(index)))

        response = await use_case.execute(GetLeaderboardRequest(limit=500))

        assert len(response.leaderboard) == 100
        assert response.leaderboard[0].username == "user104"
        assert response.leaderboard[-1].rank == 100

    @pytest.mark.asyncio
    async def test_default_limit(self, unit_env):
        """Without a limit the configured size applies."""
        use_case = await unit_env.get(GetLeaderboardUseCase)
        user_repo = await unit_env.get(UserRepository)
        for index in range(3):
            await user_repo.save(make_user(f"user{index}"))

        response = await use_case.execute(GetLeaderboardRequest())

        assert [e.rank for e in response.leaderboard] == [1, 2, 3]


class TestGetCommunityStatsUseCase:
    """Tests for GetCommunityStatsUseCase."""

    @pytest.mark.asyncio
    async def test_stats_serialize_with_aliases(self, unit_env):
        """The response body uses the camelCase field names."""
        use_case = await unit_env.get(GetCommunityStatsUseCase)

        response = await use_case.execute()
        body = response.model_dump(mode="json", by_alias=True)

        assert body["stats"]["totalUsers"] == 0
        assert body["stats"]["weekly"]["mostPopularHabit"] == "N/A"
