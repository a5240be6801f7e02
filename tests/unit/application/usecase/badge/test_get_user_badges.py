"""Unit tests for the badge use cases."""

from decimal import Decimal
from uuid import uuid4

import pytest

from eco.application.usecase.badge import GetUserBadgesUseCase, ListBadgesUseCase
from eco.domain.error import NotFoundError
from eco.domain.repository import UserRepository
from eco.domain.service import BadgeService
from eco.domain.value import BadgeId
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListBadgesUseCase:
    """Tests for ListBadgesUseCase."""

    @pytest.mark.asyncio
    async def test_lists_seeded_badges(self, unit_env):
        """Every seeded badge is listed."""
        await (await unit_env.get(BadgeService)).seed_badges()
        use_case = await unit_env.get(ListBadgesUseCase)

        response = await use_case.execute()

        assert len(response.badges) == 9
        assert response.badges[0].kind == "category"


class TestGetUserBadgesUseCase:
    """Tests for GetUserBadgesUseCase."""

    @pytest.mark.asyncio
    async def test_unlocked_and_locked_badges(self, unit_env):
        """Unlocked badges have no progress; locked ones show progress and target."""
        # Arrange
        use_case = await unit_env.get(GetUserBadgesUseCase)
        user = await (await unit_env.get(UserRepository)).save(
            make_user(
                total_points=Decimal("150"),
                current_streak=2,
                longest_streak=5,
                badges=[BadgeId("points-100")],
            )
        )

        # Act
        response = await use_case.execute(str(user.id))

        # Assert
        badges = {b.id: b for b in response.badges}
        assert badges["points-100"].is_unlocked is True
        assert badges["points-100"].progress is None
        assert badges["points-500"].is_unlocked is False
        assert badges["points-500"].progress == 150.0
        assert badges["points-500"].target == 500
        assert badges["streak-3"].progress == 2
        assert response.stats.model_dump() == {
            "total_badges": 1,
            "current_streak": 2,
            "longest_streak": 5,
            "total_points": 150.0,
        }

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        """A missing user is reported as not found."""
        use_case = await unit_env.get(GetUserBadgesUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(str(uuid4()))
