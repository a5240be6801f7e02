"""Unit tests for the progress use cases."""

from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from eco.application.usecase.progress import (
    GetMonthlyProgressRequest,
    GetMonthlyProgressUseCase,
    GetProgressUseCase,
)
from eco.domain.error import NotFoundError
from eco.domain.repository import ActionRepository, UserRepository
from eco.domain.service import BadgeService
from eco.domain.value import ActionType, ImpactCategory, UserId
from tests.di import FROZEN_NOW
from tests.factories import make_action, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetProgressUseCase:
    """Tests for GetProgressUseCase."""

    @pytest.mark.asyncio
    async def test_dashboard(self, unit_env):
        """Totals come from the records, streak from the user."""
        # Arrange
        await (await unit_env.get(BadgeService)).seed_badges()
        user_repo = await unit_env.get(UserRepository)
        action_repo = await unit_env.get(ActionRepository)
        user = await user_repo.save(
            make_user(total_points=Decimal("5"), current_streak=2, longest_streak=4)
        )
        await action_repo.save(
            make_action(user.id, ActionType.SKIPPED_MEAT, FROZEN_NOW, points="2", carbon_saved="3")
        )
        await action_repo.save(
            make_action(
                user.id,
                ActionType.NO_PLASTIC_DAY,
                FROZEN_NOW - timedelta(days=40),
                points="1.5",
                carbon_saved="1",
            )
        )
        use_case = await unit_env.get(GetProgressUseCase)

        # Act
        response = await use_case.execute(str(user.id))

        # Assert
        assert response.total_actions == 2
        assert response.total_points == 3.5
        assert response.total_carbon_saved == 4.0
        assert (response.streak.current, response.streak.longest) == (2, 4)
        assert [(m.month, m.actions) for m in response.progress_by_month] == [
            ("May", 1),
            ("Jun", 1),
        ]
        assert [c.category for c in response.impact_by_category] == [
            ImpactCategory.WASTE,
            ImpactCategory.FOOD,
        ]
        assert len(response.badges) == 9

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(GetProgressUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(str(uuid4()))


class TestGetMonthlyProgressUseCase:
    """Tests for GetMonthlyProgressUseCase."""

    @pytest.mark.asyncio
    async def test_defaults_to_current_year(self, unit_env):
        """Without a year the clock's year is used."""
        action_repo = await unit_env.get(ActionRepository)
        user_id = UserId(uuid4())
        await action_repo.save(make_action(user_id, ActionType.CARPOOLING, FROZEN_NOW))
        use_case = await unit_env.get(GetMonthlyProgressUseCase)

        response = await use_case.execute(GetMonthlyProgressRequest(user_id=str(user_id)))

        assert response.year == 2025
        assert [m.month for m in response.progress_by_month] == ["Jun"]

    @pytest.mark.asyncio
    async def test_other_year(self, unit_env):
        use_case = await unit_env.get(GetMonthlyProgressUseCase)

        response = await use_case.execute(
            GetMonthlyProgressRequest(user_id=str(uuid4()), year=2020)
        )

        assert response.year == 2020
        assert response.progress_by_month == []
