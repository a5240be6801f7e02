"""Unit tests for LogActionsUseCase."""

import pytest

from eco.adapter.realtime import EventOutbox
from eco.application.usecase.action import (
    LogActionsRequest,
    LogActionsUseCase,
    SubmittedAction,
)
from eco.domain.error import NoNewActionsError, StoreError
from eco.domain.event import CommunityStatsUpdated
from eco.domain.repository import UserRepository
from eco.domain.service import CommunityService
from tests.factories import make_user
from tests.harness import RecordingTransactionManager, create_env_fixture

unit_env = create_env_fixture()


class TestLogActionsUseCase:
    """Tests for LogActionsUseCase."""

    @pytest.mark.asyncio
    async def test_logs_and_queues_community_update(self, unit_env):
        """A successful batch returns the records and queues a stats event."""
        # Arrange
        use_case = await unit_env.get(LogActionsUseCase)
        outbox = await unit_env.get(EventOutbox)
        user = await (await unit_env.get(UserRepository)).save(make_user("alice"))

        # Act
        response = await use_case.execute(
            LogActionsRequest(
                user_id=str(user.id),
                actions=[
                    SubmittedAction(type="Carpooling"),
                    SubmittedAction(type="Custom", notes="Composted"),
                ],
            )
        )

        # Assert
        assert response.success is True
        assert [a.type for a in response.actions] == ["Carpooling", "Custom"]
        assert response.actions[1].notes == "Composted"
        assert response.stats.total_points == 3.0
        assert response.stats.actions_added == 2
        assert response.stats.carbon_saved == 3.0
        assert response.new_badges == []

        assert len(outbox.pending) == 1
        event = outbox.pending[0]
        assert isinstance(event, CommunityStatsUpdated)
        assert event.snapshot.stats.total_actions == 2
        assert event.snapshot.leaderboard[0].username == "alice"

    @pytest.mark.asyncio
    async def test_rejected_batch_queues_nothing(self, unit_env):
        """No event is queued when the transaction fails."""
        use_case = await unit_env.get(LogActionsUseCase)
        outbox = await unit_env.get(EventOutbox)
        user = await (await unit_env.get(UserRepository)).save(make_user())
        request = LogActionsRequest(
            user_id=str(user.id), actions=[SubmittedAction(type="Skipped Meat")]
        )
        await use_case.execute(request)
        outbox.discard()

        with pytest.raises(NoNewActionsError):
            await use_case.execute(request)

        assert outbox.pending == []

    @pytest.mark.asyncio
    async def test_broadcast_failure_is_swallowed(self, unit_env, monkeypatch):
        """The response is returned even if the aggregate cannot be built."""
        # Arrange
        use_case = await unit_env.get(LogActionsUseCase)
        community_service = await unit_env.get(CommunityService)
        outbox = await unit_env.get(EventOutbox)
        user = await (await unit_env.get(UserRepository)).save(make_user())
        transaction = RecordingTransactionManager()

        async def broken():
            raise StoreError("aggregate failed")

        monkeypatch.setattr(community_service, "get_snapshot", broken)
        monkeypatch.setattr(use_case, "transaction", transaction)

        # Act
        response = await use_case.execute(
            LogActionsRequest(
                user_id=str(user.id), actions=[SubmittedAction(type="Carpooling")]
            )
        )

        # Assert
        assert response.stats.actions_added == 1
        assert outbox.pending == []
        assert [type(e) for e in transaction.failures] == [StoreError]
