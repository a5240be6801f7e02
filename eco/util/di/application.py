"""Application layer DI providers."""

from dishka import Scope, provide

from eco.application.usecase.action import (
    GetActionStatsUseCase,
    GetActionsUseCase,
    GetTodayActionsUseCase,
    LogActionsUseCase,
)
from eco.application.usecase.badge import GetUserBadgesUseCase, ListBadgesUseCase
from eco.application.usecase.community import (
    GetCommunityStatsUseCase,
    GetLeaderboardUseCase,
)
from eco.application.usecase.journal import (
    GetJournalDayUseCase,
    GetJournalUseCase,
    SaveReflectionUseCase,
)
from eco.application.usecase.progress import (
    GetMonthlyProgressUseCase,
    GetProgressUseCase,
)
from eco.config import AccrualSettings, CommunitySettings
from eco.domain.event import EventPublisher
from eco.domain.repository import TransactionManager
from eco.domain.service import (
    ActionService,
    BadgeService,
    CommunityService,
    JournalService,
    ProgressService,
    UserService,
)
from eco.util.clock import Clock
from eco.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Action use cases
    @provide
    def get_log_actions_use_case(
        self,
        action_service: ActionService,
        community_service: CommunityService,
        event_publisher: EventPublisher,
        transaction: TransactionManager,
    ) -> LogActionsUseCase:
        """Provide log actions use case."""
        return LogActionsUseCase(
            action_service=action_service,
            community_service=community_service,
            event_publisher=event_publisher,
            transaction=transaction,
        )

    @provide
    def get_get_actions_use_case(
        self, action_service: ActionService, clock: Clock, settings: AccrualSettings
    ) -> GetActionsUseCase:
        """Provide action history use case."""
        return GetActionsUseCase(
            action_service=action_service, clock=clock, settings=settings
        )

    @provide
    def get_get_today_actions_use_case(
        self, action_service: ActionService
    ) -> GetTodayActionsUseCase:
        """Provide today's actions use case."""
        return GetTodayActionsUseCase(action_service=action_service)

    @provide
    def get_get_action_stats_use_case(
        self, user_service: UserService, progress_service: ProgressService
    ) -> GetActionStatsUseCase:
        """Provide personal action stats use case."""
        return GetActionStatsUseCase(
            user_service=user_service, progress_service=progress_service
        )

    # Badge use cases
    @provide
    def get_list_badges_use_case(self, badge_service: BadgeService) -> ListBadgesUseCase:
        """Provide list badges use case."""
        return ListBadgesUseCase(badge_service=badge_service)

    @provide
    def get_get_user_badges_use_case(
        self, user_service: UserService, badge_service: BadgeService
    ) -> GetUserBadgesUseCase:
        """Provide user badges use case."""
        return GetUserBadgesUseCase(
            user_service=user_service, badge_service=badge_service
        )

    # Community use cases
    @provide
    def get_get_community_stats_use_case(
        self, community_service: CommunityService
    ) -> GetCommunityStatsUseCase:
        """Provide community stats use case."""
        return GetCommunityStatsUseCase(community_service=community_service)

    @provide
    def get_get_leaderboard_use_case(
        self, community_service: CommunityService, settings: CommunitySettings
    ) -> GetLeaderboardUseCase:
        """Provide leaderboard use case."""
        return GetLeaderboardUseCase(
            community_service=community_service, settings=settings
        )

    # Journal use cases
    @provide
    def get_get_journal_use_case(
        self, journal_service: JournalService, settings: AccrualSettings
    ) -> GetJournalUseCase:
        """Provide journal overview use case."""
        return GetJournalUseCase(journal_service=journal_service, settings=settings)

    @provide
    def get_get_journal_day_use_case(
        self, journal_service: JournalService
    ) -> GetJournalDayUseCase:
        """Provide journal day use case."""
        return GetJournalDayUseCase(journal_service=journal_service)

    @provide
    def get_save_reflection_use_case(
        self, journal_service: JournalService
    ) -> SaveReflectionUseCase:
        """Provide save reflection use case."""
        return SaveReflectionUseCase(journal_service=journal_service)

    # Progress use cases
    @provide
    def get_get_progress_use_case(
        self,
        user_service: UserService,
        progress_service: ProgressService,
        badge_service: BadgeService,
    ) -> GetProgressUseCase:
        """Provide progress dashboard use case."""
        return GetProgressUseCase(
            user_service=user_service,
            progress_service=progress_service,
            badge_service=badge_service,
        )

    @provide
    def get_get_monthly_progress_use_case(
        self, progress_service: ProgressService
    ) -> GetMonthlyProgressUseCase:
        """Provide monthly progress use case."""
        return GetMonthlyProgressUseCase(progress_service=progress_service)
