"""Domain layer DI providers."""

from dishka import Scope, provide

from eco.config import AccrualSettings, AuthSettings, CommunitySettings
from eco.domain.catalog import ActionCatalog, BadgeCatalog
from eco.domain.repository import (
    ActionRepository,
    BadgeRepository,
    TransactionManager,
    UserRepository,
)
from eco.domain.service import (
    ActionService,
    BadgeService,
    CommunityService,
    JournalService,
    JWTService,
    ProgressService,
    UserService,
)
from eco.util.clock import Clock
from eco.util.di.base import ProviderBase
from eco.util.locks import KeyedLock


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_badge_service(
        self,
        badge_repository: BadgeRepository,
        user_repository: UserRepository,
        action_repository: ActionRepository,
        badge_catalog: BadgeCatalog,
    ) -> BadgeService:
        """Provide badge domain service."""
        return BadgeService(
            badge_repository=badge_repository,
            user_repository=user_repository,
            action_repository=action_repository,
            badge_catalog=badge_catalog,
        )

    @provide
    def get_action_service(
        self,
        action_repository: ActionRepository,
        user_repository: UserRepository,
        badge_service: BadgeService,
        action_catalog: ActionCatalog,
        clock: Clock,
        user_locks: KeyedLock,
        transaction: TransactionManager,
    ) -> ActionService:
        """Provide action logging domain service."""
        return ActionService(
            action_repository=action_repository,
            user_repository=user_repository,
            badge_service=badge_service,
            action_catalog=action_catalog,
            clock=clock,
            user_locks=user_locks,
            transaction=transaction,
        )

    @provide
    def get_community_service(
        self,
        action_repository: ActionRepository,
        user_repository: UserRepository,
        clock: Clock,
        accrual_settings: AccrualSettings,
        community_settings: CommunitySettings,
    ) -> CommunityService:
        """Provide community aggregates domain service."""
        return CommunityService(
            action_repository=action_repository,
            user_repository=user_repository,
            clock=clock,
            weekly_window_days=accrual_settings.weekly_window_days,
            leaderboard_size=community_settings.leaderboard_size,
        )

    @provide
    def get_journal_service(
        self, action_repository: ActionRepository, clock: Clock
    ) -> JournalService:
        """Provide journal domain service."""
        return JournalService(action_repository=action_repository, clock=clock)

    @provide
    def get_progress_service(
        self,
        action_repository: ActionRepository,
        action_catalog: ActionCatalog,
        clock: Clock,
        accrual_settings: AccrualSettings,
    ) -> ProgressService:
        """Provide personal progress domain service."""
        return ProgressService(
            action_repository=action_repository,
            action_catalog=action_catalog,
            clock=clock,
            daily_window_days=accrual_settings.daily_window_days,
        )
