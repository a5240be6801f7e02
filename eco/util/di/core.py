"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from eco.config import AccrualSettings, AuthSettings, CommunitySettings, Settings
from eco.domain.catalog import (
    ActionCatalog,
    BadgeCatalog,
    default_action_catalog,
    default_badge_catalog,
)
from eco.util.di.base import ProviderBase
from eco.util.locks import KeyedLock


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_accrual_settings(self, settings: Settings) -> AccrualSettings:
        """Provide accrual settings."""
        return settings.accrual

    @provide
    def provide_community_settings(self, settings: Settings) -> CommunitySettings:
        """Provide community settings."""
        return settings.community

    @provide
    def provide_action_catalog(self) -> ActionCatalog:
        """Provide the fixed action rewards."""
        return default_action_catalog()

    @provide
    def provide_badge_catalog(self) -> BadgeCatalog:
        """Provide the badge definitions."""
        return default_badge_catalog()

    @provide
    def provide_user_locks(self) -> KeyedLock:
        """Provide the per-user locks shared by all requests."""
        return KeyedLock()
