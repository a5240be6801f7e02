"""Clock infrastructure providers."""

from dishka import Scope, provide

from eco.config import AccrualSettings
from eco.util.clock import Clock, resolve_timezone
from eco.util.di.base import ProviderBase


class ClockProvider(ProviderBase):
    """Clock component base."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Wall clock in the configured time zone."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self, settings: AccrualSettings) -> Clock:
        """Provide wall clock."""
        return Clock(resolve_timezone(settings.timezone))
