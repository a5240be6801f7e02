"""Realtime broadcast providers."""

from collections.abc import Iterator

from dishka import Scope, alias, provide

from eco.adapter.realtime import BroadcastHub, EventOutbox
from eco.config import CommunitySettings
from eco.domain.event import EventPublisher
from eco.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """In-process broadcast hub and per-request outbox - concrete, no mocks needed."""

    @provide(scope=Scope.APP)
    def get_hub(self, settings: CommunitySettings) -> BroadcastHub:
        """Provide the application-wide broadcast hub."""
        return BroadcastHub(queue_size=settings.subscriber_queue_size)

    @provide(scope=Scope.REQUEST)
    def get_outbox(self, hub: BroadcastHub) -> Iterator[EventOutbox]:
        """Provide the request's event outbox.

        Buffered events are flushed when the request scope closes. Anything
        that depends on the outbox (the database session) is finalized first,
        so events only go out after the transaction has committed.
        """
        outbox = EventOutbox(hub)
        try:
            yield outbox
        except Exception:
            outbox.discard()
            raise
        outbox.flush()

    event_publisher = alias(source=EventOutbox, provides=EventPublisher)
