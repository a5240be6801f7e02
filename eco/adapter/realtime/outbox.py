"""Request-scoped event outbox.

Events published during a request are held here and only reach the hub once
the request's database transaction has committed. On rollback they are
discarded.
"""

import logfire

from eco.domain.event import DomainEvent, EventPublisher

from .hub import BroadcastHub, Message


class EventOutbox(EventPublisher):
    """Buffers domain events until the unit of work completes."""

    def __init__(self, hub: BroadcastHub) -> None:
        self.hub = hub
        self.pending: list[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self.pending.append(event)

    def flush(self) -> int:
        """Hand every buffered event to the hub.

        Delivery failures are logged; the remaining events are still sent.

        Returns:
            Number of events flushed
        """
        events, self.pending = self.pending, []
        for event in events:
            try:
                delivered = self.hub.publish(
                    event.topic, Message(event=event.name, data=event.payload())
                )
                logfire.info(
                    "Event broadcast",
                    topic=event.topic,
                    event_name=event.name,
                    subscribers=delivered,
                )
            except Exception as e:
                logfire.error(
                    "Event broadcast failed",
                    topic=event.topic,
                    event_name=event.name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
        return len(events)

    def discard(self) -> int:
        """Drop buffered events without publishing them.

        Returns:
            Number of events dropped
        """
        dropped = len(self.pending)
        self.pending = []
        if dropped:
            logfire.info("Pending events discarded", count=dropped)
        return dropped
