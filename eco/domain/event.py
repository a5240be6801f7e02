"""Outbound domain events.

Services describe what happened; an EventPublisher decides when and how it
reaches subscribers.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from eco.domain.model.common import DomainModel
from eco.domain.model.community import CommunitySnapshot


class DomainEvent(DomainModel):
    """Base for events published to a broadcast topic."""

    topic: ClassVar[str]
    name: ClassVar[str]

    def payload(self) -> dict[str, Any]:
        """JSON-ready event body."""
        return self.model_dump(mode="json", by_alias=True)


class CommunityStatsUpdated(DomainEvent):
    """Community aggregates changed after a logging transaction."""

    topic: ClassVar[str] = "community"
    name: ClassVar[str] = "community-stats-updated"

    snapshot: CommunitySnapshot

    def payload(self) -> dict[str, Any]:
        return self.snapshot.model_dump(mode="json", by_alias=True)


class EventPublisher(ABC):
    """Publishes domain events without blocking the caller."""

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Publish an event.

        Must not raise because of delivery problems.

        Args:
            event: Event to publish
        """
        pass
