"""Topic-based broadcast hub.

Each subscriber owns a bounded queue. Publishing never awaits: when a
subscriber's queue is full the message is dropped for that subscriber only.
"""

import asyncio
from dataclasses import dataclass
from typing import Any

import logfire

from eco.adapter.error import SubscriptionClosedError


@dataclass(frozen=True)
class Message:
    """One broadcast frame."""

    event: str
    data: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"event": self.event, "data": self.data}


class Subscription:
    """A single subscriber's view of one topic."""

    def __init__(self, hub: "BroadcastHub", topic: str, queue_size: int) -> None:
        self.hub = hub
        self.topic = topic
        self.queue: asyncio.Queue[Message | None] = asyncio.Queue(maxsize=queue_size)
        self.dropped = 0
        self.closed = False

    async def get(self) -> Message:
        """Wait for the next message.

        Raises:
            SubscriptionClosedError: If the subscription was closed
        """
        if self.closed and self.queue.empty():
            raise SubscriptionClosedError(self.topic)
        message = await self.queue.get()
        if message is None:
            raise SubscriptionClosedError(self.topic)
        return message

    def offer(self, message: Message) -> bool:
        """Enqueue without waiting. Returns False if the message was dropped."""
        try:
            self.queue.put_nowait(message)
            return True
        except asyncio.QueueFull:
            self.dropped += 1
            return False

    def close(self) -> None:
        """Detach from the hub and wake any pending ``get``."""
        if self.closed:
            return
        self.closed = True
        self.hub.unsubscribe(self)
        try:
            self.queue.put_nowait(None)
        except asyncio.QueueFull:
            pass  # get() sees `closed` once the backlog is drained

    async def __aenter__(self) -> "Subscription":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()


class BroadcastHub:
    """Application-wide registry of topic subscribers."""

    def __init__(self, queue_size: int = 32) -> None:
        """Initialize broadcast hub.

        Args:
            queue_size: Pending messages per subscriber before dropping
        """
        self.queue_size = queue_size
        self._subscribers: dict[str, set[Subscription]] = {}

    def subscribe(self, topic: str) -> Subscription:
        """Register a new subscriber for a topic."""
        subscription = Subscription(self, topic, self.queue_size)
        self._subscribers.setdefault(topic, set()).add(subscription)
        logfire.debug("Subscriber added", topic=topic, subscribers=self.subscriber_count(topic))
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscriber. Unknown subscriptions are ignored."""
        subscribers = self._subscribers.get(subscription.topic)
        if not subscribers:
            return
        subscribers.discard(subscription)
        if not subscribers:
            del self._subscribers[subscription.topic]

    def publish(self, topic: str, message: Message) -> int:
        """Deliver a message to every current subscriber of a topic.

        Args:
            topic: Topic name
            message: Message to deliver

        Returns:
            Number of subscribers that received the message
        """
        delivered = 0
        for subscription in list(self._subscribers.get(topic, ())):
            if subscription.offer(message):
                delivered += 1
            else:
                logfire.warn(
                    "Subscriber queue full, message dropped",
                    topic=topic,
                    event=message.event,
                    dropped=subscription.dropped,
                )
        return delivered

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, ()))
