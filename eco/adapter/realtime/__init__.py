"""In-process realtime broadcasting."""

from .hub import BroadcastHub, Message, Subscription
from .outbox import EventOutbox

__all__ = [
    "BroadcastHub",
    "EventOutbox",
    "Message",
    "Subscription",
]
