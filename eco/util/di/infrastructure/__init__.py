"""Infrastructure providers."""

# Import bases
from .clock import ClockProvider
from .persistence import PersistenceProvider
from .realtime import RealtimeProvider

# Import implementations (needed for __subclasses__())
from .clock import ProdClockProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ClockProvider",
    "PersistenceProvider",
    "ProdClockProvider",
    "ProdPersistenceProvider",
    "RealtimeProvider",
]
