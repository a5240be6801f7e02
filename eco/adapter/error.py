"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class SubscriptionClosedError(AdapterError):
    """Raised when reading from a subscription that has been closed."""

    pass
