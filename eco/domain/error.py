"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Submitted data failed a business validation rule."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class NoNewActionsError(DomainError):
    """Every submitted action was already logged today."""

    def __init__(self) -> None:
        super().__init__(
            "All specified non-custom actions have already been logged today"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StoreError(DomainError):
    """The data store failed to read or write."""

    pass
