"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidSignificantValuesError(DomainError, TypeError):
    """Raised when a value object declares something that is not a sequence."""

    def __init__(self, owner: str, received: str):
        self.owner = owner
        self.received = received
        super().__init__(
            f"{owner}.significant_values() must return a sequence or None, "
            f"got {received}"
        )
