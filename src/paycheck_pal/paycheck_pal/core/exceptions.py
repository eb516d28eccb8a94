class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidIntervalError(ValidationError):
    """Raised when a work interval does not end strictly after it starts."""


class ClockStateError(ValidationError):
    """Raised when punching in/out does not match the open session state."""


class NotFoundError(DomainError):
    """Raised when a record id or position is not present in the store."""


class PersistenceError(DomainError):
    """Raised (or recorded) when a durable write did not complete."""
