class DomainError(Exception):
    """Base exception for the dashboard."""


class ValidationError(DomainError):
    """Raised when an upstream payload does not look like attendance data."""


class FetchError(DomainError):
    """Raised when the attendance records could not be fetched."""


class NotFoundError(DomainError):
    """Raised when a day has no detail to show."""


class InvalidTransitionError(DomainError):
    """Raised when the view state machine is driven out of order."""
