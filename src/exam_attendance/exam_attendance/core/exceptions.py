class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NoExamSelectedError(DomainError):
    """Raised when an operation needs a selected exam session and none is set."""

    def __init__(self, message: str = "Please select an exam session first."):
        super().__init__(message)


class StoreError(DomainError):
    """Raised when a read or write against the roster store fails."""


class RenderError(DomainError):
    """Raised when a report artifact cannot be produced."""
