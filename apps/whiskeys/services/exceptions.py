"""Domain-specific exceptions for whiskeys services."""


class WhiskeysServiceError(Exception):
    """Base exception for whiskeys services."""
    pass


class WhiskeyNotFoundError(WhiskeysServiceError):
    """
    Raised when a whiskey does not exist or belongs to another user.

    Both cases carry the same message so callers cannot tell them apart.
    """
    pass


class WhiskeyValidationError(WhiskeysServiceError):
    """Raised when whiskey data violates a field constraint."""

    def __init__(self, field, message):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")

    def as_dict(self):
        return {self.field: [self.message]}


class CSVFormatError(WhiskeysServiceError):
    """Raised when an uploaded CSV document cannot be read at all."""
    pass
