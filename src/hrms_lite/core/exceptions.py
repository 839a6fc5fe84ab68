class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""

    status_code = 400


class NotFoundError(DomainError):
    """Raised when a referenced employee does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """Raised when a write would duplicate an existing key."""

    status_code = 409
