"""Shared exception hierarchy used across layers."""


class CodeShelfError(Exception):
    """Base class for errors raised by the application and domain layers."""

    def __init__(self, message: str, *, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(CodeShelfError):
    """Raised when user supplied data breaks a business rule."""


class AuthenticationError(CodeShelfError):
    """Raised when credentials or tokens are missing or invalid."""


class PermissionDeniedError(CodeShelfError):
    """Raised when a user acts on a record they do not own."""


class NotFoundError(CodeShelfError):
    """Raised when a requested record does not exist or is not visible."""


class ConflictError(CodeShelfError):
    """Raised when a unique field (email, username, slug) is already taken."""
