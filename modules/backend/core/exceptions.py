"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Domain errors subclass one of the generic categories so the exception
handlers can map them to an HTTP status by walking the class hierarchy.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Resource not found", code: str = "RES_NOT_FOUND") -> None:
        super().__init__(message, code=code)


class ValidationError(ApplicationError):
    """Raised when validation fails."""

    def __init__(
        self,
        message: str = "Validation failed",
        details: dict | None = None,
        code: str = "VAL_VALIDATION_ERROR",
    ) -> None:
        self.details = details or {}
        super().__init__(message, code=code)


class AuthenticationError(ApplicationError):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication required", code: str = "AUTH_UNAUTHORIZED") -> None:
        super().__init__(message, code=code)


class AuthorizationError(ApplicationError):
    """Raised when authorization fails."""

    def __init__(self, message: str = "Permission denied") -> None:
        super().__init__(message, code="AUTHZ_FORBIDDEN")


class ConflictError(ApplicationError):
    """Raised when there is a state conflict."""

    def __init__(self, message: str = "Resource conflict") -> None:
        super().__init__(message, code="RES_CONFLICT")


# =============================================================================
# Domain errors
# =============================================================================


class DuplicateUsernameError(ValidationError):
    """Raised when registering a username that is already taken."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__("Username already exists", code="USER_DUPLICATE_USERNAME")


class InvalidCredentialsError(AuthenticationError):
    """Raised when a password does not match the stored hash."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials", code="AUTH_INVALID_CREDENTIALS")


class MissingTokenError(AuthenticationError):
    """Raised when an identity-scoped request carries no bearer token."""

    def __init__(self) -> None:
        super().__init__("Unauthorized: No token provided", code="AUTH_MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token fails signature, expiry or claim checks."""

    def __init__(self) -> None:
        super().__init__("Unauthorized: Invalid token", code="AUTH_INVALID_TOKEN")


class NoteNotFoundError(NotFoundError):
    """
    Raised when a note does not exist or is owned by someone else.

    The two cases look the same to the caller.
    """

    def __init__(self, action: str) -> None:
        super().__init__(
            f"Note not found or you are not authorized to {action} this note",
            code="NOTE_NOT_FOUND",
        )


class ProfileUpdateError(ApplicationError):
    """Raised when a profile update fails for an unexpected reason."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__("Failed to update user data", code="USER_UPDATE_FAILED")
