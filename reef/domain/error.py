"""Domain layer errors.

Every error a client can see carries an ``ErrorCode``: a stable number and
name that the interface layer puts into the error body.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes exposed to API clients."""

    NOT_FOUND = (1001, "NotFound")
    VALIDATION_FAILED = (1002, "ValidationFailed")
    USER_ALREADY_EXISTS = (2001, "UserAlreadyExisting")
    USER_NOT_FOUND = (2002, "UserNotExisting")
    INCORRECT_CREDENTIALS = (2003, "IncorrectCredentials")
    AUTHENTICATION_FAILED = (3001, "AuthenticationFailed")
    INTERNAL_FAILURE = (9999, "InternalFailure")

    def __init__(self, number: int, error_name: str) -> None:
        self.number = number
        self.error_name = error_name


class DomainError(Exception):
    """Base domain error."""

    code: ErrorCode = ErrorCode.INTERNAL_FAILURE

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Domain validation error."""

    code = ErrorCode.VALIDATION_FAILED


class ValidationFailedError(ValidationError):
    """Malformed or missing input."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UserNotFoundError(NotFoundError):
    """No local account matches the given username or email."""

    code = ErrorCode.USER_NOT_FOUND

    def __init__(self, identifier: str):
        super().__init__("User", identifier)


class DuplicateUserError(DomainError):
    """Username or email already belongs to another account."""

    code = ErrorCode.USER_ALREADY_EXISTS

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"User with {field} '{value}' already exists")


class IncorrectCredentialsError(DomainError):
    """Local credential check failed (password or permanent token)."""

    code = ErrorCode.INCORRECT_CREDENTIALS

    def __init__(self, message: str = "Incorrect username or password"):
        super().__init__(message)


class AuthenticationFailedError(DomainError):
    """The identity provider rejected credentials or provisioning.

    Attributes:
        status_code: HTTP status reported by (or synthesized for) the provider
        message: Human-readable reason, safe to show to clients
        error_code: Classification of the rejection
        detail: Provider-side detail, kept for logs only
    """

    code = ErrorCode.AUTHENTICATION_FAILED

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: ErrorCode = ErrorCode.AUTHENTICATION_FAILED,
        detail: str | None = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.detail = detail
        super().__init__(message)


class InternalFailureError(DomainError):
    """Unexpected store or network fault."""

    code = ErrorCode.INTERNAL_FAILURE
