"""Application error variants. Each maps to exactly one HTTP status."""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric codes carried by BusinessError bodies."""

    RECORD_NOT_FOUND = 1001
    BAD_CREDENTIALS = 1002
    RESOURCE_IN_USE = 1003
    USERNAME_TAKEN = 1004


class SysApiError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(SysApiError):
    """Raised when a read finds no row for the requested id."""

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class InvalidInputError(SysApiError):
    """Raised for malformed or missing input (bad id, blank field, bad reference)."""

    pass


class BusinessError(SysApiError):
    """Domain rule violation; carries a numeric code for the client."""

    def __init__(self, code: int, message: str) -> None:
        self.code = int(code)
        super().__init__(message)


class ForbiddenError(SysApiError):
    """Raised by the role gate when the session lacks a required role."""

    pass


class LoginRequiredError(SysApiError):
    """
    Raised when a protected route is called without a valid session.

    Not an error response: the exception handler answers with a redirect to the
    login page and remembers original_uri for the post-login redirect.
    """

    def __init__(self, original_uri: str) -> None:
        self.original_uri = original_uri
        super().__init__("Login required")
