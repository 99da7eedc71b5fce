from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service and store layers.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, offending values)
        code: machine-readable error code used in the response envelope
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Service error"
    default_code = "SERVICE_ERROR"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "SERVICE_VALIDATION_ERROR"


class DuplicateNameError(ServiceValidationError):
    """Raised when an ingredient name collides case-insensitively with another one."""

    default_message = "An ingredient with that name already exists"
    default_code = "DUPLICATE_NAME"


class NotFoundError(ServiceError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class UnauthenticatedError(ServiceError):
    """Raised when a protected operation is called without a resolvable caller."""

    http_status = 401
    default_message = "User not authenticated"
    default_code = "UNAUTHENTICATED"


class StoreError(ServiceError):
    """Raised when the persistence layer is unreachable or a statement fails.

    Not recoverable at the service layer; the request fails as a whole.
    """

    http_status = 503
    default_message = "Ingredient store unavailable"
    default_code = "STORE_ERROR"
