"""Predictable customer-service failures and the HTTP status each one maps to."""

from __future__ import annotations


class CustomerServiceError(Exception):
    """Base class for service-layer errors carrying an API status and code."""

    status_code: int = 500
    error_code: str = "CUSTOMER_SERVICE_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ResourceNotFoundError(CustomerServiceError):
    """Raised when the referenced customer id does not exist."""

    status_code = 404
    error_code = "RESOURCE_NOT_FOUND"


class DuplicateResourceError(CustomerServiceError):
    """Raised when an email is already taken by another customer."""

    status_code = 409
    error_code = "DUPLICATE_RESOURCE"


class RequestValidationError(CustomerServiceError):
    """Raised when an update request would not change anything."""

    status_code = 400
    error_code = "REQUEST_VALIDATION_FAILED"
