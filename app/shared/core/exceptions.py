# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines the special error types the billing service uses to say what went wrong:
# bad input from the caller, a subscription that does not exist, or a problem with the database.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# Repositories, application handlers, mappers, middleware, app.main exception handlers

from typing import Any, Dict, Optional

from fastapi import status


class BillingServiceException(Exception):
    """
    Base exception class for the Subscription Billing service.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self, request_id: Optional[str] = None) -> Dict[str, Any]:
        """Convert exception to the error envelope returned to callers."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "request_id": request_id,
            }
        }


# =============================================================================
# CLIENT ERRORS
# =============================================================================

class ValidationError(BillingServiceException):
    """
    Exception raised for data validation failures.
    Used when input data, identifiers or query parameters are malformed.
    The message is passed through to the caller unchanged.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(BillingServiceException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class SubscriptionNotFoundError(NotFoundError):
    """Specialized NotFoundError for subscription records."""

    def __init__(self, subscription_id: Optional[str] = None):
        super().__init__(
            message="subscription not found",
            resource_type="subscription",
            resource_id=subscription_id,
        )


# =============================================================================
# SERVER ERRORS
# =============================================================================

class StorageError(BillingServiceException):
    """
    Exception raised for storage failures: connectivity, constraint
    violations, timeouts or unexpected query errors.

    The message is the opaque text shown to callers. The underlying
    failure is kept on ``cause`` for logging and never serialized.
    """

    def __init__(
        self,
        message: str = "storage operation failed",
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None
    ):
        self.operation = operation
        self.cause = cause
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={},
            error_code="STORAGE_ERROR"
        )


class ConfigurationError(BillingServiceException):
    """
    Exception raised when the service cannot start with its configuration,
    e.g. the database stays unreachable after all startup attempts.
    """

    def __init__(
        self,
        message: str = "Configuration error",
        component: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if component:
            details["component"] = component

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="CONFIGURATION_ERROR"
        )


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def is_client_error(exception: Exception) -> bool:
    """
    Check if exception represents a client error (4xx).

    Args:
        exception: Exception to check

    Returns:
        bool: True if client error, False otherwise
    """
    if isinstance(exception, BillingServiceException):
        return 400 <= exception.status_code < 500

    return False
