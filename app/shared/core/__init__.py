"""
Core utilities package for the Subscription Billing service.
Provides the exception hierarchy shared by every module.
"""

from .exceptions import (
    BillingServiceException,
    ValidationError,
    NotFoundError,
    SubscriptionNotFoundError,
    StorageError,
    ConfigurationError,
)

__all__ = [
    "BillingServiceException",
    "ValidationError",
    "NotFoundError",
    "SubscriptionNotFoundError",
    "StorageError",
    "ConfigurationError",
]
