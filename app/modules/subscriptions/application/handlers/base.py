# 📄 File: app/modules/subscriptions/application/handlers/base.py
# 🧭 Purpose (Layman Explanation):
# Makes sure that whatever goes wrong inside storage, the caller only ever sees one of three
# answers: "bad input", "not found", or a plain "something failed on our side".
# 🧪 Purpose (Technical Summary):
# Shared guard for repository calls: typed service exceptions pass through, any other
# exception is logged with its traceback and reclassified as StorageError with an opaque message.
# 🔗 Dependencies:
# app.shared.core.exceptions, logging
# 🔄 Connected Modules / Calls From:
# command_handlers.py, query_handlers.py

import logging
from typing import Awaitable, TypeVar

from app.shared.core.exceptions import BillingServiceException, StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def guard_repository_call(awaitable: Awaitable[T], message: str, operation: str) -> T:
    """
    Await a repository operation, classifying unexpected failures.

    Args:
        awaitable: Pending repository call
        message: Opaque caller-facing message, e.g. "failed to list subscriptions"
        operation: Operation name for logs

    Raises:
        BillingServiceException: Typed errors from the repository, unchanged
        StorageError: For any other exception
    """
    try:
        return await awaitable
    except BillingServiceException:
        raise
    except Exception as e:
        logger.error(f"Unexpected failure during subscription {operation}: {e}", exc_info=True)
        raise StorageError(message, operation=operation, cause=e) from e
