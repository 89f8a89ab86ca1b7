from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError

log = logging.getLogger(__name__)

T = TypeVar("T")

# what a page or route treats as "database unreachable"
DB_ERRORS = (SQLAlchemyError, OSError, TimeoutError)

# errors worth another attempt: the server could not be reached or stopped answering
_TRANSIENT_MARKERS = ("timeout", "timed out", "connection")


def is_transient_db_error(exc: BaseException) -> bool:
    if isinstance(exc, (TimeoutError, ConnectionError)):
        return True
    if isinstance(exc, OperationalError):
        return True
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return True
    message = str(exc).lower()
    return any(marker in message for marker in _TRANSIENT_MARKERS)


async def retry_db_operation(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    delay: float = 1.0,
) -> T:
    """
    Run `operation`, retrying connection/timeout failures with exponential backoff.
    Any other error is raised immediately; the last transient error is raised
    once `max_retries` attempts are used up.
    """
    for attempt in range(1, max_retries + 1):
        try:
            return await operation()
        except Exception as exc:
            if attempt == max_retries or not is_transient_db_error(exc):
                raise
            log.warning(
                "database operation failed (attempt %s/%s), retrying in %ss",
                attempt, max_retries, delay,
            )
            await asyncio.sleep(delay)
            delay *= 2
    raise RuntimeError("max_retries must be at least 1")


async def safe_db_operation(operation: Callable[[], Awaitable[T]], fallback: T) -> T:
    """Run `operation`; on a database error log it and return `fallback`."""
    try:
        return await operation()
    except DB_ERRORS:
        log.exception("database operation failed, using fallback")
        return fallback
