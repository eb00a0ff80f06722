"""Translation of SQLAlchemy failures into domain storage errors."""

import functools
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

import structlog
from sqlalchemy.exc import SQLAlchemyError

from core.config import settings
from core.exceptions import StorageError

logger = structlog.get_logger()

P = ParamSpec("P")
R = TypeVar("R")

GENERIC_STORAGE_MESSAGE = "A database error occurred"


def describe(exc: SQLAlchemyError) -> str:
    """Client-facing text for a storage failure.

    Driver messages can leak schema details, so production gets a fixed string.
    """
    if settings.is_production:
        return GENERIC_STORAGE_MESSAGE
    return str(exc.orig) if getattr(exc, "orig", None) is not None else str(exc)


def storage_errors(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """Re-raise SQLAlchemy errors from a repository coroutine as StorageError."""

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except SQLAlchemyError as exc:
            logger.warning(
                "storage_error",
                operation=func.__qualname__,
                error_type=type(exc).__name__,
            )
            raise StorageError(describe(exc)) from exc

    return wrapper
