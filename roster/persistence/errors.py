"""Translation of storage exceptions into domain errors."""

import functools
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

import logfire
from sqlalchemy import exc as sa_exc

from roster.domain.error import ConflictError, TransientError

P = ParamSpec("P")
R = TypeVar("R")


def translate_errors(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """Decorate a repository method so it only raises domain errors.

    - IntegrityError (unique or foreign key violation) -> ConflictError
    - Connection loss, operational failures and timeouts -> TransientError
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except sa_exc.IntegrityError as e:
            logfire.warn(
                "Storage integrity violation",
                operation=func.__qualname__,
                error=str(e.orig),
            )
            raise ConflictError(f"Conflicting write: {e.orig}") from e
        except (sa_exc.OperationalError, sa_exc.TimeoutError, TimeoutError) as e:
            logfire.error(
                "Storage unavailable",
                operation=func.__qualname__,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransientError("Storage is temporarily unavailable") from e
        except sa_exc.DBAPIError as e:
            if e.connection_invalidated:
                logfire.error(
                    "Storage connection lost",
                    operation=func.__qualname__,
                    error=str(e),
                )
                raise TransientError("Storage connection lost") from e
            raise

    return wrapper
