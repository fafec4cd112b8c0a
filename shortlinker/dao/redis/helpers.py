import functools
from typing import TypeVar, Any
from collections.abc import Callable

import redis

from shortlinker.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def connection_info(client: Any) -> str:
    """Return '<host>:<port>/<db>' of a Redis client for error messages"""
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_connection_error(method: F) -> F:
    """Wrap async Redis-interacting DAO methods to handle connection errors

    Args:
        method (Callable[..., Awaitable[Any]]):
            Async DAO method performing Redis operations which may raise
            redis.exceptions.ConnectionError or redis.exceptions.TimeoutError.

    Returns:
        Callable[..., Awaitable[Any]]:
            Wrapped method which raises DataStoreError on connectivity issues with Redis.

    Example:
        >>> @handle_redis_connection_error
        ... async def get_count(self):
        ...     return await self.redis.get('count')
    """

    @functools.wraps(method)
    async def wrapper(self, *args, **kwargs):
        try:
            return await method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {connection_info(self.redis)}.") from e

    return wrapper
