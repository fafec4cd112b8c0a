"""Redis mixin providing shared async client initialization and connectivity checks.

Responsibilities:
    - Initialize an asyncio Redis client
    - Healthcheck Redis client
    - Close the client's connection pool

Classes:
    - RedisClientMixin: Base mixin to inject Redis key management, client setup & healthcheck.

Example:
    Typical usage with a DAO implementation:

        >>> class MappingRedisDAO(RedisClientMixin, MappingBaseDAO):
        ...     pass
        ...
        >>> dao = await MappingRedisDAO(prefix='myapp:prod').connect()
        >>> await dao._healthcheck()
        True
        >>> await dao.close()
"""

from typing import Optional

import redis
import redis.asyncio

from shortlinker.dao.redis.redis_key_schema import RedisKeySchema
from shortlinker.dao.redis.helpers import connection_info
from shortlinker.dao.exceptions import DataStoreError


class RedisClientMixin:
    """Mixin Redis client setup and health check for Redis-backed DAOs.

    The client is created lazily by redis-py: no connection is opened in
    __init__, so `connect()` must be awaited to verify connectivity.

    Attributes:
        redis (redis.asyncio.Redis):
            Active asyncio Redis client instance used by subclasses.

        keys (RedisKeySchema):
            Helper class for generating namespaced Redis key names.

    Methods:
        connect() -> Self:
            Ping Redis and raise DataStoreError if unreachable.

        close() -> None:
            Close the Redis client.

        _healthcheck(raise_error: bool = True) -> bool:
            Ping Redis to verify connectivity.
            Optionally raise a DataStoreError if unreachable.
    """

    def __init__(
        self,
        redis_host: Optional[str] = 'localhost',
        redis_port: Optional[int] = 6379,
        redis_db: Optional[int] = 0,
        redis_decode_responses: Optional[bool] = True,
        redis_username: Optional[str] = None,
        redis_password: Optional[str] = None,
        redis_client: Optional[redis.asyncio.Redis] = None,
        prefix: Optional[str] = None,
    ):
        """Initialize a Redis-based DAO

        The option is given to either use an existing Redis client instance or
        create one via the appropriate Redis connection parameters.

        Args:
            redis_host (Optional[str]):
                Hostname of the Redis server. Defaults to 'localhost'.

            redis_port (Optional[int]):
                Redis server port. Defaults to 6379.

            redis_db (Optional[int]):
                Redis database index. Defaults to 0.

            redis_decode_responses (Optional[bool]):
                If True, decodes Redis responses. Defaults to True.

            redis_username (Optional[str]):
                Username for Redis authentication (if required).

            redis_password (Optional[str]):
                Password for Redis authentication (if required).

            redis_client (Optional[redis.asyncio.Redis]):
                Pre-initialized Redis client. If None, a new client is created.

            prefix (Optional[str]):
                Namespace prefix for all Redis keys, e.g. 'app:env'.
        """
        if redis_client is None:
            redis_client = redis.asyncio.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

    async def connect(self):
        """Healthcheck Redis before the DAO is used

        Returns:
            self (for method chaining)

        Raises:
            DataStoreError:
                If Redis connection cannot be established.
        """
        await self._healthcheck()
        return self

    async def close(self) -> None:
        await self.redis.aclose()

    async def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING Redis to healthcheck connectivity

        Args:
            raise_error (bool):
                If True, raises DataStoreError on failure. Defaults to True.

        Returns:
            bool:
                True if Redis is reachable, False otherwise (only if raise_error=False).

        Raises:
            DataStoreError:
                If Redis connection cannot be established and raise_error=True.
        """
        try:
            await self.redis.ping()
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            if raise_error:
                raise DataStoreError(
                    f"Can't connect to Redis at {connection_info(self.redis)}. Check the provided configuration parameters."
                ) from e
            return False
        else:
            return True
