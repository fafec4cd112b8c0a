"""Data Access Object (DAO) implementation for managing mappings in Redis

This module provides an asyncio Redis implementation of MappingBaseDAO for
CRUD-like operations with MappingModel instances.

Responsibilities:
    - Insert, retrieve and mutate mappings stored as Redis hashes;
    - Maintain the destination index used for de-duplication;
    - Increment the global counter used to derive aliases;
    - Raise appropriate DAO exceptions on missing keys and connectivity issues.

Storage layout:
    <prefix>:mappings:<alias>               HASH   destination, created_at, [expires_at]
    <prefix>:destinations:<xxh128(url)>     SET    aliases of mappings pointing at this destination
    <prefix>:mappings:counter               STRING global counter

Classes:
    MappingRedisDAO:
        DAO for storing and retrieving MappingModel in a Redis datastore.

Example:
    >>> from datetime import datetime, UTC
    >>> from shortlinker.models import MappingModel
    >>> from shortlinker.dao.redis import MappingRedisDAO

    >>> dao = await MappingRedisDAO(prefix='app:dev').connect()

    >>> mapping = MappingModel(
    ...     alias='abc123',
    ...     destination='https://example.com/page',
    ...     created_at=datetime.now(UTC),
    ... )
    >>> await dao.insert(mapping)
    <MappingRedisDAO>

    >>> (await dao.get('abc123')).destination
    'https://example.com/page'
    >>> (await dao.find_by_destination('https://example.com/page')).alias
    'abc123'
"""

from datetime import datetime

from beartype import beartype

from shortlinker.models import MappingModel
from shortlinker.dao.base import MappingBaseDAO
from shortlinker.dao.redis.mixins import RedisClientMixin
from shortlinker.dao.redis.helpers import handle_redis_connection_error
from shortlinker.dao.exceptions import MappingAlreadyExistsError, MappingNotFoundError


def _to_hash(mapping: MappingModel) -> dict[str, str]:
    fields = {
        'destination': mapping.destination,
        'created_at': mapping.created_at.isoformat(),
    }
    if mapping.expires_at is not None:
        fields['expires_at'] = mapping.expires_at.isoformat()
    return fields


def _from_hash(alias: str, fields: dict[str, str]) -> MappingModel:
    expires_at = fields.get('expires_at')
    return MappingModel(
        alias=alias,
        destination=fields['destination'],
        created_at=datetime.fromisoformat(fields['created_at']),
        expires_at=datetime.fromisoformat(expires_at) if expires_at else None,
    )


class MappingRedisDAO(RedisClientMixin, MappingBaseDAO):
    """Redis-based Data Access Object (DAO) for managing alias mappings

    This class implements the MappingBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.asyncio.Redis):
            Asyncio Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    NOTE:
        Every mapping alias is a member of exactly one destination set: the set
        of its current destination. Inserts and updates maintain the sets in
        the same transaction as the mapping hash. Lookups still re-check each
        member's destination, since a concurrent update may land between the
        SMEMBERS and HGETALL calls.
    """

    @handle_redis_connection_error
    @beartype
    async def insert(self, mapping: MappingModel, **kwargs) -> 'MappingRedisDAO':
        """Insert a mapping and index its destination

        Both writes are performed via a Redis transaction, so a mapping is
        never visible without its destination index entry.

        Args:
            mapping (MappingModel):
                MappingModel instance to store.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            MappingRedisDAO: self (for method chaining)

        Raises:
            MappingAlreadyExistsError:
                If a mapping with the same alias already exists.
            DataStoreError:
                If a Redis connection issue occurs during the transaction.
        """
        mapping_key = self.keys.mapping_key(mapping.alias)
        if await self.redis.exists(mapping_key):
            raise MappingAlreadyExistsError(f"Mapping with alias '{mapping.alias}' already exists.")

        async with self.redis.pipeline(transaction=True) as pipe:
            pipe.hset(mapping_key, mapping=_to_hash(mapping))
            pipe.sadd(self.keys.destination_key(mapping.destination), mapping.alias)
            await pipe.execute()
        return self

    @handle_redis_connection_error
    @beartype
    async def get(self, alias: str, **kwargs) -> MappingModel:
        """Retrieve a stored mapping by alias

        Raises:
            MappingNotFoundError:
                If the mapping does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> await dao.get('abc123')
            MappingModel(alias='abc123', destination='https://example.com', ...)
        """
        fields = await self.redis.hgetall(self.keys.mapping_key(alias))
        if not fields:
            raise MappingNotFoundError(f"Mapping with alias '{alias}' not found.")
        return _from_hash(alias, fields)

    @handle_redis_connection_error
    @beartype
    async def find_by_destination(self, destination: str, **kwargs) -> MappingModel | None:
        """Retrieve a mapping pointing at an exact destination string

        Returns:
            MappingModel | None:
                The oldest indexed mapping which still points at this
                destination, or None if there is none.
        """
        matches = []
        for alias in await self.redis.smembers(self.keys.destination_key(destination)):
            fields = await self.redis.hgetall(self.keys.mapping_key(alias))
            if fields and fields.get('destination') == destination:
                matches.append(_from_hash(alias, fields))

        return min(matches, key=lambda m: (m.created_at, m.alias), default=None)

    @handle_redis_connection_error
    @beartype
    async def update_destination(self, alias: str, destination: str, **kwargs) -> 'MappingRedisDAO':
        """Overwrite a mapping's destination and move it to the new destination's index

        `created_at` and `expires_at` are left untouched.

        Raises:
            MappingNotFoundError:
                If the mapping does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        mapping_key = self.keys.mapping_key(alias)
        old_destination = await self.redis.hget(mapping_key, 'destination')
        if old_destination is None:
            raise MappingNotFoundError(f"Mapping with alias '{alias}' not found.")

        async with self.redis.pipeline(transaction=True) as pipe:
            pipe.hset(mapping_key, 'destination', destination)
            pipe.srem(self.keys.destination_key(old_destination), alias)
            pipe.sadd(self.keys.destination_key(destination), alias)
            await pipe.execute()
        return self

    @handle_redis_connection_error
    @beartype
    async def update_expiry(self, alias: str, expires_at: datetime, **kwargs) -> 'MappingRedisDAO':
        """Overwrite a mapping's expiry

        Raises:
            MappingNotFoundError:
                If the mapping does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        mapping_key = self.keys.mapping_key(alias)
        if not await self.redis.exists(mapping_key):
            raise MappingNotFoundError(f"Mapping with alias '{alias}' not found.")

        await self.redis.hset(mapping_key, 'expires_at', expires_at.isoformat())
        return self

    @handle_redis_connection_error
    async def count(self, increment: bool = False, **kwargs) -> int:
        """Retrieve global mapping counter

        Args:
            increment (bool):
                If True, increments the counter. Otherwise, retrieves its value.

        Returns:
            int:
                The updated or current global counter value (0 if never incremented).

        Example:
            >>> await dao.count(increment=False)
            123
            >>> await dao.count(increment=True)
            124
        """
        if increment:
            return await self.redis.incr(self.keys.counter_key())
        return int(await self.redis.get(self.keys.counter_key()) or 0)
