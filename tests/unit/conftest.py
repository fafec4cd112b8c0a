from datetime import datetime, UTC
from unittest.mock import AsyncMock, MagicMock

import pytest
import redis.asyncio

from shortlinker.models import MappingModel


@pytest.fixture
def app_prefix() -> str:
    return 'testapp:test'


@pytest.fixture
def pipeline() -> MagicMock:
    """Mock an asyncio Redis transaction pipeline.

    Commands queued on a pipeline are plain calls; only execute() is awaited.
    """
    pipe = MagicMock(spec=redis.asyncio.client.Pipeline)
    pipe.__aenter__.return_value = pipe
    pipe.__aexit__.return_value = None
    pipe.execute = AsyncMock(return_value=[])
    return pipe


@pytest.fixture
def redis_client(pipeline) -> MagicMock:
    """Mock an asyncio Redis client with awaitable commands."""
    client = MagicMock(spec=redis.asyncio.Redis)
    client.connection_pool = MagicMock(
        spec=redis.asyncio.ConnectionPool,
        connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 0},
    )
    client.pipeline.return_value = pipeline
    client.ping = AsyncMock(return_value=True)
    client.exists = AsyncMock(return_value=0)
    client.get = AsyncMock(return_value=None)
    client.hget = AsyncMock(return_value=None)
    client.hgetall = AsyncMock(return_value={})
    client.smembers = AsyncMock(return_value=set())
    client.hset = AsyncMock(return_value=1)
    client.incr = AsyncMock(return_value=1)
    client.aclose = AsyncMock(return_value=None)
    return client


@pytest.fixture
def created_at() -> datetime:
    return datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def mapping(created_at) -> MappingModel:
    return MappingModel(alias='abc123', destination='https://example.com/a', created_at=created_at)


@pytest.fixture
def stateful_redis() -> MagicMock:
    """Mock an asyncio Redis client backed by plain dicts.

    Supports the hash, set and counter commands used by MappingRedisDAO.
    Pipelined commands are queued and applied on execute().
    """
    hashes: dict[str, dict[str, str]] = {}
    sets: dict[str, set[str]] = {}
    strings: dict[str, str] = {}

    def hset(key, field=None, value=None, mapping=None):
        fields = hashes.setdefault(key, {})
        fields.update(mapping or {})
        if field is not None:
            fields[field] = value
        return 1

    def sadd(key, *members):
        sets.setdefault(key, set()).update(members)
        return len(members)

    def srem(key, *members):
        sets.get(key, set()).difference_update(members)
        return len(members)

    def incr(key):
        strings[key] = str(int(strings.get(key, 0)) + 1)
        return int(strings[key])

    def pipeline(transaction=True):
        queued = []
        pipe = MagicMock(spec=redis.asyncio.client.Pipeline)
        pipe.__aenter__.return_value = pipe
        pipe.__aexit__.return_value = None
        for name, command in (('hset', hset), ('sadd', sadd), ('srem', srem)):
            getattr(pipe, name).side_effect = lambda *a, _command=command, **kw: queued.append((_command, a, kw))
        pipe.execute = AsyncMock(side_effect=lambda: [command(*a, **kw) for command, a, kw in queued])
        return pipe

    client = MagicMock(spec=redis.asyncio.Redis)
    client.connection_pool = MagicMock(
        spec=redis.asyncio.ConnectionPool,
        connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 0},
    )
    client.pipeline.side_effect = pipeline
    client.ping = AsyncMock(return_value=True)
    client.exists = AsyncMock(side_effect=lambda key: int(key in hashes))
    client.get = AsyncMock(side_effect=lambda key: strings.get(key))
    client.hget = AsyncMock(side_effect=lambda key, field: hashes.get(key, {}).get(field))
    client.hgetall = AsyncMock(side_effect=lambda key: dict(hashes.get(key, {})))
    client.hset = AsyncMock(side_effect=hset)
    client.smembers = AsyncMock(side_effect=lambda key: set(sets.get(key, set())))
    client.incr = AsyncMock(side_effect=incr)
    client.aclose = AsyncMock(return_value=None)
    client.sets = sets
    return client
