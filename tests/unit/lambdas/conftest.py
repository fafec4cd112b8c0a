import json
from datetime import datetime, UTC

import pytest

from shortlinker.dao.memory import MappingMemoryDAO
from shortlinker.models import MappingModel


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    monkeypatch.setenv('APP_NAME', 'shortlinker')
    monkeypatch.setenv('APP_ENV', 'test')
    monkeypatch.delenv('SHORT_URL_BASE', raising=False)
    monkeypatch.delenv('ALIAS_SALT', raising=False)
    monkeypatch.delenv('ALIAS_LENGTH', raising=False)


@pytest.fixture
def context():
    class _Context:
        function_name = 'test_lambda'

    return _Context()


@pytest.fixture
def config():
    return {'redis': {'host': 'redis.test', 'port': 6379, 'db': 0}}


@pytest.fixture
def created_at() -> datetime:
    return datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def store_dao(created_at) -> MappingMemoryDAO:
    """Mapping store contents shared by all handlers: one live alias"""
    return MappingMemoryDAO(
        mappings=[MappingModel(alias='abc123', destination='https://example.com/a', created_at=created_at)],
        counter=1,
    )


@pytest.fixture
def redis_dao_factory(monkeypatch, store_dao):
    """Replace the Redis DAO built by the handlers with the in-memory store"""
    calls = []

    def factory(**kwargs):
        calls.append(kwargs)
        return store_dao

    monkeypatch.setattr('shortlinker.lambdas.common.MappingRedisDAO', factory)
    return calls


@pytest.fixture
def make_event():
    """Build an API Gateway proxy event"""

    def _make_event(body=None, path_parameters=None, raw_body=None, method='POST'):
        event = {
            'httpMethod': method,
            'headers': {'User-Agent': 'pytest'},
            'requestContext': {'domainName': 'sho.rt', 'stage': 'test', 'httpMethod': method},
            'pathParameters': path_parameters,
            'body': raw_body if raw_body is not None else (None if body is None else json.dumps(body)),
        }
        return event

    return _make_event
