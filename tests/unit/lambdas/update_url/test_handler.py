"""Unit tests for the update_url AWS Lambda handler.

Test coverage includes:

1. Successful update, by bare alias or by full short URL
2. Bad requests (HTTP 400)
3. Unknown alias (HTTP 404), no mapping is created
4. Data store errors (HTTP 500)
"""

import json

import pytest

from shortlinker.dao.exceptions import DataStoreError
from shortlinker.lambdas.update_url import app


@pytest.fixture(autouse=True)
def _patch_lambda_dependencies(monkeypatch, config, redis_dao_factory):
    monkeypatch.setattr(app, 'load_config', lambda *a, **kw: config)


# -------------------------------
# 1. Successful update
# -------------------------------


@pytest.mark.parametrize('alias', ['abc123', 'https://sho.rt/abc123', 'www.ppa.in/abc123/'])
def test_lambda_handler(make_event, context, store_dao, created_at, alias):
    response = app.lambda_handler(make_event({'alias': alias, 'destination_url': 'https://example.com/b'}), context)
    body = json.loads(response['body'])

    assert response['statusCode'] == 200
    assert body == {'message': 'Alias abc123 now redirects to https://example.com/b', 'success': True}

    mapping = store_dao.mappings['abc123']
    assert mapping.destination == 'https://example.com/b'
    assert mapping.created_at == created_at


# -------------------------------
# 2. Bad requests
# -------------------------------


@pytest.mark.parametrize(
    'kwargs, error_code',
    [
        ({'raw_body': 'not json'}, 'BAD_REQUEST'),
        ({'raw_body': '["abc123"]'}, 'BAD_REQUEST'),
        ({'body': {'destination_url': 'https://example.com/b'}}, 'BAD_REQUEST'),
        ({'body': {'alias': 'abc123'}}, 'BAD_REQUEST'),
        ({'body': {'alias': 'abc123', 'destination_url': 'example.com/b'}}, 'INVALID_URL'),
    ],
)
def test_lambda_handler_bad_request(make_event, context, store_dao, kwargs, error_code):
    response = app.lambda_handler(make_event(**kwargs), context)

    assert response['statusCode'] == 400
    assert json.loads(response['body'])['errorCode'] == error_code
    assert store_dao.mappings['abc123'].destination == 'https://example.com/a'


# -------------------------------
# 3. Unknown alias
# -------------------------------


def test_lambda_handler_unknown_alias(make_event, context, store_dao):
    response = app.lambda_handler(make_event({'alias': 'nope123', 'destination_url': 'https://example.com/b'}), context)

    assert response['statusCode'] == 404
    assert json.loads(response['body']) == {'message': "Not Found (alias 'nope123' doesn't exist)", 'errorCode': 'ALIAS_NOT_FOUND'}
    assert 'nope123' not in store_dao.mappings


# -------------------------------
# 4. Data store errors
# -------------------------------


def test_lambda_handler_data_store_error(monkeypatch, make_event, context, store_dao):
    async def _unreachable(*args, **kwargs):
        raise DataStoreError("Can't connect to Redis at redis.test:6379/0.")

    monkeypatch.setattr(store_dao, 'update_destination', _unreachable)

    response = app.lambda_handler(make_event({'alias': 'abc123', 'destination_url': 'https://example.com/b'}), context)

    assert response['statusCode'] == 500
    assert json.loads(response['body']) == {'message': 'Internal Server Error', 'errorCode': 'INTERNAL_ERROR'}
    assert store_dao.mappings['abc123'].destination == 'https://example.com/a'
