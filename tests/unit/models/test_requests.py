"""Unit tests for request data structures

Test coverage includes:

1. parse_alias() accepts bare aliases and full short URLs
2. ShortenRequest / UpdateRequest body parsing
3. ResolveRequest path parsing
4. ExtendExpiryRequest days_to_add validation
5. Malformed JSON bodies
"""

import json

import pytest

from shortlinker.exceptions import BadRequestError
from shortlinker.models import ShortenRequest, UpdateRequest, ResolveRequest, ExtendExpiryRequest
from shortlinker.models.requests import parse_alias


def body_event(**body) -> dict:
    return {'body': json.dumps(body)}


# -------------------------------
# 1. Alias parsing
# -------------------------------


@pytest.mark.parametrize(
    'value, expected',
    [
        ('abc123', 'abc123'),
        ('https://sho.rt/abc123', 'abc123'),
        ('https://sho.rt/abc123/', 'abc123'),
        ('www.ppa.in/abc123', 'abc123'),
        ('https://abc.execute-api.us-east-1.amazonaws.com/Prod/abc123', 'abc123'),
    ],
)
def test_parse_alias(value, expected):
    assert parse_alias(value) == expected


@pytest.mark.parametrize('value', ['/', '   ', '///'])
def test_parse_alias_without_alias(value):
    with pytest.raises(BadRequestError):
        parse_alias(value)


# -------------------------------
# 2. Body parsing
# -------------------------------


def test_shorten_request():
    request = ShortenRequest.from_event(body_event(destination_url='https://example.com/a'))
    assert request == ShortenRequest(destination_url='https://example.com/a')


def test_shorten_request_does_not_validate_url():
    """URL validation belongs to the mapping store."""
    assert ShortenRequest.from_event(body_event(destination_url='not a url')).destination_url == 'not a url'


@pytest.mark.parametrize('body', [{}, {'destination_url': ''}, {'destination_url': 42}, {'target_url': 'https://example.com'}])
def test_shorten_request_missing_destination(body):
    with pytest.raises(BadRequestError, match="missing 'destination_url' in JSON body"):
        ShortenRequest.from_event(body_event(**body))


def test_update_request_with_short_url():
    event = body_event(alias='https://sho.rt/abc123', destination_url='https://example.com/b')
    assert UpdateRequest.from_event(event) == UpdateRequest(alias='abc123', destination_url='https://example.com/b')


def test_update_request_missing_alias():
    with pytest.raises(BadRequestError, match="missing 'alias' in JSON body"):
        UpdateRequest.from_event(body_event(destination_url='https://example.com/b'))


# -------------------------------
# 3. Path parsing
# -------------------------------


def test_resolve_request():
    assert ResolveRequest.from_event({'pathParameters': {'alias': 'abc123'}}).alias == 'abc123'


@pytest.mark.parametrize('event', [{}, {'pathParameters': None}, {'pathParameters': {'shortcode': 'abc123'}}, {'pathParameters': {'alias': ''}}])
def test_resolve_request_missing_alias(event):
    with pytest.raises(BadRequestError, match="missing 'alias' in path"):
        ResolveRequest.from_event(event)


# -------------------------------
# 4. days_to_add validation
# -------------------------------


@pytest.mark.parametrize('days', [0, 7, -1, 3650, 36_500, -36_500])
def test_extend_expiry_request(days):
    request = ExtendExpiryRequest.from_event(body_event(alias='abc123', days_to_add=days))
    assert request == ExtendExpiryRequest(alias='abc123', days_to_add=days)


@pytest.mark.parametrize('days', [None, '7', 1.5, True, [7]])
def test_extend_expiry_request_with_non_integer_days(days):
    with pytest.raises(BadRequestError, match="'days_to_add' must be an integer"):
        ExtendExpiryRequest.from_event(body_event(alias='abc123', days_to_add=days))


@pytest.mark.parametrize('days', [36_501, -36_501, 10**9, -10**9])
def test_extend_expiry_request_with_out_of_range_days(days):
    with pytest.raises(BadRequestError, match="'days_to_add' must be between -36500 and 36500"):
        ExtendExpiryRequest.from_event(body_event(alias='abc123', days_to_add=days))


# -------------------------------
# 5. Malformed JSON bodies
# -------------------------------


@pytest.mark.parametrize('request_class', [ShortenRequest, UpdateRequest, ExtendExpiryRequest])
def test_invalid_json_body(request_class):
    with pytest.raises(BadRequestError, match='invalid JSON body'):
        request_class.from_event({'body': '{"invalid_json": true'})


@pytest.mark.parametrize('request_class', [ShortenRequest, UpdateRequest, ExtendExpiryRequest])
def test_non_object_json_body(request_class):
    with pytest.raises(BadRequestError, match='JSON body must be an object'):
        request_class.from_event({'body': '["https://example.com"]'})
