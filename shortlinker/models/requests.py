"""Request data structures for the Lambda handlers

Each request class parses an API Gateway (Lambda proxy) event and validates
the fields it needs. Malformed input raises BadRequestError, which handlers
answer with HTTP 400. URL well-formedness is NOT checked here: that belongs
to the mapping store and surfaces as ValidationError.

Classes:
    ShortenRequest:
        POST body {"destination_url": str}
    UpdateRequest:
        POST body {"alias": str, "destination_url": str}
    ResolveRequest:
        GET path parameter "alias"
    ExtendExpiryRequest:
        POST body {"alias": str, "days_to_add": int}

Example:
    >>> event = {'body': '{"alias": "https://sho.rt/abc123", "days_to_add": 7}'}
    >>> ExtendExpiryRequest.from_event(event)
    ExtendExpiryRequest(alias='abc123', days_to_add=7)
"""

import json
from dataclasses import dataclass
from typing import Any

from shortlinker.constants import ExpiryDefaults
from shortlinker.exceptions import BadRequestError
from shortlinker.types import LambdaEvent


def _json_body(event: LambdaEvent) -> dict[str, Any]:
    try:
        body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError as e:
        raise BadRequestError('invalid JSON body') from e

    if not isinstance(body, dict):
        raise BadRequestError('JSON body must be an object')
    return body


def _required_string(body: dict[str, Any], field: str) -> str:
    value = body.get(field)
    if not isinstance(value, str) or not value:
        raise BadRequestError(f"missing '{field}' in JSON body")
    return value


def parse_alias(value: str) -> str:
    """Extract the alias from either a bare alias or a full short URL

    Clients may send back the short URL exactly as it was returned by
    the shorten endpoint. Only the last path segment is the alias.

    Args:
        value (str): bare alias ('abc123') or short URL ('https://sho.rt/abc123').

    Returns:
        str: the alias.

    Raises:
        BadRequestError: if no alias can be extracted.

    Example:
        >>> parse_alias('www.sho.rt/abc123')
        'abc123'
        >>> parse_alias('abc123')
        'abc123'
    """
    alias = value.strip().rstrip('/').rsplit('/', 1)[-1]
    if not alias:
        raise BadRequestError(f"can't extract alias from '{value}'")
    return alias


@dataclass(frozen=True)
class ShortenRequest:
    destination_url: str

    @classmethod
    def from_event(cls, event: LambdaEvent) -> 'ShortenRequest':
        body = _json_body(event)
        return cls(destination_url=_required_string(body, 'destination_url'))


@dataclass(frozen=True)
class UpdateRequest:
    alias: str
    destination_url: str

    @classmethod
    def from_event(cls, event: LambdaEvent) -> 'UpdateRequest':
        body = _json_body(event)
        return cls(
            alias=parse_alias(_required_string(body, 'alias')),
            destination_url=_required_string(body, 'destination_url'),
        )


@dataclass(frozen=True)
class ResolveRequest:
    alias: str

    @classmethod
    def from_event(cls, event: LambdaEvent) -> 'ResolveRequest':
        # API Gateway sends "pathParameters": null when there are none
        alias = (event.get('pathParameters') or {}).get('alias')
        if not isinstance(alias, str) or not alias:
            raise BadRequestError("missing 'alias' in path")
        return cls(alias=alias)


@dataclass(frozen=True)
class ExtendExpiryRequest:
    alias: str
    days_to_add: int

    @classmethod
    def from_event(cls, event: LambdaEvent) -> 'ExtendExpiryRequest':
        body = _json_body(event)
        alias = parse_alias(_required_string(body, 'alias'))

        days_to_add = body.get('days_to_add')
        # NOTE: bool is a subclass of int, but `true` is not a number of days
        if not isinstance(days_to_add, int) or isinstance(days_to_add, bool):
            raise BadRequestError("'days_to_add' must be an integer")
        if abs(days_to_add) > ExpiryDefaults.MAX_DAYS_TO_ADD:
            raise BadRequestError(f"'days_to_add' must be between -{ExpiryDefaults.MAX_DAYS_TO_ADD} and {ExpiryDefaults.MAX_DAYS_TO_ADD}")
        return cls(alias=alias, days_to_add=days_to_add)
