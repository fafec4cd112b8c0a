"""API Gateway (Lambda proxy) response builders

Functions:
    response_200(**body) -> dict
    response_302(location) -> dict
    response_error(error) -> dict
        Status code, message and errorCode taken from a ShortLinkerError.
    response_500(message=None, error_code=None) -> dict

Example:
    >>> from shortlinker.exceptions import ExpiredError
    >>> response_error(ExpiredError('short url https://sho.rt/abc123 has expired'))['statusCode']
    410
"""

import json
from http import HTTPStatus
from typing import Any

from shortlinker.exceptions import ShortLinkerError
from shortlinker.types import HttpHeaders, LambdaResponse


CORS_HEADERS: HttpHeaders = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'OPTIONS,POST,GET',
}


def _response(status_code: int, body: dict[str, Any], headers: HttpHeaders | None = None) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **CORS_HEADERS, **(headers or {})},
        'body': json.dumps(body),
    }


def response_200(**body: Any) -> LambdaResponse:
    return _response(200, body)


def response_302(*, location: str) -> LambdaResponse:
    return _response(302, {}, headers={'Location': location})  # no body needed for redirects


def response_error(error: ShortLinkerError) -> LambdaResponse:
    """Build an error response from an application exception

    The message is the status phrase, followed by the exception text
    in parentheses when there is one, e.g. "Not Found (alias 'abc123' doesn't exist)".
    Server errors never expose the exception text.
    """
    base = HTTPStatus(error.status_code).phrase
    detail = str(error) if error.status_code < 500 else ''
    return _response(
        error.status_code,
        {
            'message': f'{base} ({detail})' if detail else base,
            'errorCode': error.error_code,
        },
    )


def response_500(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Internal Server Error'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return _response(500, body)
