"""Destination URL validation

A destination is accepted when it is an absolute web URI: an http or https
scheme, a host, no whitespace and a well-formed port.

Example:
    >>> is_web_uri('https://example.com/a?b=c')
    True
    >>> is_web_uri('not a url')
    False
    >>> validate_destination('ftp://example.com')
    Traceback (most recent call last):
        ...
    shortlinker.exceptions.ValidationError: Invalid URL 'ftp://example.com'
"""

from typing import Any
from urllib.parse import urlsplit

from shortlinker.exceptions import ValidationError


WEB_SCHEMES = frozenset({'http', 'https'})
MAX_URL_LENGTH = 2048


def is_web_uri(value: Any) -> bool:
    if not isinstance(value, str) or not value or len(value) > MAX_URL_LENGTH:
        return False
    if any(char.isspace() for char in value):
        return False

    try:
        parts = urlsplit(value)
        parts.port  # raises ValueError on a non-numeric or out of range port
    except ValueError:
        return False

    return parts.scheme.lower() in WEB_SCHEMES and bool(parts.hostname)


def validate_destination(value: Any) -> str:
    """Return `value` unchanged if it is a web URI, else raise ValidationError"""
    if not is_web_uri(value):
        raise ValidationError(f'Invalid URL {value!r}')
    return value
