"""Unit tests for MappingModel

Test coverage includes:

1. Immutability
2. Expiry status derived from expires_at
"""

import dataclasses
from datetime import timedelta

import pytest

from shortlinker.models import MappingModel


def test_mapping_is_immutable(mapping):
    with pytest.raises(dataclasses.FrozenInstanceError):
        mapping.destination = 'https://example.com/b'


def test_mapping_without_expiry_never_expires(mapping, created_at):
    assert mapping.expires_at is None
    assert not mapping.is_expired(created_at + timedelta(days=365 * 100))


@pytest.mark.parametrize(
    'offset, expected',
    [
        (timedelta(seconds=-1), True),  # expired one second ago
        (timedelta(0), False),  # expires exactly now
        (timedelta(seconds=1), False),
    ],
)
def test_mapping_is_expired(mapping, created_at, offset, expected):
    now = created_at + timedelta(days=1)
    expiring = dataclasses.replace(mapping, expires_at=now + offset)
    assert expiring.is_expired(now) is expected


def test_mapping_equality(mapping):
    assert mapping == MappingModel(alias='abc123', destination='https://example.com/a', created_at=mapping.created_at)
