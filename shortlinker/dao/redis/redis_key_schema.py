import functools
from collections.abc import Callable

import xxhash


__all__ = ['RedisKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RedisKeySchema:
    """Provide standardized Redis keys for storing mappings.

    An optional prefix can be provided to namespace all generated keys.
    It is highly encouraged to set a custom prefix for each app and environment,
    e.g. "shortlinker:prod" or "shortlinker:dev".

    Destinations can be arbitrarily long, so the destination index key is
    built from a 128-bit xxhash digest of the exact destination string.
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def mapping_key(self, alias: str) -> str:
        return f'mappings:{alias}'

    @prefix_key
    def destination_key(self, destination: str) -> str:
        return f'destinations:{xxhash.xxh128_hexdigest(destination)}'

    @prefix_key
    def counter_key(self) -> str:
        return 'mappings:counter'
