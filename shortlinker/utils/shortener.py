"""Alias generation utility

This module provides a helper function for generating short, deterministic,
non-sequential aliases based on a numeric counter and a secret salt value.

Functions:
    generate_alias(counter, salt='shortlinker', length=7, mult=1315423911):
        Generate a fixed-length Base62 alias suitable for use as a URL slug.

Example:
    >>> from shortlinker.utils import generate_alias
    >>> generate_alias(12345, salt='my_secret')
    'Gh71WPT'
"""

import math
import string

import xxhash

from shortlinker.constants import AliasDefaults


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits


def _encode_base62(number: int, length: int) -> str:
    digits = []
    for _ in range(length):
        number, remainder = divmod(number, BASE)
        digits.append(ALPHABET[remainder])
    return ''.join(reversed(digits))


def generate_alias(counter: int, salt: str = AliasDefaults.SALT, length: int = AliasDefaults.LENGTH, mult: int = 1315423911) -> str:
    """Generate a short, deterministic alias from a counter and salt.

    The counter is scrambled with an affine permutation over the fixed space
    BASE^length and then Base62-encoded, which guarantees:
    - 1:1 mapping while counter < BASE^length (collision-free)
    - Fixed-length output
    - No visible sequential patterns

    Args:
        counter (int):
            Unique non-negative integer, usually from the DAO counter.

        salt (str, optional):
            Secret string used to offset the output space.
            Highly recommended to set a custom salt via ALIAS_SALT.

        length (int, optional):
            Length of the resulting alias. Defaults to 7.

        mult (int, optional):
            Multiplicative factor for the permutation.
            Must be coprime with BASE**length.

    Returns:
        str: An alphanumeric alias of exactly `length` characters.

    Raises:
        TypeError: if counter is not an int or salt is not a str.
        ValueError: if counter is negative, salt is empty, length is not
                    positive or mult is not coprime with BASE**length.

    NOTE:
        - Aliases repeat once the counter wraps around BASE**length. Callers
          must treat an existing alias as a collision and draw a new counter.
        - The output is not trivially predictable without the salt
          (this is obfuscation, not encryption).
    """
    if not isinstance(counter, int):
        raise TypeError(f'Counter must be of type integer (given type: {type(counter)}).')
    if counter < 0:
        raise ValueError(f'Counter must be a non-negative integer (given value: {counter}).')
    if not isinstance(salt, str):
        raise TypeError(f'Salt must be of type string (given type: {type(salt)}).')
    if not salt:
        raise ValueError(f'Salt must be a non-empty string (given value: {salt}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    modulo_space = BASE**length
    if math.gcd(mult, modulo_space) != 1:
        raise ValueError(f'Multiplicative factor must be coprime with mod ({modulo_space}) (given value: mult={mult}).')

    salt_offset = xxhash.xxh64_intdigest(salt) % modulo_space
    permuted = (counter * mult + salt_offset) % modulo_space
    return _encode_base62(permuted, length)
