"""Shortcode generation utility

This module provides helpers for generating short, random, URL-safe codes
and for checking that a string looks like one.

Functions:
    generate_shortcode(length=9) -> str:
        Generate a random shortcode suitable for use as a URL slug.
    is_valid_shortcode(value) -> bool:
        Check whether a value matches the shortcode format.

Example:
    >>> from dynashort.utils import generate_shortcode
    >>> generate_shortcode()
    'Gh71WPTx9'
"""

import re
import base64
import secrets

from dynashort.constants import Shortcode


# Standard base64 alphabet minus '+', '/' (unsafe in URL paths) and '=' (padding)
ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789'
SHORTCODE_PATTERN = re.compile(rf'^[A-Za-z0-9]{{{Shortcode.LENGTH}}}$')

_STRIP_UNSAFE = str.maketrans('', '', '+/=')


def generate_shortcode(length: int = Shortcode.LENGTH) -> str:
    """Generate a random, URL-safe shortcode.

    Random bytes from a CSPRNG are base64-encoded, the '+', '/' and '='
    symbols are stripped, and the result is truncated to `length`. Encoding
    rounds repeat until enough characters are available, since stripping
    may shorten a round's output.

    Args:
        length (int, optional):
            Number of characters in the resulting shortcode. Defaults to 9.

    Returns:
        str: A shortcode drawn from `ALPHABET`.

    NOTE:
        Uniqueness is NOT guaranteed. The caller must verify that the
        shortcode is unused and write it with a conditional put.
    """
    if not isinstance(length, int):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    shortcode = ''
    while len(shortcode) < length:
        chunk = base64.b64encode(secrets.token_bytes(Shortcode.RANDOM_BYTES)).decode('ascii')
        shortcode += chunk.translate(_STRIP_UNSAFE)
    return shortcode[:length]


def is_valid_shortcode(value: object) -> bool:
    """Check whether `value` is a string in the generated shortcode format."""
    return isinstance(value, str) and SHORTCODE_PATTERN.match(value) is not None
