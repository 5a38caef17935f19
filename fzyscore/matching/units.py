"""
Input normalisation for needles and haystacks.

Matching works on single-byte units, not Unicode code points. ``bytes`` are
decoded as latin-1 so each byte maps to exactly one character, and case
folding only touches ASCII letters.
"""

import string
from typing import Union

from fzyscore.matching.configuration import MatchConfiguration

Text = Union[str, bytes, bytearray]

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def as_units(value: Text) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode('latin-1')
    return value


def fold_case(config: MatchConfiguration, value: str) -> str:
    """Return ``value`` folded to ASCII lowercase unless the configuration is case sensitive."""
    if config.case_sensitive:
        return value
    return value.translate(_ASCII_LOWER)


def is_lower(char: str) -> bool:
    return 'a' <= char <= 'z'


def is_upper(char: str) -> bool:
    return 'A' <= char <= 'Z'
