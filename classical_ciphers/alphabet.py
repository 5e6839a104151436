"""
Alphabet — the shared coordinate system
=======================================
The 26 lowercase Latin letters, a..z, indexed 0..25.

Both ciphers map a letter to its position, add an offset modulo 26 and
map back. Lookups are arithmetic on code points rather than scans of
the letter sequence; anything outside a-z / A-Z has no position and is
passed through untouched by the ciphers.
"""

import string
from typing import Optional

LETTERS = string.ascii_lowercase
SIZE    = len(LETTERS)

_LOWER_BASE = ord("a")
_UPPER_BASE = ord("A")


def index_of(char: str) -> Optional[int]:
    """Zero-based position of the case-folded letter, or None."""
    if "a" <= char <= "z":
        return ord(char) - _LOWER_BASE
    if "A" <= char <= "Z":
        return ord(char) - _UPPER_BASE
    return None


def at(index: int) -> str:
    return LETTERS[index % SIZE]


def is_letter(char: str) -> bool:
    return index_of(char) is not None


def shift_letter(char: str, offset: int) -> str:
    """
    Move a letter `offset` places along the alphabet, wrapping at the
    ends, and give it back in the case it came in.
    """
    index = index_of(char)
    if index is None:
        raise ValueError(f"{char!r} is not a Latin letter.")
    shifted = at(index + offset)
    return shifted.upper() if char.isupper() else shifted
