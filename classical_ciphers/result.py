"""
Direction sign and the typed transform result shared by both tiers.
"""

import enum
from dataclasses import dataclass
from typing import Optional

from .errors import CipherError


class Direction(enum.IntEnum):
    """Sign applied to every shift: +1 encrypts, -1 decrypts."""

    ENCRYPT = 1
    DECRYPT = -1

    @property
    def label(self) -> str:
        return "Encrypted" if self is Direction.ENCRYPT else "Decrypted"


@dataclass(frozen=True)
class CipherResult:
    """
    Output of a single transform.

    On the recovered error path `text` is the input, unchanged, and
    `error` holds the reason. Callers that only want the string can use
    `result.text` (or `str(result)`); callers that need to branch check
    `result.ok`.
    """

    text:  str
    error: Optional[CipherError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> "CipherResult":
        if self.error is not None:
            raise self.error
        return self

    def __str__(self) -> str:
        return self.text
