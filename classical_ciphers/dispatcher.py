"""
CIPHER DISPATCHER
=================
Routes encrypt/decrypt calls to the Caesar or Vigenère tier according
to the dispatcher's active mode.

The mode belongs to the dispatcher instance. Two dispatchers never see
each other's mode, and a lock serialises reads and writes so that a
transform picks one mode at the start of the call and keeps it.
"""

import enum
import logging
import threading
from typing import Union

from .errors import InvalidShiftError
from .result import CipherResult, Direction
from .tiers.tier1_caesar import CaesarCipher
from .tiers.tier2_vigenere import VigenereCipher

logger = logging.getLogger(__name__)

KeyOrShift = Union[str, int]


class CipherMode(str, enum.Enum):
    CAESAR   = "caesar"
    VIGENERE = "vigenere"


def coerce_shift(shift: KeyOrShift) -> int:
    """
    Read a Caesar shift the way a form field hands it over: ints pass
    through, numeric strings are parsed, a blank field counts as 0.
    """
    if isinstance(shift, bool):
        raise InvalidShiftError(shift)
    if isinstance(shift, int):
        return shift
    if isinstance(shift, str):
        stripped = shift.strip()
        if not stripped:
            return 0
        try:
            return int(stripped)
        except ValueError:
            raise InvalidShiftError(shift) from None
    raise InvalidShiftError(shift)


class CipherDispatcher:
    """Selects a cipher by mode and applies it in a given direction."""

    def __init__(self, mode: Union[CipherMode, str] = CipherMode.CAESAR):
        self._lock = threading.Lock()
        self._mode = self._parse_mode(mode)

    @staticmethod
    def _parse_mode(mode: Union[CipherMode, str]) -> CipherMode:
        if isinstance(mode, CipherMode):
            return mode
        try:
            return CipherMode(str(mode).strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in CipherMode)
            raise ValueError(f"Unknown cipher mode {mode!r}; expected one of: {choices}") from None

    @property
    def mode(self) -> CipherMode:
        with self._lock:
            return self._mode

    def set_mode(self, mode: Union[CipherMode, str]) -> None:
        new_mode = self._parse_mode(mode)
        with self._lock:
            self._mode = new_mode
        logger.debug("cipher mode set to %s", new_mode.value)

    def transform(self, text: str, key_or_shift: KeyOrShift,
                  direction: Direction) -> CipherResult:
        mode = self.mode
        if mode is CipherMode.CAESAR:
            return CaesarCipher.transform(text, coerce_shift(key_or_shift), direction)
        return VigenereCipher.transform(text, key_or_shift, direction)

    def encrypt(self, text: str, key_or_shift: KeyOrShift) -> str:
        return self.transform(text, key_or_shift, Direction.ENCRYPT).text

    def decrypt(self, text: str, key_or_shift: KeyOrShift) -> str:
        return self.transform(text, key_or_shift, Direction.DECRYPT).text

    @staticmethod
    def status_label(direction: Direction) -> str:
        """Status text shown beside the output: Encrypted or Decrypted."""
        return Direction(direction).label

    def __repr__(self):
        return f"CipherDispatcher(mode={self.mode.value!r})"
