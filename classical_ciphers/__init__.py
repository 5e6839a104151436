"""
classical_ciphers
=================
Caesar and Vigenère substitution ciphers behind a mode-switching
dispatcher.

Tiers:
    1  MONOALPHABETIC — Caesar shift (any integer shift, mod 26)
    2  POLYALPHABETIC — Vigenère (repeating keyword)

Educational ciphers: trivially broken, never use them to protect data.
"""

import logging

__version__ = "1.0.0"

logger = logging.getLogger("classical_ciphers")
logger.addHandler(logging.NullHandler())

from .alphabet               import LETTERS
from .errors                 import CipherError, InvalidKeyError, InvalidShiftError
from .result                 import CipherResult, Direction
from .tiers.tier1_caesar     import CaesarCipher
from .tiers.tier2_vigenere   import VigenereCipher
from .dispatcher             import CipherDispatcher, CipherMode

__all__ = [
    "LETTERS",
    "CipherError",
    "InvalidKeyError",
    "InvalidShiftError",
    "CipherResult",
    "Direction",
    "CaesarCipher",
    "VigenereCipher",
    "CipherDispatcher",
    "CipherMode",
]
