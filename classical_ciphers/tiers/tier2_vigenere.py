"""
Tier 2 — POLYALPHABETIC: Vigenère Cipher
=========================================
A repeating keyword picks a different Caesar shift for each letter:
key letter a shifts by 0, b by 1, ... z by 25.

The key cursor moves only when a letter of the text is consumed, so
spaces and punctuation neither change nor use up the key:

    text  A t t a c k   a t   d a w n !
    key   L E M O N L   E M   O N L E
    out   L x f o p v   e f   r n h r !

Historical note: Giovan Battista Bellaso, 1553, later credited to
Blaise de Vigenère. Called "le chiffre indéchiffrable" for 300 years
until Kasiski published a general attack in 1863.

An invalid key (empty, or holding anything but letters) does not raise:
the text comes back unchanged and the CipherResult carries an
InvalidKeyError, which is also logged.
"""

import logging

from .. import alphabet
from ..errors import InvalidKeyError
from ..result import CipherResult, Direction

logger = logging.getLogger(__name__)


def validate_key(key) -> None:
    """Raise InvalidKeyError unless `key` is a non-empty run of letters."""
    if not isinstance(key, str) or not key:
        raise InvalidKeyError(key)
    if not all(alphabet.is_letter(c) for c in key):
        raise InvalidKeyError(key)


class VigenereCipher:
    """Stateless Vigenère cipher. The key is supplied on every call."""

    @staticmethod
    def transform(text: str, key: str,
                  direction: Direction = Direction.ENCRYPT) -> CipherResult:
        try:
            validate_key(key)
        except InvalidKeyError as exc:
            logger.warning("%s; returning text unchanged", exc)
            return CipherResult(text, error=exc)

        sign     = int(direction)
        shifts   = [alphabet.index_of(c) for c in key]
        period   = len(shifts)
        cursor   = 0
        out = []
        for ch in text:
            if alphabet.is_letter(ch):
                out.append(alphabet.shift_letter(ch, shifts[cursor % period] * sign))
                cursor += 1
            else:
                out.append(ch)
        return CipherResult("".join(out))

    @classmethod
    def encrypt(cls, plaintext: str, key: str) -> str:
        """Encrypt plaintext. Returns it unchanged if the key is invalid."""
        return cls.transform(plaintext, key, Direction.ENCRYPT).text

    @classmethod
    def decrypt(cls, ciphertext: str, key: str) -> str:
        """Decrypt ciphertext. Returns it unchanged if the key is invalid."""
        return cls.transform(ciphertext, key, Direction.DECRYPT).text
