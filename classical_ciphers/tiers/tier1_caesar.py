"""
Tier 1 — MONOALPHABETIC: Caesar Shift Cipher
=============================================
Every letter moves the same fixed number of places along the alphabet,
wrapping from z back to a. Suetonius records Julius Caesar using a
shift of three.

Any integer is a usable shift: it is reduced modulo 26, so 3, 29 and
-23 all produce the same ciphertext. Letters keep their case; digits,
punctuation and whitespace pass through where they stand.

Role in the stack: the simplest substitution. 25 useful keys, broken
by trying them all.
"""

from .. import alphabet
from ..errors import InvalidShiftError
from ..result import CipherResult, Direction


class CaesarCipher:
    """Stateless Caesar shift. The shift is supplied on every call."""

    @staticmethod
    def transform(text: str, shift: int,
                  direction: Direction = Direction.ENCRYPT) -> CipherResult:
        """
        Shift each letter of `text` by `shift * direction` places.
        Always succeeds for an integer shift.
        """
        if isinstance(shift, bool) or not isinstance(shift, int):
            raise InvalidShiftError(shift)
        offset = (shift * int(direction)) % alphabet.SIZE
        out = []
        for ch in text:
            if alphabet.is_letter(ch):
                out.append(alphabet.shift_letter(ch, offset))
            else:
                out.append(ch)
        return CipherResult("".join(out))

    @classmethod
    def encrypt(cls, plaintext: str, shift: int) -> str:
        return cls.transform(plaintext, shift, Direction.ENCRYPT).text

    @classmethod
    def decrypt(cls, ciphertext: str, shift: int) -> str:
        return cls.transform(ciphertext, shift, Direction.DECRYPT).text
