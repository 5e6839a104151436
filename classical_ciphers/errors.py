"""Exceptions raised (or carried in a CipherResult) by the ciphers."""


class CipherError(ValueError):
    """Base class for bad cipher parameters."""


class InvalidKeyError(CipherError):
    """Vigenère key is empty or holds a non-alphabetic character."""

    def __init__(self, key, message: str = None):
        self.key = key
        super().__init__(
            message
            or "Invalid key: key must only contain alphabetic characters "
               "and must not be empty"
        )


class InvalidShiftError(CipherError):
    """Caesar shift given as text that does not read as an integer."""

    def __init__(self, shift, message: str = None):
        self.shift = shift
        super().__init__(message or f"Invalid shift {shift!r}: must be an integer")
