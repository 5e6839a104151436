from .tier1_caesar   import CaesarCipher
from .tier2_vigenere import VigenereCipher

__all__ = ["CaesarCipher", "VigenereCipher"]
