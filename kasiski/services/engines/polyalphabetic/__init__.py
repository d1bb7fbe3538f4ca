"""Polyalphabetic cipher engines."""

from kasiski.services.engines.polyalphabetic.vigenere import DecryptionResult, VigenereEngine

__all__ = [
    "DecryptionResult",
    "VigenereEngine",
]
