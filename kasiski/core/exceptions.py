from typing import Any


class CryptanalysisError(Exception):
    """Base exception for all cryptanalysis errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InputError(CryptanalysisError):
    """Raised when input cannot be read or holds too few letters."""

    pass


class UnsupportedFactorError(CryptanalysisError):
    """Raised when a repeat gap has a prime factor beyond the prime table."""

    def __init__(self, gap: int, largest_prime: int):
        super().__init__(
            f"gap {gap} has a prime factor larger than {largest_prime}",
            {"gap": gap, "largest_prime": largest_prime},
        )


class DegenerateKeyLengthError(CryptanalysisError):
    """
    Raised in strict mode when no prime clears the voting threshold.

    The default pipeline never raises this; it falls back to a key length of 1.
    """

    def __init__(self, num_repeats: int, threshold: float):
        super().__init__(
            f"no prime factor clears the {threshold} threshold "
            f"over {num_repeats} repeats",
            {"num_repeats": num_repeats, "threshold": threshold},
        )


class EmptyCosetError(CryptanalysisError):
    """Raised when the key length exceeds the available text."""

    def __init__(self, index: int, key_length: int, text_length: int):
        super().__init__(
            f"coset {index} is empty: key length {key_length} "
            f"exceeds text length {text_length}",
            {"index": index, "key_length": key_length, "text_length": text_length},
        )


class InvalidKeyError(CryptanalysisError):
    """Raised when a cipher key is empty or not alphabetic."""

    pass
