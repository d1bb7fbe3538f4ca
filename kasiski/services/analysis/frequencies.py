"""Reference letter-frequency tables, indexed A..Z."""

import string
from types import MappingProxyType

from kasiski.models.schemas import Language

ALPHABET = string.ascii_uppercase
ALPHABET_SIZE = len(ALPHABET)

# Relative frequencies (sum close to 1.0)
ENGLISH_FREQ: tuple[float, ...] = (
    0.08200, 0.01500, 0.02800, 0.04300, 0.13000, 0.02200, 0.02000,  # A-G
    0.06100, 0.07000, 0.00150, 0.00770, 0.04000, 0.02400, 0.06700,  # H-N
    0.07500, 0.01900, 0.00095, 0.06000, 0.06300, 0.09100, 0.02800,  # O-U
    0.00980, 0.02400, 0.00150, 0.02000, 0.00074,                    # V-Z
)

PORTUGUESE_FREQ: tuple[float, ...] = (
    0.1463, 0.0104, 0.0388, 0.0499, 0.1257, 0.0102, 0.0130,  # A-G
    0.0128, 0.0618, 0.0040, 0.0002, 0.0278, 0.0474, 0.0505,  # H-N
    0.1073, 0.0252, 0.0120, 0.0653, 0.0781, 0.0434, 0.0463,  # O-U
    0.0167, 0.0001, 0.0021, 0.0001, 0.0047,                  # V-Z
)

FREQUENCY_TABLES = MappingProxyType({
    Language.ENGLISH: ENGLISH_FREQ,
    Language.PORTUGUESE: PORTUGUESE_FREQ,
})


def get_frequency_table(language: Language | str) -> tuple[float, ...]:
    """Return the reference distribution for a language."""
    return FREQUENCY_TABLES[Language(language)]


def sum_of_squares(freq: tuple[float, ...] | list[float]) -> float:
    """Self-correlation of a distribution; how peaked the language is."""
    return sum(f * f for f in freq)
