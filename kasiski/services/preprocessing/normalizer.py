import logging
import string
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from kasiski.core.exceptions import InputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedText:
    """Result of text normalization."""

    text: str
    codes: tuple[int, ...]
    removed: int

    def __len__(self) -> int:
        return len(self.codes)


class TextNormalizer:
    """
    Normalizes text for cryptanalysis.

    Handles:
    - Non-alphabetic character removal
    - Case folding
    - Chunked reading of streams
    """

    ALPHABET = string.ascii_uppercase
    CHUNK_SIZE = 1024
    MIN_LETTERS = 3

    def __init__(self, min_letters: int = MIN_LETTERS):
        self.min_letters = min_letters
        self._allowed = frozenset(string.ascii_letters)

    def normalize(self, text: str) -> NormalizedText:
        """
        Normalize in-memory text.

        Args:
            text: Raw ciphertext

        Returns:
            NormalizedText with letters only, uppercase

        Raises:
            InputError: If fewer than `min_letters` letters remain
        """
        letters = self._filter_chars(text)
        return self._build(letters, len(text) - len(letters))

    def read_stream(self, stream: TextIO | BinaryIO) -> NormalizedText:
        """
        Read a stream to end-of-input and normalize it.

        Binary streams are decoded as latin-1 so that every byte maps to
        one character; only ASCII letters survive anyway.
        """
        parts: list[str] = []
        removed = 0

        try:
            while True:
                chunk = stream.read(self.CHUNK_SIZE)
                if not chunk:
                    break
                if isinstance(chunk, bytes):
                    chunk = chunk.decode("latin-1")
                letters = self._filter_chars(chunk)
                removed += len(chunk) - len(letters)
                parts.append(letters)
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(
                "could not read from standard input",
                {"reason": str(e)},
            ) from e

        return self._build("".join(parts), removed)

    def _filter_chars(self, text: str) -> str:
        """Keep only ASCII letters, uppercased."""
        return "".join(c for c in text if c in self._allowed).upper()

    def _build(self, letters: str, removed: int) -> NormalizedText:
        if not letters:
            raise InputError("no alphabetic characters in input")
        if len(letters) < self.min_letters:
            raise InputError(
                f"input has {len(letters)} letters, at least {self.min_letters} required",
                {"length": len(letters), "min_letters": self.min_letters},
            )

        logger.debug("normalized %d letters, dropped %d characters", len(letters), removed)
        return NormalizedText(
            text=letters,
            codes=tuple(ord(c) - ord("A") for c in letters),
            removed=removed,
        )
