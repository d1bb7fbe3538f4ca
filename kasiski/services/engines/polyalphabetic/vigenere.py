import string
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator

from kasiski.core.exceptions import InvalidKeyError
from kasiski.models.schemas import Language
from kasiski.services.pipeline.examiner import KasiskiExaminer


@dataclass
class DecryptionResult:
    """Result of a decryption operation."""

    plaintext: str
    key: str
    recovered: bool
    explanation: str


class VigenereEngine:
    """
    Vigenère cipher engine.

    A polyalphabetic substitution cipher that uses a keyword to determine
    the shift for each letter. Each letter of the keyword represents a
    different Caesar shift applied in sequence.

    Only letters consume key letters; everything else is copied through
    unchanged and the case of every letter is preserved.
    """

    name = "Vigenère Cipher"
    description = (
        "A polyalphabetic cipher where each letter is shifted by a different amount "
        "based on a repeating keyword. Vulnerable to Kasiski examination and "
        "frequency analysis per key position."
    )

    ALPHABET: ClassVar[str] = string.ascii_uppercase

    def encrypt(self, plaintext: str, key: str) -> str:
        """Encrypt using the keyword."""
        return "".join(self._transform(plaintext, self._shifts(key), 1))

    def decrypt(self, ciphertext: str, key: str) -> str:
        """Decrypt using the keyword."""
        return "".join(self._transform(ciphertext, self._shifts(key), -1))

    def decrypt_with_key(self, ciphertext: str, key: str) -> DecryptionResult:
        """Decrypt with a known keyword."""
        plaintext = self.decrypt(ciphertext, key)

        return DecryptionResult(
            plaintext=plaintext,
            key=key,
            recovered=False,
            explanation=self.explain(key),
        )

    def find_key_and_decrypt(
        self,
        ciphertext: str,
        language: Language | str | None = None,
    ) -> DecryptionResult:
        """Recover the key with a Kasiski examination, then decrypt."""
        report = KasiskiExaminer(language=language).examine(ciphertext)
        plaintext = self.decrypt(ciphertext, report.key)

        return DecryptionResult(
            plaintext=plaintext,
            key=report.key,
            recovered=True,
            explanation=self.explain(report.key),
        )

    def transform_stream(
        self,
        chunks: Iterable[str],
        key: str,
        direction: int = 1,
    ) -> Iterator[str]:
        """
        Shift a stream of text chunks, carrying the key position across chunks.

        Unlike encrypt(), non-letters in the key are ignored and a key with
        no letters at all acts as "a" (identity).
        """
        shifts = [self.ALPHABET.index(c) for c in key.upper() if c in self.ALPHABET]
        if not shifts:
            shifts = [0]

        position = 0
        for chunk in chunks:
            out = []
            for char in chunk:
                upper = char.upper()
                if char.isascii() and upper in self.ALPHABET:
                    out.append(self._shift_char(char, direction * shifts[position]))
                    position = (position + 1) % len(shifts)
                else:
                    out.append(char)
            yield "".join(out)

    def validate_key(self, key: str) -> bool:
        """Validate that key is alphabetic."""
        return len(key) > 0 and key.isascii() and key.isalpha()

    def explain(self, key: str) -> str:
        """Generate human-readable explanation."""
        shifts = self._shifts(key)
        shift_desc = ", ".join(f"{c}={s}" for c, s in zip(key, shifts))

        return (
            f"Vigenère cipher with keyword '{key}' (length {len(key)}). "
            f"Letter shifts: {shift_desc}. "
            f"Each letter of the ciphertext is shifted back by the corresponding "
            f"key letter's position in the alphabet."
        )

    def _shifts(self, key: str) -> list[int]:
        if not self.validate_key(key):
            raise InvalidKeyError(
                "key must contain only alphabetic characters",
                {"key": key},
            )
        return [self.ALPHABET.index(c) for c in key.upper()]

    def _transform(self, text: str, shifts: list[int], direction: int) -> Iterator[str]:
        key_idx = 0

        for char in text:
            if char.isascii() and char.upper() in self.ALPHABET:
                shift = shifts[key_idx % len(shifts)]
                yield self._shift_char(char, direction * shift)
                key_idx += 1
            else:
                yield char

    def _shift_char(self, char: str, shift: int) -> str:
        base = ord("A") if char.isupper() else ord("a")
        return chr((ord(char) - base + shift) % 26 + base)
