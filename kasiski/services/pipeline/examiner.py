"""
Kasiski examination pipeline.

Runs each stage over the complete output of the previous one:
1. Normalize the ciphertext to letter codes
2. Detect repeated three-letter windows
3. Factor every repeat gap and tally prime votes
4. Resolve the key length from the primes above the threshold
5. Recover one key letter per coset by frequency correlation
"""

import logging
from typing import BinaryIO, TextIO

from kasiski.core.config import get_settings
from kasiski.core.exceptions import DegenerateKeyLengthError
from kasiski.models.schemas import KasiskiReport, Language
from kasiski.services.analysis.factorization import FactorizationEngine
from kasiski.services.analysis.frequencies import get_frequency_table
from kasiski.services.analysis.key_length import KeyLengthResolver
from kasiski.services.analysis.recovery import FrequencyRecoverer
from kasiski.services.analysis.repeats import RepeatDetector
from kasiski.services.preprocessing.normalizer import NormalizedText, TextNormalizer

logger = logging.getLogger(__name__)


class KasiskiExaminer:
    """
    Estimates the key of a repeating-key cipher.

    Constants default to the application settings and can be overridden
    per instance. With strict=True a key length that falls back to 1
    raises DegenerateKeyLengthError instead.
    """

    def __init__(
        self,
        language: Language | str | None = None,
        threshold: float | None = None,
        prime_limit: int | None = None,
        strict: bool = False,
    ):
        settings = get_settings()
        self.language = Language(language or settings.default_language)
        self.strict = strict

        self.normalizer = TextNormalizer()
        self.detector = RepeatDetector()
        self.factorizer = FactorizationEngine(prime_limit)
        self.resolver = KeyLengthResolver(threshold)
        self.recoverer = FrequencyRecoverer(get_frequency_table(self.language))

    def examine(self, ciphertext: str) -> KasiskiReport:
        """Run the full pipeline on in-memory ciphertext."""
        return self.examine_normalized(self.normalizer.normalize(ciphertext))

    def examine_stream(self, stream: TextIO | BinaryIO) -> KasiskiReport:
        """Read a stream to end-of-input and run the full pipeline."""
        return self.examine_normalized(self.normalizer.read_stream(stream))

    def examine_normalized(self, text: NormalizedText) -> KasiskiReport:
        scan = self.detector.scan(text.codes)
        counts = self.factorizer.tally(scan.gaps())
        estimate = self.resolver.resolve(counts, scan.num_repeats)

        if estimate.degenerate and self.strict:
            raise DegenerateKeyLengthError(scan.num_repeats, self.resolver.threshold)

        cosets = self.recoverer.recover(text.codes, estimate.length)
        key = "".join(coset.letter for coset in cosets)

        logger.debug("recovered key %r (length %d)", key, estimate.length)

        return KasiskiReport(
            key=key,
            key_length=estimate.length,
            language=self.language,
            text_length=len(text),
            repeated_windows=len(scan.repeated),
            num_repeats=scan.num_repeats,
            degenerate=estimate.degenerate,
            factors=[count.to_schema() for count in counts.values()],
            cosets=cosets,
        )
