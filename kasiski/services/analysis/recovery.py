import logging
from collections import Counter
from typing import Sequence

from scipy import stats

from kasiski.core.exceptions import EmptyCosetError
from kasiski.models.schemas import CosetAnalysis
from kasiski.services.analysis.frequencies import ALPHABET_SIZE, sum_of_squares

logger = logging.getLogger(__name__)


class FrequencyRecoverer:
    """
    Recovers one key letter per coset by frequency correlation.

    For the true shift s, the coset's letter profile is the language
    profile rotated by s, so sum(ref[k] * obs[(k + s) % 26]) should be
    close to the language's own sum of squares. The shift whose
    correlation lies closest to that target wins; ties go to the
    smallest shift.
    """

    def __init__(self, reference: Sequence[float]):
        if len(reference) != ALPHABET_SIZE:
            raise ValueError(f"reference table must have {ALPHABET_SIZE} entries")
        self.reference = tuple(reference)
        self.target = sum_of_squares(self.reference)

    def recover(self, codes: Sequence[int], key_length: int) -> list[CosetAnalysis]:
        """
        Pick the best shift for every coset.

        Args:
            codes: Normalized letter codes (0..25)
            key_length: Number of interleaved cosets

        Returns:
            One CosetAnalysis per coset, in key order

        Raises:
            EmptyCosetError: If the key is longer than the text
        """
        return [
            self._analyse_coset(codes, index, key_length)
            for index in range(key_length)
        ]

    def coset_frequencies(self, coset: Sequence[int]) -> list[float]:
        """Relative frequency of each letter in a coset."""
        counter = Counter(coset)
        total = len(coset)
        return [counter.get(code, 0) / total for code in range(ALPHABET_SIZE)]

    def correlation(self, observed: Sequence[float], shift: int) -> float:
        return sum(
            self.reference[k] * observed[(k + shift) % ALPHABET_SIZE]
            for k in range(ALPHABET_SIZE)
        )

    def best_shift(self, observed: Sequence[float]) -> tuple[int, float, float]:
        """Return (shift, correlation, distance) minimising |target - correlation|."""
        best = (0, 0.0, float("inf"))

        for shift in range(ALPHABET_SIZE):
            corr = self.correlation(observed, shift)
            distance = abs(self.target - corr)
            # Strict comparison keeps the first (smallest) shift on ties
            if distance < best[2]:
                best = (shift, corr, distance)

        return best

    def _analyse_coset(
        self,
        codes: Sequence[int],
        index: int,
        key_length: int,
    ) -> CosetAnalysis:
        coset = codes[index::key_length]
        if not coset:
            raise EmptyCosetError(index, key_length, len(codes))

        observed = self.coset_frequencies(coset)
        shift, corr, distance = self.best_shift(observed)

        return CosetAnalysis(
            index=index,
            length=len(coset),
            shift=shift,
            letter=chr(ord("a") + shift),
            correlation=corr,
            distance=distance,
            chi_squared=self._chi_squared(coset, shift),
        )

    def _chi_squared(self, coset: Sequence[int], shift: int) -> float:
        """Goodness of fit of the decrypted coset against the reference."""
        n = len(coset)
        counter = Counter((code - shift) % ALPHABET_SIZE for code in coset)
        observed = [counter.get(code, 0) for code in range(ALPHABET_SIZE)]

        total = sum(self.reference)
        expected = [f / total * n for f in self.reference]

        statistic, _ = stats.chisquare(observed, expected)
        return float(statistic)
