import logging
from dataclasses import dataclass
from typing import Mapping

from kasiski.core.config import get_settings
from kasiski.services.analysis.factorization import FactorCount

logger = logging.getLogger(__name__)


@dataclass
class KeyLengthEstimate:
    """Key length and the primes that produced it."""

    length: int
    primes: dict[int, int]
    degenerate: bool


class KeyLengthResolver:
    """
    Combines prime votes into one key length.

    A prime contributes when it divides more than `threshold` of all
    repeat gaps; it is raised to its average multiplicity.
    """

    def __init__(self, threshold: float | None = None):
        if threshold is None:
            threshold = get_settings().kasiski_threshold
        self.threshold = threshold

    def resolve(
        self,
        counts: Mapping[int, FactorCount],
        num_repeats: int,
    ) -> KeyLengthEstimate:
        length = 1
        primes: dict[int, int] = {}

        if num_repeats > 0:
            for prime, count in sorted(counts.items()):
                if count.vote_count / num_repeats <= self.threshold:
                    continue
                # Average multiplicity, truncated
                power = count.total_count // count.vote_count
                primes[prime] = power
                length *= prime ** power

        degenerate = not primes
        if degenerate:
            logger.warning(
                "no prime factor clears the %.2f threshold over %d repeats; "
                "assuming key length 1",
                self.threshold, num_repeats,
            )
        else:
            logger.debug("key length %d from primes %s", length, primes)

        return KeyLengthEstimate(length=length, primes=primes, degenerate=degenerate)
