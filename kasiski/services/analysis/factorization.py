import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

from kasiski.core.config import get_settings
from kasiski.core.exceptions import UnsupportedFactorError
from kasiski.models.schemas import PrimeFactorTally

logger = logging.getLogger(__name__)


@lru_cache
def prime_table(limit: int) -> tuple[int, ...]:
    """All primes <= limit, ascending (sieve of Eratosthenes)."""
    if limit < 2:
        return ()
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, int(limit ** 0.5) + 1):
        if sieve[i]:
            sieve[i * i::i] = bytearray(len(range(i * i, limit + 1, i)))
    return tuple(i for i, is_prime in enumerate(sieve) if is_prime)


@dataclass
class FactorCount:
    """Mutable tally for one prime while gaps are being factored."""

    prime: int
    vote_count: int = 0
    total_count: int = 0

    def to_schema(self) -> PrimeFactorTally:
        return PrimeFactorTally(
            prime=self.prime,
            vote_count=self.vote_count,
            total_count=self.total_count,
        )


class FactorizationEngine:
    """
    Turns repeat gaps into votes for prime factors of the key length.

    A gap between two identically enciphered windows is a multiple of
    the key length, so each prime dividing it gets one vote per gap and
    its multiplicity added to the total count.
    """

    def __init__(self, prime_limit: int | None = None):
        if prime_limit is None:
            prime_limit = get_settings().kasiski_prime_limit
        self.primes = prime_table(prime_limit)
        self.largest_prime = self.primes[-1]

    def factorise(self, value: int) -> list[tuple[int, int]]:
        """
        Factor a value by trial division over the prime table.

        Args:
            value: Integer to factor

        Returns:
            (prime, multiplicity) pairs, ascending; empty for 0 and 1

        Raises:
            UnsupportedFactorError: If a prime factor is beyond the table
        """
        if value < 2:
            return []

        remaining = value
        factors = []

        for prime in self.primes:
            if prime * prime > remaining:
                break
            if remaining % prime:
                continue
            multiplicity = 0
            while remaining % prime == 0:
                remaining //= prime
                multiplicity += 1
            factors.append((prime, multiplicity))

        if remaining > 1:
            # Prime cofactor, or a product of primes past the end of the table
            if remaining > self.largest_prime:
                raise UnsupportedFactorError(value, self.largest_prime)
            factors.append((remaining, 1))

        return factors

    def tally(self, gaps: Iterable[int]) -> dict[int, FactorCount]:
        """Collect vote and total counts for every prime over all gaps."""
        counts: dict[int, FactorCount] = {}

        for gap in gaps:
            for prime, multiplicity in self.factorise(gap):
                count = counts.get(prime)
                if count is None:
                    count = counts[prime] = FactorCount(prime)
                count.vote_count += 1
                count.total_count += multiplicity

        logger.debug("tallied %d distinct prime factors", len(counts))
        return dict(sorted(counts.items()))
