"""
Pipeline services for repeating-key cryptanalysis.

This module implements the Kasiski examination pipeline that:
1. Finds repeated trigrams and the gaps between them
2. Votes on prime factors of the gaps to estimate the key length
3. Recovers each key letter by frequency correlation
"""

from kasiski.services.pipeline.examiner import KasiskiExaminer

__all__ = [
    "KasiskiExaminer",
]
