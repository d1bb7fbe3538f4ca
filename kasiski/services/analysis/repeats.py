import logging
from dataclasses import dataclass, field
from typing import Sequence

logger = logging.getLogger(__name__)

WINDOW_SIZE = 3
# Third value meaning "no third character" (tail digram)
ABSENT = 26
RADIX = ABSENT + 1
TABLE_SIZE = RADIX ** WINDOW_SIZE


def pack_window(a: int, b: int, c: int = ABSENT) -> int:
    """Pack three letter codes in [0, 26] into one table index."""
    return (a * RADIX + b) * RADIX + c


def unpack_window(code: int) -> str:
    """Render a packed window as uppercase letters."""
    letters = []
    for _ in range(WINDOW_SIZE):
        code, value = divmod(code, RADIX)
        if value != ABSENT:
            letters.append(chr(ord("A") + value))
    return "".join(reversed(letters))


@dataclass
class TrigramEntry:
    """One distinct window value and the gaps between its occurrences."""

    code: int
    last_pos: int
    gaps: list[int] = field(default_factory=list)

    @property
    def window(self) -> str:
        return unpack_window(self.code)

    @property
    def occurrences(self) -> int:
        return len(self.gaps) + 1


@dataclass
class RepeatScan:
    """Output of the repeat detector."""

    entries: list[TrigramEntry]
    num_repeats: int

    @property
    def repeated(self) -> list[TrigramEntry]:
        """Entries seen more than once, in first-seen order."""
        return [entry for entry in self.entries if entry.gaps]

    def gaps(self) -> list[int]:
        return [gap for entry in self.entries for gap in entry.gaps]


class RepeatDetector:
    """
    Finds repeated three-letter windows (Kasiski examination, step 1).

    Every window value is looked up in a flat table of 27**3 slots, so
    there is no hashing and no collision handling. The window starting at
    N-2 is stored as a digram with ABSENT as third value.
    """

    def scan(self, codes: Sequence[int]) -> RepeatScan:
        """
        Record the gap between consecutive occurrences of every window.

        Args:
            codes: Normalized letter codes (0..25)

        Returns:
            RepeatScan with all entries and the total number of gaps
        """
        table: list[TrigramEntry | None] = [None] * TABLE_SIZE
        entries: list[TrigramEntry] = []
        num_repeats = 0
        n = len(codes)

        for pos in range(max(n - 1, 0)):
            third = codes[pos + 2] if pos + 2 < n else ABSENT
            code = pack_window(codes[pos], codes[pos + 1], third)

            entry = table[code]
            if entry is None:
                entry = TrigramEntry(code=code, last_pos=pos)
                table[code] = entry
                entries.append(entry)
                continue

            entry.gaps.append(pos - entry.last_pos)
            entry.last_pos = pos
            num_repeats += 1

        logger.debug(
            "scanned %d windows: %d distinct, %d repeats",
            max(n - 1, 0), len(entries), num_repeats,
        )
        return RepeatScan(entries=entries, num_repeats=num_repeats)
