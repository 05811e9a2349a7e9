"""Boyer-Moore-Horspool search using only the bad-character shift."""

from typing import Dict, Iterator

from genomatch.matching.base import (
    Algorithm,
    Comparison,
    Match,
    Matcher,
    ScanEvent,
    Shift,
    ShiftReason,
)


def horspool_shift_table(pattern: str) -> Dict[str, int]:
    """
    Distance from each symbol's last occurrence to the end of the pattern.

    The final symbol is left out; symbols not in the table shift by the
    full pattern length.

    Example:
        >>> horspool_shift_table("ATGC")
        {'A': 3, 'T': 2, 'G': 1}
    """
    m = len(pattern)
    return {pattern[i]: m - 1 - i for i in range(m - 1)}


class HorspoolMatcher(Matcher):
    """
    Compares right to left and shifts by the table entry for the subject
    symbol under the pattern's last position. After a hit the pattern
    moves by one so overlapping occurrences are found.
    """

    algorithm = Algorithm.HORSPOOL

    def scan(self, subject: str, pattern: str) -> Iterator[ScanEvent]:
        n, m = len(subject), len(pattern)
        table = horspool_shift_table(pattern)
        i = 0

        while i <= n - m:
            j = m - 1
            while j >= 0:
                is_match = pattern[j] == subject[i + j]
                yield Comparison(i, j, is_match)
                if not is_match:
                    break
                j -= 1

            if j < 0:
                yield Match(i)
                shift, reason = 1, ShiftReason.MATCH
            else:
                shift, reason = table.get(subject[i + m - 1], m), ShiftReason.BAD_CHARACTER

            i += shift
            yield Shift(shift, reason, i)
