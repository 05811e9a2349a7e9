"""
Boyer-Moore search with the bad-character and (strong) good-suffix rules.

The good-suffix table is built from the suffix-length array in linear
time, following the usual border technique.
"""

from typing import Dict, Iterator, List

from genomatch.matching.base import (
    Algorithm,
    Comparison,
    Match,
    Matcher,
    ScanEvent,
    Shift,
    ShiftReason,
)


def bad_character_table(pattern: str) -> Dict[str, int]:
    """
    Index of the last occurrence of each symbol in ``pattern``.

    Symbols that do not occur are looked up with a default of -1.

    Example:
        >>> bad_character_table("GCAGAG")
        {'G': 5, 'C': 1, 'A': 4}
    """
    return {symbol: i for i, symbol in enumerate(pattern)}


def suffix_lengths(pattern: str) -> List[int]:
    """
    ``suff[i]`` is the length of the longest substring ending at ``i``
    that is also a suffix of ``pattern``.
    """
    m = len(pattern)
    suff = [0] * m
    if m == 0:
        return suff

    suff[m - 1] = m
    f = g = m - 1
    for i in range(m - 2, -1, -1):
        if i > g and suff[i + m - 1 - f] < i - g:
            suff[i] = suff[i + m - 1 - f]
        else:
            if i < g:
                g = i
            f = i
            while g >= 0 and pattern[g] == pattern[g + m - 1 - f]:
                g -= 1
            suff[i] = f - g

    return suff


def good_suffix_table(pattern: str) -> List[int]:
    """
    Shift to apply after a mismatch at pattern index ``j``.

    ``table[0]`` is also the shift used after a full match.

    Example:
        >>> good_suffix_table("ATGC")
        [4, 4, 4, 1]
        >>> good_suffix_table("AA")
        [1, 2]
        >>> good_suffix_table("ABAB")
        [2, 2, 4, 1]
    """
    m = len(pattern)
    suff = suffix_lengths(pattern)
    shift = [m] * m

    # Case 2: a prefix of the pattern matches part of the good suffix
    j = 0
    for i in range(m - 1, -1, -1):
        if suff[i] == i + 1:
            while j < m - 1 - i:
                if shift[j] == m:
                    shift[j] = m - 1 - i
                j += 1

    # Case 1: the good suffix reoccurs inside the pattern
    for i in range(m - 1):
        shift[m - 1 - suff[i]] = m - 1 - i

    return shift


class BoyerMooreMatcher(Matcher):
    """Right-to-left comparison, shifting by the larger of the two rules."""

    algorithm = Algorithm.BOYER_MOORE

    def scan(self, subject: str, pattern: str) -> Iterator[ScanEvent]:
        n, m = len(subject), len(pattern)
        bad_char = bad_character_table(pattern)
        good_suffix = good_suffix_table(pattern)
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
                shift, reason = good_suffix[0], ShiftReason.MATCH
            else:
                bad_char_shift = max(1, j - bad_char.get(subject[i + j], -1))
                good_suffix_shift = good_suffix[j]
                if bad_char_shift >= good_suffix_shift:
                    shift, reason = bad_char_shift, ShiftReason.BAD_CHARACTER
                else:
                    shift, reason = good_suffix_shift, ShiftReason.GOOD_SUFFIX

            i += shift
            yield Shift(shift, reason, i)
