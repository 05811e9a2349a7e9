"""
Knuth-Morris-Pratt search.

The pattern is preprocessed into its longest-proper-prefix-suffix
(failure) table. From that table a mismatch transition is derived for
every symbol occurring in the pattern, so each subject symbol is
compared exactly once and previously matched symbols are never
re-examined.
"""

from typing import Dict, Iterator, List, Optional

from genomatch.matching.base import (
    Algorithm,
    Comparison,
    Match,
    Matcher,
    ScanEvent,
    Shift,
    ShiftReason,
)


def compute_lps(pattern: str) -> List[int]:
    """
    Longest proper prefix that is also a suffix, for every prefix of ``pattern``.

    Example:
        >>> compute_lps("AACAAAC")
        [0, 1, 0, 1, 2, 2, 3]
    """
    m = len(pattern)
    lps = [0] * m
    length = 0
    i = 1

    while i < m:
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1

    return lps


def kmp_fallback_table(pattern: str, lps: Optional[List[int]] = None) -> List[Dict[str, int]]:
    """
    State to resume from after a mismatch.

    ``table[j][c]`` is the number of pattern symbols matched once subject
    symbol ``c`` fails to match ``pattern[j]``. Symbols missing from a row
    send the search back to state 0.
    """
    if lps is None:
        lps = compute_lps(pattern)

    symbols = sorted(set(pattern))
    table: List[Dict[str, int]] = []

    for j, expected in enumerate(pattern):
        row = {}
        for symbol in symbols:
            if symbol == expected or j == 0:
                continue
            k = lps[j - 1]
            state = k + 1 if pattern[k] == symbol else table[k].get(symbol, 0)
            if state:
                row[symbol] = state
        table.append(row)

    return table


class KMPMatcher(Matcher):
    """Linear-time search driven by the failure table."""

    algorithm = Algorithm.KMP

    def scan(self, subject: str, pattern: str) -> Iterator[ScanEvent]:
        m = len(pattern)
        lps = compute_lps(pattern)
        fallback = kmp_fallback_table(pattern, lps)
        j = 0

        for i, symbol in enumerate(subject):
            is_match = symbol == pattern[j]
            yield Comparison(i - j, j, is_match)

            if is_match:
                j += 1
                if j == m:
                    yield Match(i - m + 1)
                    j = lps[m - 1]
                    yield Shift(m - j, ShiftReason.MATCH, i + 1 - j)
            else:
                resume = fallback[j].get(symbol, 0)
                yield Shift(j - resume + 1, ShiftReason.FAILURE_LINK, i + 1 - resume)
                j = resume
