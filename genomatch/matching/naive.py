"""Brute-force search: try every alignment, compare left to right."""

from typing import Iterator

from genomatch.matching.base import (
    Algorithm,
    Comparison,
    Match,
    Matcher,
    ScanEvent,
    Shift,
    ShiftReason,
)


class NaiveMatcher(Matcher):
    """Checks every start index, stopping each attempt at the first mismatch."""

    algorithm = Algorithm.NAIVE

    def scan(self, subject: str, pattern: str) -> Iterator[ScanEvent]:
        m = len(pattern)

        for i in range(len(subject) - m + 1):
            for j in range(m):
                is_match = subject[i + j] == pattern[j]
                yield Comparison(i, j, is_match)
                if not is_match:
                    break
            else:
                yield Match(i)

            yield Shift(1, ShiftReason.SLIDE, i + 1)
