"""
Rabin-Karp search with a rolling polynomial hash.

Hash hits are always verified symbol by symbol; only those verification
comparisons are counted as character comparisons.
"""

from typing import Iterator

from genomatch.matching.base import (
    Algorithm,
    Comparison,
    HashCheck,
    Match,
    Matcher,
    ScanEvent,
    Shift,
    ShiftReason,
)

HASH_BASE = 256
HASH_PRIME = 101


def polynomial_hash(text: str, base: int = HASH_BASE, prime: int = HASH_PRIME) -> int:
    """
    Hash of ``text`` as a base-``base`` number modulo ``prime``.

    Example:
        >>> polynomial_hash("AT")
        59
    """
    value = 0
    for symbol in text:
        value = (base * value + ord(symbol)) % prime
    return value


class RabinKarpMatcher(Matcher):
    """
    Rolling-hash search.

    One replay step is one window hash comparison, since windows whose
    hash differs involve no character comparison at all.

    Args:
        base: Radix of the polynomial hash
        prime: Modulus of the polynomial hash
    """

    algorithm = Algorithm.RABIN_KARP
    step_event = HashCheck

    def __init__(self, base: int = HASH_BASE, prime: int = HASH_PRIME):
        if prime < 2:
            raise ValueError(f"Hash modulus must be a prime >= 2, got {prime}")
        self.base = base
        self.prime = prime

    def scan(self, subject: str, pattern: str) -> Iterator[ScanEvent]:
        n, m = len(subject), len(pattern)
        base, prime = self.base, self.prime

        # Weight of the leading symbol in a window
        high = pow(base, m - 1, prime)
        pattern_hash = polynomial_hash(pattern, base, prime)
        window_hash = polynomial_hash(subject[:m], base, prime)

        for i in range(n - m + 1):
            hit = window_hash == pattern_hash
            yield HashCheck(i, hit)

            if hit:
                for j in range(m):
                    is_match = subject[i + j] == pattern[j]
                    yield Comparison(i, j, is_match)
                    if not is_match:
                        break
                else:
                    yield Match(i)

            if i < n - m:
                window_hash = (
                    base * (window_hash - ord(subject[i]) * high) + ord(subject[i + m])
                ) % prime

            yield Shift(1, ShiftReason.SLIDE, i + 1)
