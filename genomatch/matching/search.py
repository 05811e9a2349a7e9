"""
Entry points for exact-match search.

Each ``Algorithm`` member maps to exactly one ``Matcher`` class; adding a
variant means adding a member and registering its class here.
"""

import logging
from typing import Dict, Iterable, Optional, Type, Union

from genomatch.matching.base import Algorithm, Matcher, MatchResult
from genomatch.matching.boyer_moore import BoyerMooreMatcher
from genomatch.matching.horspool import HorspoolMatcher
from genomatch.matching.kmp import KMPMatcher
from genomatch.matching.naive import NaiveMatcher
from genomatch.matching.rabin_karp import RabinKarpMatcher

logger = logging.getLogger(__name__)

AlgorithmLike = Union[Algorithm, str]


class MatcherRegistry:
    """Builds matchers from an ``Algorithm`` or its name."""

    _matchers: Dict[Algorithm, Type[Matcher]] = {
        Algorithm.NAIVE: NaiveMatcher,
        Algorithm.KMP: KMPMatcher,
        Algorithm.RABIN_KARP: RabinKarpMatcher,
        Algorithm.HORSPOOL: HorspoolMatcher,
        Algorithm.BOYER_MOORE: BoyerMooreMatcher,
    }

    @classmethod
    def resolve(cls, algorithm: AlgorithmLike) -> Algorithm:
        try:
            return Algorithm(algorithm)
        except ValueError:
            raise ValueError(
                f"Unknown algorithm: {algorithm}. Available: {[a.value for a in cls._matchers]}"
            ) from None

    @classmethod
    def get(cls, algorithm: AlgorithmLike, **params) -> Matcher:
        return cls._matchers[cls.resolve(algorithm)](**params)

    @classmethod
    def available(cls):
        return list(cls._matchers)


def get_matcher(algorithm: AlgorithmLike, **params) -> Matcher:
    """
    Instantiate the matcher for ``algorithm``.

    Args:
        algorithm: ``Algorithm`` member or its name, e.g. ``"boyer-moore"``
        **params: Matcher options (e.g. ``prime`` for Rabin-Karp)
    """
    return MatcherRegistry.get(algorithm, **params)


def search(
    subject: str,
    pattern: str,
    algorithm: AlgorithmLike = Algorithm.BOYER_MOORE
) -> MatchResult:
    """
    Find every occurrence of ``pattern`` in ``subject``.

    All algorithms report the same positions; they differ only in the
    number of character comparisons made.

    Args:
        subject: Sequence to search (uppercase, pre-validated)
        pattern: Sequence to look for
        algorithm: Which algorithm to use

    Returns:
        MatchResult with positions, comparison count and elapsed time

    Example:
        >>> search("ATGCATGC", "ATGC", "boyer-moore").positions
        (0, 4)
        >>> search("AAAA", "", "naive").comparisons
        0
    """
    return get_matcher(algorithm).search(subject, pattern)


def compare_algorithms(
    subject: str,
    pattern: str,
    algorithms: Optional[Iterable[AlgorithmLike]] = None
) -> Dict[Algorithm, MatchResult]:
    """
    Run several algorithms on the same input, e.g. for a performance table.

    Args:
        subject: Sequence to search
        pattern: Sequence to look for
        algorithms: Algorithms to run (defaults to all of them)

    Returns:
        Mapping from algorithm to its MatchResult, in the order requested
    """
    if algorithms is None:
        algorithms = MatcherRegistry.available()

    results = {}
    for algorithm in algorithms:
        matcher = get_matcher(algorithm)
        results[matcher.algorithm] = matcher.search(subject, pattern)

    logger.debug("compared %d algorithms on n=%d m=%d", len(results), len(subject), len(pattern))
    return results
