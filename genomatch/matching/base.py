"""
Shared types for the exact-match search algorithms.

Every matcher is written as a generator over scan events. ``search``
consumes the events to build a ``MatchResult``; the step replay in
``genomatch.matching.replay`` consumes the very same events to
reconstruct intermediate states, so both views always agree.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple, Tuple, Union

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    """Exact-match algorithm variants."""
    NAIVE = "naive"
    KMP = "kmp"
    RABIN_KARP = "rabin-karp"
    HORSPOOL = "horspool"
    BOYER_MOORE = "boyer-moore"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-").replace(" ", "-")
            key = _ALGORITHM_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        return None


_ALGORITHM_ALIASES = {
    "brute-force": "naive",
    "knuth-morris-pratt": "kmp",
    "rabinkarp": "rabin-karp",
    "boyermoore": "boyer-moore",
}


class ShiftReason(str, Enum):
    """Why the pattern moved to a new alignment."""
    SLIDE = "slide by one"
    FAILURE_LINK = "failure link"
    BAD_CHARACTER = "bad character rule"
    GOOD_SUFFIX = "good suffix rule"
    MATCH = "match found"


class Comparison(NamedTuple):
    """One character comparison between pattern and subject."""
    search_index: int
    pattern_index: int
    is_match: bool


class HashCheck(NamedTuple):
    """Rolling-hash comparison of a whole window."""
    search_index: int
    is_match: bool


class Match(NamedTuple):
    position: int


class Shift(NamedTuple):
    """The pattern moved by ``amount``; ``search_index`` is the new window start."""
    amount: int
    reason: ShiftReason
    search_index: int


ScanEvent = Union[Comparison, HashCheck, Match, Shift]


@dataclass(frozen=True)
class MatchResult:
    """Result of an exact-match search.

    ``positions`` are 0-based start indices in discovery order,
    ``comparisons`` counts character comparisons actually made and
    ``elapsed`` is wall-clock seconds.
    """
    algorithm: Algorithm
    positions: Tuple[int, ...]
    comparisons: int
    elapsed: float

    @property
    def count(self) -> int:
        return len(self.positions)


def is_searchable(subject: str, pattern: str) -> bool:
    """Empty patterns and patterns longer than the subject never match."""
    return 0 < len(pattern) <= len(subject)


class Matcher(ABC):
    """
    Base class for exact-match algorithms.

    Subclasses implement ``scan``, yielding ``Comparison`` events for each
    character compared, ``Match`` for each hit and ``Shift`` whenever the
    pattern moves. ``step_event`` names the event type that counts as one
    step during replay.
    """

    algorithm: Algorithm
    step_event = Comparison

    def search(self, subject: str, pattern: str) -> MatchResult:
        """Find all (possibly overlapping) occurrences of ``pattern`` in ``subject``."""
        start = time.perf_counter()
        positions = []
        comparisons = 0

        if is_searchable(subject, pattern):
            for event in self.scan(subject, pattern):
                if isinstance(event, Comparison):
                    comparisons += 1
                elif isinstance(event, Match):
                    positions.append(event.position)

        elapsed = time.perf_counter() - start
        logger.debug(
            "%s: n=%d m=%d hits=%d comparisons=%d",
            self.algorithm.value, len(subject), len(pattern), len(positions), comparisons,
        )
        return MatchResult(
            algorithm=self.algorithm,
            positions=tuple(positions),
            comparisons=comparisons,
            elapsed=elapsed,
        )

    @abstractmethod
    def scan(self, subject: str, pattern: str) -> Iterator[ScanEvent]:
        """Run the algorithm, yielding scan events.

        Callers guarantee ``0 < len(pattern) <= len(subject)``.
        """
