"""
Exact pattern search over nucleotide sequences.

This module provides:
- Naive, KMP, Rabin-Karp, Horspool and Boyer-Moore matchers
- Comparison counts for performance comparison
- Deterministic step replay for visualisers
"""

from genomatch.matching.base import (
    Algorithm,
    Matcher,
    MatchResult,
    ShiftReason,
)

from genomatch.matching.naive import NaiveMatcher
from genomatch.matching.kmp import KMPMatcher, compute_lps, kmp_fallback_table
from genomatch.matching.rabin_karp import RabinKarpMatcher, polynomial_hash
from genomatch.matching.horspool import HorspoolMatcher, horspool_shift_table
from genomatch.matching.boyer_moore import (
    BoyerMooreMatcher,
    bad_character_table,
    good_suffix_table,
)

from genomatch.matching.search import (
    MatcherRegistry,
    compare_algorithms,
    get_matcher,
    search,
)

from genomatch.matching.replay import (
    StepState,
    count_steps,
    step_state,
    trace,
)

__all__ = [
    "Algorithm",
    "Matcher",
    "MatchResult",
    "ShiftReason",
    "NaiveMatcher",
    "KMPMatcher",
    "RabinKarpMatcher",
    "HorspoolMatcher",
    "BoyerMooreMatcher",
    "compute_lps",
    "kmp_fallback_table",
    "polynomial_hash",
    "horspool_shift_table",
    "bad_character_table",
    "good_suffix_table",
    "MatcherRegistry",
    "compare_algorithms",
    "get_matcher",
    "search",
    "StepState",
    "count_steps",
    "step_state",
    "trace",
]
