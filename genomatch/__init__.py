"""
GenoMatch: Pattern Search and Alignment for DNA Sequences

This package provides tools for:
- Exact pattern search (naive, KMP, Rabin-Karp, Horspool, Boyer-Moore)
- Step-by-step replay of the search algorithms for visualisation
- Global and local pairwise alignment with affine gap penalties
- Alignment statistics (identity, similarity, gaps)
- Point and frameshift mutation classification with impact tiers

Built on top of NumPy for the dynamic programming matrices.
"""

__version__ = "0.1.0"
__author__ = "GenoMatch Contributors"

from genomatch.scoring import (
    GAP_PENALTIES,
    DEFAULT_SCHEME,
    GapPenalty,
    ScoringScheme,
)

from genomatch.matching import (
    Algorithm,
    MatchResult,
    StepState,
    compare_algorithms,
    search,
    step_state,
)

from genomatch.alignment import (
    AlignmentMode,
    AlignmentResult,
    AlignmentStats,
    align,
    compute_stats,
)

from genomatch.mutations import (
    Mutation,
    MutationAnalysisResult,
    classify_alignment,
    classify_mutations,
)

from genomatch.utils import (
    clean_sequence,
    validate_sequence,
)

__all__ = [
    # Scoring
    "GAP_PENALTIES",
    "DEFAULT_SCHEME",
    "GapPenalty",
    "ScoringScheme",
    # Exact matching
    "Algorithm",
    "MatchResult",
    "StepState",
    "compare_algorithms",
    "search",
    "step_state",
    # Alignment
    "AlignmentMode",
    "AlignmentResult",
    "AlignmentStats",
    "align",
    "compute_stats",
    # Mutations
    "Mutation",
    "MutationAnalysisResult",
    "classify_alignment",
    "classify_mutations",
    # Utilities
    "clean_sequence",
    "validate_sequence",
]
