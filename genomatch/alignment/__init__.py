"""
Pairwise alignment of nucleotide sequences.

This module provides:
- Global (Needleman-Wunsch) and local (Smith-Waterman) alignment with affine gaps
- Identity, similarity and gap statistics for aligned pairs
"""

from genomatch.alignment.engine import (
    AlignmentMode,
    AlignmentResult,
    align,
    needleman_wunsch,
    smith_waterman,
)

from genomatch.alignment.stats import (
    GAP,
    AlignmentStats,
    compute_stats,
)

__all__ = [
    "AlignmentMode",
    "AlignmentResult",
    "align",
    "needleman_wunsch",
    "smith_waterman",
    "GAP",
    "AlignmentStats",
    "compute_stats",
]
