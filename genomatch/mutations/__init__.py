"""
Mutation detection between an original and a mutated sequence.

This module provides:
- Point / frameshift classification of raw sequence pairs
- Point / insertion / deletion classification of aligned pairs
- Codon-based impact tiers (high, medium, low)
"""

from genomatch.mutations.classifier import (
    Impact,
    Mutation,
    MutationAnalysisResult,
    MutationType,
    classify_alignment,
    classify_mutations,
    first_divergence,
    indel_impact,
    point_mutation_impact,
)

__all__ = [
    "Impact",
    "Mutation",
    "MutationAnalysisResult",
    "MutationType",
    "classify_alignment",
    "classify_mutations",
    "first_divergence",
    "indel_impact",
    "point_mutation_impact",
]
