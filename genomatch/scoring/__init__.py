"""
Scoring models for nucleotide and protein comparisons.

This module provides:
- Nucleotide substitution scores with IUPAC ambiguity resolution
- Affine gap penalty presets
- The standard codon table and BLOSUM62 amino-acid scores
"""

from genomatch.scoring.nucleotides import (
    AMBIGUOUS_NUCLEOTIDES,
    DEFAULT_SCHEME,
    DNA_SCORING_MATRIX,
    GAP_PENALTIES,
    UNKNOWN_SCORE,
    GapPenalty,
    ScoringScheme,
    nucleotide_score,
    substitution_table,
)

from genomatch.scoring.amino_acids import (
    BLOSUM62,
    CODON_TABLE,
    STOP_SYMBOL,
    amino_acid_score,
    translate,
)

__all__ = [
    "AMBIGUOUS_NUCLEOTIDES",
    "DEFAULT_SCHEME",
    "DNA_SCORING_MATRIX",
    "GAP_PENALTIES",
    "UNKNOWN_SCORE",
    "GapPenalty",
    "ScoringScheme",
    "nucleotide_score",
    "substitution_table",
    "BLOSUM62",
    "CODON_TABLE",
    "STOP_SYMBOL",
    "amino_acid_score",
    "translate",
]
