"""
Sequence input utilities.

This module provides:
- Whitespace stripping and case normalisation
- Alphabet validation for plain DNA and IUPAC input
"""

from genomatch.utils.sequences import (
    DNA_ALPHABET,
    IUPAC_ALPHABET,
    clean_sequence,
    is_valid_sequence,
    validate_sequence,
)

__all__ = [
    "DNA_ALPHABET",
    "IUPAC_ALPHABET",
    "clean_sequence",
    "is_valid_sequence",
    "validate_sequence",
]
