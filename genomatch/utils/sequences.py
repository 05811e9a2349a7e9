"""
Input normalisation helpers for nucleotide sequences.

The search, alignment and mutation functions assume clean uppercase
input and do not re-validate it; these helpers perform that cleanup for
callers that need it.
"""

import re

DNA_ALPHABET = "ATGCN"
IUPAC_ALPHABET = "ATGCRYSWKMBDHVN"

_WHITESPACE = re.compile(r"\s+")


def clean_sequence(sequence: str) -> str:
    """
    Strip all whitespace and uppercase a sequence.

    Example:
        >>> clean_sequence(" atg c\\nNa ")
        'ATGCNA'
    """
    return _WHITESPACE.sub("", sequence).upper()


def validate_sequence(sequence: str, alphabet: str = DNA_ALPHABET) -> str:
    """
    Clean a sequence and check that every symbol is in ``alphabet``.

    Args:
        sequence: Raw sequence text
        alphabet: Allowed symbols (DNA_ALPHABET or IUPAC_ALPHABET)

    Returns:
        The cleaned sequence

    Raises:
        ValueError: On the first symbol outside the alphabet
    """
    cleaned = clean_sequence(sequence)
    for i, symbol in enumerate(cleaned):
        if symbol not in alphabet:
            raise ValueError(f"Invalid nucleotide '{symbol}' at position {i}")
    return cleaned


def is_valid_sequence(sequence: str, alphabet: str = DNA_ALPHABET) -> bool:
    """True if the cleaned sequence only uses symbols from ``alphabet``."""
    return all(symbol in alphabet for symbol in clean_sequence(sequence))
