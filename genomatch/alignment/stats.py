"""
Summary statistics over an aligned sequence pair.
"""

from dataclasses import dataclass
from typing import Optional

from genomatch.scoring import DEFAULT_SCHEME, ScoringScheme

GAP = "-"


@dataclass(frozen=True)
class AlignmentStats:
    """Identity, similarity and gap metrics (percentages in 0-100)."""
    identity: float
    similarity: float
    gap_count: int
    gap_percentage: float
    length: int


def compute_stats(
    aligned_a: str,
    aligned_b: str,
    scheme: Optional[ScoringScheme] = None
) -> AlignmentStats:
    """
    Calculate identity, similarity and gap content of an alignment.

    A column counts towards similarity when both symbols are identical or
    when the substitution score of the pair is positive (e.g. ``A``/``R``).
    A zero-length alignment reports zeros.

    Args:
        aligned_a: First aligned sequence (with ``-`` gaps)
        aligned_b: Second aligned sequence, same length
        scheme: Scoring scheme for the similarity test (defaults to DEFAULT_SCHEME)

    Returns:
        AlignmentStats

    Example:
        >>> compute_stats("ACGT", "AC-A").identity
        50.0
    """
    if len(aligned_a) != len(aligned_b):
        raise ValueError(
            f"Aligned sequences must be of equal length, got {len(aligned_a)} and {len(aligned_b)}"
        )
    if scheme is None:
        scheme = DEFAULT_SCHEME

    length = len(aligned_a)
    matches = 0
    similar = 0
    gaps = 0

    for a, b in zip(aligned_a, aligned_b):
        if a == GAP or b == GAP:
            gaps += 1
        elif a == b:
            matches += 1
            similar += 1
        elif scheme.score(a, b) > 0:
            similar += 1

    if length == 0:
        return AlignmentStats(0.0, 0.0, 0, 0.0, 0)

    return AlignmentStats(
        identity=matches / length * 100,
        similarity=similar / length * 100,
        gap_count=gaps,
        gap_percentage=gaps / length * 100,
        length=length,
    )
