"""
Nucleotide substitution scores and gap penalty schemes.

Scores for definite bases come from a small +2/-1 matrix. IUPAC
ambiguity codes are resolved optimistically: the score of a pair is the
maximum over every concrete expansion of both symbols.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

# Substitution matrix for definite bases
DNA_SCORING_MATRIX = MappingProxyType({
    "A": MappingProxyType({"A": 2, "T": -1, "G": -1, "C": -1}),
    "T": MappingProxyType({"A": -1, "T": 2, "G": -1, "C": -1}),
    "G": MappingProxyType({"A": -1, "T": -1, "G": 2, "C": -1}),
    "C": MappingProxyType({"A": -1, "T": -1, "G": -1, "C": 2}),
})

# IUPAC ambiguity codes
AMBIGUOUS_NUCLEOTIDES = MappingProxyType({
    "R": ("A", "G"),            # Purine
    "Y": ("C", "T"),            # Pyrimidine
    "S": ("G", "C"),            # Strong
    "W": ("A", "T"),            # Weak
    "K": ("G", "T"),            # Keto
    "M": ("A", "C"),            # Amino
    "B": ("C", "G", "T"),       # Not A
    "D": ("A", "G", "T"),       # Not C
    "H": ("A", "C", "T"),       # Not G
    "V": ("A", "C", "G"),       # Not T
    "N": ("A", "C", "G", "T"),  # Any
})

# Score for symbols the matrix does not know (gaps included)
UNKNOWN_SCORE = -1


@dataclass(frozen=True)
class GapPenalty:
    """Affine gap cost: ``open`` starts a gap, ``extend`` continues one."""
    open: float
    extend: float

    def __post_init__(self):
        if self.open > 0 or self.extend > 0:
            raise ValueError(
                f"Gap penalties must be negative or zero, "
                f"got open={self.open}, extend={self.extend}"
            )


GAP_PENALTIES = MappingProxyType({
    "default": GapPenalty(open=-2, extend=-1),
    "strict": GapPenalty(open=-4, extend=-2),
    "lenient": GapPenalty(open=-1, extend=-0.5),
})


@dataclass(frozen=True)
class ScoringScheme:
    """
    Substitution scores plus gap penalties for nucleotide alignment.

    Args:
        gap: Affine gap penalty
        substitution: Nested mapping ``substitution[a][b]`` for definite bases
        ambiguity: Mapping from ambiguity code to the bases it stands for

    Example:
        >>> scheme = ScoringScheme.from_preset("strict")
        >>> scheme.score("A", "R")
        2
    """
    gap: GapPenalty = GAP_PENALTIES["default"]
    substitution: Mapping[str, Mapping[str, int]] = field(
        default_factory=lambda: DNA_SCORING_MATRIX, repr=False
    )
    ambiguity: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: AMBIGUOUS_NUCLEOTIDES, repr=False
    )

    @classmethod
    def from_preset(cls, name: str) -> "ScoringScheme":
        """Build a scheme using one of the named ``GAP_PENALTIES``."""
        key = name.strip().lower()
        if key not in GAP_PENALTIES:
            raise ValueError(
                f"Unknown gap penalty preset: {name}. Available: {list(GAP_PENALTIES.keys())}"
            )
        return cls(gap=GAP_PENALTIES[key])

    def with_gap(self, open: float, extend: float) -> "ScoringScheme":
        """Return a copy of this scheme with different gap penalties."""
        return replace(self, gap=GapPenalty(open=open, extend=extend))

    def expand(self, symbol: str) -> Tuple[str, ...]:
        """Concrete bases a symbol may stand for."""
        return self.ambiguity.get(symbol, (symbol,))

    def score(self, a: str, b: str) -> int:
        """
        Substitution score for a pair of symbols.

        Ambiguity codes take the best score over all expansions; pairs
        involving unknown symbols score ``UNKNOWN_SCORE``.
        """
        best = None
        for x in self.expand(a):
            row = self.substitution.get(x)
            if row is None:
                continue
            for y in self.expand(b):
                value = row.get(y)
                if value is not None and (best is None or value > best):
                    best = value

        return UNKNOWN_SCORE if best is None else best


DEFAULT_SCHEME = ScoringScheme()


def nucleotide_score(a: str, b: str, scheme: ScoringScheme = DEFAULT_SCHEME) -> int:
    """
    Score two nucleotides, resolving ambiguity codes.

    Example:
        >>> nucleotide_score("A", "A")
        2
        >>> nucleotide_score("N", "C")
        2
        >>> nucleotide_score("A", "-")
        -1
    """
    return scheme.score(a, b)


def substitution_table(
    scheme: ScoringScheme = DEFAULT_SCHEME,
    symbols: str = "ATGCN"
) -> Dict[str, Dict[str, int]]:
    """Expanded score table over ``symbols``, e.g. for display."""
    return {a: {b: scheme.score(a, b) for b in symbols} for a in symbols}
