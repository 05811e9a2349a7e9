"""
Codon translation and amino-acid substitution scores.

Used by the mutation classifier to judge how disruptive a base change
is at the protein level.
"""

from types import MappingProxyType
from typing import Mapping, Optional

# Standard genetic code (DNA codons)
CODON_TABLE = MappingProxyType({
    "TTT": "F", "TTC": "F", "TTA": "L", "TTG": "L",
    "TCT": "S", "TCC": "S", "TCA": "S", "TCG": "S",
    "TAT": "Y", "TAC": "Y", "TAA": "*", "TAG": "*",
    "TGT": "C", "TGC": "C", "TGA": "*", "TGG": "W",
    "CTT": "L", "CTC": "L", "CTA": "L", "CTG": "L",
    "CCT": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "CAT": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
    "CGT": "R", "CGC": "R", "CGA": "R", "CGG": "R",
    "ATT": "I", "ATC": "I", "ATA": "I", "ATG": "M",
    "ACT": "T", "ACC": "T", "ACA": "T", "ACG": "T",
    "AAT": "N", "AAC": "N", "AAA": "K", "AAG": "K",
    "AGT": "S", "AGC": "S", "AGA": "R", "AGG": "R",
    "GTT": "V", "GTC": "V", "GTA": "V", "GTG": "V",
    "GCT": "A", "GCC": "A", "GCA": "A", "GCG": "A",
    "GAT": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "GGT": "G", "GGC": "G", "GGA": "G", "GGG": "G",
})

STOP_SYMBOL = "*"
UNKNOWN_AMINO_ACID = "X"

# Fallback for pairs outside BLOSUM62 (e.g. "X")
DEFAULT_AMINO_ACID_SCORE = -2

_BLOSUM62_ORDER = "ARNDCQEGHILKMFPSTWYV"
_BLOSUM62_ROWS = """
 4 -1 -2 -2  0 -1 -1  0 -2 -1 -1 -1 -1 -2 -1  1  0 -3 -2  0
-1  5  0 -2 -3  1  0 -2  0 -3 -2  2 -1 -3 -2 -1 -1 -3 -2 -3
-2  0  6  1 -3  0  0  0  1 -3 -3  0 -2 -3 -2  1  0 -4 -2 -3
-2 -2  1  6 -3  0  2 -1 -1 -3 -4 -1 -3 -3 -1  0 -1 -4 -3 -3
 0 -3 -3 -3  9 -3 -4 -3 -3 -1 -1 -3 -1 -2 -3 -1 -1 -2 -2 -1
-1  1  0  0 -3  5  2 -2  0 -3 -2  1  0 -3 -1  0 -1 -2 -1 -2
-1  0  0  2 -4  2  5 -2  0 -3 -3  1 -2 -3 -1  0 -1 -3 -2 -2
 0 -2  0 -1 -3 -2 -2  6 -2 -4 -4 -2 -3 -3 -2  0 -2 -2 -3 -3
-2  0  1 -1 -3  0  0 -2  8 -3 -3 -1 -2 -1 -2 -1 -2 -2  2 -3
-1 -3 -3 -3 -1 -3 -3 -4 -3  4  2 -3  1  0 -3 -2 -1 -3 -1  3
-1 -2 -3 -4 -1 -2 -3 -4 -3  2  4 -2  2  0 -3 -2 -1 -2 -1  1
-1  2  0 -1 -3  1  1 -2 -1 -3 -2  5 -1 -3 -1  0 -1 -3 -2 -2
-1 -1 -2 -3 -1  0 -2 -3 -2  1  2 -1  5  0 -2 -1 -1 -1 -1  1
-2 -3 -3 -3 -2 -3 -3 -3 -1  0  0 -3  0  6 -4 -2 -2  1  3 -1
-1 -2 -2 -1 -3 -1 -1 -2 -2 -3 -3 -1 -2 -4  7 -1 -1 -4 -3 -2
 1 -1  1  0 -1  0  0  0 -1 -2 -2  0 -1 -2 -1  4  1 -3 -2 -2
 0 -1  0 -1 -1 -1 -1 -2 -2 -1 -1 -1 -1 -2 -1  1  5 -2 -2  0
-3 -3 -4 -4 -2 -2 -3 -2 -2 -3 -2 -3 -1  1 -4 -3 -2 11  2 -3
-2 -2 -2 -3 -2 -1 -2 -3  2 -1 -1 -2 -1  3 -3 -2 -2  2  7 -1
 0 -3 -3 -3 -1 -2 -2 -3 -3  3  1 -2  1 -1 -2 -2  0 -3 -1  4
"""


def _parse_matrix(order: str, rows: str) -> Mapping[str, Mapping[str, int]]:
    matrix = {}
    for aa, line in zip(order, rows.strip().splitlines()):
        values = [int(v) for v in line.split()]
        matrix[aa] = MappingProxyType(dict(zip(order, values)))
    return MappingProxyType(matrix)


BLOSUM62 = _parse_matrix(_BLOSUM62_ORDER, _BLOSUM62_ROWS)


def translate(
    sequence: str,
    codon_table: Optional[Mapping[str, str]] = None,
    to_stop: bool = False
) -> str:
    """
    Translate a DNA sequence to protein.

    Args:
        sequence: DNA sequence (trailing partial codon is ignored)
        codon_table: Custom codon table (defaults to standard)
        to_stop: If True, stop translation at first stop codon

    Returns:
        Amino acid sequence, ``X`` for codons the table does not know

    Example:
        >>> translate("ATGGCC")
        'MA'
        >>> translate("ATGTGA", to_stop=True)
        'M'
    """
    if codon_table is None:
        codon_table = CODON_TABLE

    sequence = sequence.upper().replace("U", "T")

    protein = []
    for i in range(0, len(sequence) - 2, 3):
        aa = codon_table.get(sequence[i:i + 3], UNKNOWN_AMINO_ACID)
        if aa == STOP_SYMBOL and to_stop:
            break
        protein.append(aa)

    return "".join(protein)


def amino_acid_score(a: str, b: str) -> int:
    """
    BLOSUM62 score for two amino acids.

    Example:
        >>> amino_acid_score("K", "P")
        -1
        >>> amino_acid_score("X", "A")
        -2
    """
    return BLOSUM62.get(a, {}).get(b, DEFAULT_AMINO_ACID_SCORE)
