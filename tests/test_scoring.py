#!/usr/bin/env python3
"""
Tests for nucleotide and amino-acid scoring.
"""

import pytest

from genomatch.scoring import (
    BLOSUM62,
    CODON_TABLE,
    DEFAULT_SCHEME,
    DNA_SCORING_MATRIX,
    GAP_PENALTIES,
    GapPenalty,
    ScoringScheme,
    amino_acid_score,
    nucleotide_score,
    substitution_table,
    translate,
)

IUPAC = "ATGCRYSWKMBDHVN"


class TestNucleotideScore:
    """Substitution scores with ambiguity resolution."""

    def test_identical_bases(self):
        for base in "ATGC":
            assert nucleotide_score(base, base) == 2

    def test_mismatched_bases(self):
        assert nucleotide_score("A", "T") == -1
        assert nucleotide_score("G", "C") == -1

    def test_ambiguity_takes_best_expansion(self):
        """R = A/G, so R scores as a match against A."""
        assert nucleotide_score("R", "A") == 2
        assert nucleotide_score("N", "C") == 2
        assert nucleotide_score("N", "N") == 2

    def test_disjoint_ambiguity_codes_mismatch(self):
        """R (A/G) and Y (C/T) share no base."""
        assert nucleotide_score("R", "Y") == -1
        assert nucleotide_score("S", "W") == -1

    def test_unknown_symbols_score_minus_one(self):
        assert nucleotide_score("A", "-") == -1
        assert nucleotide_score("X", "A") == -1
        assert nucleotide_score("-", "N") == -1

    def test_symmetric(self):
        for a in IUPAC:
            for b in IUPAC:
                assert nucleotide_score(a, b) == nucleotide_score(b, a)

    def test_substitution_table(self):
        table = substitution_table()
        assert table["N"]["A"] == 2
        assert table["A"]["T"] == -1
        assert set(table) == set("ATGCN")


class TestScoringScheme:
    """Gap penalties and presets."""

    def test_default_scheme(self):
        assert DEFAULT_SCHEME.gap == GapPenalty(open=-2, extend=-1)

    def test_presets(self):
        assert ScoringScheme.from_preset("strict").gap == GapPenalty(-4, -2)
        assert ScoringScheme.from_preset(" Lenient ").gap == GapPenalty(-1, -0.5)
        assert set(GAP_PENALTIES) == {"default", "strict", "lenient"}

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Available"):
            ScoringScheme.from_preset("generous")

    def test_positive_gap_penalty_rejected(self):
        with pytest.raises(ValueError):
            GapPenalty(open=1, extend=-1)
        with pytest.raises(ValueError):
            GapPenalty(open=-1, extend=0.5)

    def test_with_gap_returns_copy(self):
        scheme = DEFAULT_SCHEME.with_gap(-3, -3)
        assert scheme.gap == GapPenalty(-3, -3)
        assert DEFAULT_SCHEME.gap == GapPenalty(-2, -1)
        assert scheme.score("A", "A") == 2

    def test_custom_substitution_matrix(self):
        matrix = {"A": {"A": 5, "C": 1}, "C": {"A": 1, "C": 5}}
        scheme = ScoringScheme(substitution=matrix)
        assert scheme.score("A", "C") == 1
        assert scheme.score("M", "M") == 5  # M = A/C
        assert scheme.score("A", "G") == -1


class TestAminoAcids:
    """Codon translation and BLOSUM62."""

    def test_translate(self):
        assert translate("ATGGCC") == "MA"
        assert translate("ATGTGA") == "M*"
        assert translate("ATGTGA", to_stop=True) == "M"

    def test_translate_ignores_partial_codon(self):
        assert translate("ATGGC") == "M"

    def test_translate_unknown_codon(self):
        assert translate("NNN") == "X"

    def test_blosum62_symmetric(self):
        for a in BLOSUM62:
            for b in BLOSUM62:
                assert BLOSUM62[a][b] == BLOSUM62[b][a]

    def test_blosum62_values(self):
        assert amino_acid_score("W", "W") == 11
        assert amino_acid_score("K", "P") == -1
        assert amino_acid_score("P", "G") == -2
        assert amino_acid_score("I", "V") == 3

    def test_unknown_amino_acid_defaults(self):
        assert amino_acid_score("X", "A") == -2
        assert amino_acid_score("*", "K") == -2

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            CODON_TABLE["ATG"] = "X"
        with pytest.raises(TypeError):
            BLOSUM62["W"]["W"] = 0
        with pytest.raises(TypeError):
            DNA_SCORING_MATRIX["A"]["A"] = 5
        assert amino_acid_score("W", "W") == 11
        assert nucleotide_score("A", "A") == 2
