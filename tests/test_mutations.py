#!/usr/bin/env python3
"""
Tests for mutation classification.
"""

import pytest

from genomatch.alignment import align
from genomatch.mutations import (
    Impact,
    MutationType,
    classify_alignment,
    classify_mutations,
    first_divergence,
    indel_impact,
    point_mutation_impact,
)


class TestClassifyMutations:
    """Raw sequence comparison."""

    def test_single_point_mutation(self):
        result = classify_mutations("ATGCAT", "ATGGAT")
        assert len(result.mutations) == 1
        mutation = result.mutations[0]
        assert mutation.kind is MutationType.POINT
        assert mutation.position == 3
        assert (mutation.original, mutation.mutated) == ("C", "G")
        assert mutation.impact is Impact.HIGH
        assert result.mutation_rate == pytest.approx(1 / 6)

    def test_trailing_insertion_is_frameshift(self):
        result = classify_mutations("ATGCAT", "ATGCATTT")
        assert len(result.mutations) == 1
        mutation = result.mutations[0]
        assert mutation.kind is MutationType.FRAMESHIFT
        assert mutation.position == 6
        assert mutation.original == ""
        assert mutation.mutated == "TT"
        assert mutation.impact is Impact.HIGH
        assert mutation.description.endswith("insertion of 2 nucleotides")
        assert result.mutation_rate == pytest.approx(1 / 8)

    def test_early_divergence(self):
        result = classify_mutations("ATGCAT", "ATCAT")
        mutation = result.mutations[0]
        assert mutation.position == 2
        assert (mutation.original, mutation.mutated) == ("GCAT", "CAT")
        assert mutation.description.endswith("sequences diverge with deletion of 1 nucleotides")

    def test_single_frameshift_even_for_in_frame_difference(self):
        result = classify_mutations("ATGCATGCA", "ATGCAT")
        assert [m.kind for m in result.mutations] == [MutationType.FRAMESHIFT]

    def test_identical_sequences(self):
        result = classify_mutations("ACGT", "ACGT")
        assert result.mutations == ()
        assert result.mutation_rate == 0.0
        assert result.impact_summary == {"high": 0, "medium": 0, "low": 0}

    def test_empty_sequences(self):
        result = classify_mutations("", "")
        assert result.mutations == ()
        assert result.mutation_rate == 0.0

    def test_impact_summary(self):
        result = classify_mutations("AAAA", "ACGT")
        assert [m.impact for m in result.mutations] == [Impact.MEDIUM, Impact.HIGH, Impact.HIGH]
        assert [m.position for m in result.mutations] == [1, 2, 3]
        assert result.mutation_rate == 0.75
        assert result.impact_summary == {"high": 2, "medium": 1, "low": 0}
        assert sum(result.impact_summary.values()) == len(result.mutations)


class TestImpact:
    """Impact tiers."""

    def test_point_impacts(self):
        assert point_mutation_impact("A", "A") is Impact.LOW
        assert point_mutation_impact("A", "C") is Impact.MEDIUM
        assert point_mutation_impact("C", "G") is Impact.HIGH

    def test_unknown_base_is_high(self):
        assert point_mutation_impact("N", "A") is Impact.HIGH

    def test_impact_follows_translation(self):
        """Bases are judged by the translated codon, so RNA U reads as T."""
        assert point_mutation_impact("U", "T") is Impact.LOW
        assert point_mutation_impact("T", "A") is Impact.HIGH

    def test_indel_impacts(self):
        assert indel_impact(3) is Impact.MEDIUM
        assert indel_impact(6) is Impact.MEDIUM
        assert indel_impact(1) is Impact.HIGH
        assert indel_impact(4) is Impact.HIGH

    def test_first_divergence(self):
        assert first_divergence("ATGC", "ATCC") == 2
        assert first_divergence("ATG", "ATGCC") == 3
        assert first_divergence("", "A") == 0


class TestClassifyAlignment:
    """Gapped alignment classification."""

    def test_single_insertion(self):
        result = classify_alignment("ATG-CAT", "ATGGCAT")
        assert len(result.mutations) == 1
        mutation = result.mutations[0]
        assert mutation.kind is MutationType.INSERTION
        assert mutation.position == 3
        assert (mutation.original, mutation.mutated) == ("", "G")
        assert mutation.impact is Impact.HIGH
        assert result.mutation_rate == pytest.approx(1 / 7)

    def test_in_frame_deletion(self):
        result = classify_alignment("ATGCCCAT", "ATG---AT")
        assert len(result.mutations) == 1
        mutation = result.mutations[0]
        assert mutation.kind is MutationType.DELETION
        assert mutation.position == 3
        assert mutation.original == "CCC"
        assert mutation.impact is Impact.MEDIUM
        assert result.mutation_rate == pytest.approx(1 / 8)

    def test_mixed(self):
        result = classify_alignment("ACGTA-CA", "ATGT-GCA")
        kinds = [(m.kind, m.position) for m in result.mutations]
        assert kinds == [
            (MutationType.POINT, 1),
            (MutationType.DELETION, 4),
            (MutationType.INSERTION, 5),
        ]
        assert result.mutation_rate == pytest.approx(3 / 7)

    def test_unequal_lengths(self):
        with pytest.raises(ValueError):
            classify_alignment("ACGT", "ACG")

    def test_from_alignment_result(self):
        alignment = align("ATGCATTGCA", "ATGGATGCA")
        result = classify_alignment(alignment.aligned_a, alignment.aligned_b)
        assert result.mutations
        assert all(m.kind is not MutationType.FRAMESHIFT for m in result.mutations)
        assert sum(result.impact_summary.values()) == len(result.mutations)

    def test_identical_alignment(self):
        alignment = align("ACGTACGT", "ACGTACGT")
        result = classify_alignment(alignment.aligned_a, alignment.aligned_b)
        assert result.mutations == ()
        assert result.mutation_rate == 0.0
