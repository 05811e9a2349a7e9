"""
Mutation detection and impact classification.

Two entry points:
- ``classify_mutations`` compares raw sequences. Equal lengths give one
  point mutation per differing position; different lengths are reported
  as a single frameshift from the first divergence to the end.
- ``classify_alignment`` walks a gapped alignment and reports point
  mutations, insertions and deletions individually.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from genomatch.alignment.stats import GAP
from genomatch.scoring.amino_acids import (
    STOP_SYMBOL,
    amino_acid_score,
    translate,
)

logger = logging.getLogger(__name__)


class MutationType(str, Enum):
    POINT = "point"
    INSERTION = "insertion"
    DELETION = "deletion"
    FRAMESHIFT = "frameshift"


class Impact(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Mutation:
    """A single divergence between the original and mutated sequence."""
    kind: MutationType
    position: int
    original: str
    mutated: str
    impact: Impact
    description: str


@dataclass(frozen=True)
class MutationAnalysisResult:
    """Detected mutations, their rate per base and counts per impact tier."""
    mutations: Tuple[Mutation, ...]
    mutation_rate: float
    impact_summary: Dict[str, int] = field(default_factory=dict)


def nucleotide_codon(base: str) -> str:
    """
    Codon used to judge a single-base change.

    The base is simply repeated three times; no reading frame is taken
    into account.
    """
    return base * 3


def point_mutation_impact(original: str, mutated: str) -> Impact:
    """
    Impact of substituting one base for another.

    Example:
        >>> point_mutation_impact("A", "C").value
        'medium'
        >>> point_mutation_impact("C", "G").value
        'high'
    """
    original_aa = translate(nucleotide_codon(original))
    mutated_aa = translate(nucleotide_codon(mutated))

    if original_aa == mutated_aa:
        return Impact.LOW
    if original_aa == STOP_SYMBOL or mutated_aa == STOP_SYMBOL:
        return Impact.HIGH

    score = amino_acid_score(original_aa, mutated_aa)
    if score > 0:
        return Impact.LOW
    if score > -2:
        return Impact.MEDIUM
    return Impact.HIGH


def indel_impact(length: int) -> Impact:
    """In-frame indels (multiples of three) are medium impact, others high."""
    return Impact.MEDIUM if length % 3 == 0 else Impact.HIGH


def _point(position: int, original: str, mutated: str) -> Mutation:
    return Mutation(
        kind=MutationType.POINT,
        position=position,
        original=original,
        mutated=mutated,
        impact=point_mutation_impact(original, mutated),
        description=f"Point mutation from {original} to {mutated} at position {position}",
    )


def _summarize(mutations: List[Mutation], longest: int) -> MutationAnalysisResult:
    rate = len(mutations) / longest if longest else 0.0
    summary = {impact.value: 0 for impact in Impact}
    for mutation in mutations:
        summary[mutation.impact.value] += 1

    logger.debug("classified %d mutations (rate=%.4f)", len(mutations), rate)
    return MutationAnalysisResult(
        mutations=tuple(mutations),
        mutation_rate=rate,
        impact_summary=summary,
    )


def first_divergence(original: str, mutated: str) -> int:
    """Index of the first position where the sequences differ."""
    shortest = min(len(original), len(mutated))
    i = 0
    while i < shortest and original[i] == mutated[i]:
        i += 1
    return i


def classify_mutations(original: str, mutated: str) -> MutationAnalysisResult:
    """
    Compare two sequences and classify the differences.

    Sequences of different length produce exactly one high-impact
    frameshift spanning from the first divergence to the end of both
    sequences, however small the length difference.

    Args:
        original: Reference sequence
        mutated: Sequence to compare against it

    Returns:
        MutationAnalysisResult

    Example:
        >>> result = classify_mutations("ATGCAT", "ATGGAT")
        >>> [(m.position, m.original, m.mutated) for m in result.mutations]
        [(3, 'C', 'G')]
    """
    mutations = []

    if len(original) != len(mutated):
        position = first_divergence(original, mutated)
        delta = abs(len(original) - len(mutated))
        change = "deletion" if len(original) > len(mutated) else "insertion"
        if position == min(len(original), len(mutated)):
            detail = f"{change} of {delta} nucleotides"
        else:
            detail = f"sequences diverge with {change} of {delta} nucleotides"

        mutations.append(Mutation(
            kind=MutationType.FRAMESHIFT,
            position=position,
            original=original[position:],
            mutated=mutated[position:],
            impact=Impact.HIGH,
            description=f"Frameshift mutation at position {position}: {detail}",
        ))
    else:
        for i, (a, b) in enumerate(zip(original, mutated)):
            if a != b:
                mutations.append(_point(i, a, b))

    return _summarize(mutations, max(len(original), len(mutated)))


def classify_alignment(aligned_original: str, aligned_mutated: str) -> MutationAnalysisResult:
    """
    Classify the differences recorded in an alignment.

    Mismatched columns become point mutations; each run of consecutive
    gap columns becomes one insertion (gap in the original) or deletion
    (gap in the mutated sequence). Positions refer to the ungapped
    original sequence.

    Args:
        aligned_original: Aligned reference (with ``-`` gaps)
        aligned_mutated: Aligned mutated sequence, same length

    Returns:
        MutationAnalysisResult

    Example:
        >>> result = classify_alignment("ATG-CAT", "ATGGCAT")
        >>> result.mutations[0].kind.value, result.mutations[0].position
        ('insertion', 3)
    """
    if len(aligned_original) != len(aligned_mutated):
        raise ValueError(
            f"Aligned sequences must be of equal length, "
            f"got {len(aligned_original)} and {len(aligned_mutated)}"
        )

    mutations = []
    length = len(aligned_original)
    position = 0
    col = 0

    while col < length:
        a, b = aligned_original[col], aligned_mutated[col]

        if a == GAP or b == GAP:
            gapped = aligned_original if a == GAP else aligned_mutated
            end = col
            while end < length and gapped[end] == GAP:
                end += 1

            if a == GAP:
                run = aligned_mutated[col:end]
                mutations.append(Mutation(
                    kind=MutationType.INSERTION,
                    position=position,
                    original="",
                    mutated=run,
                    impact=indel_impact(len(run)),
                    description=(
                        f"Insertion of {run} ({len(run)} nucleotides) "
                        f"at position {position}"
                    ),
                ))
            else:
                run = aligned_original[col:end]
                mutations.append(Mutation(
                    kind=MutationType.DELETION,
                    position=position,
                    original=run,
                    mutated="",
                    impact=indel_impact(len(run)),
                    description=(
                        f"Deletion of {run} ({len(run)} nucleotides) "
                        f"at position {position}"
                    ),
                ))
                position += len(run)
            col = end
            continue

        if a != b:
            mutations.append(_point(position, a, b))
        position += 1
        col += 1

    original_length = length - aligned_original.count(GAP)
    mutated_length = length - aligned_mutated.count(GAP)
    return _summarize(mutations, max(original_length, mutated_length))
