#!/usr/bin/env python3
"""
Example: Sequence Analysis with GenoMatch

This example demonstrates the search and alignment capabilities of
GenoMatch:
- Exact pattern search with several algorithms
- Step-by-step replay of a search
- Global and local alignment
- Mutation classification
"""

import sys
sys.path.insert(0, '..')

from genomatch.matching import (
    Algorithm,
    compare_algorithms,
    count_steps,
    good_suffix_table,
    horspool_shift_table,
    step_state,
)
from genomatch.alignment import align
from genomatch.scoring import ScoringScheme
from genomatch.mutations import classify_alignment, classify_mutations
from genomatch.utils import validate_sequence


def demo_search():
    """Demonstrate exact pattern search."""
    print("\n" + "=" * 60)
    print("PATTERN SEARCH")
    print("=" * 60)

    seq = validate_sequence("ATGCTATAAA TGCGCTATAA ATATATATAG CGC")
    pattern = "TATA"
    print(f"\nSequence: {seq}")
    print(f"Pattern:  {pattern}")

    results = compare_algorithms(seq, pattern)
    print(f"\n{'Algorithm':<14}{'Comparisons':>12}  Positions")
    for algorithm, result in results.items():
        print(f"{algorithm.value:<14}{result.comparisons:>12}  {list(result.positions)}")

    print(f"\nHorspool shift table: {horspool_shift_table(pattern)}")
    print(f"Good suffix table:    {good_suffix_table(pattern)}")


def demo_step_replay():
    """Demonstrate stepping through Boyer-Moore."""
    print("\n" + "=" * 60)
    print("STEP REPLAY (Boyer-Moore)")
    print("=" * 60)

    seq = "ATGCATGCAATGC"
    pattern = "ATGC"
    total = count_steps(seq, pattern, Algorithm.BOYER_MOORE)
    print(f"\nSequence: {seq}")
    print(f"Pattern:  {pattern}")
    print(f"Steps:    {total}")

    for step in range(total + 1):
        state = step_state(seq, pattern, Algorithm.BOYER_MOORE, step)
        if state.done:
            print(f"  done: found {list(state.positions_found)} "
                  f"with {state.comparisons_so_far} comparisons")
            break
        reason = state.shift_reason.value if state.shift_reason else "-"
        print(f"  step {step:>2}: window {state.search_index:>2}, "
              f"pattern[{state.pattern_index}] {'==' if state.is_match else '!='} "
              f"seq[{state.search_index + state.pattern_index}]  "
              f"(last shift {state.last_shift}, {reason})")


def demo_alignment():
    """Demonstrate sequence alignment."""
    print("\n" + "=" * 60)
    print("SEQUENCE ALIGNMENT")
    print("=" * 60)

    seq1 = "GATTACA"
    seq2 = "GCATGCA"

    print("\n1. Global Alignment (Needleman-Wunsch):")
    result = align(seq1, seq2, mode="global")
    print(result)
    print(f"   Similarity: {result.stats.similarity:.1f}%")

    print("\n2. Local Alignment (Smith-Waterman, strict gaps):")
    result = align("NNTTACGTACGTTT", "ACGTACGT", ScoringScheme.from_preset("strict"), mode="local")
    print(f"   Seq1[{result.start_a}:{result.end_a}]: {result.aligned_a}")
    print(f"   Seq2[{result.start_b}:{result.end_b}]: {result.aligned_b}")
    print(f"   Score: {result.score}")


def demo_mutations():
    """Demonstrate mutation classification."""
    print("\n" + "=" * 60)
    print("MUTATION ANALYSIS")
    print("=" * 60)

    for original, mutated in [("ATGCAT", "ATGGAT"), ("ATGCAT", "ATGCATTT")]:
        analysis = classify_mutations(original, mutated)
        print(f"\n{original} -> {mutated}")
        for mutation in analysis.mutations:
            print(f"  [{mutation.impact.value}] {mutation.description}")
        print(f"  Rate: {analysis.mutation_rate:.3f}  Summary: {analysis.impact_summary}")

    alignment = align("ATGCATTGCA", "ATGGATGCA")
    analysis = classify_alignment(alignment.aligned_a, alignment.aligned_b)
    print(f"\nFrom alignment:\n{alignment}")
    for mutation in analysis.mutations:
        print(f"  [{mutation.impact.value}] {mutation.description}")


def main():
    print("=" * 60)
    print("GenoMatch Sequence Analysis Demo")
    print("=" * 60)

    demo_search()
    demo_step_replay()
    demo_alignment()
    demo_mutations()

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
