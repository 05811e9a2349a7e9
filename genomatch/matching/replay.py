"""
Step-by-step replay of the exact-match algorithms for visualisation.

A run is recorded once as a trace of ``StepState`` snapshots, one per
step (a character comparison, or a window hash check for Rabin-Karp),
and memoised. ``step_state`` then simply indexes into the trace, so
repeated calls with the same arguments return identical snapshots and
stepping backwards costs nothing.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from genomatch.matching.base import (
    Algorithm,
    Comparison,
    HashCheck,
    Match,
    Shift,
    ShiftReason,
    is_searchable,
)
from genomatch.matching.search import AlgorithmLike, MatcherRegistry

logger = logging.getLogger(__name__)

# Number of distinct (subject, pattern, algorithm) traces kept in memory
TRACE_CACHE_SIZE = 32


@dataclass(frozen=True)
class StepState:
    """
    Algorithm state just before a step is taken.

    Fields:
        search_index: Subject index the pattern is currently aligned to
        pattern_index: Pattern index about to be compared (-1 for a whole-window
            hash check, or once the run is done)
        is_match: Outcome of the pending comparison
        comparisons_so_far: Character comparisons made before this step
        positions_found: Matches reported before this step
        last_shift: Most recent shift amount (0 before the first shift)
        shift_reason: Why that shift was taken
        done: True once the algorithm has no steps left
    """
    search_index: int
    pattern_index: int
    is_match: bool
    comparisons_so_far: int
    positions_found: Tuple[int, ...]
    last_shift: int = 0
    shift_reason: Optional[ShiftReason] = None
    done: bool = False


@lru_cache(maxsize=TRACE_CACHE_SIZE)
def _trace(
    subject: str,
    pattern: str,
    algorithm: Algorithm
) -> Tuple[Tuple[StepState, ...], StepState]:
    logger.debug("recording %s trace: n=%d m=%d", algorithm.value, len(subject), len(pattern))

    if not is_searchable(subject, pattern):
        return (), StepState(0, -1, False, 0, (), done=True)

    matcher = MatcherRegistry.get(algorithm)
    states = []
    comparisons = 0
    positions: Tuple[int, ...] = ()
    last_shift, reason = 0, None
    window = 0

    for event in matcher.scan(subject, pattern):
        if isinstance(event, matcher.step_event):
            pattern_index = event.pattern_index if isinstance(event, Comparison) else -1
            states.append(StepState(
                search_index=event.search_index,
                pattern_index=pattern_index,
                is_match=event.is_match,
                comparisons_so_far=comparisons,
                positions_found=positions,
                last_shift=last_shift,
                shift_reason=reason,
            ))

        if isinstance(event, Comparison):
            comparisons += 1
        elif isinstance(event, Match):
            positions += (event.position,)
        elif isinstance(event, Shift):
            last_shift, reason, window = event.amount, event.reason, event.search_index
        elif not isinstance(event, HashCheck):
            raise TypeError(f"Unexpected scan event: {event!r}")

    final = StepState(
        search_index=window,
        pattern_index=-1,
        is_match=False,
        comparisons_so_far=comparisons,
        positions_found=positions,
        last_shift=last_shift,
        shift_reason=reason,
        done=True,
    )
    return tuple(states), final


def trace(subject: str, pattern: str, algorithm: AlgorithmLike) -> Tuple[StepState, ...]:
    """All step snapshots of a run, followed by the final (done) state."""
    states, final = _trace(subject, pattern, MatcherRegistry.resolve(algorithm))
    return states + (final,)


def count_steps(subject: str, pattern: str, algorithm: AlgorithmLike) -> int:
    """Number of steps the algorithm takes on this input."""
    states, _ = _trace(subject, pattern, MatcherRegistry.resolve(algorithm))
    return len(states)


def step_state(subject: str, pattern: str, algorithm: AlgorithmLike, step_index: int) -> StepState:
    """
    State of ``algorithm`` after exactly ``step_index`` steps.

    Steps past the end of the run return the final state with
    ``done=True``.

    Args:
        subject: Sequence being searched
        pattern: Sequence searched for
        algorithm: Which algorithm to replay
        step_index: Number of steps already taken (0-based)

    Example:
        >>> step_state("ATGCATGC", "ATGC", "horspool", 0).pattern_index
        3
    """
    if step_index < 0:
        raise ValueError(f"step_index must be non-negative, got {step_index}")

    states, final = _trace(subject, pattern, MatcherRegistry.resolve(algorithm))
    if step_index < len(states):
        return states[step_index]
    return final
