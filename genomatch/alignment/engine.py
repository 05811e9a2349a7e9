"""
Pairwise sequence alignment.

Needleman-Wunsch (global) and Smith-Waterman (local) over a single score
matrix with affine gaps. Whether a gap edge opens or extends a gap is
decided from the traceback direction already stored at the neighbouring
cell, rather than from separate gap-state matrices.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

import numpy as np

from genomatch.alignment.stats import GAP, AlignmentStats, compute_stats
from genomatch.scoring import DEFAULT_SCHEME, ScoringScheme

logger = logging.getLogger(__name__)

# Traceback directions
STOP = 0
DIAG = 1
UP = 2
LEFT = 3


class AlignmentMode(str, Enum):
    GLOBAL = "global"
    LOCAL = "local"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower()
            key = {"needleman-wunsch": "global", "smith-waterman": "local"}.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        return None


@dataclass(frozen=True)
class AlignmentResult:
    """Result of a pairwise alignment.

    ``start_*``/``end_*`` give the aligned region of each input as a
    0-based half-open interval.
    """
    aligned_a: str
    aligned_b: str
    score: float
    stats: AlignmentStats
    mode: AlignmentMode
    start_a: int
    end_a: int
    start_b: int
    end_b: int

    def __str__(self) -> str:
        """Pretty print the alignment."""
        lines = []
        match_line = ""
        for c1, c2 in zip(self.aligned_a, self.aligned_b):
            if c1 == c2 and c1 != GAP:
                match_line += "|"
            elif c1 == GAP or c2 == GAP:
                match_line += " "
            else:
                match_line += "."

        # Split into chunks for display
        chunk_size = 60
        for i in range(0, len(self.aligned_a), chunk_size):
            lines.append(self.aligned_a[i:i + chunk_size])
            lines.append(match_line[i:i + chunk_size])
            lines.append(self.aligned_b[i:i + chunk_size])
            lines.append("")

        lines.append(f"Score: {self.score}")
        lines.append(f"Identity: {self.stats.identity:.1f}%")
        return "\n".join(lines)


def _fill(
    seq_a: str,
    seq_b: str,
    scheme: ScoringScheme,
    local: bool
) -> Tuple[np.ndarray, np.ndarray, float, Tuple[int, int]]:
    """Fill score and traceback matrices; returns the best cell for local mode."""
    m, n = len(seq_a), len(seq_b)
    gap = scheme.gap

    score = np.zeros((m + 1, n + 1), dtype=np.float64)
    trace = np.full((m + 1, n + 1), STOP, dtype=np.int8)

    if not local:
        for i in range(m + 1):
            score[i, 0] = i * gap.open
            trace[i, 0] = UP
        for j in range(n + 1):
            score[0, j] = j * gap.open
            trace[0, j] = LEFT
        trace[0, 0] = DIAG

    max_score = 0.0
    max_pos = (0, 0)

    for i in range(1, m + 1):
        a = seq_a[i - 1]
        for j in range(1, n + 1):
            diag = score[i - 1, j - 1] + scheme.score(a, seq_b[j - 1])
            up = score[i - 1, j] + (gap.extend if trace[i - 1, j] == UP else gap.open)
            left = score[i, j - 1] + (gap.extend if trace[i, j - 1] == LEFT else gap.open)

            best = max(diag, up, left)

            # Ties resolve diagonal, then up, then left
            if local and best <= 0:
                score[i, j] = 0
                trace[i, j] = STOP
                continue
            elif best == diag:
                trace[i, j] = DIAG
            elif best == up:
                trace[i, j] = UP
            else:
                trace[i, j] = LEFT
            score[i, j] = best

            if local and best > max_score:
                max_score = best
                max_pos = (i, j)

    return score, trace, float(max_score), max_pos


def _step(
    seq_a: str,
    seq_b: str,
    i: int,
    j: int,
    direction: int,
    aligned_a: list,
    aligned_b: list
) -> Tuple[int, int]:
    """Emit one alignment column for ``direction`` and return the predecessor cell."""
    if direction == DIAG:
        aligned_a.append(seq_a[i - 1])
        aligned_b.append(seq_b[j - 1])
        return i - 1, j - 1
    if direction == UP:
        aligned_a.append(seq_a[i - 1])
        aligned_b.append(GAP)
        return i - 1, j
    aligned_a.append(GAP)
    aligned_b.append(seq_b[j - 1])
    return i, j - 1


def _result(
    aligned_a: list,
    aligned_b: list,
    score: float,
    scheme: ScoringScheme,
    mode: AlignmentMode,
    start: Tuple[int, int],
    end: Tuple[int, int]
) -> AlignmentResult:
    a = "".join(reversed(aligned_a))
    b = "".join(reversed(aligned_b))
    logger.debug("%s alignment: score=%s length=%d", mode.value, score, len(a))
    return AlignmentResult(
        aligned_a=a,
        aligned_b=b,
        score=score,
        stats=compute_stats(a, b, scheme),
        mode=mode,
        start_a=start[0],
        end_a=end[0],
        start_b=start[1],
        end_b=end[1],
    )


def needleman_wunsch(
    seq_a: str,
    seq_b: str,
    scheme: ScoringScheme = DEFAULT_SCHEME
) -> AlignmentResult:
    """
    Global alignment using the Needleman-Wunsch algorithm with affine gaps.

    Borders are initialised with ``k * gap.open``. Once traceback reaches
    the first row or column the remaining symbols are aligned to gaps.

    Args:
        seq_a: First sequence
        seq_b: Second sequence
        scheme: Substitution scores and gap penalties

    Returns:
        AlignmentResult spanning both sequences end to end

    Example:
        >>> result = needleman_wunsch("GATTACA", "GCATGCA")
        >>> result.score
        5.0
        >>> result.aligned_b
        'GCATGCA'
    """
    m, n = len(seq_a), len(seq_b)
    score, trace, _, _ = _fill(seq_a, seq_b, scheme, local=False)

    aligned_a, aligned_b = [], []
    i, j = m, n

    while i > 0 or j > 0:
        if i == 0:
            direction = LEFT
        elif j == 0:
            direction = UP
        else:
            direction = trace[i, j]
        i, j = _step(seq_a, seq_b, i, j, direction, aligned_a, aligned_b)

    return _result(
        aligned_a, aligned_b, float(score[m, n]), scheme,
        AlignmentMode.GLOBAL, start=(0, 0), end=(m, n),
    )


def smith_waterman(
    seq_a: str,
    seq_b: str,
    scheme: ScoringScheme = DEFAULT_SCHEME
) -> AlignmentResult:
    """
    Local alignment using the Smith-Waterman algorithm with affine gaps.

    Traceback starts from the first maximum-scoring cell in row-major
    order and stops at the first cell scoring zero.

    Args:
        seq_a: First sequence
        seq_b: Second sequence
        scheme: Substitution scores and gap penalties

    Returns:
        AlignmentResult for the best-scoring local region (empty with
        score 0 when nothing scores above zero)

    Example:
        >>> result = smith_waterman("TTACGTTT", "ACGT")
        >>> result.aligned_a, result.start_a
        ('ACGT', 2)
    """
    score, trace, max_score, max_pos = _fill(seq_a, seq_b, scheme, local=True)

    aligned_a, aligned_b = [], []
    i, j = max_pos

    while i > 0 and j > 0 and score[i, j] != 0:
        direction = trace[i, j]
        if direction == STOP:
            break
        i, j = _step(seq_a, seq_b, i, j, direction, aligned_a, aligned_b)

    return _result(
        aligned_a, aligned_b, max_score, scheme,
        AlignmentMode.LOCAL, start=(i, j), end=max_pos,
    )


def align(
    seq_a: str,
    seq_b: str,
    scheme: Optional[ScoringScheme] = None,
    mode: Union[AlignmentMode, str] = AlignmentMode.GLOBAL
) -> AlignmentResult:
    """
    Align two sequences globally or locally.

    Args:
        seq_a: First sequence
        seq_b: Second sequence
        scheme: Scoring scheme (defaults to DEFAULT_SCHEME)
        mode: ``"global"`` or ``"local"``

    Returns:
        AlignmentResult with aligned strings, score and statistics
    """
    if scheme is None:
        scheme = DEFAULT_SCHEME
    try:
        mode = AlignmentMode(mode)
    except ValueError:
        raise ValueError(
            f"Unknown alignment mode: {mode}. Available: {[m.value for m in AlignmentMode]}"
        ) from None

    if mode is AlignmentMode.GLOBAL:
        return needleman_wunsch(seq_a, seq_b, scheme)
    return smith_waterman(seq_a, seq_b, scheme)
