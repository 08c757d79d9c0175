"""Stage 2: Row-pattern consistency scoring.

The correct dialect is expected to produce many rows of the same pattern.
The pattern score favours row patterns that occur often and contain several
fields, and penalises dialects that produce many distinct patterns.
"""

from __future__ import annotations

from collections import Counter

from csvdetect.enums import Abstraction
from csvdetect.pipeline import Dialect
from csvdetect.pipeline.abstraction import make_abstraction

#: Floor for the field factor so that single-field rows keep a tiny,
#: non-zero weight.
EPS: float = 0.001


def row_patterns(abstraction: list[Abstraction]) -> list[tuple[Abstraction, ...]]:
    """Split *abstraction* into row patterns on row delimiters.

    The delimiters themselves are dropped, as is the empty slice following a
    trailing row delimiter.
    """
    patterns: list[tuple[Abstraction, ...]] = []
    start = 0
    for i, symbol in enumerate(abstraction):
        if symbol is Abstraction.ROW_DELIMITER:
            if i > start:
                patterns.append(tuple(abstraction[start:i]))
            start = i + 1
    if start < len(abstraction):
        patterns.append(tuple(abstraction[start:]))
    return patterns


def score_abstraction(abstraction: list[Abstraction]) -> float:
    """Compute the pattern score of an already built abstraction.

    Each distinct row pattern with *f* fields occurring *c* times contributes
    ``c * max(EPS, f - 1) / f``; the sum is divided by the number of
    distinct patterns.  An empty abstraction scores ``0.0``.
    """
    counts = Counter(row_patterns(abstraction))
    if not counts:
        return 0.0
    score = 0.0
    for pattern, count in counts.items():
        field_count = pattern.count(Abstraction.CELL)
        score += count * max(EPS, field_count - 1.0) / field_count
    return score / len(counts)


def calculate_pattern_score(text: str, dialect: Dialect) -> float:
    """Return the pattern score of *text* interpreted with *dialect*."""
    abstraction, _ = make_abstraction(text, dialect)
    return score_abstraction(abstraction)
