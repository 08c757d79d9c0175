"""Pipeline orchestrator: scores every candidate dialect and ranks them."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable

from csvdetect._utils import FIELD_DELIMITERS, _validate_delimiters, delimiter_name
from csvdetect.pipeline import Dialect, DialectScore
from csvdetect.pipeline.abstraction import make_abstraction
from csvdetect.pipeline.pattern import score_abstraction

logger = logging.getLogger(__name__)

#: Signature of a type scorer: ``(text, dialect) -> multiplier``.
TypeScorer = Callable[[str, Dialect], float]


def neutral_type_score(text: str, dialect: Dialect) -> float:  # noqa: ARG001
    """Type score used when no content-aware scorer is supplied.

    Always ``1.0``, so the consistency score equals the pattern score.
    """
    return 1.0


def _apply_tiebreak(results: list[DialectScore]) -> list[DialectScore]:
    """Order results best-first.

    Higher score wins; among equal scores the dialect with fewer escaping
    diagnostics wins, and remaining ties keep candidate order (the sort is
    stable).
    """
    return sorted(results, key=lambda r: (-r.score, len(r.diagnostics)))


def run_pipeline(
    text: str,
    delimiters: Iterable[str] = FIELD_DELIMITERS,
    type_scorer: TypeScorer | None = None,
) -> list[DialectScore]:
    """Score each candidate dialect for *text*.

    A candidate whose pattern score is already below the best consistency
    score seen so far is not type-scored and does not appear in the result.
    This only holds while the type score cannot exceed ``1.0``, so the skip
    is disabled whenever a custom *type_scorer* is given.

    :param text: The complete raw text.
    :param delimiters: Candidate field delimiters, in evaluation order.
    :param type_scorer: Optional multiplier applied to each pattern score.
    :returns: A list of :class:`DialectScore`, best first.
    """
    candidates = _validate_delimiters(delimiters)
    scorer = type_scorer if type_scorer is not None else neutral_type_score
    can_skip = scorer is neutral_type_score

    max_consistency = -math.inf
    results: list[DialectScore] = []
    for delimiter in candidates:
        dialect = Dialect(field_delimiter=delimiter)
        abstraction, errors = make_abstraction(text, dialect)
        pattern_score = score_abstraction(abstraction)

        if can_skip and pattern_score < max_consistency:
            logger.debug(
                "skipping %s: pattern score %s below %s",
                delimiter_name(delimiter),
                pattern_score,
                max_consistency,
            )
            continue

        consistency = pattern_score * scorer(text, dialect)
        max_consistency = max(max_consistency, consistency)
        logger.debug(
            "%s: pattern score = %s, consistency = %s, %d diagnostic(s)",
            delimiter_name(delimiter),
            pattern_score,
            consistency,
            len(errors),
        )
        results.append(
            DialectScore(dialect=dialect, score=consistency, diagnostics=tuple(errors))
        )

    return _apply_tiebreak(results)
