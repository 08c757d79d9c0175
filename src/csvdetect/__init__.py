"""Dialect and header detection for delimiter-separated text."""

from __future__ import annotations

from collections.abc import Iterable

from csvdetect._utils import ESCAPE_CHARACTER, FIELD_DELIMITERS, ROW_DELIMITER
from csvdetect.enums import Abstraction, AbstractionError, FieldType
from csvdetect.fieldtypes import FIELD_TYPE_CHECKS, detect_type
from csvdetect.header import classify_rows, is_header_present
from csvdetect.pipeline import DEFAULT_DIALECT, Dialect, DialectScore
from csvdetect.pipeline.abstraction import make_abstraction
from csvdetect.pipeline.orchestrator import TypeScorer, run_pipeline
from csvdetect.pipeline.pattern import calculate_pattern_score

__version__ = "1.0.0"
__all__ = [
    "ESCAPE_CHARACTER",
    "FIELD_DELIMITERS",
    "FIELD_TYPE_CHECKS",
    "ROW_DELIMITER",
    "Abstraction",
    "AbstractionError",
    "Dialect",
    "DialectScore",
    "FieldType",
    "calculate_pattern_score",
    "classify_rows",
    "detect",
    "detect_all",
    "detect_type",
    "is_header_present",
    "make_abstraction",
]


def detect(
    text: str,
    delimiters: Iterable[str] = FIELD_DELIMITERS,
    type_scorer: TypeScorer | None = None,
) -> Dialect:
    """Detect the dialect of the given text.

    Always returns a dialect: empty or degenerate input falls back to the
    best-ranked (comma, by candidate order) dialect.

    :param text: The complete raw text, not split into lines.
    :param delimiters: Candidate field delimiters, in evaluation order.
    :param type_scorer: Optional content-aware multiplier for pattern scores.
    :raises ValueError: If *delimiters* holds an invalid candidate.
    """
    results = run_pipeline(text, delimiters, type_scorer)
    if not results:
        return DEFAULT_DIALECT
    return results[0].dialect


def detect_all(
    text: str,
    delimiters: Iterable[str] = FIELD_DELIMITERS,
    type_scorer: TypeScorer | None = None,
) -> list[DialectScore]:
    """Score all candidate dialects of the given text, best first.

    Candidates skipped because their pattern score could not beat an
    earlier candidate are not included.
    """
    return run_pipeline(text, delimiters, type_scorer)
