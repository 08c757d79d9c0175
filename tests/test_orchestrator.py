# tests/test_orchestrator.py
"""Tests for candidate scoring and tie-breaking."""

from __future__ import annotations

import logging

import pytest

from csvdetect.enums import AbstractionError
from csvdetect.pipeline import Dialect, DialectScore
from csvdetect.pipeline.orchestrator import (
    _apply_tiebreak,
    neutral_type_score,
    run_pipeline,
)

TIE_SAMPLE = 'foo;,bar\nbaz;,"boo"'


def _score(delimiter: str, score: float, errors: int = 0) -> DialectScore:
    return DialectScore(
        dialect=Dialect(field_delimiter=delimiter),
        score=score,
        diagnostics=(AbstractionError.INVALID_ESCAPE_CHARACTER_POSITION,) * errors,
    )


def test_neutral_type_score():
    assert neutral_type_score("a,b", Dialect(field_delimiter=",")) == 1.0


def test_tiebreak_prefers_higher_score():
    results = [_score(",", 1.0), _score(";", 2.0)]
    assert _apply_tiebreak(results)[0].dialect.field_delimiter == ";"


def test_tiebreak_prefers_fewer_diagnostics():
    results = [_score(";", 1.0, errors=1), _score(",", 1.0)]
    assert _apply_tiebreak(results)[0].dialect.field_delimiter == ","


def test_tiebreak_keeps_candidate_order():
    results = [_score("|", 1.0), _score("\t", 1.0)]
    ordered = _apply_tiebreak(results)
    assert [r.dialect.field_delimiter for r in ordered] == ["|", "\t"]


def test_tiebreak_empty_results():
    assert _apply_tiebreak([]) == []


def test_tie_sample_prefers_dialect_without_errors():
    # Semicolon is tried first here, so only the diagnostics decide
    results = run_pipeline(TIE_SAMPLE, delimiters=(";", ","))
    assert results[0].dialect == Dialect(field_delimiter=",")
    assert results[0].score == 1.0
    assert results[0].diagnostics == ()
    assert results[1].dialect == Dialect(field_delimiter=";")
    assert results[1].diagnostics == (
        AbstractionError.INVALID_ESCAPE_CHARACTER_POSITION,
    )


def test_low_pattern_scores_are_skipped():
    text = "a,b,c\nd,e,f\n"
    results = run_pipeline(text)
    # Comma comes first and every later candidate scores lower
    assert [r.dialect.field_delimiter for r in results] == [","]


def test_empty_input_falls_back_to_comma():
    results = run_pipeline("")
    assert results[0].dialect == Dialect(field_delimiter=",")
    assert all(r.score == 0.0 for r in results)


def test_custom_type_scorer_evaluates_every_candidate():
    seen: list[str] = []

    def prefer_pipe(text: str, dialect: Dialect) -> float:
        seen.append(dialect.field_delimiter)
        return 1000.0 if dialect.field_delimiter == "|" else 1.0

    results = run_pipeline("a,b,c\nd,e,f", type_scorer=prefer_pipe)
    assert seen == [",", ";", "\t", "|"]
    assert results[0].dialect.field_delimiter == "|"


def test_no_candidates_yields_no_results():
    assert run_pipeline("a,b", delimiters=()) == []


@pytest.mark.parametrize("delimiters", [("ab",), ("\n",), ('"',), (",", ","), ","])
def test_invalid_delimiters_raise(delimiters) -> None:
    with pytest.raises(ValueError):
        run_pipeline("a,b", delimiters=delimiters)


def test_candidate_scores_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="csvdetect.pipeline.orchestrator"):
        run_pipeline("a,b\nc,d")
    assert "comma: pattern score" in caplog.text
    assert "skipping semicolon" in caplog.text
