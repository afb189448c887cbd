"""Tests for vote tallying and the decision policies."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lettergauge.metrics import MetricResult, MetricResults
from lettergauge.voting import MajorityPolicy, WeightedFirstPolicy, tally_votes


def _vote(language: str, confidence: float = 1.5) -> MetricResult:
    if language == "default":
        return MetricResult.undecided()
    return MetricResult(language=language, confidence=confidence)  # type: ignore[arg-type]


def _results(
    peculiars: str = "default",
    levenshtein: str = "default",
    damerau: str = "default",
    positional: str = "default",
    supplemental: str = "default",
    similarity: str = "default",
) -> MetricResults:
    return MetricResults(
        peculiars=_vote(peculiars),
        levenshtein=_vote(levenshtein),
        damerau=_vote(damerau),
        positional=_vote(positional),
        positional_supplemental=_vote(supplemental),
        similarity=_vote(similarity),
    )


# ---------------------------------------------------------------------------
# Tally


def test_tally_keeps_encounter_order_on_ties() -> None:
    assert tally_votes(["default", "en", "en", "default", "de"]) == [("default", 2), ("en", 2), ("de", 1)]


def test_votes_fold_positional_fallback() -> None:
    results = _results(peculiars="ru", positional="default", supplemental="es")
    assert results.votes() == ["ru", "default", "default", "es", "default"]


def test_votes_omit_skipped_metrics() -> None:
    results = MetricResults(peculiars=_vote("de"), positional=_vote("de"))
    assert results.votes() == ["de", "de"]
    assert set(results.as_dict()) == {
        "peculiars",
        "levenshtein",
        "damerau",
        "positional",
        "positional_supplemental",
        "similarity",
    }


# ---------------------------------------------------------------------------
# Weighted-first policy


def test_weighted_first_returns_positional_result() -> None:
    results = _results(levenshtein="en", damerau="en", positional="de", supplemental="es")
    decision = WeightedFirstPolicy().decide(results)
    assert decision.language == "de"
    assert decision.confidence == pytest.approx(1.5)


def test_weighted_first_falls_back_to_supplemental() -> None:
    decision = WeightedFirstPolicy().decide(_results(positional="default", supplemental="es"))
    assert decision.language == "es"


def test_weighted_first_without_positional_is_undecided() -> None:
    assert WeightedFirstPolicy().decide(MetricResults()).language == "default"


# ---------------------------------------------------------------------------
# Majority policy


def test_majority_returns_most_voted_language() -> None:
    results = _results(levenshtein="en", damerau="en", positional="en")
    decision = MajorityPolicy().decide(results)
    assert decision.language == "en"
    assert decision.confidence == pytest.approx(0.6)


def test_majority_skips_leading_default() -> None:
    results = _results(positional="ru", similarity="es")
    decision = MajorityPolicy().decide(results)
    assert decision.language == "ru"
    assert decision.confidence == pytest.approx(0.2)


def test_majority_all_default_is_undecided() -> None:
    decision = MajorityPolicy().decide(_results())
    assert decision.language == "default"
    assert decision.confidence == 0
