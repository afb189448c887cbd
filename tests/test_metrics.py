"""Unit tests for the language metrics and their building blocks."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lettergauge.metrics import (
    EditCosts,
    MetricContext,
    count_peculiars,
    get_metric,
    get_strategy,
    levenshtein,
    levenshtein_metric,
    peculiars_metric,
    positional_distance,
    positional_supplemental_metric,
    rank_languages,
    similar_text,
    similarity_metric,
)
from lettergauge.text import ByteSpaceExhausted, build_signature, compact_pair, normalize


def _context(text: str, **kwargs: object) -> MetricContext:
    return MetricContext(text=text, signature=build_signature(normalize(text)), **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Ranking


def test_rank_lower_scores_win() -> None:
    result = rank_languages({"en": 3, "de": 1, "es": 2, "ru": 5}, higher_is_better=False)
    assert result.language == "de"
    assert result.confidence == pytest.approx(2.0)
    assert result.scores["ru"] == 5


def test_rank_higher_scores_win() -> None:
    result = rank_languages({"en": 0, "de": 4, "es": 2, "ru": 0}, higher_is_better=True)
    assert result.language == "de"
    assert result.confidence == pytest.approx(2.0)


def test_rank_tie_at_top_is_undecided() -> None:
    result = rank_languages({"en": 1, "de": 1, "es": 2, "ru": 2}, higher_is_better=False)
    assert result.language == "default"
    assert result.confidence == 0
    assert result.decided is False


def test_rank_zero_divisor_returns_dividend() -> None:
    assert rank_languages({"en": 0, "de": 3, "es": 0, "ru": 0}, higher_is_better=True).confidence == 3
    assert rank_languages({"en": 0, "de": 2, "es": 4, "ru": 5}, higher_is_better=False).confidence == 2


def test_rank_requires_two_languages() -> None:
    with pytest.raises(ValueError):
        rank_languages({"en": 1}, higher_is_better=True)


# ---------------------------------------------------------------------------
# Edit distances


def test_levenshtein_ascii_baseline() -> None:
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("flaw", "lawn") == 2
    assert levenshtein("", "abc") == 3
    assert levenshtein("abc", "abc") == 0


def test_levenshtein_over_compacted_bytes_matches_baseline() -> None:
    assert levenshtein(*compact_pair("kitten", "sitting")) == 3
    assert levenshtein(*compact_pair("кот", "кит")) == 1
    assert levenshtein(*compact_pair("straße", "strasse")) == levenshtein("straße", "strasse")


@pytest.mark.parametrize("key", ["matrix", "pure"])
@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("ab", "ba", 1.0),
        ("ca", "abc", 3.0),
        ("kitten", "sitting", 3.0),
        ("", "abc", 3.0),
        ("abc", "", 3.0),
        ("abcdef", "abcdef", 0.0),
        ("abcdef", "badcfe", 3.0),
    ],
)
def test_damerau_levenshtein_unit_costs(key: str, left: str, right: str, expected: float) -> None:
    strategy = get_strategy(key)  # type: ignore[arg-type]
    assert strategy.distance(left, right) == pytest.approx(expected)
    assert strategy.distance(*compact_pair(left, right)) == pytest.approx(expected)


@pytest.mark.parametrize("key", ["matrix", "pure"])
def test_damerau_levenshtein_weighted_costs(key: str) -> None:
    strategy = get_strategy(key)  # type: ignore[arg-type]
    assert strategy.distance("ab", "ba", EditCosts(transposition=10.0)) == pytest.approx(2.0)
    assert strategy.distance("a", "b", EditCosts(substitution=5.0)) == pytest.approx(2.0)
    assert strategy.distance("abc", "", EditCosts(deletion=2.0)) == pytest.approx(6.0)


def test_damerau_strategies_agree() -> None:
    matrix, pure = get_strategy("matrix"), get_strategy("pure")
    pairs = [
        ("оеаинтс", "оеаинст"),
        ("eiadlsycoruvwbgmp", "eaoidlsrcuymwpgvb"),
        ("aohcenilrstubdmxzñú", "eaosrnidltcubmxzñ00"),
    ]
    for left, right in pairs:
        encoded = compact_pair(left, right)
        assert matrix.distance(*encoded) == pure.distance(*encoded)
        assert matrix.distance(left, right) == pure.distance(left, right)


def test_unknown_strategy_is_rejected() -> None:
    with pytest.raises(ValueError):
        get_strategy("native")  # type: ignore[arg-type]


def test_edit_costs_must_be_positive() -> None:
    with pytest.raises(ValueError):
        EditCosts(insertion=0.0).validate()


# ---------------------------------------------------------------------------
# Similarity and positional distance


def test_similar_text_sums_recursive_matches() -> None:
    assert similar_text("World", "Word") == 4
    assert similar_text("abc", "") == 0
    assert similar_text("abc", "xyz") == 0
    assert similar_text(*compact_pair("привет", "привет")) == 6


def test_positional_distance_weights_position_gaps() -> None:
    weights = {"a": 0.5, "b": 0.3, "c": 0.2}
    assert positional_distance(("a", "b", "c"), ("c", "a", "b"), weights) == pytest.approx(0.8)


def test_positional_distance_skips_letters_absent_from_both() -> None:
    assert positional_distance(("a", "b"), ("a", "b"), {"q": 1.0}) == 0.0


def test_positional_distance_counts_letters_missing_from_reference() -> None:
    assert positional_distance(("a", "я"), ("a", "0"), {"a": 0.5, "я": 0.5}) == pytest.approx(0.5)


# ---------------------------------------------------------------------------
# Metrics over a context


def test_count_peculiars_is_case_sensitive_on_raw_text() -> None:
    assert count_peculiars("Straße, Mädchen, ÄÖ", "de") == 2
    assert count_peculiars("anything at all", "en") == 0


def test_peculiars_metric_picks_spanish() -> None:
    result = peculiars_metric(_context("El niño comió una manzana."))
    assert result.language == "es"
    assert result.scores["es"] == 2
    assert result.confidence == 2


def test_self_match_reaches_maximal_similarity() -> None:
    result = similarity_metric(_context("eeettn"))
    assert result.scores["en"] == 3


def test_supplemental_rescales_empty_totals() -> None:
    result = positional_supplemental_metric(_context("aaaa"))
    assert result.language == "default"
    assert set(result.scores.values()) == {100.0}


def test_compaction_overflow_surfaces_from_metric() -> None:
    text = "".join(chr(0x4E00 + offset) for offset in range(130))
    with pytest.raises(ByteSpaceExhausted):
        levenshtein_metric(_context(text))
    result = levenshtein_metric(_context(text, compact_bytes=False))
    assert result.language == "default"


def test_get_metric_rejects_unknown_name() -> None:
    with pytest.raises(ValueError):
        get_metric("trigraphs")  # type: ignore[arg-type]
