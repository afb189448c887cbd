"""Turn per-language scores into a single metric verdict."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..reference import LanguageCode
from .records import MetricResult


def rank_languages(scores: Mapping[LanguageCode, float], higher_is_better: bool) -> MetricResult:
    """Pick the best-scoring language and derive its confidence.

    Confidence compares the winner against the runner-up: ``best / second``
    when higher scores win, ``second / best`` when lower scores win. A zero
    divisor yields the dividend itself. An exact tie at the top yields the
    ``default`` label with zero confidence.
    """
    if len(scores) < 2:
        raise ValueError("Ranking needs scores for at least two languages.")

    frozen = MappingProxyType(dict(scores))
    ordered = sorted(frozen.items(), key=lambda item: item[1], reverse=higher_is_better)
    (top_language, best), (_, runner_up) = ordered[0], ordered[1]
    if best == runner_up:
        return MetricResult.undecided(frozen)

    if higher_is_better:
        dividend, divisor = best, runner_up
    else:
        dividend, divisor = runner_up, best
    confidence = dividend / divisor if divisor else dividend
    return MetricResult(language=top_language, confidence=float(confidence), scores=frozen)
