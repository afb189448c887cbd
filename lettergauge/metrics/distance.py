"""Edit distance between input and reference signatures."""

from __future__ import annotations

from typing import Dict

from ..reference import SUPPORTED_LANGUAGES, LanguageCode
from .context import MetricContext
from .edit_distance import levenshtein
from .ranking import rank_languages
from .records import MetricResult


def levenshtein_metric(context: MetricContext) -> MetricResult:
    """Lowest Levenshtein distance wins."""
    scores: Dict[LanguageCode, float] = {}
    for language in SUPPORTED_LANGUAGES:
        left, right = context.comparison_pair(language)
        scores[language] = levenshtein(left, right)
    return rank_languages(scores, higher_is_better=False)


def damerau_metric(context: MetricContext) -> MetricResult:
    """Lowest Damerau-Levenshtein distance wins, computed by the configured strategy."""
    scores: Dict[LanguageCode, float] = {}
    for language in SUPPORTED_LANGUAGES:
        left, right = context.comparison_pair(language)
        scores[language] = context.damerau.distance(left, right, context.edit_costs)
    return rank_languages(scores, higher_is_better=False)
