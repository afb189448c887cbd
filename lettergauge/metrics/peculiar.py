"""Occurrences of letters unique to one language."""

from __future__ import annotations

from typing import Dict

from ..reference import PECULIAR_LETTERS, SUPPORTED_LANGUAGES, LanguageCode
from .context import MetricContext
from .ranking import rank_languages
from .records import MetricResult


def count_peculiars(text: str, language: LanguageCode) -> int:
    """Count raw, case-sensitive occurrences of the language's peculiar letters."""
    peculiar = PECULIAR_LETTERS[language]
    if not peculiar:
        return 0
    return sum(1 for char in text if char in peculiar)


def peculiars_metric(context: MetricContext) -> MetricResult:
    # Counted on the raw text: normalization may drop the very words carrying them.
    scores: Dict[LanguageCode, float] = {
        language: count_peculiars(context.text, language) for language in SUPPORTED_LANGUAGES
    }
    return rank_languages(scores, higher_is_better=True)
