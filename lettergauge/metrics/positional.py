"""Weighted distance between letter positions."""

from __future__ import annotations

from typing import Dict, Mapping, Sequence

from ..reference import LETTER_FREQUENCIES, SUPPORTED_LANGUAGES, LanguageCode
from .context import MetricContext
from .ranking import rank_languages
from .records import MetricResult

# Stands in for supplemental totals that carry no information.
MAX_SUPPLEMENTAL_SCORE = 100.0


def positional_distance(
    signature: Sequence[str],
    reference: Sequence[str],
    weights: Mapping[str, float],
) -> float:
    """Sum ``weight * |p_in - p_ref| / (p_in + p_ref)`` over the weighted letters.

    Positions are indexes in the respective sequence, 0 when the letter is
    absent. Letters at position 0 on both sides contribute nothing. Note the
    most frequent letter therefore sits at the same position as a missing one.
    """
    input_positions = _positions(signature)
    reference_positions = _positions(reference)

    total = 0.0
    for letter, weight in weights.items():
        p_in = input_positions.get(letter, 0)
        p_ref = reference_positions.get(letter, 0)
        if p_in + p_ref > 0:
            total += weight * abs(p_in - p_ref) / (p_in + p_ref)
    return total


def positional_metric(context: MetricContext) -> MetricResult:
    """Primary variant: weighted by the input's own letter frequencies."""
    signature = context.signature
    scores: Dict[LanguageCode, float] = {
        language: positional_distance(signature.letters, context.reference(language), signature.frequencies)
        for language in SUPPORTED_LANGUAGES
    }
    return rank_languages(scores, higher_is_better=False)


def positional_supplemental_metric(context: MetricContext) -> MetricResult:
    """Fallback variant: weighted by each language's published frequencies."""
    scores: Dict[LanguageCode, float] = {}
    for language in SUPPORTED_LANGUAGES:
        raw = positional_distance(
            context.signature.letters,
            context.reference(language),
            LETTER_FREQUENCIES[language],
        )
        scores[language] = MAX_SUPPLEMENTAL_SCORE if raw <= 0 else raw / 100.0
    return rank_languages(scores, higher_is_better=False)


def _positions(letters: Sequence[str]) -> Dict[str, int]:
    positions: Dict[str, int] = {}
    for index, letter in enumerate(letters):
        positions.setdefault(letter, index)
    return positions
