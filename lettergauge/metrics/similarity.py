"""Recursive longest-common-substring similarity."""

from __future__ import annotations

from typing import Dict, Tuple, Union

from ..reference import SUPPORTED_LANGUAGES, LanguageCode
from .context import MetricContext
from .ranking import rank_languages
from .records import MetricResult

Symbols = Union[bytes, str]


def similar_text(left: Symbols, right: Symbols) -> int:
    """Total length of common runs: the longest one plus matches on either side.

    The first longest run found (scanning ``left`` then ``right``) splits both
    sequences; the left remainders and the right remainders are matched
    recursively.
    """
    if not left or not right:
        return 0
    length, left_start, right_start = _longest_common_run(left, right)
    if not length:
        return 0
    return (
        length
        + similar_text(left[:left_start], right[:right_start])
        + similar_text(left[left_start + length :], right[right_start + length :])
    )


def similarity_metric(context: MetricContext) -> MetricResult:
    """Highest similarity wins."""
    scores: Dict[LanguageCode, float] = {}
    for language in SUPPORTED_LANGUAGES:
        left, right = context.comparison_pair(language)
        scores[language] = similar_text(left, right)
    return rank_languages(scores, higher_is_better=True)


def _longest_common_run(left: Symbols, right: Symbols) -> Tuple[int, int, int]:
    best = left_start = right_start = 0
    for i in range(len(left)):
        for j in range(len(right)):
            k = 0
            while i + k < len(left) and j + k < len(right) and left[i + k] == right[j + k]:
                k += 1
            if k > best:
                best, left_start, right_start = k, i, j
    return best, left_start, right_start
