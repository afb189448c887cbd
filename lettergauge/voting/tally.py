"""Vote counting across metric verdicts."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Tuple

from ..reference import LanguageLabel

Tally = List[Tuple[LanguageLabel, int]]


def tally_votes(votes: Iterable[LanguageLabel]) -> Tally:
    """Count votes, most common first; equal counts keep encounter order."""
    return Counter(votes).most_common()
