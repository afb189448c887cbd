"""Letters that identify a single supported language, computed once at import."""

from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Mapping

from .tables import LATIN1_ACCENTED, LETTER_FREQUENCIES, SUPPORTED_LANGUAGES, LanguageCode


def _compute_peculiar_letters() -> Mapping[LanguageCode, FrozenSet[str]]:
    peculiar = {}
    for language in SUPPORTED_LANGUAGES:
        others = set()
        for other in SUPPORTED_LANGUAGES:
            if other != language:
                others.update(LETTER_FREQUENCIES[other])
        peculiar[language] = frozenset(LETTER_FREQUENCIES[language]) - others
    return MappingProxyType(peculiar)


PECULIAR_LETTERS: Mapping[LanguageCode, FrozenSet[str]] = _compute_peculiar_letters()

ALL_PECULIAR_LETTERS: FrozenSet[str] = frozenset().union(*PECULIAR_LETTERS.values())

# Only accents unique to one language survive; shared ones such as ü mark a foreign word too.
PERMITTED_ACCENTS: FrozenSet[str] = frozenset(LATIN1_ACCENTED) & ALL_PECULIAR_LETTERS
FORBIDDEN_ACCENTS: FrozenSet[str] = frozenset(LATIN1_ACCENTED) - ALL_PECULIAR_LETTERS


__all__ = [
    "ALL_PECULIAR_LETTERS",
    "FORBIDDEN_ACCENTS",
    "PECULIAR_LETTERS",
    "PERMITTED_ACCENTS",
]
