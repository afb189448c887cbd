"""Compiled-in reference data for the supported languages."""

from .peculiar import ALL_PECULIAR_LETTERS, FORBIDDEN_ACCENTS, PECULIAR_LETTERS, PERMITTED_ACCENTS
from .tables import (
    DEFAULT_LANGUAGE,
    DIACRITIC_RULES,
    LETTER_FREQUENCIES,
    SUPPORTED_LANGUAGES,
    LanguageCode,
    LanguageLabel,
    letters_of,
)

__all__ = [
    "ALL_PECULIAR_LETTERS",
    "DEFAULT_LANGUAGE",
    "DIACRITIC_RULES",
    "FORBIDDEN_ACCENTS",
    "LETTER_FREQUENCIES",
    "LanguageCode",
    "LanguageLabel",
    "PECULIAR_LETTERS",
    "PERMITTED_ACCENTS",
    "SUPPORTED_LANGUAGES",
    "letters_of",
]
