"""Text normalization ahead of letter-frequency analysis."""

from __future__ import annotations

import re
import unicodedata
from typing import Pattern, Tuple

from ..reference import DIACRITIC_RULES, FORBIDDEN_ACCENTS

_WORD_RE = re.compile(r"\S+")

_COMPILED_RULES: Tuple[Tuple[Pattern[str], str], ...] = tuple(
    (re.compile(f"{re.escape(base)}[{marks}]"), replacement) for base, marks, replacement in DIACRITIC_RULES
)


def case_fold(text: str) -> str:
    """Lowercase ``text``; ``str.lower`` keeps ``ß`` intact, unlike ``casefold``."""
    return text.lower()


def resolve_diacritics(text: str) -> str:
    """Canonicalize known combining sequences and drop words with foreign accents.

    A word (maximal non-whitespace run) is removed when, after the known
    substitutions, it still carries a combining mark or contains a precomposed
    accented letter that no supported language uses. Such words are usually
    names or toponyms and only add noise to the frequency profile.
    """
    for pattern, replacement in _COMPILED_RULES:
        text = pattern.sub(replacement, text)
    return _WORD_RE.sub(_drop_foreign_word, text)


def strip_non_letters(text: str) -> str:
    """Remove everything that is not a Unicode letter, spaces included."""
    return "".join(char for char in text if _is_letter(char))


def normalize(text: str) -> str:
    """Full pipeline: case fold, resolve diacritics, strip non-letters."""
    return strip_non_letters(resolve_diacritics(case_fold(text)))


def _drop_foreign_word(match: re.Match[str]) -> str:
    word = match.group(0)
    for char in word:
        if char in FORBIDDEN_ACCENTS or unicodedata.category(char).startswith("M"):
            return ""
    return word


def _is_letter(char: str) -> bool:
    return unicodedata.category(char).startswith("L")
