"""Static reference data: per-language letter frequencies and accent rules."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Literal, Mapping, Tuple

LanguageCode = Literal["en", "de", "es", "ru"]
LanguageLabel = Literal["en", "de", "es", "ru", "default"]

DEFAULT_LANGUAGE: Final = "default"
SUPPORTED_LANGUAGES: Tuple[LanguageCode, ...] = ("en", "de", "es", "ru")

# ---------------------------------------------------------------------------
# Letter frequencies (percent), ordered from most to least frequent.
# Sources: Wikipedia "Letter frequency" for the Latin alphabets,
# sttmedia.com for Russian.

_ENGLISH = {
    "e": 12.70, "t": 9.05, "a": 8.16, "o": 7.50, "i": 6.96, "n": 6.74,
    "s": 6.32, "h": 6.09, "r": 5.98, "d": 4.25, "l": 4.02, "c": 2.78,
    "u": 2.75, "m": 2.40, "w": 2.36, "f": 2.22, "g": 2.01, "y": 1.97,
    "p": 1.92, "b": 1.49, "v": 0.97, "k": 0.77, "j": 0.15, "x": 0.15,
    "q": 0.09, "z": 0.07,
}

_GERMAN = {
    "e": 17.39, "n": 9.77, "i": 7.55, "s": 7.27, "r": 7.00, "a": 6.51,
    "t": 6.15, "d": 5.07, "h": 4.75, "u": 4.34, "l": 3.43, "g": 3.00,
    "c": 2.73, "o": 2.59, "m": 2.53, "w": 1.92, "b": 1.88, "f": 1.65,
    "k": 1.41, "z": 1.13, "ü": 0.99, "v": 0.84, "p": 0.67, "ö": 0.57,
    "ä": 0.44, "ß": 0.30, "j": 0.26, "y": 0.03, "x": 0.03, "q": 0.01,
}

_SPANISH = {
    "e": 13.68, "a": 12.52, "o": 8.68, "s": 7.97, "r": 6.87, "n": 6.71,
    "i": 6.24, "d": 5.86, "l": 4.96, "t": 4.63, "c": 4.13, "u": 3.92,
    "m": 3.15, "p": 2.51, "b": 2.21, "g": 1.76, "v": 1.13, "y": 1.00,
    "q": 0.87, "ó": 0.82, "í": 0.72, "h": 0.70, "f": 0.69, "z": 0.51,
    "á": 0.50, "j": 0.44, "é": 0.43, "ñ": 0.31, "x": 0.21, "ú": 0.16,
    "w": 0.01, "ü": 0.01, "k": 0.0,
}

_RUSSIAN = {
    "о": 11.07, "е": 8.50, "а": 7.50, "и": 7.09, "н": 6.70, "т": 5.97,
    "с": 4.97, "л": 4.96, "в": 4.33, "р": 4.33, "к": 3.30, "м": 3.10,
    "д": 3.09, "п": 2.47, "ы": 2.36, "у": 2.22, "б": 2.01, "я": 1.96,
    "ь": 1.84, "г": 1.72, "з": 1.48, "ч": 1.40, "й": 1.21, "ж": 1.01,
    "х": 0.95, "ш": 0.72, "ю": 0.47, "ц": 0.39, "э": 0.36, "щ": 0.30,
    "ф": 0.21, "ё": 0.20, "ъ": 0.02,
}

LETTER_FREQUENCIES: Mapping[LanguageCode, Mapping[str, float]] = MappingProxyType(
    {
        "en": MappingProxyType(_ENGLISH),
        "de": MappingProxyType(_GERMAN),
        "es": MappingProxyType(_SPANISH),
        "ru": MappingProxyType(_RUSSIAN),
    }
)

# ---------------------------------------------------------------------------
# Accent handling.

ACUTE_MARKS = "\u0301\u0341"
UMLAUT_MARK = "\u0308"

# (base letter, combining marks, precomposed replacement)
DIACRITIC_RULES: Tuple[Tuple[str, str, str], ...] = (
    ("a", ACUTE_MARKS, "á"),
    ("a", UMLAUT_MARK, "ä"),
    ("o", ACUTE_MARKS, "ó"),
    ("o", UMLAUT_MARK, "ö"),
    ("u", ACUTE_MARKS, "ú"),
    ("u", UMLAUT_MARK, "ü"),
    ("i", ACUTE_MARKS, "í"),
    ("e", ACUTE_MARKS, "é"),
)

# Lowercase Latin-1 letters carrying a diacritic (plus ß).
LATIN1_ACCENTED = "ßàáâãäåæçèéêëìíîïðñòóôõöøùúûüýþÿ"


def letters_of(language: LanguageCode) -> Tuple[str, ...]:
    """Return the letters of ``language`` ordered by descending frequency."""
    try:
        return tuple(LETTER_FREQUENCIES[language])
    except KeyError as exc:
        raise ValueError(f"Unsupported language '{language}'. Available: {list(SUPPORTED_LANGUAGES)}") from exc


__all__ = [
    "ACUTE_MARKS",
    "DEFAULT_LANGUAGE",
    "DIACRITIC_RULES",
    "LATIN1_ACCENTED",
    "LETTER_FREQUENCIES",
    "LanguageCode",
    "LanguageLabel",
    "SUPPORTED_LANGUAGES",
    "UMLAUT_MARK",
    "letters_of",
]
