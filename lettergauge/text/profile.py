"""Letter-frequency signatures of normalized text."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from ..reference import LanguageCode, letters_of

# Pads reference signatures; never a letter, so it never matches input.
PLACEHOLDER = "0"


class EmptySignal(ValueError):
    """Raised when normalized input contains no letters at all."""


@dataclass(frozen=True)
class FrequencySignature:
    """Distinct letters ordered by descending frequency, with their frequencies."""

    letters: Tuple[str, ...]
    frequencies: Mapping[str, float]
    total: int

    def __len__(self) -> int:
        return len(self.letters)

    def __contains__(self, letter: object) -> bool:
        return letter in self.frequencies

    def as_string(self) -> str:
        return "".join(self.letters)


def build_signature(letters: str) -> FrequencySignature:
    """Count ``letters`` and order them by descending count.

    Equal counts keep the order in which the letters first appear, which
    ``Counter.most_common`` guarantees.
    """
    if not letters:
        raise EmptySignal("Normalized input contains no letters.")

    counts = Counter(letters)
    total = len(letters)
    ordered = counts.most_common()
    frequencies = {letter: count / total for letter, count in ordered}
    return FrequencySignature(
        letters=tuple(letter for letter, _ in ordered),
        frequencies=MappingProxyType(frequencies),
        total=total,
    )


def reference_signature(language: LanguageCode, signature: FrequencySignature) -> Tuple[str, ...]:
    """Return the language's letters restricted to the input alphabet.

    The result is padded with :data:`PLACEHOLDER` (or truncated) to the length
    of ``signature``.

    Raises:
        ValueError: if ``language`` is not supported.
    """
    size = len(signature)
    matched = [letter for letter in letters_of(language) if letter in signature]
    if len(matched) < size:
        matched.extend(PLACEHOLDER * (size - len(matched)))
    return tuple(matched[:size])
