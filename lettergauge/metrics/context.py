"""Inputs shared by every metric of one classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

from ..reference import LanguageCode
from ..text import FrequencySignature, compact_pair, reference_signature
from .edit_distance import DamerauLevenshteinStrategy, EditCosts, MatrixDamerauLevenshtein

Symbols = Union[bytes, str]


@dataclass(frozen=True)
class MetricContext:
    """Raw text, its signature and the knobs the metrics read."""

    text: str
    signature: FrequencySignature
    compact_bytes: bool = True
    damerau: DamerauLevenshteinStrategy = field(default_factory=MatrixDamerauLevenshtein)
    edit_costs: EditCosts = field(default_factory=EditCosts)

    def reference(self, language: LanguageCode) -> Tuple[str, ...]:
        return reference_signature(language, self.signature)

    def comparison_pair(self, language: LanguageCode) -> Tuple[Symbols, Symbols]:
        """Input and reference signatures ready for byte-oriented algorithms.

        Raises:
            ByteSpaceExhausted: if compaction is enabled and the pair holds
                more distinct non-ASCII letters than private bytes exist.
        """
        left = self.signature.as_string()
        right = "".join(self.reference(language))
        if not self.compact_bytes:
            return left, right
        return compact_pair(left, right)
