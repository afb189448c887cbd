"""Shared result records for the language metrics."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Dict, List, Literal, Mapping, Optional, Tuple

from ..reference import DEFAULT_LANGUAGE, LanguageCode, LanguageLabel

MetricName = Literal[
    "peculiars",
    "levenshtein",
    "damerau",
    "positional",
    "positional_supplemental",
    "similarity",
]
METRIC_NAMES: Tuple[MetricName, ...] = (
    "peculiars",
    "levenshtein",
    "damerau",
    "positional",
    "positional_supplemental",
    "similarity",
)


@dataclass(frozen=True)
class MetricResult:
    """Winning language of one metric with a relative confidence hint."""

    language: LanguageLabel
    confidence: float
    scores: Mapping[LanguageCode, float] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def decided(self) -> bool:
        """True unless the metric ended in a tie."""
        return self.language != DEFAULT_LANGUAGE

    @classmethod
    def undecided(cls, scores: Optional[Mapping[LanguageCode, float]] = None) -> "MetricResult":
        return cls(language=DEFAULT_LANGUAGE, confidence=0.0, scores=MappingProxyType(dict(scores or {})))


@dataclass(frozen=True)
class MetricResults:
    """One slot per metric; ``None`` marks a metric skipped for this input."""

    peculiars: Optional[MetricResult] = None
    levenshtein: Optional[MetricResult] = None
    damerau: Optional[MetricResult] = None
    positional: Optional[MetricResult] = None
    positional_supplemental: Optional[MetricResult] = None
    similarity: Optional[MetricResult] = None

    @property
    def positional_vote(self) -> Optional[MetricResult]:
        """Positional result, replaced by its supplemental variant on a tie."""
        if self.positional is not None and self.positional.decided:
            return self.positional
        return self.positional_supplemental or self.positional

    def votes(self) -> List[LanguageLabel]:
        """Labels cast by the five voting metrics, skipped ones omitted."""
        ballot = (self.peculiars, self.levenshtein, self.damerau, self.positional_vote, self.similarity)
        return [result.language for result in ballot if result is not None]

    def as_dict(self) -> Dict[str, Optional[MetricResult]]:
        return {item.name: getattr(self, item.name) for item in fields(self)}
