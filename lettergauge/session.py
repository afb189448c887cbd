"""Per-call classification session and the public entry points."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .metrics import (
    METRIC_NAMES,
    STRATEGIES,
    EditCosts,
    MetricContext,
    MetricName,
    MetricResult,
    MetricResults,
    StrategyKey,
    get_metric,
    get_strategy,
)
from .reference import DEFAULT_LANGUAGE, LanguageLabel
from .text import ByteSpaceExhausted, EmptySignal, FrequencySignature, build_signature, normalize
from .voting import Tally, VotePolicy, WeightedFirstPolicy, tally_votes

logger = logging.getLogger(__name__)


@dataclass
class ClassifierConfig:
    """Configuration for `classify` and `ClassificationSession`."""

    policy: VotePolicy = field(default_factory=WeightedFirstPolicy)
    damerau_strategy: StrategyKey = "matrix"
    edit_costs: EditCosts = field(default_factory=EditCosts)
    compact_bytes: bool = True

    def validate(self) -> None:
        if self.damerau_strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown Damerau-Levenshtein strategy '{self.damerau_strategy}'. Available: {list(STRATEGIES)}"
            )
        self.edit_costs.validate()


@dataclass(frozen=True)
class ClassificationReport:
    """Diagnostic view of one classification."""

    language: LanguageLabel
    confidence: float
    signature: str
    frequencies: Mapping[str, float]
    metrics: MetricResults
    tally: Tally

    @property
    def decided(self) -> bool:
        return self.language != DEFAULT_LANGUAGE


class ClassificationSession:
    """Owns the input of one classification and memoizes metric results.

    Metrics are computed on demand; `evaluate` runs all of them once and hands
    the results to the configured vote policy.
    """

    def __init__(self, text: str, config: Optional[ClassifierConfig] = None) -> None:
        self.config = config or ClassifierConfig()
        self.config.validate()
        self.text = text
        self.cleaned = normalize(text)
        self._results: Dict[MetricName, Optional[MetricResult]] = {}
        self.signature: Optional[FrequencySignature]
        try:
            self.signature = build_signature(self.cleaned)
        except EmptySignal:
            logger.debug("No letters left after normalization; every metric is undecided.")
            self.signature = None
        self._context: Optional[MetricContext] = None
        if self.signature is not None:
            self._context = MetricContext(
                text=text,
                signature=self.signature,
                compact_bytes=self.config.compact_bytes,
                damerau=get_strategy(self.config.damerau_strategy),
                edit_costs=self.config.edit_costs,
            )

    def metric(self, name: MetricName) -> Optional[MetricResult]:
        """Result of metric ``name``, or ``None`` if it had to be skipped."""
        if name in self._results:
            return self._results[name]

        metric_fn = get_metric(name)
        result: Optional[MetricResult]
        if self._context is None:
            result = MetricResult.undecided()
        else:
            try:
                result = metric_fn(self._context)
            except ByteSpaceExhausted as exc:
                logger.warning("Skipping metric '%s': %s", name, exc)
                result = None
            else:
                logger.debug("Metric '%s' suggests %s (confidence %.3f)", name, result.language, result.confidence)
        self._results[name] = result
        return result

    def results(self) -> MetricResults:
        """Run every metric (memoized) and collect them in one record."""
        computed = {name: self.metric(name) for name in METRIC_NAMES}
        return MetricResults(**computed)

    def evaluate(self) -> ClassificationReport:
        results = self.results()
        verdict = self.config.policy.decide(results)
        logger.debug("Final suggestion %s (confidence %.3f)", verdict.language, verdict.confidence)

        signature = self.signature
        return ClassificationReport(
            language=verdict.language,
            confidence=verdict.confidence,
            signature=signature.as_string() if signature is not None else "",
            frequencies=signature.frequencies if signature is not None else MappingProxyType({}),
            metrics=results,
            tally=tally_votes(results.votes()),
        )


def classify_detailed(text: str, config: Optional[ClassifierConfig] = None) -> ClassificationReport:
    """Classify ``text`` and expose every intermediate measure."""
    return ClassificationSession(text, config).evaluate()


def classify(text: str, config: Optional[ClassifierConfig] = None) -> LanguageLabel:
    """Return the language code of ``text``, or ``"default"`` when undecided."""
    return classify_detailed(text, config).language
