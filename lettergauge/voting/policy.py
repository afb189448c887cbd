"""Decision policies turning per-metric verdicts into one suggestion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..metrics.records import MetricResult, MetricResults
from ..reference import DEFAULT_LANGUAGE
from .tally import tally_votes


class VotePolicy(Protocol):
    """Strategy object choosing the final language from all metric results."""

    def decide(self, results: MetricResults) -> MetricResult:
        """Return the final verdict."""
        ...


@dataclass(frozen=True)
class WeightedFirstPolicy:
    """Trust the weighted positional distance, falling back to its supplemental variant."""

    def decide(self, results: MetricResults) -> MetricResult:
        vote = results.positional_vote
        if vote is None:
            return MetricResult.undecided()
        return vote


@dataclass(frozen=True)
class MajorityPolicy:
    """Most voted language; a leading ``default`` yields to the runner-up.

    Confidence is the share of cast votes won by the chosen label.
    """

    def decide(self, results: MetricResults) -> MetricResult:
        votes = results.votes()
        tally = tally_votes(votes)
        if not tally:
            return MetricResult.undecided()

        language, count = tally[0]
        if language == DEFAULT_LANGUAGE and len(tally) > 1:
            language, count = tally[1]
        if language == DEFAULT_LANGUAGE:
            return MetricResult.undecided()
        return MetricResult(language=language, confidence=count / len(votes))
