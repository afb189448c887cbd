"""Language metrics comparing an input signature against the reference tables."""

from __future__ import annotations

from typing import Callable, Dict

from .context import MetricContext
from .distance import damerau_metric, levenshtein_metric
from .edit_distance import (
    STRATEGIES,
    DamerauLevenshteinStrategy,
    EditCosts,
    MatrixDamerauLevenshtein,
    PureDamerauLevenshtein,
    StrategyKey,
    get_strategy,
    levenshtein,
)
from .peculiar import count_peculiars, peculiars_metric
from .positional import positional_distance, positional_metric, positional_supplemental_metric
from .ranking import rank_languages
from .records import METRIC_NAMES, MetricName, MetricResult, MetricResults
from .similarity import similar_text, similarity_metric

MetricFn = Callable[[MetricContext], MetricResult]

METRICS: Dict[MetricName, MetricFn] = {
    "peculiars": peculiars_metric,
    "levenshtein": levenshtein_metric,
    "damerau": damerau_metric,
    "positional": positional_metric,
    "positional_supplemental": positional_supplemental_metric,
    "similarity": similarity_metric,
}


def get_metric(name: MetricName) -> MetricFn:
    """Return the metric function registered under ``name``."""
    try:
        return METRICS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown metric '{name}'. Available: {list(METRICS)}") from exc


__all__ = [
    "METRICS",
    "METRIC_NAMES",
    "STRATEGIES",
    "DamerauLevenshteinStrategy",
    "EditCosts",
    "MatrixDamerauLevenshtein",
    "MetricContext",
    "MetricFn",
    "MetricName",
    "MetricResult",
    "MetricResults",
    "PureDamerauLevenshtein",
    "StrategyKey",
    "count_peculiars",
    "damerau_metric",
    "get_metric",
    "get_strategy",
    "levenshtein",
    "levenshtein_metric",
    "peculiars_metric",
    "positional_distance",
    "positional_metric",
    "positional_supplemental_metric",
    "rank_languages",
    "similar_text",
    "similarity_metric",
]
