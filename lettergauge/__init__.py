"""Letter-frequency language identification for English, German, Spanish and Russian."""

from .metrics import EditCosts, MetricResult, MetricResults
from .reference import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, LanguageCode, LanguageLabel
from .session import ClassificationReport, ClassificationSession, ClassifierConfig, classify, classify_detailed
from .text import ByteSpaceExhausted, EmptySignal
from .voting import MajorityPolicy, WeightedFirstPolicy

__all__ = [
    "ByteSpaceExhausted",
    "ClassificationReport",
    "ClassificationSession",
    "ClassifierConfig",
    "DEFAULT_LANGUAGE",
    "EditCosts",
    "EmptySignal",
    "LanguageCode",
    "LanguageLabel",
    "MajorityPolicy",
    "MetricResult",
    "MetricResults",
    "SUPPORTED_LANGUAGES",
    "WeightedFirstPolicy",
    "classify",
    "classify_detailed",
]
