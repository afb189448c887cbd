"""Normalization, byte compaction and frequency profiling of input text."""

from .compaction import ByteCompactor, ByteSpaceExhausted, compact_pair
from .normalize import case_fold, normalize, resolve_diacritics, strip_non_letters
from .profile import PLACEHOLDER, EmptySignal, FrequencySignature, build_signature, reference_signature

__all__ = [
    "ByteCompactor",
    "ByteSpaceExhausted",
    "EmptySignal",
    "FrequencySignature",
    "PLACEHOLDER",
    "build_signature",
    "case_fold",
    "compact_pair",
    "normalize",
    "reference_signature",
    "resolve_diacritics",
    "strip_non_letters",
]
