"""Edit distances over byte-compacted (or plain) signatures.

Two interchangeable Damerau-Levenshtein implementations share one protocol:
``MatrixDamerauLevenshtein`` fills the full (n+1)x(m+1) matrix with numpy,
resolving each row's insertion chain with a running minimum, while
``PureDamerauLevenshtein`` keeps three plain-Python rows. Both compute the
optimal string alignment distance (adjacent transpositions, no substring
edited twice) and agree on every input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Literal, Protocol, Union

import numpy as np

Symbols = Union[bytes, str]
StrategyKey = Literal["matrix", "pure"]


@dataclass(frozen=True)
class EditCosts:
    """Per-operation costs; the unit-cost variant is canonical."""

    insertion: float = 1.0
    deletion: float = 1.0
    substitution: float = 1.0
    transposition: float = 1.0

    def validate(self) -> None:
        if min(self.insertion, self.deletion, self.substitution, self.transposition) <= 0:
            raise ValueError("Edit costs must be strictly positive.")


UNIT_COSTS = EditCosts()


def levenshtein(left: Symbols, right: Symbols) -> int:
    """Unit-cost Levenshtein distance (insert, delete, substitute)."""
    if not left:
        return len(right)
    if not right:
        return len(left)

    previous = list(range(len(right) + 1))
    for i, left_symbol in enumerate(left, start=1):
        current = [i]
        for j, right_symbol in enumerate(right, start=1):
            substitution = previous[j - 1] + (left_symbol != right_symbol)
            current.append(min(previous[j] + 1, current[j - 1] + 1, substitution))
        previous = current
    return previous[-1]


class DamerauLevenshteinStrategy(Protocol):
    """Computes the Damerau-Levenshtein distance between two symbol sequences."""

    def distance(self, left: Symbols, right: Symbols, costs: EditCosts = UNIT_COSTS) -> float:
        """Return the edit distance using ``costs``."""
        ...


class MatrixDamerauLevenshtein:
    """numpy implementation keeping the whole DP matrix."""

    def distance(self, left: Symbols, right: Symbols, costs: EditCosts = UNIT_COSTS) -> float:
        if not left:
            return float(len(right) * costs.insertion)
        if not right:
            return float(len(left) * costs.deletion)

        a = _as_codes(left)
        b = _as_codes(right)
        rows, cols = a.size + 1, b.size + 1

        matrix = np.zeros((rows, cols), dtype=float)
        matrix[:, 0] = np.arange(rows) * costs.deletion
        matrix[0, :] = np.arange(cols) * costs.insertion
        offsets = np.arange(cols) * costs.insertion

        for i in range(1, rows):
            substitution = np.where(a[i - 1] != b, costs.substitution, 0.0)
            candidate = np.empty(cols, dtype=float)
            candidate[0] = matrix[i, 0]
            candidate[1:] = np.minimum(matrix[i - 1, 1:] + costs.deletion, matrix[i - 1, :-1] + substitution)
            if i > 1 and cols > 2:
                swapped = (a[i - 1] == b[:-1]) & (a[i - 2] == b[1:])
                transposed = matrix[i - 2, :-2] + costs.transposition
                candidate[2:] = np.where(swapped, np.minimum(candidate[2:], transposed), candidate[2:])
            # d[i, j] = min(candidate[j], d[i, j - 1] + insertion), unrolled.
            matrix[i] = np.minimum.accumulate(candidate - offsets) + offsets

        return float(matrix[-1, -1])


class PureDamerauLevenshtein:
    """Plain Python implementation with three rolling rows."""

    def distance(self, left: Symbols, right: Symbols, costs: EditCosts = UNIT_COSTS) -> float:
        if not left:
            return float(len(right) * costs.insertion)
        if not right:
            return float(len(left) * costs.deletion)

        before_previous: List[float] = []
        previous = [j * costs.insertion for j in range(len(right) + 1)]
        for i in range(1, len(left) + 1):
            current = [i * costs.deletion]
            for j in range(1, len(right) + 1):
                substitution = 0.0 if left[i - 1] == right[j - 1] else costs.substitution
                value = min(
                    previous[j] + costs.deletion,
                    current[j - 1] + costs.insertion,
                    previous[j - 1] + substitution,
                )
                if i > 1 and j > 1 and left[i - 1] == right[j - 2] and left[i - 2] == right[j - 1]:
                    value = min(value, before_previous[j - 2] + costs.transposition)
                current.append(value)
            before_previous, previous = previous, current
        return float(previous[-1])


STRATEGIES: Dict[StrategyKey, Callable[[], DamerauLevenshteinStrategy]] = {
    "matrix": MatrixDamerauLevenshtein,
    "pure": PureDamerauLevenshtein,
}


def get_strategy(key: StrategyKey) -> DamerauLevenshteinStrategy:
    """Instantiate the Damerau-Levenshtein strategy registered under ``key``."""
    try:
        factory = STRATEGIES[key]
    except KeyError as exc:
        raise ValueError(f"Unknown Damerau-Levenshtein strategy '{key}'. Available: {list(STRATEGIES)}") from exc
    return factory()


def _as_codes(symbols: Symbols) -> np.ndarray:
    if isinstance(symbols, (bytes, bytearray)):
        return np.frombuffer(bytes(symbols), dtype=np.uint8).astype(np.int64)
    return np.fromiter((ord(char) for char in symbols), dtype=np.int64, count=len(symbols))
