"""
Threshold Search Module

Sweeps a grid of candidate thresholds through the profit function and picks
the operating point with the highest profit.
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np
import pandas as pd

from .errors import EmptyCandidateSetError, InvalidInputError
from .evaluation import ConfusionMatrix
from .profit import CostModel, _profit_at, validate_threshold
from .vectors import ArrayLike, check_aligned

logger = logging.getLogger(__name__)


def linear_candidates(start: float = 0.01, stop: float = 0.99,
                      num: int = 99) -> Tuple[float, ...]:
    """
    Evenly spaced, strictly increasing threshold grid.

    Args:
        start: First threshold
        stop: Last threshold (inclusive)
        num: Number of thresholds

    Returns:
        Tuple of thresholds rounded to 10 decimals
    """
    start = validate_threshold(start)
    stop = validate_threshold(stop)
    if isinstance(num, bool) or not isinstance(num, (int, np.integer)) or num < 1:
        raise InvalidInputError(f"num must be a positive integer, got {num!r}")
    if num == 1:
        return (start,)
    if start >= stop:
        raise InvalidInputError(f"start must be below stop, got start={start}, stop={stop}")
    grid = np.round(np.linspace(start, stop, int(num)), 10)
    return tuple(float(t) for t in grid)


def validate_candidates(candidates: Iterable[float]) -> Tuple[float, ...]:
    """Check a candidate set while keeping the caller's order."""
    values = tuple(candidates)
    if not values:
        raise EmptyCandidateSetError("At least one candidate threshold is required")
    checked = tuple(validate_threshold(t) for t in values)
    if len(set(checked)) != len(checked):
        raise InvalidInputError("Candidate thresholds must be unique")
    return checked


@dataclass(frozen=True)
class ProfitCurve:
    """Profit at each candidate threshold, in candidate order."""

    thresholds: Tuple[float, ...]
    profits: Tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.thresholds) != len(self.profits):
            raise InvalidInputError("ProfitCurve needs one profit per threshold")

    def __len__(self) -> int:
        return len(self.thresholds)

    def __iter__(self) -> Iterator[float]:
        return iter(self.thresholds)

    def __getitem__(self, threshold: float) -> float:
        try:
            return self.profits[self.thresholds.index(threshold)]
        except ValueError:
            raise KeyError(threshold) from None

    def items(self) -> Iterator[Tuple[float, float]]:
        return zip(self.thresholds, self.profits)

    def to_series(self) -> pd.Series:
        index = pd.Index(self.thresholds, name="threshold")
        return pd.Series(self.profits, index=index, name="profit", dtype=float)


@dataclass(frozen=True)
class OptimalOperatingPoint:
    """Profit-maximising threshold for one model."""

    threshold: float
    profit: float
    profit_curve: ProfitCurve
    confusion_matrix: Optional[ConfusionMatrix] = None

    def with_confusion_matrix(self, matrix: ConfusionMatrix) -> "OptimalOperatingPoint":
        return replace(self, confusion_matrix=matrix)

    def to_dict(self) -> dict:
        out = {"threshold": self.threshold, "profit": self.profit}
        if self.confusion_matrix is not None:
            out.update(self.confusion_matrix.to_dict())
        return out


def search(predictions: ArrayLike, actuals: ArrayLike, candidates: Iterable[float],
           cost_model: CostModel) -> OptimalOperatingPoint:
    """
    Find the candidate threshold with the highest profit.

    Ties go to the first maximal candidate in the order given, so the result
    depends only on candidate order.

    Args:
        predictions: Predicted response probabilities in [0, 1]
        actuals: Observed 0/1 responses
        candidates: Thresholds to evaluate, in search order
        cost_model: Contact cost and response revenue

    Returns:
        OptimalOperatingPoint without a confusion matrix
    """
    thresholds = validate_candidates(candidates)
    if not isinstance(cost_model, CostModel):
        raise InvalidInputError(f"cost_model must be a CostModel, got {type(cost_model).__name__}")
    preds, y_true = check_aligned(predictions, actuals)

    profits = np.array([_profit_at(preds, y_true, t, cost_model) for t in thresholds])
    logger.debug(f"Evaluated profit at {len(thresholds)} thresholds over {preds.shape[0]} instances")

    # np.argmax returns the first index on ties
    best_idx = int(np.argmax(profits))
    curve = ProfitCurve(thresholds, tuple(float(p) for p in profits))
    point = OptimalOperatingPoint(thresholds[best_idx], float(profits[best_idx]), curve)
    logger.info(f"Optimal threshold {point.threshold:.4f} with profit {point.profit:.2f}")
    return point
