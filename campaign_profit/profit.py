"""
Profit Module

Business cost model and the profit a contact policy earns at a given
probability threshold.
"""

import logging
import math
from dataclasses import dataclass
from numbers import Real

import numpy as np

from .errors import InvalidInputError
from .vectors import ArrayLike, as_prediction_vector, check_aligned

logger = logging.getLogger(__name__)


def _check_cost(name: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value) or value < 0:
        raise InvalidInputError(f"{name} must be finite and non-negative, got {value}")
    return value


def validate_threshold(threshold: float) -> float:
    """Return ``threshold`` as a float, rejecting values outside [0, 1]."""
    if isinstance(threshold, bool) or not isinstance(threshold, Real):
        raise InvalidInputError(f"Threshold must be a real number, got {threshold!r}")
    threshold = float(threshold)
    if not 0.0 <= threshold <= 1.0:
        raise InvalidInputError(f"Threshold must lie in [0, 1], got {threshold}")
    return threshold


@dataclass(frozen=True)
class CostModel:
    """Per-instance economics of a marketing contact."""

    cost_per_contact: float
    revenue_per_response: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "cost_per_contact",
                           _check_cost("cost_per_contact", self.cost_per_contact))
        object.__setattr__(self, "revenue_per_response",
                           _check_cost("revenue_per_response", self.revenue_per_response))

    @property
    def break_even_precision(self) -> float:
        """Response rate among contacts at which profit is exactly zero."""
        if self.revenue_per_response == 0:
            return math.inf
        return self.cost_per_contact / self.revenue_per_response

    def profit(self, predictions: ArrayLike, actuals: ArrayLike, threshold: float) -> float:
        return profit(predictions, actuals, threshold,
                      self.cost_per_contact, self.revenue_per_response)


def contact_mask(predictions: np.ndarray, threshold: float) -> np.ndarray:
    """Instances scoring at or above the threshold are contacted."""
    return predictions >= threshold


def contact_count(predictions: ArrayLike, threshold: float) -> int:
    """Number of instances contacted at ``threshold``."""
    preds = as_prediction_vector(predictions)
    return int(contact_mask(preds, validate_threshold(threshold)).sum())


def _profit_at(preds: np.ndarray, y_true: np.ndarray, threshold: float,
               cost_model: CostModel) -> float:
    # Inputs already validated by the caller.
    contacted = contact_mask(preds, threshold)
    n_contacted = int(contacted.sum())
    n_responders = int(y_true[contacted].sum())
    return float(n_responders * cost_model.revenue_per_response
                 - n_contacted * cost_model.cost_per_contact)


def profit(predictions: ArrayLike, actuals: ArrayLike, threshold: float,
           cost_per_contact: float, revenue_per_response: float) -> float:
    """
    Profit of contacting every instance scoring at or above ``threshold``.

    Every contact costs ``cost_per_contact``; only contacted instances that
    actually respond earn ``revenue_per_response``. Instances not contacted
    contribute nothing.

    Args:
        predictions: Predicted response probabilities in [0, 1]
        actuals: Observed 0/1 responses, same order as predictions
        threshold: Minimum score that triggers a contact, in [0, 1]
        cost_per_contact: Cost charged for each contact
        revenue_per_response: Revenue credited for each responding contact

    Returns:
        Total profit as a float
    """
    preds, y_true = check_aligned(predictions, actuals)
    cost_model = CostModel(cost_per_contact, revenue_per_response)
    return _profit_at(preds, y_true, validate_threshold(threshold), cost_model)
