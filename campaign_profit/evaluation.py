"""
Evaluation Module

Confusion matrix and classification metrics for a campaign response model
operated at a fixed probability threshold.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Dict

import numpy as np
from sklearn.metrics import (
    accuracy_score, precision_score, recall_score, f1_score,
    confusion_matrix, roc_auc_score, average_precision_score,
    matthews_corrcoef, balanced_accuracy_score
)

from .errors import InternalConsistencyError, InvalidInputError
from .profit import contact_mask, validate_threshold
from .vectors import ArrayLike, check_aligned

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfusionMatrix:
    """Counts of predicted vs actual outcomes at one threshold."""

    true_positives: int
    false_positives: int
    true_negatives: int
    false_negatives: int

    def __post_init__(self) -> None:
        for name, value in asdict(self).items():
            if value < 0:
                raise InvalidInputError(f"{name} must be non-negative, got {value}")

    @property
    def total(self) -> int:
        return (self.true_positives + self.false_positives
                + self.true_negatives + self.false_negatives)

    @property
    def contacted(self) -> int:
        return self.true_positives + self.false_positives

    @property
    def precision(self) -> float:
        return self.true_positives / self.contacted if self.contacted > 0 else 0.0

    @property
    def recall(self) -> float:
        positives = self.true_positives + self.false_negatives
        return self.true_positives / positives if positives > 0 else 0.0

    sensitivity = recall

    @property
    def specificity(self) -> float:
        negatives = self.true_negatives + self.false_positives
        return self.true_negatives / negatives if negatives > 0 else 0.0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def _binarize(predictions: ArrayLike, actuals: ArrayLike, threshold: float):
    preds, y_true = check_aligned(predictions, actuals)
    y_pred = contact_mask(preds, validate_threshold(threshold)).astype(np.int8)
    return preds, y_true, y_pred


def evaluate(predictions: ArrayLike, actuals: ArrayLike, threshold: float) -> ConfusionMatrix:
    """
    Cross-tabulate contact decisions at ``threshold`` against actual outcomes.

    Args:
        predictions: Predicted response probabilities in [0, 1]
        actuals: Observed 0/1 responses
        threshold: Scores at or above this value are predicted positive

    Returns:
        ConfusionMatrix whose counts sum to the number of instances
    """
    _, y_true, y_pred = _binarize(predictions, actuals, threshold)

    # labels=[0, 1] keeps the 2x2 shape when a class is absent
    tn, fp, fn, tp = confusion_matrix(y_true, y_pred, labels=[0, 1]).ravel()
    matrix = ConfusionMatrix(int(tp), int(fp), int(tn), int(fn))

    if matrix.total != y_true.shape[0]:
        raise InternalConsistencyError(
            f"Confusion matrix counts sum to {matrix.total}, expected {y_true.shape[0]}"
        )
    return matrix


def calculate_metrics(predictions: ArrayLike, actuals: ArrayLike,
                      threshold: float) -> Dict[str, float]:
    """
    Classification metrics of the contact policy at ``threshold``.

    Args:
        predictions: Predicted response probabilities in [0, 1]
        actuals: Observed 0/1 responses
        threshold: Scores at or above this value are predicted positive

    Returns:
        Dictionary of evaluation metrics
    """
    preds, y_true, y_pred = _binarize(predictions, actuals, threshold)
    metrics = {}

    metrics['accuracy'] = accuracy_score(y_true, y_pred)
    metrics['precision'] = precision_score(y_true, y_pred, zero_division=0)
    metrics['recall'] = recall_score(y_true, y_pred, zero_division=0)
    metrics['specificity'] = recall_score(y_true, y_pred, pos_label=0, zero_division=0)
    metrics['f1_score'] = f1_score(y_true, y_pred, zero_division=0)
    metrics['balanced_accuracy'] = balanced_accuracy_score(y_true, y_pred)
    metrics['mcc'] = matthews_corrcoef(y_true, y_pred)

    # Ranking metrics are undefined with a single observed class
    if len(np.unique(y_true)) == 2:
        metrics['auc_roc'] = roc_auc_score(y_true, preds)
        metrics['auc_pr'] = average_precision_score(y_true, preds)
    else:
        logger.warning("Only one outcome class present; skipping AUC metrics")

    return {name: float(value) for name, value in metrics.items()}
