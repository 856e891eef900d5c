"""
Model Comparison Module

Runs the profit threshold search and confusion-matrix evaluation for several
response models against the same outcomes, candidate grid and cost model.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

import numpy as np
import pandas as pd
from joblib import Parallel, delayed

from .errors import InvalidInputError
from .evaluation import evaluate
from .profit import CostModel
from .threshold_search import OptimalOperatingPoint, search, validate_candidates
from .vectors import ArrayLike, as_actual_vector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelFailure:
    """Why a model produced no operating point."""

    model_name: str
    error_type: str
    message: str


ComparisonResult = Union[OptimalOperatingPoint, ModelFailure]


def _evaluate_model(model_name: str, predictions: ArrayLike, actuals: np.ndarray,
                    candidates: Tuple[float, ...], cost_model: CostModel,
                    raise_on_error: bool) -> ComparisonResult:
    try:
        point = search(predictions, actuals, candidates, cost_model)
        matrix = evaluate(predictions, actuals, point.threshold)
    except InvalidInputError as e:
        if raise_on_error:
            raise
        logger.error(f"Model '{model_name}' failed: {e}")
        return ModelFailure(model_name, type(e).__name__, str(e))
    return point.with_confusion_matrix(matrix)


class ModelComparator:
    """Compare profit-optimal operating points across response models."""

    def __init__(self, n_jobs: int = 1, raise_on_error: bool = False):
        """
        Initialize ModelComparator.

        Args:
            n_jobs: Number of models evaluated in parallel (joblib semantics)
            raise_on_error: Re-raise a model's input error instead of
                recording it as a ModelFailure
        """
        self.n_jobs = n_jobs
        self.raise_on_error = raise_on_error

    def compare(self, models: Mapping[str, ArrayLike], actuals: ArrayLike,
                candidates: Iterable[float],
                cost_model: CostModel) -> Dict[str, ComparisonResult]:
        """
        Find each model's optimal operating point.

        Args:
            models: Model name -> predicted probabilities
            actuals: Observed 0/1 responses shared by all models
            candidates: Threshold grid shared by all models
            cost_model: Contact cost and response revenue

        Returns:
            Model name -> OptimalOperatingPoint or ModelFailure, in input order
        """
        thresholds = validate_candidates(candidates)
        y_true = as_actual_vector(actuals)
        if not isinstance(cost_model, CostModel):
            raise InvalidInputError(f"cost_model must be a CostModel, got {type(cost_model).__name__}")

        names = list(models)
        if not names:
            logger.warning("No models supplied for comparison")
            return {}

        logger.info(f"Comparing {len(names)} models over {len(thresholds)} thresholds")
        outcomes = Parallel(n_jobs=self.n_jobs, prefer="threads")(
            delayed(_evaluate_model)(name, models[name], y_true, thresholds,
                                     cost_model, self.raise_on_error)
            for name in names
        )
        return dict(zip(names, outcomes))


def best_model(results: Mapping[str, ComparisonResult]) -> Optional[str]:
    """Name of the most profitable successful model, first on ties."""
    best_name, best_profit = None, None
    for name, result in results.items():
        if isinstance(result, ModelFailure):
            continue
        if best_profit is None or result.profit > best_profit:
            best_name, best_profit = name, result.profit
    return best_name


def summary_frame(results: Mapping[str, ComparisonResult]) -> pd.DataFrame:
    """One row per model with its operating point or failure reason."""
    rows = []
    for name, result in results.items():
        if isinstance(result, ModelFailure):
            rows.append({'model': name, 'status': 'failed',
                         'error': f"{result.error_type}: {result.message}"})
            continue
        row = {'model': name, 'status': 'ok', **result.to_dict()}
        if result.confusion_matrix is not None:
            row['precision'] = result.confusion_matrix.precision
            row['recall'] = result.confusion_matrix.recall
        rows.append(row)

    columns = ['model', 'status', 'threshold', 'profit',
               'true_positives', 'false_positives', 'true_negatives', 'false_negatives',
               'precision', 'recall', 'error']
    return pd.DataFrame(rows, columns=columns).set_index('model')


def profit_curve_frame(results: Mapping[str, ComparisonResult]) -> pd.DataFrame:
    """Profit curves of successful models, indexed by threshold."""
    curves = {
        name: result.profit_curve.to_series()
        for name, result in results.items()
        if not isinstance(result, ModelFailure)
    }
    if not curves:
        return pd.DataFrame(index=pd.Index([], name='threshold'))
    frame = pd.concat(curves, axis=1)
    frame.index.name = 'threshold'
    return frame
