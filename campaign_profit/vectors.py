"""
Vector Validation Module

Boundary checks for the prediction and outcome vectors consumed by the
optimizer. Everything downstream works on the read-only arrays returned here.
"""

import logging
from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .errors import InvalidInputError

logger = logging.getLogger(__name__)

ArrayLike = Union[Sequence[Any], np.ndarray, pd.Series]


def _freeze(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def as_prediction_vector(values: ArrayLike) -> np.ndarray:
    """
    Convert predicted probabilities into a validated, read-only vector.

    Args:
        values: Scores produced by a classifier, one per instance

    Returns:
        1-D float64 array with every element in [0, 1]
    """
    try:
        raw = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Predictions must be numeric: {e}") from e
    # numeric strings are not parsed
    if raw.dtype.kind not in "biuf":
        raise InvalidInputError(f"Predictions must be numeric, got dtype {raw.dtype}")
    arr = np.array(raw, dtype=np.float64)

    if arr.ndim != 1:
        raise InvalidInputError(f"Predictions must be one-dimensional, got shape {arr.shape}")
    if arr.size == 0:
        raise InvalidInputError("Predictions must contain at least one instance")
    if not np.isfinite(arr).all():
        raise InvalidInputError("Predictions contain NaN or infinite values")
    if (arr < 0.0).any() or (arr > 1.0).any():
        raise InvalidInputError(
            f"Predictions must lie in [0, 1], got range [{arr.min():.4f}, {arr.max():.4f}]"
        )
    return _freeze(arr)


def as_actual_vector(values: ArrayLike) -> np.ndarray:
    """
    Convert ground-truth outcomes into a validated, read-only 0/1 vector.

    Args:
        values: Binary labels, one per instance (booleans accepted)

    Returns:
        1-D int8 array containing only 0 and 1
    """
    arr = np.asarray(values)

    if arr.ndim != 1:
        raise InvalidInputError(f"Actuals must be one-dimensional, got shape {arr.shape}")
    if arr.size == 0:
        raise InvalidInputError("Actuals must contain at least one instance")
    if arr.dtype.kind == "O" and not any(isinstance(v, (str, bytes)) for v in arr):
        try:
            arr = np.asarray(pd.to_numeric(arr))
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Actuals must be numeric 0/1 labels: {e}") from e
    if arr.dtype == bool:
        arr = arr.astype(np.int8)
    if arr.dtype.kind not in "iuf":
        raise InvalidInputError(
            f"Actuals must be numeric 0/1 labels, got dtype {arr.dtype}; "
            "use encode_binary_labels for categorical outcomes"
        )

    valid = np.isin(arr, (0, 1))
    if not valid.all():
        bad = np.unique(arr[~valid])[:5].tolist()
        raise InvalidInputError(f"Actuals must be exactly 0 or 1, found {bad}")
    return _freeze(arr.astype(np.int8))


def check_aligned(predictions: ArrayLike, actuals: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """Validate both vectors and require matching lengths."""
    preds = as_prediction_vector(predictions)
    y_true = as_actual_vector(actuals)
    if preds.shape[0] != y_true.shape[0]:
        raise InvalidInputError(
            f"Length mismatch: {preds.shape[0]} predictions vs {y_true.shape[0]} actuals"
        )
    return preds, y_true


def encode_binary_labels(values: ArrayLike, positive_label: Any,
                         negative_label: Optional[Any] = None) -> np.ndarray:
    """
    Encode a two-level outcome column as an explicit 0/1 vector.

    The positive level is always named by the caller instead of being
    inferred from category order.

    Args:
        values: Raw outcome values (e.g. 'Yes'/'No')
        positive_label: Value that maps to 1
        negative_label: Value that maps to 0; when omitted, any single
            remaining level is treated as negative

    Returns:
        Read-only int8 vector of 0/1 labels
    """
    series = pd.Series(values)
    if series.isna().any():
        raise InvalidInputError(f"Outcome column has {int(series.isna().sum())} missing values")

    levels = list(series.unique())
    others = [level for level in levels if level != positive_label]

    if negative_label is not None:
        unexpected = [level for level in others if level != negative_label]
        if unexpected:
            raise InvalidInputError(
                f"Unexpected outcome levels {unexpected[:5]}; "
                f"expected {positive_label!r} or {negative_label!r}"
            )
    elif len(others) > 1:
        if len(levels) == 2 and len(others) == 2:
            raise InvalidInputError(
                f"Positive label {positive_label!r} not present in outcome levels {levels}"
            )
        raise InvalidInputError(
            f"Outcome has more than two levels {levels[:5]}; "
            f"cannot encode with positive label {positive_label!r}"
        )

    if len(others) == len(levels):
        logger.warning(f"Positive label {positive_label!r} not present; all outcomes encoded as 0")

    return as_actual_vector((series == positive_label).astype(np.int8).to_numpy())
