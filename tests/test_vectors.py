"""Tests for prediction/outcome vector validation and label encoding."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from campaign_profit import InvalidInputError
from campaign_profit.vectors import (
    as_actual_vector,
    as_prediction_vector,
    check_aligned,
    encode_binary_labels,
)


def test_prediction_vector_is_read_only_copy() -> None:
    source = np.array([0.2, 0.8])
    preds = as_prediction_vector(source)
    source[0] = 0.9
    assert preds[0] == 0.2
    with pytest.raises(ValueError):
        preds[0] = 0.5


@pytest.mark.parametrize(
    "values",
    [[], [0.5, 1.2], [-0.1], [0.3, np.nan], [[0.1, 0.2]], ["high"]],
)
def test_prediction_vector_rejects_bad_input(values) -> None:
    with pytest.raises(InvalidInputError):
        as_prediction_vector(values)


def test_actual_vector_accepts_bool_and_float_labels() -> None:
    assert as_actual_vector([True, False]).tolist() == [1, 0]
    assert as_actual_vector(pd.Series([1.0, 0.0, 1.0])).tolist() == [1, 0, 1]
    assert as_actual_vector([1, 0]).dtype == np.int8


@pytest.mark.parametrize("values", [[], [0, 2], [1, -1], [0.5], ["Yes", "No"], [1.0, np.nan]])
def test_actual_vector_rejects_non_binary(values) -> None:
    with pytest.raises(InvalidInputError):
        as_actual_vector(values)


def test_check_aligned_rejects_length_mismatch() -> None:
    with pytest.raises(InvalidInputError, match="Length mismatch"):
        check_aligned([0.1, 0.2], [1])


def test_encode_binary_labels_explicit_positive() -> None:
    encoded = encode_binary_labels(["No", "Yes", "No"], positive_label="Yes")
    assert encoded.tolist() == [0, 1, 0]


def test_encode_binary_labels_positive_not_first_level() -> None:
    # "Yes" sorts after "No"; encoding must not depend on level order
    encoded = encode_binary_labels(pd.Series(["Yes", "No"]), positive_label="No")
    assert encoded.tolist() == [0, 1]


def test_encode_binary_labels_rejects_extra_levels() -> None:
    with pytest.raises(InvalidInputError):
        encode_binary_labels(["Yes", "No", "Maybe"], positive_label="Yes")
    with pytest.raises(InvalidInputError):
        encode_binary_labels(["Yes", "no"], positive_label="Yes", negative_label="No")


def test_encode_binary_labels_rejects_missing() -> None:
    with pytest.raises(InvalidInputError, match="missing"):
        encode_binary_labels(["Yes", None], positive_label="Yes")


def test_encode_binary_labels_absent_positive_is_all_negative() -> None:
    encoded = encode_binary_labels(["No", "No"], positive_label="Yes")
    assert encoded.tolist() == [0, 0]


def test_encode_binary_labels_reports_absent_positive_label() -> None:
    with pytest.raises(InvalidInputError, match="not present"):
        encode_binary_labels(["1.0", "0.0", "1.0"], positive_label="1")


def test_encode_binary_labels_numeric_levels() -> None:
    encoded = encode_binary_labels(pd.Series([1.0, 0.0, 1.0]), positive_label=1.0)
    assert encoded.tolist() == [1, 0, 1]


def test_actual_vector_accepts_object_dtype_numbers() -> None:
    assert as_actual_vector(pd.Series([1, 0, 1], dtype=object)).tolist() == [1, 0, 1]


@pytest.mark.parametrize(
    "values",
    [pd.Series(["1", "0"], dtype=object), pd.Series([1, None], dtype=object)],
)
def test_actual_vector_rejects_object_non_numeric(values) -> None:
    with pytest.raises(InvalidInputError):
        as_actual_vector(values)


def test_prediction_vector_rejects_numeric_strings() -> None:
    with pytest.raises(InvalidInputError, match="numeric"):
        as_prediction_vector(["0.5", "0.2"])
    with pytest.raises(InvalidInputError, match="numeric"):
        as_prediction_vector(pd.Series([0.5, 0.2], dtype=object))
