"""
Campaign Profit Package

Profit-optimal decision thresholds for campaign response models: profit at
a threshold, threshold search, confusion-matrix evaluation and comparison of
several models on the same outcomes.
"""

from .errors import (
    ProfitThresholdError,
    InvalidInputError,
    EmptyCandidateSetError,
    InternalConsistencyError,
)
from .vectors import as_prediction_vector, as_actual_vector, check_aligned, encode_binary_labels
from .profit import CostModel, profit, contact_count
from .evaluation import ConfusionMatrix, evaluate, calculate_metrics
from .threshold_search import (
    ProfitCurve,
    OptimalOperatingPoint,
    linear_candidates,
    search,
)
from .comparison import (
    ModelComparator,
    ModelFailure,
    best_model,
    summary_frame,
    profit_curve_frame,
)
from .config import CampaignConfig

__version__ = "0.1.0"
__all__ = [
    "ProfitThresholdError",
    "InvalidInputError",
    "EmptyCandidateSetError",
    "InternalConsistencyError",
    "as_prediction_vector",
    "as_actual_vector",
    "check_aligned",
    "encode_binary_labels",
    "CostModel",
    "profit",
    "contact_count",
    "ConfusionMatrix",
    "evaluate",
    "calculate_metrics",
    "ProfitCurve",
    "OptimalOperatingPoint",
    "linear_candidates",
    "search",
    "ModelComparator",
    "ModelFailure",
    "best_model",
    "summary_frame",
    "profit_curve_frame",
    "CampaignConfig",
]
