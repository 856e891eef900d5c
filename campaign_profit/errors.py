"""Exception types raised by the profit threshold optimizer."""


class ProfitThresholdError(Exception):
    """Base class for all optimizer errors."""


class InvalidInputError(ProfitThresholdError, ValueError):
    """Inputs violate a precondition (lengths, labels, ranges, costs)."""


class EmptyCandidateSetError(ProfitThresholdError, ValueError):
    """No candidate thresholds were supplied to the search."""


class InternalConsistencyError(ProfitThresholdError, RuntimeError):
    """An internal invariant failed; indicates a defect, never recovered."""
