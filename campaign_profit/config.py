"""
Campaign configuration: contact economics and the threshold grid to search.
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from .errors import InvalidInputError
from .profit import CostModel
from .threshold_search import linear_candidates


@dataclass
class CampaignConfig:
    """Configuration for a profit threshold run"""

    # Contact economics
    cost_per_contact: float = 3.0
    revenue_per_response: float = 11.0

    # Candidate threshold grid (inclusive bounds)
    threshold_start: float = 0.01
    threshold_stop: float = 0.99
    threshold_steps: int = 99

    # Models evaluated in parallel
    n_jobs: int = 1

    def cost_model(self) -> CostModel:
        return CostModel(self.cost_per_contact, self.revenue_per_response)

    def candidates(self) -> Tuple[float, ...]:
        return linear_candidates(self.threshold_start, self.threshold_stop,
                                 self.threshold_steps)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "CampaignConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise InvalidInputError(f"Unknown configuration keys: {unknown}")
        return cls(**values)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "CampaignConfig":
        with open(path) as f:
            values = json.load(f)
        if not isinstance(values, dict):
            raise InvalidInputError(f"Configuration in {path} must be a JSON object")
        return cls.from_dict(values)
