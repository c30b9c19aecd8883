from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class OutcomeDistribution:
    probability: int  # 0 - 100, heuristic weight, not a calibrated estimate
    description: str


@dataclass(frozen=True)
class RiskRewardAnalysis:
    """
    Outcome buckets for a single strategy. Probabilities sum to 100.
    """
    strategy_id: str
    strategy_name: str
    distributions: List[OutcomeDistribution]
