from dataclasses import dataclass
from typing import List

from src.decision.domain.reframed_problem import ReframedProblem
from src.decision.domain.variables import VariablesAndConstraints
from src.decision.domain.strategy import StrategySpace
from src.decision.domain.risk import RiskRewardAnalysis
from src.decision.domain.bias import BiasWarnings


@dataclass(frozen=True)
class DecisionAnalysis:
    """
    Aggregate output of the decision pipeline.
    Pure data: exposes decision structure, contains no recommendation.
    """
    reframed_problem: ReframedProblem
    variables_and_constraints: VariablesAndConstraints
    strategy_space: StrategySpace
    risk_reward_analysis: List[RiskRewardAnalysis]
    bias_warnings: BiasWarnings
