from abc import ABC, abstractmethod
from typing import List
from src.decision.domain.strategy import StrategySpace
from src.decision.domain.variables import VariablesAndConstraints
from src.decision.domain.risk import RiskRewardAnalysis


class RiskAnalyzer(ABC):
    """
    Interface for assigning outcome distributions to strategies.
    """

    @abstractmethod
    def analyze(
            self,
            strategy_space: StrategySpace,
            variables: VariablesAndConstraints
    ) -> List[RiskRewardAnalysis]:
        """
        Return one analysis per strategy, in strategy order.
        """
        pass
