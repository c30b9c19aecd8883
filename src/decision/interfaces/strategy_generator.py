from abc import ABC, abstractmethod
from src.decision.domain.reframed_problem import ReframedProblem
from src.decision.domain.variables import VariablesAndConstraints
from src.decision.domain.strategy import StrategySpace


class StrategyGenerator(ABC):
    """
    Interface for enumerating alternative action strategies.
    Strategies are described, never ranked or recommended.
    """

    @abstractmethod
    def generate(
            self,
            reframed: ReframedProblem,
            variables: VariablesAndConstraints
    ) -> StrategySpace:
        pass
