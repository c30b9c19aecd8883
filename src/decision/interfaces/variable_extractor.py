from abc import ABC, abstractmethod
from src.decision.domain.reframed_problem import ReframedProblem
from src.decision.domain.variables import VariablesAndConstraints


class VariableExtractor(ABC):
    """
    Interface for deriving goals, variables, constraints and uncertainties.
    """

    @abstractmethod
    def extract(self, reframed: ReframedProblem) -> VariablesAndConstraints:
        pass
