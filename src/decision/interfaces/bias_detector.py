from abc import ABC, abstractmethod
from src.decision.domain.reframed_problem import ReframedProblem
from src.decision.domain.bias import BiasWarnings


class BiasDetector(ABC):
    """
    Interface for flagging cognitive-bias signatures in the problem phrasing.
    """

    @abstractmethod
    def detect(self, reframed: ReframedProblem) -> BiasWarnings:
        pass
