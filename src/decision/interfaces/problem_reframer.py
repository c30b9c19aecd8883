from abc import ABC, abstractmethod
from src.decision.domain.reframed_problem import ReframedProblem


class ProblemReframer(ABC):
    """
    Interface for turning a loaded problem statement into a neutral question.
    Must be pure, stateless, and authority-free.
    """

    @abstractmethod
    def reframe(self, problem_text: str) -> ReframedProblem:
        """
        Identify emotional elements and return a neutral restatement.
        """
        pass
