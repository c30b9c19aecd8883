from typing import Any

from src.config.settings import settings
from src.decision.domain.exceptions import ProblemTextRejected


class ProblemTextValidator:
    """
    Boundary precondition check. Rejected text never reaches the pipeline.
    """

    def __init__(
            self,
            min_length: int = settings.MIN_PROBLEM_TEXT_LENGTH,
            max_length: int = settings.MAX_PROBLEM_TEXT_LENGTH
    ):
        self.min_length = int(min_length)
        self.max_length = int(max_length)

    def validate(self, problem_text: Any) -> str:
        if not isinstance(problem_text, str):
            raise ProblemTextRejected("problem_text 必须是字符串")
        if len(problem_text) < self.min_length:
            raise ProblemTextRejected(f"问题描述至少需要{self.min_length}个字符")
        if len(problem_text) > self.max_length:
            raise ProblemTextRejected(f"问题描述不能超过{self.max_length}个字符")
        return problem_text
