from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ReframedProblem:
    """
    Neutral restatement of a decision problem.
    Keeps the original wording next to the emotional/rhetorical elements found in it.
    """
    original: str
    reframed: str
    emotional_elements: List[str]
