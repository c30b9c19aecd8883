from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class VariablesAndConstraints:
    """
    Decision structure extracted from the problem text.
    Every list is non-empty: dimensions without matches carry their defaults.
    """
    goals: List[str]
    key_variables: List[str]
    hard_constraints: List[str]
    uncertainties: List[str]
