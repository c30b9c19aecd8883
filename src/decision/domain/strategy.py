from dataclasses import dataclass
from enum import Enum
from typing import List


class StrategyType(Enum):
    AGGRESSIVE = "aggressive"
    CONSERVATIVE = "conservative"
    HEDGE = "hedge"
    EXIT = "exit"


@dataclass(frozen=True)
class Strategy:
    id: str  # "A" - "D"
    name: str
    type: StrategyType
    type_label: str
    preconditions: List[str]
    execution_cost: str
    trigger_points: List[str]
    worst_case: str


@dataclass(frozen=True)
class StrategySpace:
    """
    Exactly one strategy per StrategyType, in declaration order.
    Descriptive alternatives only, never a ranking.
    """
    strategies: List[Strategy]
